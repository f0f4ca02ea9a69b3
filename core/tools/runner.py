"""
Tool Runner - Runs the external age executables.

Every call blocks until the process exits; no source file may be touched
while its ciphertext is still being written.
"""

import subprocess
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Sequence

from core.config import Config
from core.utils import console

TIMED_OUT = -1


@dataclass(frozen=True)
class ToolResult:
    exit_status: int
    stdout: str = ""
    stderr: str = ""

    @property
    def ok(self) -> bool:
        return self.exit_status == 0


class ToolRunner(ABC):
    """
    Narrow interface around process execution so tests can substitute a fake tool.
    """

    @abstractmethod
    def invoke(self, args: Sequence[str]) -> ToolResult:
        """
        Run a command to completion.

        Args:
            args: Executable path followed by its arguments

        Returns:
            ToolResult: Exit status and captured output
        """
        pass


class SubprocessRunner(ToolRunner):
    """
    Runs commands with subprocess.run.

    Args:
        timeout: Seconds before the process is killed. None waits forever.
    """

    def __init__(self, timeout: Optional[float] = Config.TOOL_TIMEOUT):
        self.timeout = timeout

    def invoke(self, args: Sequence[str]) -> ToolResult:
        args = [str(a) for a in args]
        console.debug(f"Running {' '.join(args)}")
        try:
            result = subprocess.run(
                args, capture_output=True, text=True, timeout=self.timeout, check=False,
            )
        except subprocess.TimeoutExpired:
            console.error(f"{args[0]} did not finish within {self.timeout}s and was killed")
            return ToolResult(exit_status=TIMED_OUT)

        if result.returncode != 0 and result.stderr:
            console.debug(result.stderr.strip())
        return ToolResult(result.returncode, result.stdout or "", result.stderr or "")
