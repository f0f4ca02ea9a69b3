from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class DiscoveredFile:
    """A file found under the input directory during one poll iteration."""

    path: Path
    size: int


@dataclass(frozen=True)
class EncryptionOutcome:
    """What an age invocation left on disk."""

    output_path: Path
    exists: bool
    size: int
    exit_status: Optional[int] = None


@dataclass
class IterationReport:
    discovered: int = 0
    encrypted: int = 0
    retained: int = 0
    errors: int = 0
    pruned_dirs: int = 0
