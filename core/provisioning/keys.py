"""
Key Provisioner - Generates an age key pair when no recipient list exists yet.
"""

import time
from pathlib import Path
from typing import Callable

from core.config import Config, executable_name
from core.errors import KeyGenerationError
from core.storage.base import FileSystem
from core.tools.runner import ToolRunner
from core.utils import console

PUBLIC_KEY_MARKER = "# public key:"


def parse_public_key(private_key_text: str) -> str:
    """
    Extract the public key from the comment age-keygen writes into the private key file.

    Raises:
        KeyGenerationError: If no "# public key:" line with a value is present.
    """
    for line in private_key_text.splitlines():
        if line.startswith(PUBLIC_KEY_MARKER):
            value = line[len(PUBLIC_KEY_MARKER):].strip()
            if value:
                return value
    raise KeyGenerationError("No public key comment found in age-keygen output")


class KeyProvisioner:
    def __init__(
        self,
        runner: ToolRunner,
        fs: FileSystem,
        sleep: Callable[[float], None] = time.sleep,
        grace_seconds: float = Config.KEYGEN_GRACE_SECONDS,
    ):
        self.runner = runner
        self.fs = fs
        self.sleep = sleep
        self.grace_seconds = grace_seconds

    def ensure_keys(self, install_dir: Path, key_file: Path, root_dir: Path) -> bool:
        """
        Create the public key file from a freshly generated key pair if it is missing.

        An existing key file is never touched, whatever it contains. If a private
        key is already sitting in root_dir it is reused instead of overwritten.

        Args:
            install_dir: Directory holding age-keygen
            key_file: Recipients file consumed by age -R
            root_dir: Where the private key is written

        Returns:
            bool: True if a new key file was written

        Raises:
            KeyGenerationError: If the private key file has no public key comment.
        """
        if self.fs.exists(key_file):
            return False

        private_key = Path(root_dir) / Config.PRIVATE_KEY_FILE_NAME
        generated = False

        if self.fs.is_file(private_key):
            console.warning(f"Deriving public key from existing private key {private_key}")
        else:
            console.info("Generating new age key pair")
            self.fs.mkdir(Path(root_dir))
            result = self.runner.invoke([
                str(Path(install_dir) / executable_name("age-keygen")),
                "-o", str(private_key),
            ])
            # let the file handle of the exited process settle
            self.sleep(self.grace_seconds)
            if not self.fs.is_file(private_key):
                raise KeyGenerationError(
                    f"age-keygen exited with status {result.exit_status} without writing {private_key}"
                )
            generated = True

        public_key = parse_public_key(self.fs.read_text(private_key))
        self.fs.mkdir(Path(key_file).parent)
        self.fs.write_text(key_file, public_key)

        if generated:
            console.banner([
                "new PRIVATE KEY generated in:",
                str(private_key),
                "MOVE IT TO SECURE LOCATION",
            ])
        console.info(
            f"Public key is in {key_file}, this will be used for encryption. "
            "The private key is not needed here unless you decrypt on this machine."
        )
        return True
