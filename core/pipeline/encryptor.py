"""
Encryption Invoker - Calls age to encrypt one file into the mirrored output tree.
"""

from pathlib import Path

from core.config import Config, WatchConfiguration
from core.pipeline.models import DiscoveredFile, EncryptionOutcome
from core.storage.base import FileSystem
from core.tools.runner import ToolRunner
from core.utils import console


def output_path_for(file_path: Path, config: WatchConfiguration) -> Path:
    """
    Map a path under the input directory to its ciphertext path.

    <input>/sub/dir/report.txt -> <output>/sub/dir/report.txt.age

    Args:
        file_path: Path of the plaintext file below config.input_dir
        config: Active configuration

    Returns:
        Path: Destination path of the ciphertext
    """
    rel_path = Path(file_path).relative_to(config.input_dir)
    return config.output_dir / rel_path.parent / (rel_path.name + Config.CIPHERTEXT_SUFFIX)


class EncryptionInvoker:
    def __init__(self, runner: ToolRunner, fs: FileSystem):
        self.runner = runner
        self.fs = fs

    def encrypt(self, file: DiscoveredFile, config: WatchConfiguration) -> EncryptionOutcome:
        """
        Encrypt a file with age, blocking until age exits.

        Any ciphertext left at the output path by an earlier run is removed first.
        The exit status is recorded but not judged here; the verification gate
        decides from the artifact on disk.

        Args:
            file: File to encrypt
            config: Active configuration

        Returns:
            EncryptionOutcome: Existence and size of the output file
        """
        out_path = output_path_for(file.path, config)
        self.fs.mkdir(out_path.parent)
        # age creates the output only once it writes; a leftover is not this run's result
        if self.fs.is_file(out_path):
            self.fs.remove_file(out_path)

        console.info(f"Encrypting {file.path}")
        result = self.runner.invoke([
            str(config.age_executable),
            "-e",
            "-o", str(out_path),
            "-R", str(config.pubkeys_file),
            str(file.path),
        ])

        exists = self.fs.is_file(out_path)
        return EncryptionOutcome(
            output_path=out_path,
            exists=exists,
            size=self.fs.size(out_path) if exists else 0,
            exit_status=result.exit_status,
        )
