"""
Cleanup - Removes verified originals and empty directories left in the input tree.
"""

from pathlib import Path
from typing import Optional

from core.config import WatchConfiguration
from core.pipeline.models import DiscoveredFile, EncryptionOutcome
from core.pipeline.verification import VerificationPolicy, is_trustworthy
from core.storage.base import FileSystem
from core.utils import console


class Cleanup:
    def __init__(self, fs: FileSystem, policy: VerificationPolicy = is_trustworthy):
        self.fs = fs
        self.policy = policy

    def after_encryption(
        self,
        file: DiscoveredFile,
        outcome: EncryptionOutcome,
        config: WatchConfiguration,
        verified: Optional[bool] = None,
    ) -> bool:
        """
        Delete the original only if deletion is enabled and the ciphertext passes verification.

        Args:
            verified: Verdict already computed for this outcome; the policy runs if None

        Returns:
            bool: True if the original was deleted
        """
        if verified is None:
            verified = self.policy(outcome, file.size)

        if config.delete_files_after_encryption and verified:
            self.fs.remove_file(file.path)
            console.debug(f"Removed original {file.path}")
            return True

        console.error(f"File not encrypted {file.path}")
        return False

    def prune_empty_directories(self, root: Path) -> int:
        """
        Remove every empty directory below root, deepest first. root itself is kept.

        A directory that cannot be listed or removed is reported and skipped.

        Returns:
            int: Number of directories removed
        """
        removed = 0
        try:
            children = [p for p in self.fs.list_dir(root) if self.fs.is_dir(p)]
        except OSError as e:
            console.error(f"Could not list directory {root}: {e}")
            return removed

        for directory in children:
            removed += self.prune_empty_directories(directory)
            try:
                if not self.fs.list_dir(directory):
                    self.fs.remove_dir(directory)
                    removed += 1
            except OSError as e:
                console.error(f"Could not remove directory {directory}: {e}")
        return removed
