"""
Polling Loop - Periodically encrypts everything found in the input directory.

Directory change notifications drop events when many files are copied at once,
so the input tree is fully enumerated on every iteration instead.
"""

import threading
from typing import List, Optional

from core.config import WatchConfiguration
from core.pipeline.cleanup import Cleanup
from core.pipeline.encryptor import EncryptionInvoker
from core.pipeline.models import DiscoveredFile, IterationReport
from core.storage.base import FileSystem
from core.utils import console


class PollingLoop:
    """
    Drives encrypt -> verify -> cleanup for every file, one file at a time.

    Args:
        config: Active configuration
        fs: Filesystem capability
        invoker: Runs age for one file
        cleanup: Deletes verified originals and prunes directories
    """

    def __init__(
        self,
        config: WatchConfiguration,
        fs: FileSystem,
        invoker: EncryptionInvoker,
        cleanup: Cleanup,
    ):
        self.config = config
        self.fs = fs
        self.invoker = invoker
        self.cleanup = cleanup

    def discover(self) -> List[DiscoveredFile]:
        """Snapshot of the files currently below the input directory."""
        found = []
        for path in self.fs.iter_files(self.config.input_dir):
            try:
                found.append(DiscoveredFile(path=path, size=self.fs.size(path)))
            except OSError:
                # Removed between listing and stat; picked up next time if it returns
                continue
        return found

    def process(self, file: DiscoveredFile, report: IterationReport) -> None:
        outcome = self.invoker.encrypt(file, self.config)
        verified = self.cleanup.policy(outcome, file.size)
        if verified:
            report.encrypted += 1
        if not self.cleanup.after_encryption(file, outcome, self.config, verified=verified):
            report.retained += 1

    def run_once(self) -> IterationReport:
        """
        One full pass over the input tree.

        Returns:
            IterationReport: What happened during the pass
        """
        report = IterationReport()
        files = self.discover()
        report.discovered = len(files)

        for file in files:
            try:
                self.process(file, report)
            except Exception as e:
                report.errors += 1
                report.retained += 1
                console.error(f"Error processing file {file.path}: {e}")

        if self.config.delete_dirs_after_encryption:
            report.pruned_dirs = self.cleanup.prune_empty_directories(self.config.input_dir)

        if report.discovered:
            console.debug(
                f"Pass finished: {report.encrypted}/{report.discovered} encrypted, "
                f"{report.retained} kept, {report.pruned_dirs} directories pruned"
            )
        return report

    def run(self, stop_event: Optional[threading.Event] = None) -> None:
        """
        Poll until stop_event is set, waiting config.poll_interval between passes.
        """
        stop_event = stop_event or threading.Event()
        console.info(f"Watching directory {self.config.input_dir}")

        while not stop_event.is_set():
            self.run_once()
            stop_event.wait(self.config.poll_interval)
