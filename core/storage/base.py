from abc import ABC, abstractmethod
from pathlib import Path
from typing import List


class FileSystem(ABC):
    """
    Abstract filesystem capability used by the provisioning and pipeline code.

    All paths are absolute.
    """

    @abstractmethod
    def exists(self, path: Path) -> bool:
        pass

    @abstractmethod
    def is_file(self, path: Path) -> bool:
        pass

    @abstractmethod
    def is_dir(self, path: Path) -> bool:
        pass

    @abstractmethod
    def size(self, path: Path) -> int:
        """
        Size of a file in bytes.

        Raises:
            FileNotFoundError: If the file does not exist.
        """
        pass

    @abstractmethod
    def mkdir(self, path: Path) -> None:
        """
        Create a directory and any missing parents. Existing directories are a no-op.
        """
        pass

    @abstractmethod
    def list_dir(self, path: Path) -> List[Path]:
        """
        List the direct children (files and directories) of a directory.
        """
        pass

    @abstractmethod
    def iter_files(self, root: Path) -> List[Path]:
        """
        Snapshot of every file below root, recursively.
        """
        pass

    @abstractmethod
    def remove_file(self, path: Path) -> None:
        pass

    @abstractmethod
    def remove_dir(self, path: Path) -> None:
        """
        Remove an empty directory.

        Raises:
            OSError: If the directory still has entries.
        """
        pass

    @abstractmethod
    def remove_tree(self, path: Path) -> None:
        """
        Remove a directory and everything below it.
        """
        pass

    @abstractmethod
    def copy_file(self, source: Path, destination: Path) -> None:
        """
        Copy a file. Fails if destination already exists.
        """
        pass

    @abstractmethod
    def read_bytes(self, path: Path) -> bytes:
        pass

    @abstractmethod
    def write_bytes(self, path: Path, data: bytes) -> None:
        pass

    @abstractmethod
    def make_executable(self, path: Path) -> None:
        pass

    def read_text(self, path: Path) -> str:
        return self.read_bytes(path).decode("utf-8")

    def write_text(self, path: Path, text: str) -> None:
        self.write_bytes(path, text.encode("utf-8"))
