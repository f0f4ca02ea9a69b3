from pathlib import PurePosixPath
from typing import Dict, List, Set

from .base import FileSystem


class MemoryFileSystem(FileSystem):
    """
    In-memory FileSystem for tests. Nothing touches the disk.

    Paths are normalised to PurePosixPath so tests behave the same on every OS.
    The root directory "/" always exists.
    """

    def __init__(self):
        self.files: Dict[PurePosixPath, bytes] = {}
        self.dirs: Set[PurePosixPath] = {PurePosixPath("/")}
        self.executables: Set[PurePosixPath] = set()

    @staticmethod
    def _p(path) -> PurePosixPath:
        return PurePosixPath(str(path).replace("\\", "/"))

    def _require_parent(self, path: PurePosixPath) -> None:
        if path.parent not in self.dirs:
            raise FileNotFoundError(f"No such directory: {path.parent}")

    def exists(self, path) -> bool:
        path = self._p(path)
        return path in self.files or path in self.dirs

    def is_file(self, path) -> bool:
        return self._p(path) in self.files

    def is_dir(self, path) -> bool:
        return self._p(path) in self.dirs

    def size(self, path) -> int:
        path = self._p(path)
        if path not in self.files:
            raise FileNotFoundError(str(path))
        return len(self.files[path])

    def mkdir(self, path) -> None:
        path = self._p(path)
        if path in self.files:
            raise FileExistsError(str(path))
        self.dirs.add(path)
        self.dirs.update(path.parents)

    def list_dir(self, path) -> List[PurePosixPath]:
        path = self._p(path)
        if path not in self.dirs:
            raise FileNotFoundError(str(path))
        children = [p for p in self.dirs if p.parent == path and p != path]
        children += [p for p in self.files if p.parent == path]
        return sorted(children)

    def iter_files(self, root) -> List[PurePosixPath]:
        root = self._p(root)
        return sorted(p for p in self.files if root in p.parents)

    def remove_file(self, path) -> None:
        path = self._p(path)
        if path not in self.files:
            raise FileNotFoundError(str(path))
        del self.files[path]
        self.executables.discard(path)

    def remove_dir(self, path) -> None:
        path = self._p(path)
        if path not in self.dirs:
            raise FileNotFoundError(str(path))
        if self.list_dir(path):
            raise OSError(f"Directory not empty: {path}")
        self.dirs.remove(path)

    def remove_tree(self, path) -> None:
        path = self._p(path)
        if path not in self.dirs:
            raise FileNotFoundError(str(path))
        for f in [p for p in self.files if path in p.parents]:
            self.remove_file(f)
        self.dirs = {d for d in self.dirs if d != path and path not in d.parents}

    def copy_file(self, source, destination) -> None:
        source, destination = self._p(source), self._p(destination)
        if self.exists(destination):
            raise FileExistsError(str(destination))
        self._require_parent(destination)
        self.files[destination] = self.read_bytes(source)

    def read_bytes(self, path) -> bytes:
        path = self._p(path)
        if path not in self.files:
            raise FileNotFoundError(str(path))
        return self.files[path]

    def write_bytes(self, path, data: bytes) -> None:
        path = self._p(path)
        if path in self.dirs:
            raise IsADirectoryError(str(path))
        self._require_parent(path)
        self.files[path] = bytes(data)

    def make_executable(self, path) -> None:
        path = self._p(path)
        if path not in self.files:
            raise FileNotFoundError(str(path))
        self.executables.add(path)
