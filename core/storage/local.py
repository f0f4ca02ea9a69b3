import os
import shutil
import stat
from pathlib import Path
from typing import List

from .base import FileSystem


class LocalFileSystem(FileSystem):
    """
    FileSystem backed by the real disk.
    """

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_file(self, path: Path) -> bool:
        return Path(path).is_file()

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()

    def size(self, path: Path) -> int:
        return Path(path).stat().st_size

    def mkdir(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)

    def list_dir(self, path: Path) -> List[Path]:
        return sorted(Path(path).iterdir())

    def iter_files(self, root: Path) -> List[Path]:
        return sorted(p for p in Path(root).rglob("*") if p.is_file())

    def remove_file(self, path: Path) -> None:
        Path(path).unlink()

    def remove_dir(self, path: Path) -> None:
        Path(path).rmdir()

    def remove_tree(self, path: Path) -> None:
        shutil.rmtree(path)

    def copy_file(self, source: Path, destination: Path) -> None:
        if Path(destination).exists():
            raise FileExistsError(f"Destination already exists: {destination}")
        shutil.copy2(source, destination)

    def read_bytes(self, path: Path) -> bytes:
        return Path(path).read_bytes()

    def write_bytes(self, path: Path, data: bytes) -> None:
        Path(path).write_bytes(data)

    def make_executable(self, path: Path) -> None:
        if os.name == "nt":
            return
        mode = Path(path).stat().st_mode
        Path(path).chmod(mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
