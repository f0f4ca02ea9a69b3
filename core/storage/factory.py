from core.storage.local import LocalFileSystem
from core.storage.mock import MemoryFileSystem


def get_filesystem(name: str = "local"):
    if name == "local":
        return LocalFileSystem()
    if name == "memory":
        return MemoryFileSystem()
    raise ValueError(f"Unknown filesystem: {name}")
