import tempfile
from dataclasses import replace
from pathlib import Path

from core.pipeline.cleanup import Cleanup
from core.pipeline.models import DiscoveredFile, EncryptionOutcome
from core.storage.local import LocalFileSystem
from core.storage.mock import MemoryFileSystem


def _setup_file(fs, config, size=100):
    path = config.input_dir / "doc.txt"
    fs.mkdir(path.parent)
    fs.write_bytes(path, b"a" * size)
    return DiscoveredFile(path, size)


def _outcome(config, size):
    return EncryptionOutcome(config.output_dir / "doc.txt.age", exists=True, size=size)


def test_verified_original_is_deleted(memory_fs, memory_config):
    file = _setup_file(memory_fs, memory_config)

    deleted = Cleanup(memory_fs).after_encryption(file, _outcome(memory_config, 300), memory_config)

    assert deleted is True
    assert not memory_fs.exists(file.path)


def test_undersized_output_keeps_original(memory_fs, memory_config):
    file = _setup_file(memory_fs, memory_config)

    deleted = Cleanup(memory_fs).after_encryption(file, _outcome(memory_config, 50), memory_config)

    assert deleted is False
    assert memory_fs.exists(file.path)


def test_deletion_disabled_keeps_verified_original(memory_fs, memory_config):
    file = _setup_file(memory_fs, memory_config)
    config = replace(memory_config, delete_files_after_encryption=False)

    assert Cleanup(memory_fs).after_encryption(file, _outcome(config, 300), config) is False
    assert memory_fs.exists(file.path)


def test_custom_policy_replaces_size_heuristic(memory_fs, memory_config):
    file = _setup_file(memory_fs, memory_config)
    cleanup = Cleanup(memory_fs, policy=lambda outcome, size: False)

    assert cleanup.after_encryption(file, _outcome(memory_config, 300), memory_config) is False
    assert memory_fs.exists(file.path)


def test_prune_removes_nested_empty_directories_bottom_up():
    fs = MemoryFileSystem()
    root = Path("/in")
    fs.mkdir(root / "a" / "b" / "c")

    removed = Cleanup(fs).prune_empty_directories(root)

    assert removed == 3
    assert not fs.exists(root / "a")
    assert fs.is_dir(root)


def test_prune_keeps_chain_above_a_file():
    fs = MemoryFileSystem()
    root = Path("/in")
    fs.mkdir(root / "a" / "b" / "c")
    fs.write_bytes(root / "a" / "b" / "c" / "late.txt", b"still copying")

    assert Cleanup(fs).prune_empty_directories(root) == 0
    assert fs.is_dir(root / "a" / "b" / "c")


def test_prune_only_removes_empty_siblings():
    fs = MemoryFileSystem()
    root = Path("/in")
    fs.mkdir(root / "empty" / "deeper")
    fs.mkdir(root / "busy")
    fs.write_bytes(root / "busy" / "f", b"1")

    assert Cleanup(fs).prune_empty_directories(root) == 2
    assert fs.is_dir(root / "busy")
    assert not fs.exists(root / "empty")


def test_prune_skips_directory_that_cannot_be_removed():
    class StubbornFileSystem(MemoryFileSystem):
        def remove_dir(self, path):
            if self._p(path).name == "locked":
                raise PermissionError("denied")
            super().remove_dir(path)

    fs = StubbornFileSystem()
    root = Path("/in")
    fs.mkdir(root / "locked")
    fs.mkdir(root / "other")

    assert Cleanup(fs).prune_empty_directories(root) == 1
    assert fs.is_dir(root / "locked")
    assert not fs.exists(root / "other")


def test_prune_on_real_disk():
    with tempfile.TemporaryDirectory() as tmp_dir:
        root = Path(tmp_dir)
        (root / "a" / "b" / "c").mkdir(parents=True)
        (root / "x" / "y").mkdir(parents=True)
        (root / "x" / "y" / "keep.txt").write_text("data")

        removed = Cleanup(LocalFileSystem()).prune_empty_directories(root)

        assert removed == 3
        assert not (root / "a").exists()
        assert (root / "x" / "y" / "keep.txt").exists()


def test_given_verdict_skips_the_policy(memory_fs, memory_config):
    file = _setup_file(memory_fs, memory_config)

    def exploding_policy(outcome, size):
        raise AssertionError("policy should not run again")

    cleanup = Cleanup(memory_fs, policy=exploding_policy)

    assert cleanup.after_encryption(file, _outcome(memory_config, 300), memory_config, verified=True) is True
    assert not memory_fs.exists(file.path)
