import pytest
from dotenv import load_dotenv
from pathlib import Path

from core.config import WatchConfiguration
from core.storage.mock import MemoryFileSystem
from tests.fakes import FakeAge


@pytest.fixture(autouse=True, scope="session")
def load_test_env():
    """
    Automatically load environment variables from `.env.test` for all test sessions.
    """
    env_path = Path(".env.test")
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=True)
        print("📦 Test environment loaded from .env.test")
    else:
        print("⚠️  No .env.test file found. Using default environment.")


@pytest.fixture
def memory_fs():
    return MemoryFileSystem()


@pytest.fixture
def memory_config():
    root = Path("/srv/drop")
    return WatchConfiguration(
        root_dir=root,
        input_dir=root / "2encrypt",
        output_dir=root / "encrypted",
        pubkeys_file=root / "age_pubkeys.txt",
        age_binary_dir=root / "age_bin",
        poll_interval=0,
    )


@pytest.fixture
def fake_age(memory_fs):
    return FakeAge(memory_fs)
