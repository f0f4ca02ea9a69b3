import os
import platform
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

load_dotenv()


def _optional_float(name: str) -> Optional[float]:
    value = os.getenv(name)
    return float(value) if value else None


class Config:
    POLL_INTERVAL = float(os.getenv("AUTOENCRYPT_POLL_INTERVAL", "2"))
    KEYGEN_GRACE_SECONDS = float(os.getenv("AUTOENCRYPT_KEYGEN_GRACE", "0.5"))
    AGE_VERSION = os.getenv("AUTOENCRYPT_AGE_VERSION", "v1.2.1")
    AGE_RELEASE_URL = os.getenv("AUTOENCRYPT_AGE_RELEASE_URL")
    DOWNLOAD_TIMEOUT = float(os.getenv("AUTOENCRYPT_DOWNLOAD_TIMEOUT", "60"))
    TOOL_TIMEOUT = _optional_float("AUTOENCRYPT_TOOL_TIMEOUT")
    LOG_FILE = os.getenv("AUTOENCRYPT_LOG_FILE")
    DEBUG = os.getenv("AUTOENCRYPT_DEBUG", "0") == "1"

    # Directory and file names used when no override is given
    INPUT_DIR_NAME = "2encrypt"
    OUTPUT_DIR_NAME = "encrypted"
    PUBKEYS_FILE_NAME = "age_pubkeys.txt"
    AGE_BIN_DIR_NAME = "age_bin"
    PRIVATE_KEY_FILE_NAME = "age_private.key"
    CIPHERTEXT_SUFFIX = ".age"


_ARCH_ALIASES = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "arm",
    "armv6l": "arm",
    "i386": "386",
    "i686": "386",
    "x86": "386",
}


def is_windows() -> bool:
    return platform.system() == "Windows"


def executable_name(name: str) -> str:
    """Return the platform specific file name of an age executable."""
    return f"{name}.exe" if is_windows() else name


def release_url(version: Optional[str] = None) -> str:
    """
    Build the download URL of the age release archive for this platform.

    AUTOENCRYPT_AGE_RELEASE_URL takes precedence when set.

    Args:
        version: Release tag, defaults to Config.AGE_VERSION

    Returns:
        str: URL of a .zip (Windows) or .tar.gz archive
    """
    if Config.AGE_RELEASE_URL:
        return Config.AGE_RELEASE_URL

    version = version or Config.AGE_VERSION
    system = platform.system().lower()
    arch = _ARCH_ALIASES.get(platform.machine().lower(), "amd64")
    extension = "zip" if system == "windows" else "tar.gz"
    return (
        "https://github.com/FiloSottile/age/releases/download/"
        f"{version}/age-{version}-{system}-{arch}.{extension}"
    )


def _resolve(path: Optional[Path], root: Path, default_name: str) -> Path:
    if path is None:
        return (root / default_name).resolve()
    path = Path(path).expanduser()
    if not path.is_absolute():
        path = root / path
    return path.resolve()


@dataclass(frozen=True)
class WatchConfiguration:
    """
    Resolved, immutable settings for one run of the pipeline.

    Built once by the CLI and handed to every component.
    """

    root_dir: Path
    input_dir: Path
    output_dir: Path
    pubkeys_file: Path
    age_binary_dir: Path
    delete_files_after_encryption: bool = True
    delete_dirs_after_encryption: bool = True
    poll_interval: float = Config.POLL_INTERVAL

    @classmethod
    def from_options(
        cls,
        root_dir: Optional[Path] = None,
        input_dir: Optional[Path] = None,
        output_dir: Optional[Path] = None,
        pubkeys_file: Optional[Path] = None,
        age_binary_dir: Optional[Path] = None,
        delete_files_after_encryption: bool = True,
        delete_dirs_after_encryption: bool = True,
        poll_interval: Optional[float] = None,
    ) -> "WatchConfiguration":
        """
        Resolve CLI overrides against the root directory.

        Missing values fall back to the default layout under root_dir,
        which itself defaults to the current working directory.
        """
        root = Path(root_dir).expanduser().resolve() if root_dir else Path.cwd().resolve()

        return cls(
            root_dir=root,
            input_dir=_resolve(input_dir, root, Config.INPUT_DIR_NAME),
            output_dir=_resolve(output_dir, root, Config.OUTPUT_DIR_NAME),
            pubkeys_file=_resolve(pubkeys_file, root, Config.PUBKEYS_FILE_NAME),
            age_binary_dir=_resolve(age_binary_dir, root, Config.AGE_BIN_DIR_NAME),
            delete_files_after_encryption=delete_files_after_encryption,
            delete_dirs_after_encryption=delete_dirs_after_encryption,
            poll_interval=Config.POLL_INTERVAL if poll_interval is None else poll_interval,
        )

    @property
    def private_key_file(self) -> Path:
        return self.root_dir / Config.PRIVATE_KEY_FILE_NAME

    @property
    def age_executable(self) -> Path:
        return self.age_binary_dir / executable_name("age")

    @property
    def age_keygen_executable(self) -> Path:
        return self.age_binary_dir / executable_name("age-keygen")
