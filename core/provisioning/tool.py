"""
Tool Provisioner - Makes sure the age executables are present, downloading a release if not.
"""

import io
import tarfile
import zipfile
from pathlib import Path, PurePosixPath
from typing import Callable, Optional

import requests

from core.config import Config, executable_name, release_url
from core.errors import ProvisioningError
from core.storage.base import FileSystem
from core.utils import console

Downloader = Callable[[str], bytes]


def download_archive(url: str, timeout: float = Config.DOWNLOAD_TIMEOUT) -> bytes:
    """
    Fetch the release archive over HTTP.

    Raises:
        requests.RequestException: On network errors or a non-2xx response.
    """
    response = requests.get(url, timeout=timeout)
    response.raise_for_status()
    return response.content


def _member_path(dest: Path, name: str) -> Path:
    parts = PurePosixPath(name.replace("\\", "/")).parts
    if not parts or parts[0] == "/" or ".." in parts:
        raise ProvisioningError(f"Refusing to extract unsafe archive entry: {name}")
    return dest.joinpath(*parts)


def extract_archive(fs: FileSystem, archive: Path, dest: Path) -> None:
    """
    Unpack a .zip or .tar.gz archive into dest.

    Only regular files and directories are extracted; links are skipped.
    """
    data = fs.read_bytes(archive)
    fs.mkdir(dest)

    if zipfile.is_zipfile(io.BytesIO(data)):
        with zipfile.ZipFile(io.BytesIO(data)) as zf:
            for info in zf.infolist():
                target = _member_path(dest, info.filename)
                if info.is_dir():
                    fs.mkdir(target)
                    continue
                fs.mkdir(target.parent)
                fs.write_bytes(target, zf.read(info))
        return

    with tarfile.open(fileobj=io.BytesIO(data), mode="r:*") as tf:
        for member in tf.getmembers():
            target = _member_path(dest, member.name)
            if member.isdir():
                fs.mkdir(target)
            elif member.isfile():
                fs.mkdir(target.parent)
                fs.write_bytes(target, tf.extractfile(member).read())


def flatten_single_folder(fs: FileSystem, staging_dir: Path, install_dir: Path) -> None:
    """
    Copy the files of the archive's single top-level folder into install_dir.

    Subdirectories of that folder are not copied. staging_dir is removed afterwards.
    """
    nested = [p for p in fs.list_dir(staging_dir) if fs.is_dir(p)]
    if len(nested) != 1:
        raise ProvisioningError(
            f"Expected one top-level folder in the age archive, found {len(nested)}"
        )

    folder = nested[0]
    for entry in fs.list_dir(folder):
        if fs.is_file(entry):
            fs.copy_file(entry, Path(install_dir) / entry.name)
    fs.remove_tree(staging_dir)


class ToolProvisioner:
    """
    Args:
        fs: Filesystem capability
        downloader: Returns the archive bytes for a URL
        url: Release archive URL, defaults to the platform specific age release
    """

    def __init__(
        self,
        fs: FileSystem,
        downloader: Downloader = download_archive,
        url: Optional[str] = None,
    ):
        self.fs = fs
        self.downloader = downloader
        self.url = url or release_url()

    def ensure_tool(self, install_dir: Path) -> bool:
        """
        Install age into install_dir unless the age executable is already there.

        An incomplete install directory is wiped and rebuilt from scratch.

        Returns:
            bool: True if a download happened

        Raises:
            ProvisioningError: If the archive could not be fetched or unpacked.
        """
        install_dir = Path(install_dir)
        primary = install_dir / executable_name("age")
        if self.fs.is_file(primary):
            return False

        console.info(f"Downloading binary release of age from {self.url}")
        archive = install_dir / ("download.zip" if self.url.endswith(".zip") else "download.tar.gz")
        staging = install_dir / ".extract"

        try:
            if self.fs.exists(install_dir):
                self.fs.remove_tree(install_dir)
            self.fs.mkdir(install_dir)

            self.fs.write_bytes(archive, self.downloader(self.url))
            extract_archive(self.fs, archive, staging)
            flatten_single_folder(self.fs, staging, install_dir)
            self.fs.remove_file(archive)

            for name in ("age", "age-keygen"):
                path = install_dir / executable_name(name)
                if self.fs.is_file(path):
                    self.fs.make_executable(path)
        except ProvisioningError:
            raise
        except (requests.RequestException, OSError, zipfile.BadZipFile, tarfile.TarError) as e:
            raise ProvisioningError(f"Could not install age from {self.url}: {e}") from e

        if not self.fs.is_file(primary):
            raise ProvisioningError(f"age archive from {self.url} did not contain {primary.name}")

        console.success(f"age installed in {install_dir}")
        return True
