"""
Options shared by the commands that need a resolved WatchConfiguration.
"""

from pathlib import Path
from typing import Optional

import typer

from core.config import WatchConfiguration

ROOT_DIR = typer.Option(
    None, "--root-dir", help="Base directory for the defaults below (default: current directory)"
)
INPUT_DIR = typer.Option(
    None, "--input-dir", help="Directory to watch for files to encrypt (default: <root>/2encrypt)"
)
OUTPUT_DIR = typer.Option(
    None, "--output-dir", help="Where encrypted files go, mirroring input subdirectories (default: <root>/encrypted)"
)
PUBKEYS = typer.Option(
    None, "--pubkeys", help="age recipients file, one public key per line (default: <root>/age_pubkeys.txt)"
)
AGE_BINARY_PATH = typer.Option(
    None, "--age-binary-path", help="Where age is installed or downloaded to (default: <root>/age_bin)"
)


def build_config(
    root_dir: Optional[Path],
    input_dir: Optional[Path],
    output_dir: Optional[Path],
    pubkeys: Optional[Path],
    age_binary_path: Optional[Path],
    delete_files: bool = True,
    delete_dirs: bool = True,
    interval: Optional[float] = None,
) -> WatchConfiguration:
    return WatchConfiguration.from_options(
        root_dir=root_dir,
        input_dir=input_dir,
        output_dir=output_dir,
        pubkeys_file=pubkeys,
        age_binary_dir=age_binary_path,
        delete_files_after_encryption=delete_files,
        delete_dirs_after_encryption=delete_dirs,
        poll_interval=interval,
    )
