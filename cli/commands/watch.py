"""
Watch Command - Encrypt everything dropped into the input directory, forever.
"""

import typer
from rich import print
from pathlib import Path
from typing import Optional

from cli.commands.common import (
    AGE_BINARY_PATH,
    INPUT_DIR,
    OUTPUT_DIR,
    PUBKEYS,
    ROOT_DIR,
    build_config,
)
from core.errors import BootstrapError
from core.pipeline.factory import create_pipeline
from core.utils.console import configure_logging

app = typer.Typer()


@app.callback(invoke_without_command=True)
def watch(
    root_dir: Optional[Path] = ROOT_DIR,
    input_dir: Optional[Path] = INPUT_DIR,
    output_dir: Optional[Path] = OUTPUT_DIR,
    pubkeys: Optional[Path] = PUBKEYS,
    age_binary_path: Optional[Path] = AGE_BINARY_PATH,
    delete_files: bool = typer.Option(
        True, "--delete-files/--keep-files", help="Delete originals once their encryption is verified"
    ),
    delete_dirs: bool = typer.Option(
        True, "--delete-dirs/--keep-dirs", help="Delete input subdirectories left empty"
    ),
    interval: Optional[float] = typer.Option(
        None, "--interval", "-i", min=0.0, help="Seconds to wait between passes"
    ),
    once: bool = typer.Option(False, "--once", help="Run a single pass and exit"),
):
    """
    Watch the input directory and encrypt new files with age.

    On first start the age binary is downloaded and a key pair generated
    if they are missing.
    """
    configure_logging()
    config = build_config(
        root_dir, input_dir, output_dir, pubkeys, age_binary_path,
        delete_files, delete_dirs, interval,
    )
    bootstrapper, loop = create_pipeline(config)

    try:
        bootstrapper.ensure(config)
    except BootstrapError as e:
        print(f"[red]❌ Startup failed:[/red] {e}")
        raise typer.Exit(code=1)

    if once:
        report = loop.run_once()
        print(
            f"[green]✓ Pass complete:[/green] {report.encrypted}/{report.discovered} encrypted, "
            f"{report.retained} kept, {report.pruned_dirs} directories pruned"
        )
        return

    try:
        loop.run()
    except KeyboardInterrupt:
        print("\n[yellow]🛑 Watcher stopped by user.[/yellow]")
