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
def init(
    root_dir: Optional[Path] = ROOT_DIR,
    input_dir: Optional[Path] = INPUT_DIR,
    output_dir: Optional[Path] = OUTPUT_DIR,
    pubkeys: Optional[Path] = PUBKEYS,
    age_binary_path: Optional[Path] = AGE_BINARY_PATH,
):
    """
    Create the directories, install age and generate keys without watching.

    Safe to run repeatedly; anything already present is left alone.
    """
    configure_logging()
    config = build_config(root_dir, input_dir, output_dir, pubkeys, age_binary_path)
    bootstrapper, _ = create_pipeline(config)

    try:
        bootstrapper.ensure(config)
    except BootstrapError as e:
        print(f"[red]❌ Initialisation failed:[/red] {e}")
        raise typer.Exit(code=1)

    print(f"[green]✅ Ready:[/green] drop files into {config.input_dir}")
