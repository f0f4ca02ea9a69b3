import typer
from pathlib import Path
from rich import print
from typing import Optional

from cli.commands.common import (
    AGE_BINARY_PATH,
    INPUT_DIR,
    OUTPUT_DIR,
    PUBKEYS,
    ROOT_DIR,
    build_config,
)

app = typer.Typer()


def _count_keys(path: Path) -> int:
    return sum(1 for line in path.read_text().splitlines() if line.strip() and not line.startswith("#"))


@app.callback(invoke_without_command=True)
def status(
    root_dir: Optional[Path] = ROOT_DIR,
    input_dir: Optional[Path] = INPUT_DIR,
    output_dir: Optional[Path] = OUTPUT_DIR,
    pubkeys: Optional[Path] = PUBKEYS,
    age_binary_path: Optional[Path] = AGE_BINARY_PATH,
):
    """
    Show the resolved directories and what has been provisioned so far.
    """
    config = build_config(root_dir, input_dir, output_dir, pubkeys, age_binary_path)
    print("[blue]AutoEncrypt Status[/blue]")

    for label, directory in (
        ("Input directory", config.input_dir),
        ("Output directory", config.output_dir),
    ):
        if directory.is_dir():
            print(f"[green]{label}:[/green] {directory}")
        else:
            print(f"[yellow]{label}:[/yellow] {directory} (will be created on start)")

    if config.input_dir.is_dir():
        pending = sum(1 for p in config.input_dir.rglob("*") if p.is_file())
        print(f"[green]Files waiting:[/green] {pending}")

    if config.age_executable.is_file():
        print(f"[green]age binary:[/green] Found at {config.age_executable}")
    else:
        print(f"[yellow]age binary:[/yellow] Not found at {config.age_executable}. Will be downloaded on start.")

    if config.pubkeys_file.is_file():
        print(f"[green]Public keys:[/green] {_count_keys(config.pubkeys_file)} in {config.pubkeys_file}")
    else:
        print(f"[yellow]Public keys:[/yellow] Not found at {config.pubkeys_file}. A key pair will be generated on start.")

    if config.private_key_file.exists():
        print(f"[red]Private key:[/red] still present at {config.private_key_file}, move it to secure storage")
