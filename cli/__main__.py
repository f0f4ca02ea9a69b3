"""
AutoEncrypt Command Line Interface - Main entry point.
"""
import typer
from rich import print
from importlib.metadata import PackageNotFoundError, version as package_version

from cli.commands import config, init, status, watch

app = typer.Typer(
    name="autoencrypt",
    help="Watch a drop directory and encrypt everything in it with age",
    no_args_is_help=True
)

# Register command modules
app.add_typer(watch.app, name="watch", help="Watch the input directory and encrypt new files")
app.add_typer(init.app, name="init", help="Install age and generate keys without watching")
app.add_typer(status.app, name="status", help="Show directories and provisioning state")
app.add_typer(config.app, name="config", help="Show environment driven settings")

@app.callback()
def main():
    """
    🔐 AutoEncrypt - encrypt-only drop folder for age

    Only public keys need to live on this machine.
    """

@app.command("version")
def version():
    """
    Show AutoEncrypt version information.
    """
    try:
        current = package_version("autoencrypt-age")
    except PackageNotFoundError:
        current = "development"

    print(f"[blue]🔐 AutoEncrypt[/blue] version [green]{current}[/green]")
    print("[dim]age: https://github.com/FiloSottile/age[/dim]")

if __name__ == "__main__":
    app()
