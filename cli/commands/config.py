# cli\commands\config.py
import typer
from rich import print
from core.config import Config, release_url

app = typer.Typer()


@app.command("show")
def show_config():
    """
    Display the environment driven settings.
    """
    print("[blue]Current Configuration:[/blue]")
    print(f"[green]Poll Interval:[/green] {Config.POLL_INTERVAL}s")
    print(f"[green]Keygen Grace Period:[/green] {Config.KEYGEN_GRACE_SECONDS}s")
    print(f"[green]age Version:[/green] {Config.AGE_VERSION}")
    print(f"[green]Release URL:[/green] {release_url()}")
    print(f"[green]Download Timeout:[/green] {Config.DOWNLOAD_TIMEOUT}s")
    print(f"[green]Tool Timeout:[/green] {Config.TOOL_TIMEOUT or 'None (wait forever)'}")
    print(f"[green]Log File:[/green] {Config.LOG_FILE or 'Not Set'}")
    print(f"[green]Debug Output:[/green] {'On' if Config.DEBUG else 'Off'}")
