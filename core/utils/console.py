import logging
from pathlib import Path
from typing import Optional

from rich.console import Console

from core.config import Config

console = Console(force_terminal=True, color_system="truecolor", stderr=True)
logger = logging.getLogger("autoencrypt")
logger.setLevel(logging.DEBUG if Config.DEBUG else logging.INFO)
logger.propagate = False
logger.addHandler(logging.NullHandler())


def configure_logging(log_file: Optional[str] = None) -> None:
    """
    Mirror console output to a plain text log file.

    Args:
        log_file: Destination path, defaults to AUTOENCRYPT_LOG_FILE. No-op when unset.
    """
    log_file = log_file or Config.LOG_FILE
    if not log_file:
        return

    path = Path(log_file).expanduser()
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == path.resolve():
            return

    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)


def info(msg): console.print(f"ℹ️  {msg}", style="blue", markup=False); logger.info(msg)
def success(msg): console.print(f"✅ {msg}", style="green", markup=False); logger.info(msg)
def warning(msg): console.print(f"⚠️  {msg}", style="yellow", markup=False); logger.warning(msg)
def error(msg): console.print(f"❌ {msg}", style="red", markup=False); logger.error(msg)


def debug(msg):
    if Config.DEBUG:
        console.print(f"🔍 {msg}", style="dim", markup=False)
    logger.debug(msg)


def banner(lines, style: str = "bold yellow") -> None:
    """Print a framed block of lines that must not be missed by the operator."""
    rule = "*" * 50
    console.print(rule, style=style)
    for line in lines:
        console.print(f"  {line}", style=style, markup=False)
    console.print(rule, style=style)
    for line in lines:
        logger.warning(line)
