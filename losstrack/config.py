import logging
import os
from pathlib import Path
from typing import Mapping, Optional

APP_DIR = "losses"
STORE_NAME = "games.csv"
FALLBACK_STORE = Path(STORE_NAME)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def data_dir(env: Optional[Mapping[str, str]] = None) -> Optional[Path]:
    """Per-user data directory, or None when there is no home to put it in."""
    env = os.environ if env is None else env
    xdg = env.get("XDG_DATA_HOME")
    if xdg and Path(xdg).is_absolute():  # relative values are ignored
        return Path(xdg)
    try:
        return Path.home() / ".local" / "share"
    except RuntimeError:
        return None


def resolve_store_path(override: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> Path:
    env = os.environ if env is None else env
    explicit = override or env.get("LOSSES_FILE")
    if explicit:
        return Path(explicit).expanduser()
    base = data_dir(env)
    if base is None:
        return FALLBACK_STORE
    return base / APP_DIR / STORE_NAME


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
