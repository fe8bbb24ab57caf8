# config.py
# Configuration constants for the clienticon lookup service

import os
import sys
from pathlib import Path


def get_steam_root():
    """Get the Steam installation directory.

    STEAM_ROOT wins when set. Otherwise use the platform's default install
    location.
    """
    env_value = os.environ.get("STEAM_ROOT", "").strip()
    if env_value:
        return Path(env_value).expanduser()

    if sys.platform == 'win32':
        # Windows: C:\Program Files (x86)\Steam
        return Path(os.environ.get('ProgramFiles(x86)', r'C:\Program Files (x86)')) / 'Steam'
    elif sys.platform == 'darwin':
        # macOS: ~/Library/Application Support/Steam
        return Path.home() / 'Library' / 'Application Support' / 'Steam'
    else:
        # Linux: ~/.local/share/Steam
        return Path.home() / '.local' / 'share' / 'Steam'


def get_appinfo_path():
    """Get the appinfo.vdf path (APPINFO_PATH env var or <steam root>/appcache)."""
    env_value = os.environ.get("APPINFO_PATH", "").strip()
    if env_value:
        return Path(env_value).expanduser()
    return get_steam_root() / "appcache" / "appinfo.vdf"


APPINFO_PATH = get_appinfo_path()

# Server settings used by app.py
PORT = int(os.environ.get("PORT", 5050))
DEBUG = os.environ.get("DEBUG", "false").lower() in ("true", "1", "yes")
