# dependencies.py
# FastAPI dependency injection for the appinfo.vdf location

from pathlib import Path

from .config import APPINFO_PATH


def get_appinfo_path() -> Path:
    """
    appinfo.vdf dependency. Tests override it to point at a generated file.

    Usage:
        @router.get("/endpoint")
        def endpoint(appinfo_path: Path = Depends(get_appinfo_path)):
            ...
    """
    return APPINFO_PATH
