# clienticon.py
# Resolves an app's client icon id from its appinfo.vdf record

import re
from pathlib import Path
from typing import Dict, Optional

from ..sources.appinfo import AppInfoNotFoundError, find_entry
from ..utils.vdf import VdfValue

# Optional sign and ASCII digits only, no whitespace or underscores
APP_ID_PATTERN = re.compile(r'[+-]?[0-9]+')
INT32_MIN = -2**31
INT32_MAX = 2**31 - 1


def parse_app_id(app_id) -> Optional[int]:
    """Parse app id text as a signed 32-bit integer, or None if it isn't one."""
    if not isinstance(app_id, str) or not APP_ID_PATTERN.fullmatch(app_id):
        return None
    value = int(app_id)
    if not INT32_MIN <= value <= INT32_MAX:
        return None
    return value


def resolve(tree: Dict[str, VdfValue], requested_app_id: int) -> Optional[str]:
    """
    Read appinfo.common.clienticon from a parsed app record.

    The record's own appinfo.appid must match the requested id, otherwise the
    tree is not trusted and None is returned.
    """
    appinfo = tree.get("appinfo")
    if not isinstance(appinfo, dict):
        return None

    app_id = appinfo.get("appid")
    if not isinstance(app_id, int) or app_id != requested_app_id:
        return None

    common = appinfo.get("common")
    if not isinstance(common, dict):
        return None

    clienticon = common.get("clienticon")
    if isinstance(clienticon, str):
        return clienticon
    return None


def get_clienticon_from_appinfo(app_id: str, path, verbose: bool = False) -> Optional[str]:
    """
    Look up the client icon id of a Steam app.

    Args:
        app_id: Steam app ID as text (e.g. "440")
        path: Path to appinfo.vdf
        verbose: Print scan progress

    Returns:
        The clienticon value (e.g. "e3f595a92552da3d664ad00277fad2107345f743"),
        or None if the app or the field is not present

    Raises:
        AppInfoNotFoundError: appinfo.vdf does not exist
        OSError, EOFError: the file could not be read
    """
    path = Path(path)
    if not path.exists():
        raise AppInfoNotFoundError(f"appinfo.vdf not found at {path}")

    requested_app_id = parse_app_id(app_id)
    if requested_app_id is None:
        return None

    tree = find_entry(path, requested_app_id, verbose=verbose)
    if tree is None:
        return None
    return resolve(tree, requested_app_id)
