# clienticon package
# Steam appinfo.vdf reader and client icon lookup

from .services.clienticon import get_clienticon_from_appinfo, resolve
from .sources.appinfo import AppInfoNotFoundError, find_entry, iter_entries

__all__ = [
    "AppInfoNotFoundError",
    "find_entry",
    "get_clienticon_from_appinfo",
    "iter_entries",
    "resolve",
]
