"""
Print the clienticon id of a Steam app from the local appinfo.vdf.

Usage:
    python get_clienticon.py <app_id> [appinfo_path]

Exit codes: 0 found, 1 not found, 2 appinfo.vdf missing.
"""
import sys

from clienticon.config import APPINFO_PATH
from clienticon.services.clienticon import get_clienticon_from_appinfo
from clienticon.sources.appinfo import AppInfoNotFoundError


def main(argv):
    if len(argv) < 2:
        print(__doc__.strip())
        return 2

    app_id = argv[1]
    appinfo_path = argv[2] if len(argv) > 2 else APPINFO_PATH

    try:
        clienticon = get_clienticon_from_appinfo(app_id, appinfo_path, verbose=True)
    except AppInfoNotFoundError as e:
        print(f"❌ {e}")
        return 2

    if clienticon is None:
        print(f"⚠️  No clienticon for app {app_id}")
        return 1

    print(clienticon)
    return 0


if __name__ == '__main__':
    sys.exit(main(sys.argv))
