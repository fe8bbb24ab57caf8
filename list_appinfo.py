"""
List the app entries stored in Steam's appinfo.vdf.

Usage:
    python list_appinfo.py [appinfo_path] [max_apps]
"""
import sys
from datetime import datetime

from clienticon.config import APPINFO_PATH
from clienticon.sources.appinfo import AppInfoNotFoundError, iter_entries, read_header


def list_appinfo(appinfo_path, max_apps=None):
    """
    Print header info and one line per app entry.

    Args:
        appinfo_path: Path to appinfo.vdf
        max_apps: Maximum number of apps to list (None = all)

    Returns:
        Number of entries listed
    """
    header = read_header(appinfo_path)
    print(f"📁 Parsing: {appinfo_path}")
    print(f"Magic: 0x{header.magic:08X}")
    print(f"Universe: {header.universe}")
    print(f"Key Table Offset: {header.key_table_offset} ({header.key_count} keys)\n")

    count = 0
    unparsed = 0
    for entry in iter_entries(appinfo_path, verbose=True):
        if max_apps and count >= max_apps:
            print(f"\n⚠️  Reached max_apps limit ({max_apps})")
            break

        timestamp = entry.last_updated
        if 0 < timestamp < 2147483647:
            date_str = datetime.fromtimestamp(timestamp).strftime('%Y-%m-%d %H:%M:%S')
        else:
            date_str = "N/A"

        if not entry.parsed:
            unparsed += 1

        print(f"AppID {entry.app_id:8} | Updated: {date_str} | Change: {entry.change_number}"
              f"{'' if entry.parsed else ' | unparsed'}")
        count += 1

    print(f"\n✅ Listed {count} apps ({unparsed} with unparseable data)")
    return count


if __name__ == '__main__':
    appinfo_path = sys.argv[1] if len(sys.argv) > 1 else APPINFO_PATH
    max_apps = int(sys.argv[2]) if len(sys.argv) > 2 else None

    try:
        list_appinfo(appinfo_path, max_apps)
    except AppInfoNotFoundError as e:
        print(f"❌ {e}")
        sys.exit(2)
