# appinfo.py
# Scans Steam's appinfo.vdf cache (V41 layout with key table) entry by entry

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterator, List, Optional

from ..utils.binary_reader import BinaryReader, VdfFormatError
from ..utils.vdf import VdfValue, load_key_table, parse_binary_vdf

# Based on: https://github.com/SteamDatabase/SteamAppInfo

# Fields after app id and size: info_state, last_updated, access_token,
# sha1, change_number, vdf sha1
ENTRY_FIXED_SIZE = 4 + 4 + 8 + 20 + 4 + 20


class AppInfoNotFoundError(FileNotFoundError):
    """Raised when appinfo.vdf does not exist at the given path."""


@dataclass
class AppInfoHeader:
    magic: int
    universe: int
    key_table_offset: int
    key_count: int


@dataclass
class AppInfoEntry:
    """One app record. `data` is None when the payload could not be parsed."""
    app_id: int
    entry_size: int
    info_state: int
    last_updated: int
    access_token: int
    sha1: bytes
    change_number: int
    vdf_sha1: bytes
    data: Optional[Dict[str, VdfValue]] = None

    @property
    def parsed(self) -> bool:
        return self.data is not None


def _open_appinfo(path):
    path = Path(path)
    if not path.exists():
        raise AppInfoNotFoundError(f"appinfo.vdf not found at {path}")
    return open(path, 'rb')


def _read_file_header(reader: BinaryReader):
    magic = reader.read_u32()
    universe = reader.read_u32()
    key_table_offset = reader.read_i64()
    return magic, universe, key_table_offset


def read_header(path) -> AppInfoHeader:
    """Read the file header and the size of its key table."""
    with _open_appinfo(path) as f:
        reader = BinaryReader(f)
        magic, universe, key_table_offset = _read_file_header(reader)
        key_table = load_key_table(reader, key_table_offset)
        return AppInfoHeader(
            magic=magic,
            universe=universe,
            key_table_offset=key_table_offset,
            key_count=len(key_table),
        )


def _parse_payload(payload: bytes, key_table: List[str]) -> Optional[Dict[str, VdfValue]]:
    # Payload gets its own reader so a bad entry can't drift into the next one
    try:
        return parse_binary_vdf(BinaryReader.from_bytes(payload), key_table)
    except (EOFError, VdfFormatError):
        return None


def _scan_entries(reader: BinaryReader, verbose: bool = False) -> Iterator[AppInfoEntry]:
    _magic, _universe, key_table_offset = _read_file_header(reader)
    key_table = load_key_table(reader, key_table_offset)

    entries_end = key_table_offset - 4
    while reader.tell() < entries_end:
        app_id = reader.read_u32()
        entry_size = reader.read_u32()
        info_state = reader.read_u32()
        last_updated = reader.read_u32()
        access_token = reader.read_u64()
        sha1 = reader.read_exact(20)
        change_number = reader.read_u32()
        vdf_sha1 = reader.read_exact(20)

        entry = AppInfoEntry(
            app_id=app_id,
            entry_size=entry_size,
            info_state=info_state,
            last_updated=last_updated,
            access_token=access_token,
            sha1=sha1,
            change_number=change_number,
            vdf_sha1=vdf_sha1,
        )

        # entry_size counts everything after the size field itself
        payload_size = entry_size - ENTRY_FIXED_SIZE
        if payload_size < 0:
            if verbose:
                print(f"⚠️  Rejecting app {app_id}: entry size {entry_size} is smaller than its header")
            yield entry
            continue

        payload_start = reader.tell()
        payload = reader.read_exact(payload_size)
        entry.data = _parse_payload(payload, key_table)
        if entry.data is None and verbose:
            print(f"⚠️  Could not parse data for app {app_id} at position {payload_start}")

        yield entry

        # Declared size wins over whatever the parser consumed
        reader.seek(payload_start + payload_size)


def iter_entries(path, verbose: bool = False) -> Iterator[AppInfoEntry]:
    """
    Iterate over every app entry in appinfo.vdf.

    Args:
        path: Path to appinfo.vdf
        verbose: Print skipped entries

    Yields:
        AppInfoEntry for each record, in file order

    Raises:
        AppInfoNotFoundError: path does not exist
        EOFError, OSError: a fixed header field could not be read
    """
    with _open_appinfo(path) as f:
        yield from _scan_entries(BinaryReader(f), verbose=verbose)


def find_entry(path, target_app_id: int, verbose: bool = False) -> Optional[Dict[str, VdfValue]]:
    """
    Find one app's parsed data without reading the rest of the file.

    Args:
        path: Path to appinfo.vdf
        target_app_id: App ID to look for
        verbose: Print scan progress and skipped entries

    Returns:
        The app's parsed key/value tree, or None if no parseable entry matches
    """
    with _open_appinfo(path) as f:
        if verbose:
            print(f"📁 Scanning: {path}")
            print(f"📊 File size: {os.path.getsize(path) / (1024*1024):.2f} MB")

        scanned = 0
        for entry in _scan_entries(BinaryReader(f), verbose=verbose):
            scanned += 1
            if entry.app_id == target_app_id and entry.data is not None:
                if verbose:
                    print(f"✅ Found app {target_app_id} after {scanned} entries")
                return entry.data

    if verbose:
        print(f"❌ App {target_app_id} not found in {scanned} entries")
    return None
