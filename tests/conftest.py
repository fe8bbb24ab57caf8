"""
Shared fixtures for building synthetic appinfo.vdf files.

Layout written by build_appinfo():
  header (magic, universe, key table offset) | entries | 4-byte terminator | key table
"""

import struct

import pytest

MAGIC_V41 = 0x07564429
DEFAULT_KEYS = ["appinfo", "appid", "common", "clienticon"]


def encode_payload(tree, keys):
    """Encode a dict tree as binary VDF using indices into `keys` (extended as needed)."""
    out = bytearray()
    for key, value in tree.items():
        if key not in keys:
            keys.append(key)
        index = struct.pack('<i', keys.index(key))
        if isinstance(value, dict):
            out += b'\x00' + index + encode_payload(value, keys)
        elif isinstance(value, str):
            out += b'\x01' + index + value.encode('utf-8') + b'\x00'
        else:
            out += b'\x02' + index + struct.pack('<i', value)
    out += b'\x08'
    return bytes(out)


def encode_entry(app_id, payload, entry_size=None, change_number=1, last_updated=1700000000):
    """Encode one entry; entry_size defaults to 60 + len(payload)."""
    if entry_size is None:
        entry_size = 60 + len(payload)
    return (
        struct.pack('<II', app_id, entry_size)
        + struct.pack('<IIQ', 2, last_updated, 0)
        + b'\x11' * 20
        + struct.pack('<I', change_number)
        + b'\x22' * 20
        + payload
    )


def app_tree(app_id, clienticon=None):
    common = {"name": f"App {app_id}"}
    if clienticon is not None:
        common["clienticon"] = clienticon
    return {"appinfo": {"appid": app_id, "common": common}}


def build_appinfo(entries, keys=None):
    """
    Build a complete appinfo.vdf image.

    Args:
        entries: list of (app_id, tree) tuples or pre-encoded entry bytes
        keys: initial key table (DEFAULT_KEYS when None)

    Returns:
        (file bytes, key table list, key table offset)
    """
    keys = list(DEFAULT_KEYS if keys is None else keys)
    body = bytearray()
    for entry in entries:
        if isinstance(entry, bytes):
            body += entry
        else:
            app_id, tree = entry
            body += encode_entry(app_id, encode_payload(tree, keys))

    key_table_offset = 16 + len(body) + 4
    data = bytearray(struct.pack('<IIq', MAGIC_V41, 1, key_table_offset))
    data += body
    data += struct.pack('<I', 0)
    data += struct.pack('<i', len(keys))
    for key in keys:
        data += key.encode('utf-8') + b'\x00'
    return bytes(data), keys, key_table_offset


@pytest.fixture
def write_appinfo(tmp_path):
    """Factory fixture: write build_appinfo() output to tmp_path/appinfo.vdf."""
    def _write(entries, keys=None, name="appinfo.vdf"):
        data, _, _ = build_appinfo(entries, keys)
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _write


@pytest.fixture
def tf2_appinfo(write_appinfo):
    """Single-entry file for app 440 with a known clienticon."""
    return write_appinfo([(440, app_tree(440, "440_abcdef.ico"))])
