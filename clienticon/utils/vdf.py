# vdf.py
# Binary KeyValues (VDF) parser with a shared key table and recursive objects

from contextlib import suppress
from typing import Dict, List, Optional, Tuple, Union

from .binary_reader import BinaryReader, VdfFormatError

# Based on: https://github.com/ValveResourceFormat/ValveKeyValue

BIN_NONE = 0x00    # Nested object
BIN_STRING = 0x01
BIN_INT32 = 0x02
BIN_END = 0x08     # End of object

VdfValue = Union[str, int, Dict[str, "VdfValue"]]


def load_key_table(reader: BinaryReader, offset: int) -> List[str]:
    """
    Load the string pool that binary keys index into.

    The table sits after the entries it decodes, so the reader's cursor is
    restored once the strings are read.

    Args:
        reader: Reader over the whole appinfo file
        offset: Absolute offset of the key table

    Returns:
        List of key strings in file order
    """
    saved_pos = reader.tell()
    try:
        reader.seek(offset)
        count = reader.read_i32()
        return [reader.read_cstring() for _ in range(max(count, 0))]
    finally:
        reader.seek(saved_pos)


def resolve_key(key_table: List[str], index: int) -> str:
    """Map a key index to its string, with a placeholder for out-of-range indices."""
    if 0 <= index < len(key_table):
        return key_table[index]
    return f"unknown_{index}"


def _skip_unknown_value(reader: BinaryReader):
    # Unknown type: try a string, otherwise assume a 4-byte value
    try:
        reader.read_cstring()
    except (EOFError, VdfFormatError):
        with suppress(EOFError):
            reader.read_exact(4)


def parse_object(reader: BinaryReader,
                 key_table: Optional[List[str]] = None) -> Tuple[Dict[str, VdfValue], bool]:
    """
    Parse one binary KeyValues object.

    Args:
        reader: Reader positioned just after the object's opening
        key_table: Key strings for indexed keys, or None for inline string keys

    Returns:
        (mapping, hit_end_of_input). A missing type byte ends the object early
        with whatever was read so far.

    Raises:
        EOFError, VdfFormatError: a key or a known value could not be read
    """
    result = {}
    while True:
        try:
            value_type = reader.read_u8()
        except EOFError:
            return result, True

        if value_type == BIN_END:
            return result, False

        if key_table is not None:
            key = resolve_key(key_table, reader.read_i32())
        else:
            key = reader.read_cstring()

        if value_type == BIN_NONE:
            child, eof = parse_object(reader, key_table)
            result[key] = child
            if eof:
                return result, True
        elif value_type == BIN_STRING:
            result[key] = reader.read_cstring()
        elif value_type == BIN_INT32:
            result[key] = reader.read_i32()
        else:
            _skip_unknown_value(reader)


def parse_binary_vdf(reader: BinaryReader,
                     key_table: Optional[List[str]] = None) -> Dict[str, VdfValue]:
    """Parse a top-level binary VDF object and return its mapping."""
    result, _ = parse_object(reader, key_table)
    return result
