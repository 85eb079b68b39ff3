"""
parser.py - Line parser for `"key" = "value";` localization files

The grammar is intentionally minimal. Lines that do not fit are skipped,
never reported: a stray `=` inside a value makes the line invisible to
parse_translations() while parse_keys() still sees its key.
"""

from pathlib import Path
from typing import Dict, Set

from .errors import DecodeError, ReadError


def read_file_content(path: Path) -> str:
    """Read a localization file as UTF-8 text."""
    path = Path(path)
    try:
        data = path.read_bytes()
    except OSError as e:
        raise ReadError(path.name) from e

    if not data:
        raise ReadError(path.name)

    try:
        # utf-8-sig drops a leading byte-order mark
        return data.decode('utf-8-sig')
    except UnicodeDecodeError as e:
        raise DecodeError(path.name) from e


def parse_key(line: str):
    """Return the first quoted token of a line, or None."""
    parts = line.split('"')
    # Needs an opening and a closing quote
    if len(parts) < 3:
        return None
    return parts[1]


def parse_keys(text: str) -> Set[str]:
    """Extract the set of keys from file content."""
    keys = set()
    for line in text.splitlines():
        key = parse_key(line)
        if key is not None:
            keys.add(key)
    return keys


def parse_translations(text: str) -> Dict[str, str]:
    """Extract key -> value pairs. Later lines override earlier ones."""
    translations = {}
    for line in text.splitlines():
        parts = line.split('=')
        if len(parts) != 2:
            continue

        key, value = (part.strip().strip('";') for part in parts)
        translations[key] = value

    return translations
