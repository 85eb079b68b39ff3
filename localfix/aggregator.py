"""
aggregator.py - Union and per-file gaps across localization files

A KeySetAggregator is built fresh for each run from the scanned files and
owns the per-file key sets for the duration of that run.
"""

from typing import Dict, Iterable, List, Set

from .parser import parse_keys, read_file_content
from .scanner import LocalizationFile


class KeySetAggregator:
    """Per-file key sets and the union of all of them."""

    def __init__(self, keys_by_file: Dict[str, Set[str]], files: Iterable[LocalizationFile] = ()):
        self.keys_by_file = {name: set(keys) for name, keys in keys_by_file.items()}
        self.files = list(files)

    @classmethod
    def from_files(cls, files: List[LocalizationFile]) -> 'KeySetAggregator':
        """Read and parse every file. Stops at the first unreadable one."""
        keys_by_file = {}
        for localization_file in files:
            keys = parse_keys(read_file_content(localization_file.path))
            # Files sharing a stem (different extensions) share one key set
            keys_by_file.setdefault(localization_file.name, set()).update(keys)
        return cls(keys_by_file, files)

    @property
    def all_keys(self) -> Set[str]:
        """Union of every file's keys."""
        union = set()
        for keys in self.keys_by_file.values():
            union |= keys
        return union

    def missing_keys(self, name: str) -> Set[str]:
        return self.all_keys - self.keys_by_file[name]

    def is_complete(self, name: str) -> bool:
        return self.all_keys <= self.keys_by_file[name]

    def is_synchronized(self) -> bool:
        """True when no file lacks a key present in another file."""
        all_keys = self.all_keys
        return all(all_keys <= keys for keys in self.keys_by_file.values())

    def incomplete_files(self) -> List[str]:
        """Names of files with missing keys, in lexicographic order."""
        return [name for name in sorted(self.keys_by_file) if not self.is_complete(name)]

    def mark_corrected(self, name: str):
        """Record that a file now holds every key of the union."""
        self.keys_by_file[name] |= self.all_keys
