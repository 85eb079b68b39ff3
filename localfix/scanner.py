"""Find localization files in a directory."""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import List

from .config import FILE_MARKER, MIN_CODE_LENGTH
from .errors import NoLocalizationFilesFound

NAME_PATTERN = re.compile(re.escape(FILE_MARKER) + '.{%d,}' % MIN_CODE_LENGTH)


@dataclass(frozen=True)
class LocalizationFile:
    """A localization file; `name` is its stem, e.g. localization-en."""

    name: str
    path: Path


def is_localization_file(path: Path) -> bool:
    if path.name.startswith('.') or not path.is_file():
        return False
    return NAME_PATTERN.search(path.stem) is not None


def scan_directory(directory) -> List[LocalizationFile]:
    """List localization files in `directory`, sorted by name."""
    directory = Path(directory)
    if not directory.is_dir():
        raise NoLocalizationFilesFound(directory)

    files = [
        LocalizationFile(name=path.stem, path=path)
        for path in directory.iterdir()
        if is_localization_file(path)
    ]

    if not files:
        raise NoLocalizationFilesFound(directory)

    return sorted(files, key=lambda f: (f.name, f.path.name))
