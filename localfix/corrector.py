"""
corrector.py - Rewrite localization files so each holds every key

Every file is regenerated from scratch: one `"key" = "value";` line per key
of the union, sorted by key. Existing values are kept, absent keys get an
empty value. Comments and other lines are dropped.

Files are rewritten one after another. A failed write stops the run and
files already rewritten stay rewritten.
"""

from typing import Dict, Iterable

from .aggregator import KeySetAggregator
from .errors import WriteError
from .parser import parse_keys, parse_translations, read_file_content
from .scanner import LocalizationFile


def format_line(key: str, value: str) -> str:
    return f'"{key}" = "{value}";\n'


def render_corrected(all_keys: Iterable[str], translations: Dict[str, str]) -> str:
    """Serialize the union of keys, overlaid with existing values."""
    values = {key: "" for key in all_keys}
    for key, value in translations.items():
        if key in values:
            values[key] = value

    return ''.join(format_line(key, values[key]) for key in sorted(values))


def correct_file(localization_file: LocalizationFile, all_keys: Iterable[str], dry_run: bool = False) -> Dict[str, int]:
    """Rewrite one file. Returns counts of added keys and whether it changed."""
    all_keys = set(all_keys)
    content = read_file_content(localization_file.path)

    # Nothing to write; an emptied file would no longer be readable
    if not all_keys:
        return {'added': 0, 'changed': 0}

    corrected = render_corrected(all_keys, parse_translations(content))

    stats = {
        'added': len(all_keys - parse_keys(content)),
        'changed': int(corrected != content),
    }

    if dry_run or not stats['changed']:
        return stats

    try:
        with open(localization_file.path, 'w', encoding='utf-8', newline='') as f:
            f.write(corrected)
    except OSError as e:
        raise WriteError(localization_file.path.name) from e

    return stats


def correct_all(aggregator: KeySetAggregator, dry_run: bool = False) -> Dict[str, int]:
    """Correct every scanned file in name order."""
    all_keys = aggregator.all_keys
    total = {'added': 0, 'files_updated': 0}

    for localization_file in sorted(aggregator.files, key=lambda f: (f.name, f.path.name)):
        stats = correct_file(localization_file, all_keys, dry_run=dry_run)
        if not dry_run:
            aggregator.mark_corrected(localization_file.name)

        if not stats['changed']:
            print(f"  {localization_file.path.name}: already in sync")
            continue

        total['added'] += stats['added']
        total['files_updated'] += 1
        verb = 'Would update' if dry_run else 'Updated'
        print(f"  {verb} {localization_file.path.name}: +{stats['added']}")

    return total
