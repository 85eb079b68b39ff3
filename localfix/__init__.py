"""
localfix - Keep key/value localization files in sync

Usage:
    from localfix import KeySetAggregator, scan_directory, render_report

    files = scan_directory('path/to/localization')
    aggregator = KeySetAggregator.from_files(files)
    print(render_report(aggregator, for_file=True))

CLI:
    localfix --files path/to/localization --report . --correct
    localfix-translate --source localization-en --dry-run
"""

__version__ = '1.0.0'

from .aggregator import KeySetAggregator
from .corrector import correct_all, correct_file, render_corrected
from .errors import (
    DecodeError,
    InvalidReportDestination,
    LocalfixError,
    NoLocalizationFilesFound,
    ReadError,
    WriteError,
)
from .parser import parse_keys, parse_translations, read_file_content
from .report import parse_report, render_report, write_report
from .scanner import LocalizationFile, scan_directory

__all__ = [
    '__version__',
    'KeySetAggregator',
    'LocalizationFile',
    'scan_directory',
    'parse_keys',
    'parse_translations',
    'read_file_content',
    'render_report',
    'parse_report',
    'write_report',
    'render_corrected',
    'correct_file',
    'correct_all',
    'LocalfixError',
    'DecodeError',
    'ReadError',
    'NoLocalizationFilesFound',
    'InvalidReportDestination',
    'WriteError',
]
