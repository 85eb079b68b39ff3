"""Shared constants. Runtime options come from command-line flags."""

import os

# Localization files carry this marker in their stem, e.g. localization-en.txt
FILE_MARKER = 'localization-'
MIN_CODE_LENGTH = 2

REPORT_FILE_NAME = 'localization_report.md'
DEFAULT_REPORT_LANG = 'en'

# Translation fill
DEFAULT_SOURCE = 'localization-en'
DEFAULT_MODEL = os.environ.get('LOCALFIX_MODEL', 'gpt-4o')
# Batch size for API calls (too large may hit token limits)
BATCH_SIZE = 50
