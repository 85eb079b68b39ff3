"""
report.py - Render the missing-keys report

Two variants share one layout:
    file      plain Markdown, written to localization_report.md
    terminal  the same text with ANSI emphasis

    ## Final report

    ### Missing strings in localization files

    - **localization-es**
      -`logout`
      -`welcome_message`
"""

from pathlib import Path
from typing import Dict, Set

from . import colors
from .aggregator import KeySetAggregator
from .config import DEFAULT_REPORT_LANG, REPORT_FILE_NAME
from .errors import InvalidReportDestination, WriteError

MESSAGES = {
    'en': {
        'title': 'Final report',
        'success': 'File integrity check passed successfully!',
        'missing': 'Missing strings in localization files',
    },
    'ru': {
        'title': 'Итоговый отчёт',
        'success': 'Проверка на целостность файлов прошла успешно!',
        'missing': 'Отсутствующие строки в файлах локализации',
    },
}


def get_messages(lang: str) -> Dict[str, str]:
    return MESSAGES.get(lang, MESSAGES[DEFAULT_REPORT_LANG])


def format_keys(name: str, keys: Set[str], for_file: bool) -> str:
    """Block listing one file's missing keys, sorted."""
    if for_file:
        text = f"\n\n- **{name}**"
        for key in sorted(keys):
            text += f"\n  -`{key}`"
        return text

    text = f"\n\n- {colors.bold(name)}"
    for key in sorted(keys):
        text += f"\n  -{colors.red(f'`{key}`')}"
    return text


def render_report(aggregator: KeySetAggregator, for_file: bool, lang: str = DEFAULT_REPORT_LANG) -> str:
    """Render the report for the file (Markdown) or terminal (ANSI) variant."""
    messages = get_messages(lang)
    heading = (lambda text: text) if for_file else colors.title

    report = heading(f"\n## {messages['title']}")

    if aggregator.is_synchronized():
        report += heading(f"\n\n{messages['success']}")
        return report

    report += heading(f"\n\n### {messages['missing']}")

    for name in aggregator.incomplete_files():
        report += format_keys(name, aggregator.missing_keys(name), for_file)

    return report


def parse_report(text: str) -> Dict[str, Set[str]]:
    """Recover file -> missing keys from either report variant."""
    result = {}
    current = None

    for line in colors.strip_ansi(text).splitlines():
        if line.startswith('- '):
            current = line[2:].strip().strip('*')
            result[current] = set()
        elif line.startswith('  -') and current is not None:
            key = line[3:].strip()
            if key.startswith('`') and key.endswith('`') and len(key) >= 2:
                result[current].add(key[1:-1])

    return result


def write_report(aggregator: KeySetAggregator, report_dir, lang: str = DEFAULT_REPORT_LANG) -> Path:
    """Write localization_report.md into an existing directory."""
    report_dir = Path(report_dir)
    if not report_dir.is_dir():
        raise InvalidReportDestination(report_dir)

    report_path = report_dir / REPORT_FILE_NAME
    try:
        with open(report_path, 'w', encoding='utf-8') as f:
            f.write(render_report(aggregator, for_file=True, lang=lang))
    except OSError as e:
        raise WriteError(report_path.name) from e

    return report_path
