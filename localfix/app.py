"""
app.py - One localfix run: scan, report, correct

LocalApp never lets a LocalfixError escape run(); the outcome comes back as
a RunResult so the command line can print one consistent message.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from . import colors
from .aggregator import KeySetAggregator
from .config import DEFAULT_REPORT_LANG
from .corrector import correct_all
from .errors import InvalidReportDestination, LocalfixError
from .report import render_report, write_report
from .scanner import scan_directory


@dataclass
class RunResult:
    ok: bool
    kind: str = ''
    context: str = ''
    message: str = ''
    synchronized: bool = True
    files_updated: int = 0
    keys_added: int = 0

    @classmethod
    def failure(cls, error: LocalfixError) -> 'RunResult':
        return cls(ok=False, kind=error.kind, context=error.context, message=error.message)


def report_dir_from_option(report: Optional[str]) -> Optional[Path]:
    """`.` or an empty value means the terminal."""
    if report is None or report in ('', '.'):
        return None
    return Path(report)


class LocalApp:
    """Localization files of one directory and where to send the report."""

    def __init__(self, files_dir=None, report: Optional[str] = None, lang: str = DEFAULT_REPORT_LANG):
        self.files_dir = Path(files_dir) if files_dir else Path.cwd()
        self.report_dir = report_dir_from_option(report)
        self.lang = lang

    def check_report_dir(self):
        if self.report_dir is not None and not self.report_dir.is_dir():
            raise InvalidReportDestination(self.report_dir)

    def load(self) -> KeySetAggregator:
        return KeySetAggregator.from_files(scan_directory(self.files_dir))

    def generate_report(self, aggregator: KeySetAggregator):
        if self.report_dir is None:
            print(render_report(aggregator, for_file=False, lang=self.lang))
            return

        report_path = write_report(aggregator, self.report_dir, lang=self.lang)
        print(colors.title("\nReport successfully wrote to file!\n"))
        print(f"  {report_path}")

    def correct(self, aggregator: KeySetAggregator, dry_run: bool = False):
        stats = correct_all(aggregator, dry_run=dry_run)
        if not dry_run:
            print(colors.title("\nLocalization files successfully corrected!\n"))
        return stats

    def run(self, report: bool = True, correct: bool = False, dry_run: bool = False) -> RunResult:
        try:
            self.check_report_dir()
            aggregator = self.load()
            result = RunResult(ok=True, synchronized=aggregator.is_synchronized())

            if report:
                self.generate_report(aggregator)

            if correct:
                stats = self.correct(aggregator, dry_run=dry_run)
                result.files_updated = stats['files_updated']
                result.keys_added = stats['added']

            return result
        except LocalfixError as e:
            return RunResult.failure(e)
