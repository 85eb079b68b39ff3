"""
localfix - Check and fix localization files

Usage:
    localfix [--files DIR] [--report DIR] [--correct] [--dry-run] [--strict]

Localization files are named `localization-<code>` with any extension,
e.g. localization-en.txt, localization-fr.strings.

Options:
    --files     Directory containing localization files (default: current)
    --report    Directory for localization_report.md (`.` for terminal)
    --correct   Add missing keys to every file and sort them
    --dry-run   With --correct, show changes without writing
    --strict    Exit with code 1 when files are out of sync
    --lang      Report language (en, ru)
"""

import argparse
import sys

from .app import LocalApp
from .config import DEFAULT_REPORT_LANG
from .report import MESSAGES


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='localfix',
        description='Check the integrity of localization files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Report to the terminal
    localfix --files path/to/localization

    # Write localization_report.md to a directory
    localfix --files path/to/localization --report path/to/reports

    # Add missing keys to every file
    localfix --files path/to/localization --correct
        """
    )
    parser.add_argument('--files', '-f',
                        help='Directory containing localization files (default: current directory)')
    parser.add_argument('--report', '-r',
                        help='Directory where localization_report.md is written (`.` for terminal)')
    parser.add_argument('--correct', action='store_true',
                        help='Insert missing keys and sort every file')
    parser.add_argument('--dry-run', action='store_true',
                        help='With --correct, show changes without writing')
    parser.add_argument('--strict', action='store_true',
                        help='Exit with code 1 when files are out of sync')
    parser.add_argument('--lang', default=DEFAULT_REPORT_LANG, choices=sorted(MESSAGES),
                        help=f'Report language (default: {DEFAULT_REPORT_LANG})')
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.dry_run and not args.correct:
        parser.error('--dry-run requires --correct')

    app = LocalApp(files_dir=args.files, report=args.report, lang=args.lang)

    if args.correct:
        print(f"Mode: {'DRY RUN' if args.dry_run else 'LIVE'}")

    result = app.run(report=True, correct=args.correct, dry_run=args.dry_run)

    if not result.ok:
        print(f"Error: {result.message}")
        return 1

    if args.correct:
        print("=" * 50)
        print("Summary:")
        print(f"  Keys added:    +{result.keys_added}")
        print(f"  Files updated: {result.files_updated}")
        print("=" * 50)

        if args.dry_run:
            print("\nRun without --dry-run to apply changes")

    if args.strict and not result.synchronized:
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
