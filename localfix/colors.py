"""ANSI styling for terminal output. Set NO_COLOR to disable."""

import os
import re

RESET = '\033[0m'
BOLD = '\033[1m'
RED = '\033[31m'
YELLOW = '\033[93m'

ANSI_PATTERN = re.compile(r'\033\[[0-9;]*m')


def enabled() -> bool:
    return 'NO_COLOR' not in os.environ


def style(text: str, *codes: str) -> str:
    if not enabled() or not codes:
        return text
    return ''.join(codes) + text + RESET


def title(text: str) -> str:
    return style(text, BOLD, YELLOW)


def bold(text: str) -> str:
    return style(text, BOLD)


def red(text: str) -> str:
    return style(text, RED)


def strip_ansi(text: str) -> str:
    return ANSI_PATTERN.sub('', text)
