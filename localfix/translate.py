"""
localfix-translate - Fill empty localization values using OpenAI

Usage:
    localfix-translate [--files DIR] [--source localization-en] [--target localization-fr] [--force]

Features:
- Fills only empty values by default (use --force to re-translate all)
- Batch processing to reduce API calls and keep context
- Preserves placeholders like %@, %d and {variable}
- Rewrites files in the same sorted form as `localfix --correct`

Requirements:
    export OPENAI_API_KEY=sk-xxx
"""

import argparse
import json
import os
import sys
from typing import Dict, Tuple

from openai import OpenAI, OpenAIError

from .config import BATCH_SIZE, DEFAULT_MODEL, DEFAULT_SOURCE, FILE_MARKER
from .corrector import render_corrected
from .errors import LocalfixError, WriteError
from .parser import parse_keys, parse_translations, read_file_content
from .scanner import LocalizationFile, scan_directory

LANGUAGE_NAMES = {
    'en': 'English',
    'zh-TW': 'Traditional Chinese',
    'zh-CN': 'Simplified Chinese',
    'ja': 'Japanese',
    'ko': 'Korean',
    'es': 'Spanish',
    'fr': 'French',
    'de': 'German',
    'pt': 'Portuguese',
    'it': 'Italian',
    'ru': 'Russian',
    'ar': 'Arabic',
    'th': 'Thai',
    'vi': 'Vietnamese',
}


def language_code(name: str) -> str:
    """localization-pt-BR -> pt-BR"""
    return name.split(FILE_MARKER, 1)[-1]


def language_name(code: str) -> str:
    return LANGUAGE_NAMES.get(code, code)


def get_system_prompt(source_lang: str, target_lang: str) -> str:
    """Generate system prompt for translation."""
    return f"""You are a professional UI translator. Translate application strings
from {language_name(source_lang)} to {language_name(target_lang)}.

## Principles
1. Natural - everyday wording, not stiff or literal
2. Accurate - do not add or drop information
3. Short - UI text should be concise
4. Consistent - the same concept gets the same translation

## Empty values
A value may be an empty string. Infer the meaning from the key name,
e.g. "settings_title" -> the word for "Settings".

## Technical requirements
- Keep placeholders such as %@, %d, %1$s, {{variable}} and ${{variable}} unchanged
- Keep technical terms such as JSON, API, URL, HTTP
- Keep emoji
- Do not add quotes or other formatting

## Output format
Return only a JSON object with the same keys, values replaced by translations."""


def translate_batch(
    client: OpenAI,
    texts: Dict[str, str],
    source_lang: str,
    target_lang: str,
    model: str = DEFAULT_MODEL
) -> Dict[str, str]:
    """Translate a batch of texts using OpenAI."""
    user_prompt = f"""Translate the values of this JSON object (keep the keys):

```json
{json.dumps(texts, indent=2, ensure_ascii=False)}
```

Return only the translated JSON."""

    try:
        response = client.chat.completions.create(
            model=model,
            messages=[
                {"role": "system", "content": get_system_prompt(source_lang, target_lang)},
                {"role": "user", "content": user_prompt}
            ],
            temperature=0.3,  # Lower temperature for consistency
            response_format={"type": "json_object"}
        )
        result = json.loads(response.choices[0].message.content)
    except (OpenAIError, json.JSONDecodeError) as e:
        print(f"  Error during translation: {e}")
        return {}

    if not isinstance(result, dict):
        print("  Error during translation: response is not a JSON object")
        return {}

    return {k: v for k, v in result.items() if isinstance(v, str)}


def translate_file(
    client,
    source: Dict[str, str],
    target_file: LocalizationFile,
    source_lang: str,
    force: bool = False,
    dry_run: bool = False,
    model: str = DEFAULT_MODEL,
) -> Tuple[int, int]:
    """
    Translate a single file.
    Returns (translated_count, skipped_count)
    """
    content = read_file_content(target_file.path)
    keys = parse_keys(content)
    translations = parse_translations(content)

    to_translate = {}
    for key in sorted(keys):
        if force or not translations.get(key):
            to_translate[key] = source.get(key, "")

    if not to_translate:
        return 0, len(keys)

    if dry_run:
        print(f"  Would translate {len(to_translate)} keys")
        return len(to_translate), len(keys) - len(to_translate)

    target_lang = language_code(target_file.name)
    translated_count = 0
    batch_keys_all = list(to_translate)
    batches = (len(batch_keys_all) + BATCH_SIZE - 1) // BATCH_SIZE

    for i in range(0, len(batch_keys_all), BATCH_SIZE):
        batch_texts = {k: to_translate[k] for k in batch_keys_all[i:i + BATCH_SIZE]}

        print(f"  Translating batch {i // BATCH_SIZE + 1}/{batches}...")

        result = translate_batch(client, batch_texts, source_lang, target_lang, model)

        for key, translated in result.items():
            if key in to_translate and translated:
                translations[key] = translated
                translated_count += 1

    if translated_count:
        try:
            with open(target_file.path, 'w', encoding='utf-8', newline='') as f:
                f.write(render_corrected(keys, translations))
        except OSError as e:
            raise WriteError(target_file.path.name) from e

    return translated_count, len(keys) - translated_count


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog='localfix-translate',
        description='Fill empty localization values using OpenAI',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Fill every file from the English one
    localfix-translate --files path/to/localization

    # Fill one file only
    localfix-translate --target localization-fr

    # Preview without making changes
    localfix-translate --dry-run
        """
    )
    parser.add_argument('--files', '-f', default='.',
                        help='Directory containing localization files (default: current directory)')
    parser.add_argument('--source', '-s', default=DEFAULT_SOURCE,
                        help=f'Reference file name (default: {DEFAULT_SOURCE})')
    parser.add_argument('--target', '-t',
                        help='Translate this file only (e.g., localization-fr)')
    parser.add_argument('--force', action='store_true',
                        help='Re-translate all keys, including existing translations')
    parser.add_argument('--dry-run', action='store_true',
                        help='Show what would be translated without making changes')
    parser.add_argument('--model', default=DEFAULT_MODEL,
                        help=f'OpenAI model to use (default: {DEFAULT_MODEL})')
    args = parser.parse_args(argv)

    # Check API key (not needed for dry-run)
    api_key = os.environ.get('OPENAI_API_KEY')
    if not api_key and not args.dry_run:
        print("Error: OPENAI_API_KEY environment variable not set")
        print("Run: export OPENAI_API_KEY=sk-xxx")
        return 1

    client = OpenAI(api_key=api_key) if api_key else None

    try:
        files = scan_directory(args.files)
        by_name = {f.name: f for f in files}

        if args.source not in by_name:
            print(f"Error: Source file not found: {args.source}")
            return 1
        if args.target and args.target not in by_name:
            print(f"Error: Target file not found: {args.target}")
            return 1

        source = parse_translations(read_file_content(by_name[args.source].path))
        source_lang = language_code(args.source)
        targets = [by_name[args.target]] if args.target else [f for f in files if f.name != args.source]

        print(f"Source: {args.source}")
        print(f"Model: {args.model}")
        print(f"Mode: {'DRY RUN' if args.dry_run else ('FORCE' if args.force else 'NORMAL')}")
        print()

        total_translated = 0
        total_skipped = 0

        for target_file in targets:
            print(f"[{target_file.name}]")

            translated, skipped = translate_file(
                client=client,
                source=source,
                target_file=target_file,
                source_lang=source_lang,
                force=args.force,
                dry_run=args.dry_run,
                model=args.model,
            )

            if translated == 0:
                print(f"  Already translated ✓ ({skipped} keys)")
            else:
                print(f"  Translated: {translated}, Skipped: {skipped}")

            total_translated += translated
            total_skipped += skipped
            print()
    except LocalfixError as e:
        print(f"Error: {e.message}")
        return 1

    print("=" * 50)
    print("Summary:")
    print(f"  Total translated: {total_translated}")
    print(f"  Total skipped:    {total_skipped}")
    print("=" * 50)

    if args.dry_run:
        print("\nRun without --dry-run to apply translations")

    return 0


if __name__ == '__main__':
    sys.exit(main())
