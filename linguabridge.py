#!/usr/bin/env python3
"""
LinguaBridge: text translation with offline fallback
----------------------------------------------------
Translates text through a public translation API (MyMemory or
LibreTranslate) and falls back to a built-in phrase dictionary when the
provider cannot be reached.

Usage examples:
  python linguabridge.py --text "good morning" --source en --target es
  python linguabridge.py --text "hello" --target de --offline
  python linguabridge.py --list
  python linguabridge.py --health
"""

import argparse
import json
import sys
from config import load_settings, build_translator
from health import get_health
from languages import list_languages
from logger import setup_logging, get_logger
from metrics import get_metrics
from validators import InvalidRequest, validate_request


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Translate text with offline fallback")
    parser.add_argument("--text", "-t", help="Text to translate (reads stdin if omitted)")
    parser.add_argument("--source", "-s", default="en", help="Source language code")
    parser.add_argument("--target", "-T", default="es", help="Target language code")
    parser.add_argument("--config", help="Path to JSON settings file")
    parser.add_argument("--provider", choices=["mymemory", "libretranslate"], help="Translation provider")
    parser.add_argument("--offline", action="store_true", help="Skip the remote provider")
    parser.add_argument("--list", action="store_true", help="List supported languages")
    parser.add_argument("--health", action="store_true", help="Run health check")
    parser.add_argument("--stats", action="store_true", help="Print metrics after translating")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    parser.add_argument("--quiet", "-q", action="store_true", help="Suppress non-error output")
    parser.add_argument("--log-file", help="Path to log file")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    log_level = "DEBUG" if args.verbose else ("ERROR" if args.quiet else "WARNING")
    setup_logging(log_file=args.log_file, log_level=log_level, console_output=not args.quiet)
    logger = get_logger()

    if args.list:
        for lang in list_languages():
            print(f"{lang.code:4s} {lang.name}")
        return 0

    if args.health:
        print(json.dumps(get_health(), indent=2))
        return 0

    try:
        settings = load_settings(args.config)
    except FileNotFoundError:
        print(f"Error: Settings file not found: {args.config}", file=sys.stderr)
        return 1
    except json.JSONDecodeError as e:
        print(f"Error: Invalid JSON in settings file: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if settings.json_logs or settings.log_file:
        setup_logging(
            log_file=args.log_file or settings.log_file,
            log_level=log_level,
            console_output=not args.quiet,
            json_format=settings.json_logs
        )

    if args.provider and args.provider != settings.provider:
        settings.provider = args.provider
        settings.api_url = None
    if args.offline:
        settings.offline = True

    text = args.text if args.text is not None else sys.stdin.read().rstrip("\n")

    try:
        validate_request(text, args.source, args.target)
    except InvalidRequest as e:
        logger.error(f"Rejected request: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    translator = build_translator(settings)
    print(translator.translate(text, args.source, args.target))

    if args.stats:
        print(json.dumps(get_metrics().get_summary(), indent=2), file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
