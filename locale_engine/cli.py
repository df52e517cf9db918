"""Command line front end.

Usage:

    locale-engine --dir ./locales languages
    locale-engine --dir ./locales translate fr greeting -p user=Ana
    locale-engine --dir ./locales translate fr title --group dashboard
"""

import argparse
import sys
from typing import Dict, List, Optional, Tuple

from locale_engine.configuration import settings
from locale_engine.i18n.factory import create_translator
from locale_engine.logging import configure_logging


def _parse_param(value: str) -> Tuple[str, str]:
    name, sep, param = value.partition("=")
    if not sep or not name:
        raise argparse.ArgumentTypeError(f"expected NAME=VALUE, got {value!r}")
    return name, param


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="locale-engine",
        description="Look up translations in a directory of language resource files.",
    )
    parser.add_argument(
        "--dir",
        dest="directory",
        default=settings.i18n.translations_dir,
        help="directory of <language>.json/.yml files (default: %(default)s)",
    )
    parser.add_argument(
        "--fallback",
        default=settings.i18n.fallback_language,
        help="fallback language (default: %(default)s)",
    )
    parser.add_argument(
        "--not-found",
        dest="not_found",
        default=settings.i18n.not_found_message,
        help="text printed when nothing resolves; may use {key} and {language}",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        default=settings.i18n.debug,
        help="log every successful resolution (sets the log level to DEBUG)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("languages", help="list the languages that loaded")

    translate = subparsers.add_parser("translate", help="translate a key")
    translate.add_argument("language", help="language code, e.g. fr")
    translate.add_argument("key", help="dotted key, e.g. errors.notFound")
    translate.add_argument("--group", default=None, help="top-level group to narrow to")
    translate.add_argument(
        "-p",
        "--param",
        dest="params",
        action="append",
        type=_parse_param,
        default=[],
        metavar="NAME=VALUE",
        help="placeholder value (repeatable)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line.

    Args:
        argv: Arguments (default: sys.argv[1:]).

    Returns:
        Exit code.
    """
    args = build_parser().parse_args(argv)
    if args.debug:
        configure_logging(log_level="DEBUG", debug=True)

    translator = create_translator(
        translations_dir=args.directory,
        fallback_language=args.fallback,
        not_found_message=args.not_found,
        debug=args.debug,
    )

    if args.command == "languages":
        for language in sorted(translator.get_available_languages()):
            print(language)
        return 0

    params: Dict[str, str] = dict(args.params)
    result = translator.resolve(args.language, args.key, params, args.group)
    if result.is_found:
        print(result.value)
        return 0

    print(translator.resolver.not_found_text(args.language, args.key))
    return 1


if __name__ == "__main__":
    sys.exit(main())
