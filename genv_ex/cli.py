"""genv-ex: generate a .env.example file from a .env file."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable

from genv_ex import __version__
from genv_ex.config import RC_FILE_NAME, ConfigFileError, load_settings
from genv_ex.services.env_files import EnvFileStore, SourceDecodeError, SourceNotFoundError
from genv_ex.services.generator import generate_env_example

Prompt = Callable[[str], str]

EPILOG = """\
Examples:
  $ genv-ex                              # Generate .env.example from .env
  $ genv-ex -i .env.prod -o .env.prod.example --preserve API_KEY
  $ genv-ex --init                       # Create a sample .env file
  $ genv-ex --dry-run                    # Preview output

Create a .genv-exrc file for default settings:
  { "placeholder": "YOUR_VALUE", "includeComments": true }
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="genv-ex",
        description="Generate a .env.example file from a .env file",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-i", "--input", dest="env_file_path", help="Input .env file path")
    parser.add_argument("-o", "--output", dest="output_file_path", help="Output .env.example file path")
    parser.add_argument("-p", "--placeholder", help="Placeholder for values")
    parser.add_argument("--preserve", dest="preserve_values", nargs="+", metavar="KEY", help="Keys to preserve original values")
    parser.add_argument("--ignore", dest="ignore_keys", nargs="+", metavar="KEY", help="Keys to exclude from output")
    parser.add_argument(
        "--no-comments",
        dest="include_comments",
        action="store_const",
        const=False,
        default=None,
        help="Exclude comments from output",
    )
    parser.add_argument("--header", help="Custom header text")
    parser.add_argument(
        "--force",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Overwrite an existing output file",
    )
    parser.add_argument("--silent", action="store_const", const=True, default=None, help="Suppress console output")
    parser.add_argument("--dry-run", action="store_const", const=True, default=None, help="Preview output without writing")
    parser.add_argument("--init", action="store_true", help="Create a sample .env file")
    parser.add_argument("-c", "--config", type=Path, help=f"Settings file (default: ./{RC_FILE_NAME} when present)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _default_prompt() -> Prompt | None:
    return input if sys.stdin.isatty() else None


def _ask(prompt: Prompt, question: str) -> str:
    try:
        return prompt(question)
    except EOFError:
        return ""


def _offer_sample(store: EnvFileStore, env_file_path: str, prompt: Prompt | None) -> int:
    print(f"No '{env_file_path}' file found.")
    if prompt is None or _ask(prompt, "Create a sample .env file? (y/n): ").strip().lower() != "y":
        print("Aborting. Please create a .env file to proceed.", file=sys.stderr)
        return 1
    if not store.create_sample(env_file_path):
        print(f"Error: '{env_file_path}' exists but is not a file", file=sys.stderr)
        return 1
    print(f"Created '{env_file_path}'. Edit it and run again.")
    return 0


def main(argv: list[str] | None = None, prompt: Prompt | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    if prompt is None:
        prompt = _default_prompt()

    config_file = args.config
    if config_file is None and Path(RC_FILE_NAME).is_file():
        config_file = Path(RC_FILE_NAME)

    try:
        if config_file is not None and not config_file.is_file():
            raise ConfigFileError(f"Config file '{config_file}' not found")
        settings = load_settings(
            config_file,
            env_file_path=args.env_file_path,
            output_file_path=args.output_file_path,
            placeholder=args.placeholder,
            preserve_values=args.preserve_values,
            ignore_keys=args.ignore_keys,
            include_comments=args.include_comments,
            header=args.header,
            force=args.force,
            silent=args.silent,
            dry_run=args.dry_run,
        )
        store = EnvFileStore()

        if args.init:
            if store.create_sample(settings.env_file_path):
                print(f"Created sample '{settings.env_file_path}'. Edit it and run again.")
            else:
                print(f"'{settings.env_file_path}' already exists. Skipping sample creation.")
            return 0

        try:
            result = generate_env_example(settings, store=store)
        except SourceNotFoundError:
            return _offer_sample(store, settings.env_file_path, prompt)
    except (ConfigFileError, SourceDecodeError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if settings.dry_run:
        sys.stdout.write(result.content)
        return 0
    if not settings.silent:
        print(f"Generated '{result.output_path}' with keys: {', '.join(result.keys) or 'none'}")
        if result.skipped_keys:
            print(f"Skipped keys: {', '.join(result.skipped_keys)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
