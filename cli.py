"""Command-line entry point: argument parsing, dispatch and exit codes."""

import argparse
import logging
import os
import sys

from convert import STDIN, convert_file, output_path_for
from errors import ParseError

__version__ = "0.1.0"

EXIT_OK = 0
EXIT_PARSE = 1
EXIT_IO = 2
EXIT_USAGE = 3


class Fm2tomlArgumentParser(argparse.ArgumentParser):
    """Custom parser that exits with code 3 on usage errors (not 2)."""

    def error(self, message: str) -> None:
        self.print_usage(sys.stderr)
        print(f"ERR: {message}", file=sys.stderr)
        sys.exit(EXIT_USAGE)


def build_parser() -> Fm2tomlArgumentParser:
    parser = Fm2tomlArgumentParser(
        prog="fm2toml",
        description="Rewrite YAML (---) front matter as TOML (+++) front matter",
    )
    parser.add_argument(
        "--version", action="version", version=f"fm2toml {__version__}",
    )
    parser.add_argument(
        "inputs", nargs="*", metavar="INPUT",
        help="Markdown files to convert (default: stdin, or '-')",
    )

    out_group = parser.add_mutually_exclusive_group()
    out_group.add_argument("-o", "--output", help="Write the result to this file")
    out_group.add_argument(
        "-d", "--output-dir",
        help="Write each result to this directory under its input file name",
    )

    alias_group = parser.add_mutually_exclusive_group()
    alias_group.add_argument("--alias", help="Add this path to `aliases`")
    alias_group.add_argument(
        "--alias-prefix",
        help="Add `<prefix>/<input file name>` to `aliases` "
        "(default: $FM2TOML_ALIAS_PREFIX)",
    )

    parser.add_argument(
        "--check", action="store_true",
        help="Parse and render only; write nothing",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Debug logging on stderr",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _validate(parser: Fm2tomlArgumentParser, args) -> None:
    inputs = args.inputs or [STDIN]
    if inputs.count(STDIN) > 1:
        parser.error("stdin ('-') can only be read once")
    if len(inputs) > 1 and args.output:
        parser.error("--output takes a single input; use --output-dir")
    if len(inputs) > 1 and not (args.output_dir or args.check):
        parser.error("multiple inputs need --output-dir or --check")
    if args.output_dir and STDIN in inputs:
        parser.error("--output-dir needs file inputs")
    if args.alias and len(inputs) > 1:
        parser.error("--alias takes a single input; use --alias-prefix")
    if STDIN in inputs and args.alias_prefix is not None:
        parser.error("--alias-prefix needs file inputs")
    if args.output_dir:
        targets = [output_path_for(source, args.output_dir) for source in inputs]
        if len(set(targets)) != len(targets):
            parser.error("--output-dir would write two inputs to the same file name")


def main(argv: list[str] | None = None) -> int:
    """Entry point for the fm2toml CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _validate(parser, args)
    _configure_logging(args.verbose)
    alias_prefix = args.alias_prefix
    if alias_prefix is None:
        alias_prefix = os.environ.get("FM2TOML_ALIAS_PREFIX", "")

    status = EXIT_OK
    for source in args.inputs or [STDIN]:
        label = "<stdin>" if source == STDIN else source
        if args.output_dir:
            output = output_path_for(source, args.output_dir)
        else:
            output = args.output

        try:
            convert_file(
                source,
                output,
                alias=args.alias,
                alias_prefix=alias_prefix,
                write=not args.check,
            )
        except ParseError as e:
            print(f"ERR: {label}: {e}", file=sys.stderr)
            status = max(status, EXIT_PARSE)
            continue
        except (OSError, UnicodeDecodeError) as e:
            print(f"ERR: {label}: {e}", file=sys.stderr)
            status = max(status, EXIT_IO)
            continue

        if args.check:
            print(f"OK {label}")

    return status


if __name__ == "__main__":
    sys.exit(main())
