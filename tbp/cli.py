"""Quick CLI for poking at captured command output."""

import argparse
import re
import sys

from tbp.blocks.models import BlockArray
from tbp.common.utils.logger import logger, setup_logging
from tbp.common.utils.config import get_config


def _regex(value: str) -> re.Pattern[str]:
    try:
        return re.compile(value)
    except re.error as e:
        raise argparse.ArgumentTypeError(f"invalid regular expression {value!r}: {e}") from e


def _read_lines(path: str) -> list[str]:
    if path == "-":
        return sys.stdin.read().splitlines()
    with open(path, "r", encoding="utf-8") as f:
        return f.read().splitlines()


def _print_blocks(blocks: BlockArray, as_diff: bool = False) -> None:
    from tbp.processor import diff_format, render

    for i, block in enumerate(blocks):
        title = blocks.title(i)
        header = f"# block {i + 1}" + (f" {title}" if title else "")
        print(header)
        print(diff_format(block) if as_diff else render(block), end="")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tbp", description="Text block parsing for captured CLI output")
    subparsers = parser.add_subparsers(dest="action", help="Action to perform")

    fetch_parser = subparsers.add_parser("fetch", help="Extract blocks between start and end patterns")
    fetch_parser.add_argument("file", type=str, help="Captured output, '-' for stdin")
    fetch_parser.add_argument("--start", required=True, type=_regex, help="Pattern of a block's first line")
    fetch_parser.add_argument(
        "--end",
        type=_regex,
        default=None,
        help="Pattern of the line after a block. Derived from the start line's first group if omitted",
    )
    fetch_parser.add_argument("--diff", action="store_true", help="Print blocks in diff format")

    cut_parser = subparsers.add_parser("cut", help="Split output at every start line")
    cut_parser.add_argument("file", type=str, help="Captured output, '-' for stdin")
    cut_parser.add_argument("--start", required=True, type=_regex, help="Pattern of a block's first line")

    segment_parser = subparsers.add_parser("segment", help="Split output at every end line")
    segment_parser.add_argument("file", type=str, help="Captured output, '-' for stdin")
    segment_parser.add_argument("--start", required=True, type=_regex, help="Pattern a kept segment must contain")
    segment_parser.add_argument("--end", required=True, type=_regex, help="Pattern of a segment's last line")

    match_parser = subparsers.add_parser("match", help="Print the groups captured on every matching line")
    match_parser.add_argument("file", type=str, help="Captured output, '-' for stdin")
    match_parser.add_argument("--pattern", required=True, type=_regex, help="Pattern to match")

    diff_parser = subparsers.add_parser("diff", help="Diff two captures of the same output")
    diff_parser.add_argument("before", type=str, help="Earlier capture")
    diff_parser.add_argument("after", type=str, help="Later capture")
    diff_parser.add_argument("--drop", type=_regex, default=None, help="Remove lines matching this pattern")
    diff_parser.add_argument("--mask", type=_regex, default=None, help="Mask spans matching this pattern")
    diff_parser.add_argument("--no-durations", action="store_true", help="Keep duration tokens as they are")

    expand_parser = subparsers.add_parser("expand", help="Expand a command template")
    expand_parser.add_argument("template", type=str, help="Template such as 'show interface ge-0/0/^0-3$'")

    subparsers.add_parser("config", help="Print configuration")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging()

    if args.action is None:
        parser.print_help()
        return 2

    try:
        match args.action:
            case "fetch":
                from tbp.blocks import fetch_block

                result = fetch_block(_read_lines(args.file), args.start, args.end)
                logger.info("Found %d block(s)", len(result))
                _print_blocks(result, as_diff=args.diff)

            case "cut":
                from tbp.blocks import cut

                result = cut(_read_lines(args.file), args.start)
                logger.info("Found %d block(s)", len(result))
                _print_blocks(result)

            case "segment":
                from tbp.blocks import segment

                result = segment(_read_lines(args.file), args.start, args.end)
                logger.info("Found %d block(s)", len(result))
                _print_blocks(result)

            case "match":
                from tbp.blocks import match_in_block

                matched = match_in_block(_read_lines(args.file), args.pattern)
                if not matched.found:
                    logger.warning("No line matches %r", args.pattern.pattern)
                    return 1
                for groups in matched.captures:
                    print("\t".join(groups))

            case "diff":
                from tbp.processor import DiffSettings, diff_blocks

                settings = DiffSettings(drop=args.drop, mask=args.mask, redact_durations=not args.no_durations)
                diff = diff_blocks(_read_lines(args.before), _read_lines(args.after), settings)
                if not diff:
                    logger.info("No differences")
                    return 0
                sys.stdout.writelines(diff)
                return 1

            case "expand":
                from tbp.common.utils.interpolate import interpolate

                commands = interpolate(args.template)
                for command in commands or [args.template]:
                    print(command)

            case "config":
                logger.info("Configuration:\n")
                for key, value in sorted(get_config().model_dump().items()):
                    print(f"{key}={value}")

    except OSError as e:
        logger.error(f"Cannot read input: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
