"""Command-line interface for js-call-builder."""

import argparse
import asyncio
import json
import logging
import sys

from js_call_builder.models import TARGET_KINDS, parse_parameter_spec
from js_call_builder.options import OptionNotFoundError, Options, OptionsLoadError
from js_call_builder.paginator import paginate, render_links
from js_call_builder.request import InvalidParameterIndex, Request

logger = logging.getLogger(__name__)


def setup_logging():
    """Configure logging to stderr."""
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _add_request_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "name",
        help="Name of the function, class method (Class.method) or event",
    )
    parser.add_argument(
        "--kind",
        "-k",
        choices=TARGET_KINDS,
        default="function",
        help="Kind of target, selects the name prefix (default: function)",
    )
    parser.add_argument(
        "--param",
        "-p",
        action="append",
        default=[],
        metavar="KIND=VALUE",
        help=(
            "Parameter to pass, in order. KIND is a value kind or one of the "
            "aliases quoted, bool, num, js, form, input, checked, html, page"
        ),
    )
    parser.add_argument(
        "--single-quote",
        action="store_true",
        help="Quote strings and element IDs with single quotes",
    )
    parser.add_argument(
        "--page",
        help="Value for the page-number parameter",
    )
    parser.add_argument(
        "--options",
        help="JSON file with options (prefix.function, prefix.class, ...)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser with subcommands."""
    parser = argparse.ArgumentParser(
        prog="js-call-builder",
        description="Generate client-side JavaScript calls",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # render subcommand
    render_parser = subparsers.add_parser(
        "render",
        help="Print the JavaScript call",
    )
    _add_request_arguments(render_parser)

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check the JavaScript call for syntax errors in a headless browser",
    )
    _add_request_arguments(check_parser)

    # paginate subcommand
    paginate_parser = subparsers.add_parser(
        "paginate",
        help="Print HTML pagination links calling the request",
    )
    _add_request_arguments(paginate_parser)
    paginate_parser.add_argument(
        "--current",
        type=int,
        default=1,
        help="Current page (default: 1)",
    )
    paginate_parser.add_argument(
        "--total",
        type=int,
        required=True,
        help="Total number of items",
    )
    paginate_parser.add_argument(
        "--per-page",
        type=int,
        default=10,
        help="Items per page (default: 10)",
    )
    paginate_parser.add_argument(
        "--max-pages",
        type=int,
        default=10,
        help="Maximum number of numbered links (default: 10)",
    )

    return parser


def parse_args(args: list[str]) -> argparse.Namespace:
    """Parse command-line arguments."""
    return create_parser().parse_args(args)


def build_request(parsed: argparse.Namespace) -> Request:
    """Build a request from parsed arguments.

    Raises:
        OptionsLoadError: If the options file cannot be loaded
        ValueError: If a parameter is not in KIND=VALUE form
    """
    options = Options.from_json(parsed.options) if parsed.options else Options()
    request = Request(parsed.name, parsed.kind, options)
    if parsed.single_quote:
        request.use_single_quote()

    for text in parsed.param:
        spec = parse_parameter_spec(text)
        request.add_parameter(spec.value_kind, spec.value)

    if parsed.page is not None:
        if not request.has_page_number():
            logger.warning("--page given but no page-number parameter, ignoring")
        request.set_page_number(parsed.page)

    logger.info(f"Built request {request!r} with {len(request.parameters)} parameters")
    return request


def run_render(parsed: argparse.Namespace) -> int:
    """Run the render command."""
    request = build_request(parsed)
    request.print_script()
    print()
    return 0


async def run_check(parsed: argparse.Namespace) -> int:
    """Run the check command.

    Returns:
        0 if the call is valid JavaScript, 1 otherwise
    """
    from js_call_builder.syntax_checker import ScriptChecker

    script = build_request(parsed).get_script()
    async with ScriptChecker() as checker:
        result = await checker.check(script)

    print(json.dumps(result.to_dict(), indent=2))
    return 0 if result.valid else 1


def run_paginate(parsed: argparse.Namespace) -> int:
    """Run the paginate command."""
    request = build_request(parsed)
    links = paginate(
        request,
        current_page=parsed.current,
        total_items=parsed.total,
        items_per_page=parsed.per_page,
        max_pages=parsed.max_pages,
    )
    if not links:
        print("All items fit on one page, no links generated", file=sys.stderr)
        return 0
    print(render_links(links))
    return 0


async def run_cli(args: list[str]) -> int:
    """Run the CLI with the given arguments.

    Args:
        args: Command-line arguments (without program name)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    setup_logging()

    try:
        parsed = parse_args(args)
    except SystemExit as e:
        return e.code if e.code else 1

    if parsed.command is None:
        # No command - show help
        create_parser().print_help(sys.stderr)
        return 1

    from js_call_builder.syntax_checker import ScriptCheckError

    try:
        if parsed.command == "render":
            return run_render(parsed)
        elif parsed.command == "check":
            return await run_check(parsed)
        elif parsed.command == "paginate":
            return run_paginate(parsed)
    except (
        OptionsLoadError,
        OptionNotFoundError,
        InvalidParameterIndex,
        ScriptCheckError,
        ValueError,
    ) as e:
        logger.error(f"{parsed.command} failed: {e}")
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 1


def main():
    """Entry point for the CLI."""
    exit_code = asyncio.run(run_cli(sys.argv[1:]))
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
