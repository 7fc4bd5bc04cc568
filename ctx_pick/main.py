"""ctx-pick CLI - build LLM context strings from code files."""

import logging
import sys

import click

from . import __version__
from .assembler import build_file_contexts
from .assembler import render_markdown
from .clipboard_handler import ClipboardTextHandler
from .config import Config
from .console import console
from .errors import ClipboardError
from .errors import CtxPickError
from .logging_setup import init_logging
from .resolution import aggregate
from .resolution import resolve_inputs
from .skeleton import supported_extensions
from .ui import DisplayManager
from .utils.error_format import escape_markup
from .utils.error_format import format_error_message

logger = logging.getLogger(__name__)


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog=(
        "Reads specified code files (or files found by partial names, glob patterns "
        "or in folders), concatenates their contents into a single Markdown formatted "
        "string, and copies it to the clipboard, printing to stdout as a fallback."
    ),
)
@click.version_option(__version__, prog_name="ctx-pick")
@click.argument("inputs", nargs=-1, required=True)
@click.option(
    "--depth",
    "-d",
    type=click.IntRange(min=0),
    default=None,
    help=(
        "Include a syntax-tree skeleton of each file, flattened to this depth. "
        f"Skeletons are available for: {', '.join(supported_extensions())}."
    ),
)
@click.option("--skeleton", "-s", is_flag=True, help="Skeleton mode at the configured default depth.")
@click.option("--tags", is_flag=True, help="Skeletons list definition lines instead of depth-flattened tokens.")
@click.option("--stdout", "to_stdout", is_flag=True, help="Print the context to stdout instead of the clipboard.")
@click.option("--jobs", "-j", type=click.IntRange(min=1), default=None, help="Resolve inputs on this many threads.")
@click.option("--verbose", "-v", is_flag=True, help="Verbose (debug) logging.")
def cli(
    inputs: tuple[str, ...],
    depth: int | None,
    skeleton: bool,
    tags: bool,
    to_stdout: bool,
    jobs: int | None,
    verbose: bool,
):
    """Files, partial names, glob patterns, or folders to include in the context."""
    try:
        config = Config.load()
    except CtxPickError as e:
        console.print(f"[bold red]Error:[/bold red] {escape_markup(format_error_message(e, include_type=False))}")
        sys.exit(1)

    init_logging(level="DEBUG" if verbose else config.logging.level, path=config.logging.path, console=console)
    display = DisplayManager(console=console, max_ambiguous_shown=config.output.max_ambiguous_shown)

    tokens = [token for token in inputs if token.strip()]
    if not tokens:
        display.print_error(click.UsageError("No input files specified."))
        sys.exit(1)

    resolutions = resolve_inputs(tokens, config.working_dir, jobs=jobs or config.resolution.jobs)
    report = aggregate(resolutions)

    if report.failed:
        display.print_resolution_errors(report)
        sys.exit(1)

    if not report.files:
        display.print_no_files()
        sys.exit(1)

    # An explicit --depth asks for the depth flatten even when settings prefer tags
    if tags:
        mode = "tags"
    elif depth is not None:
        mode = "depth"
    else:
        mode = config.skeleton.mode
    if depth is None and (skeleton or tags):
        depth = config.skeleton.depth

    contexts = build_file_contexts(report.files, depth=depth, mode=mode)
    markdown = render_markdown(contexts)
    line_count = len(markdown.splitlines())

    clipboard_error: ClipboardError | None = None
    copied = False
    if not to_stdout and config.output.clipboard:
        handler = ClipboardTextHandler()
        try:
            handler.copy(markdown)
            copied = True
        except ClipboardError as e:
            logger.debug(f"Clipboard copy failed: {e}")
            clipboard_error = e

    display.print_operation_summary(contexts, line_count, clipboard_error=clipboard_error, copied=copied)
    if clipboard_error is not None:
        console.print(f"[dim]{handler.get_platform_hint()}[/dim]")

    if not copied:
        click.echo(markdown, nl=False)


def main() -> None:
    """Console-script entry point."""
    cli()


if __name__ == "__main__":
    main()
