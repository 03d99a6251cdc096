"""
Command-line interface for pentpdf.
"""

import sys
from pathlib import Path
from typing import List

import click
from rich.console import Console
from rich.markup import escape

from pentpdf import __version__
from pentpdf.exceptions import PentPDFError
from pentpdf.logging_utils import configure_logging
from pentpdf.splitter import split_document
from pentpdf.types import DEFAULT_MAX_PAGES, DEFAULT_PREFIX, Chunk, RunConfig, SplitResult

console = Console(highlight=False, soft_wrap=True)
error_console = Console(stderr=True, highlight=False, soft_wrap=True)


class ConsoleReporter:
    """Prints run progress to a rich console."""

    def __init__(self, out: Console) -> None:
        self.out = out

    def loaded(self, source: Path, total_pages: int) -> None:
        self.out.print(
            f"Loaded PDF: {escape(str(source))} [bold](Total pages: {total_pages})[/bold]"
        )

    def no_split_needed(self, total_pages: int, max_pages: int) -> None:
        self.out.print(
            f"[bold yellow]File has {total_pages} pages, which is not greater than "
            f"the limit of {max_pages}. No split needed.[/bold yellow]"
        )

    def planned(self, chunks: List[Chunk], max_pages: int) -> None:
        self.out.print(
            f"[bold cyan]Splitting into {len(chunks)} part(s) "
            f"(max {max_pages} pages per file)...[/bold cyan]"
        )

    def chunk_started(self, part_index: int, chunk: Chunk, destination: Path) -> None:
        self.out.print(
            f"Writing \\[{escape(destination.name)}] ({chunk.label})... ",
            end="",
        )

    def chunk_done(self, part_index: int, chunk: Chunk, destination: Path) -> None:
        self.out.print("[green]Done.[/green]")

    def finished(self, result: SplitResult, output_dir: Path) -> None:
        self.out.print(
            f"[bold green]✓ All parts saved successfully to:[/bold green] {escape(str(output_dir))}"
        )


@click.command(name="pentpdf")
@click.version_option(version=__version__, prog_name="pentpdf")
@click.option(
    '--input', '-i', 'input_path',
    required=True,
    help='Source PDF file to split',
    type=click.Path(path_type=Path),
    metavar='FILE',
)
@click.option(
    '--output-dir', '-o',
    default='.',
    show_default=True,
    envvar='PENTPDF_OUTPUT_DIR',
    help='Directory for the generated parts',
    type=click.Path(path_type=Path),
    metavar='DIR',
)
@click.option(
    '--pages', '-p',
    default=DEFAULT_MAX_PAGES,
    show_default=True,
    envvar='PENTPDF_PAGES',
    help='Maximum number of pages per part',
    type=int,
    metavar='NUM',
)
@click.option(
    '--prefix',
    default=DEFAULT_PREFIX,
    show_default=True,
    envvar='PENTPDF_PREFIX',
    help='Prefix for output filenames',
    type=str,
)
@click.option(
    '--verbose', '-v',
    is_flag=True,
    help='Log every step to stderr',
)
def cli(input_path, output_dir, pages, prefix, verbose):
    """
    Split a PDF into manageable chunks.

    Examples:

        pentpdf -i book.pdf

        pentpdf -i book.pdf -o parts -p 50 --prefix book
    """
    configure_logging(verbose)
    config = RunConfig.create(input_path, output_dir, pages, prefix)

    try:
        split_document(config, reporter=ConsoleReporter(console))
    except PentPDFError as e:
        error_console.print(f"[bold red]\\[Error][/bold red] {escape(str(e))}")
        sys.exit(1)
    except Exception as e:
        error_console.print(f"[bold red]\\[Error][/bold red] Unexpected error: {escape(str(e))}")
        sys.exit(1)


def main() -> None:
    cli()


if __name__ == '__main__':
    main()
