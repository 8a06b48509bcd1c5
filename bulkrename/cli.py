"""CLI entrypoints."""

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from bulkrename.models.rename import RenameOutcome, RenamePlan
from bulkrename.models.settings import RunSettings
from bulkrename.processors.directory_scanner import DirectoryAccessError, scan_directory, validate_directory
from bulkrename.processors.rename_processor import RenameProcessor, is_affirmative
from bulkrename.processors.transforms import NameTransform, select_transform


# Emoji shortcodes are disabled so entry names print verbatim
console = Console(emoji=False)


@click.group(context_settings=dict(show_default=True))
@click.option(
    "-d",
    "--directory",
    type=click.Path(path_type=Path),
    default=".",
    help="Target directory whose entries are renamed.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show detailed progress.")
@click.version_option(package_name="bulkrename")
@click.pass_context
def cli(ctx: click.Context, directory: Path, verbose: bool) -> None:
    """bulkrename - Rename the entries of a directory in one go.

    Every change is previewed and applied only after confirmation.
    """
    ctx.obj = RunSettings(directory=directory, verbose=verbose)


@cli.command("remove")
@click.argument("pattern", type=str)
@click.pass_obj
def remove(settings: RunSettings, pattern: str) -> None:
    """Remove PATTERN from every name."""
    _run(settings, select_transform("remove", pattern))


@cli.command("replace")
@click.argument("old", type=str)
@click.argument("new", type=str)
@click.pass_obj
def replace(settings: RunSettings, old: str, new: str) -> None:
    """Replace OLD with NEW in every name."""
    _run(settings, select_transform("replace", old, new))


@cli.command("add-prefix")
@click.argument("prefix", type=str)
@click.pass_obj
def add_prefix(settings: RunSettings, prefix: str) -> None:
    """Add PREFIX to the start of every name."""
    _run(settings, select_transform("add-prefix", prefix))


@cli.command("add-suffix")
@click.argument("suffix", type=str)
@click.pass_obj
def add_suffix(settings: RunSettings, suffix: str) -> None:
    """Add SUFFIX before the extension of every name.

    The extension starts at the last dot; names without a dot get SUFFIX appended.
    """
    _run(settings, select_transform("add-suffix", suffix))


@cli.command("regex-replace")
@click.argument("pattern", type=str)
@click.argument("replacement", type=str)
@click.pass_obj
def regex_replace(settings: RunSettings, pattern: str, replacement: str) -> None:
    r"""Replace matches of the regular expression PATTERN with REPLACEMENT.

    REPLACEMENT may reference groups as \1 or \g<name>. An invalid PATTERN
    leaves every name unchanged.

    Examples:

        bulkrename regex-replace "^img" "photo"

        bulkrename -d ./scans regex-replace "(\d+)_(\w+)" "\2_\1"
    """
    _run(settings, select_transform("regex-replace", pattern, replacement))


def _run(settings: RunSettings, transform: NameTransform) -> None:
    """Validate, scan, plan, confirm, apply and report for one transform."""
    directory = settings.directory
    verbose = settings.verbose

    try:
        validate_directory(directory)
        if verbose:
            console.print(f"[dim]Target directory: {escape(str(directory.resolve()))}[/dim]")
            console.print(f"[dim]Command: {escape(transform.describe())}[/dim]")
        entries = scan_directory(directory)
    except (FileNotFoundError, NotADirectoryError, DirectoryAccessError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise SystemExit(1) from e

    if not entries:
        console.print("[yellow]Directory is empty.[/yellow]")
        return

    if verbose:
        console.print(f"[dim]Found {len(entries)} entries.[/dim]")

    processor = RenameProcessor(transform=transform)
    plan = processor.build_plan(entries)

    if not plan:
        console.print("[yellow]Nothing to change.[/yellow]")
        return

    _show_plan(plan)

    if not _confirm():
        console.print("[yellow]Operation cancelled. No entries were renamed.[/yellow]")
        return

    summary = processor.apply_plan(plan, report=lambda outcome: _report_outcome(outcome, verbose))

    console.print()
    console.print(
        f"[bold green]Done.[/bold green] Succeeded: [green]{summary.succeeded}[/green], "
        f"failed: [red]{summary.failed}[/red]"
    )


def _show_plan(plan: RenamePlan) -> None:
    console.print()
    console.print(f"[bold]Proposed renames ({len(plan)}):[/bold]")

    table = Table(show_header=True, header_style="bold")
    table.add_column("Original", style="cyan", overflow="fold")
    table.add_column("New Name", style="green", overflow="fold")

    for op in plan.operations:
        table.add_row(escape(op.original_name), escape(op.new_name))

    console.print(table)
    console.print()


def _confirm() -> bool:
    """Read one line and report whether it is an affirmative answer.

    End of input counts as a refusal.
    """
    try:
        response = console.input("Apply these renames? [y/N]: ", markup=False)
    except EOFError:
        return False
    return is_affirmative(response)


def _report_outcome(outcome: RenameOutcome, verbose: bool) -> None:
    op = outcome.operation
    pair = f"{escape(op.original_name)} -> {escape(op.new_name)}"
    if not outcome.succeeded:
        console.print(f"[red]✗[/red] {pair} [red](error: {escape(outcome.error or '')})[/red]", soft_wrap=True)
    elif verbose:
        console.print(f"[green]✓[/green] {pair}", soft_wrap=True)
