"""Moodlog CLI - Mental Fitness Tracker."""

import json
import logging
import sys

import click

from .config import load_config, resolve_export_path
from .core.entry import Entry
from .core.errors import BlankKeyError, BlankNoteError, InvalidKeyError, InvalidNoteError, StorageError
from .core.views import Mood
from .workflows import Journal

MOOD_FACES = {
    Mood.POSITIVE: "😊",
    Mood.NEGATIVE: "😟",
    Mood.BALANCED: "😐",
}

RULE = "============================="


def _configure_logging(level: str, debug: bool) -> None:
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )
    else:
        logging.basicConfig(format="%(message)s", level=getattr(logging, level, logging.INFO))


def _format_pair(key: str, entry: Entry) -> str:
    return f"{key} → {entry}"


def _echo_pairs(pairs: list[tuple[str, Entry]]) -> None:
    for key, entry in pairs:
        click.echo(_format_pair(key, entry))


def _fail(message: str) -> None:
    click.echo(message, err=True)
    sys.exit(1)


@click.group()
@click.version_option(package_name="moodlog")
@click.option("--file", "save_file", default=None, type=click.Path(dir_okay=False),
              help="Save file to use instead of the configured one")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, save_file: str | None, debug: bool):
    """Moodlog - Mental Fitness Tracker."""
    config = load_config()
    _configure_logging(config.log_level, debug)
    ctx.obj = {"config": config, "journal": Journal.open(config, save_file)}


# ============== Entry commands ==============


@main.command()
@click.argument("key")
@click.argument("note", required=False)
@click.option("--yes", "-y", is_flag=True, help="Overwrite an existing entry without asking")
@click.pass_obj
def add(obj: dict, key: str, note: str | None, yes: bool):
    """Add an entry under KEY (e.g. Mood or 2025-06-29)."""
    journal: Journal = obj["journal"]
    if not key.strip():
        _fail("Key cannot be blank.")

    existing = journal.get(key)
    if existing is not None and not yes:
        click.echo("An entry already exists for this key:")
        click.echo(f"→ {_format_pair(key.strip().lower(), existing)}")
        if not click.confirm("Do you want to overwrite it?"):
            click.echo("Entry was not changed.")
            return

    if note is None:
        note = click.prompt("Enter your mental fitness note", default="", show_default=False)

    try:
        entry = journal.add(key, note)
    except (BlankKeyError, InvalidKeyError, BlankNoteError, InvalidNoteError) as e:
        _fail(str(e))
    click.echo(f"Entry saved! [{key.strip().lower()} : {entry}]")


@main.command("list")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_obj
def list_entries(obj: dict, as_json: bool):
    """View all entries."""
    journal: Journal = obj["journal"]
    pairs = journal.entries()

    if as_json:
        click.echo(
            json.dumps(
                [
                    {"key": key, "note": entry.note, "timestamp": entry.formatted_timestamp}
                    for key, entry in pairs
                ],
                indent=2,
            )
        )
        return

    click.echo(RULE)
    if not pairs:
        click.echo("No entries found.")
        click.echo(RULE)
        return

    click.echo("--- All Entries ---")
    click.echo(RULE)
    _echo_pairs(pairs)
    click.echo(f"\nTotal entries: {len(pairs)}")
    click.echo(RULE)


@main.command()
@click.argument("key")
@click.pass_obj
def remove(obj: dict, key: str):
    """Remove the entry stored under KEY."""
    journal: Journal = obj["journal"]
    if journal.remove(key):
        click.echo("Entry removed successfully.")
    else:
        click.echo("No entry found with that key.")


@main.command()
@click.argument("key")
@click.argument("note", required=False)
@click.pass_obj
def modify(obj: dict, key: str, note: str | None):
    """Replace the note stored under KEY."""
    journal: Journal = obj["journal"]
    current = journal.get(key)
    if current is None:
        click.echo("No entry found with that key.")
        return

    click.echo(f"Current Entry: {current}")
    if note is None:
        note = click.prompt("Enter the new value", default="", show_default=False)

    try:
        journal.modify(key, note)
    except (BlankNoteError, InvalidNoteError) as e:
        _fail(str(e))
    click.echo("Entry updated!")


# ============== Views ==============


@main.command()
@click.argument("keyword")
@click.pass_obj
def search(obj: dict, keyword: str):
    """Find entries whose key or note contains KEYWORD."""
    matches = obj["journal"].search(keyword)
    if not matches:
        click.echo("No matching entries found.")
        return
    _echo_pairs(matches)


@main.command()
@click.option("--by", "order", type=click.Choice(["key", "timestamp"]), default="key",
              show_default=True, help="Sort order")
@click.pass_obj
def sort(obj: dict, order: str):
    """List entries sorted by key or by timestamp."""
    journal: Journal = obj["journal"]
    if not len(journal):
        click.echo("No entries to sort.")
        return

    if order == "timestamp":
        click.echo("\n--- Entries Sorted by Timestamp ---")
        _echo_pairs(journal.sorted_by_timestamp())
    else:
        click.echo("\n--- Entries Sorted by Key ---")
        _echo_pairs(journal.sorted_by_key())
        click.echo(f"\nTotal entries: {len(journal)}")


@main.command()
@click.pass_obj
def trends(obj: dict):
    """Analyze emotional trends across all notes."""
    report = obj["journal"].trends()
    click.echo("\n--- Entries Trend Analysis ---")
    click.echo(f"Total entries scanned: {report.total}")
    click.echo(f"Positive emotion words found: {report.positive_count}")
    click.echo(f"Negative emotion words found: {report.negative_count}")
    click.echo(f"Overall mood trend: {report.verdict.value} {MOOD_FACES[report.verdict]}")


# ============== Files ==============


@main.command()
@click.pass_obj
def save(obj: dict):
    """Save entries to the save file."""
    journal: Journal = obj["journal"]
    if not journal.save():
        sys.exit(1)
    click.echo(f"Entries saved to {journal.path}")


@main.command()
@click.option("--output", "-o", default=None, type=click.Path(dir_okay=False),
              help="CSV file to write (defaults to the configured export file)")
@click.pass_obj
def export(obj: dict, output: str | None):
    """Export entries to CSV."""
    path = output or resolve_export_path(obj["config"])
    try:
        count = obj["journal"].export(path)
    except StorageError as e:
        _fail(str(e))
    click.echo(f"Exported {count} entries to {path}")


# ============== Interactive menu ==============

MENU = """
=== Mental Fitness Tracker ===
1. Add Entry
2. View All Entries
3. Remove Entry
4. Modify Entry
5. Exit
6. Search Entries
7. Sort Entries (by Key)
8. Save Entries to File
9. Export Entries to CSV
10. Sort Entries by Timestamp
11. Analyze Emotional Trends"""


def _ask(text: str) -> str:
    return click.prompt(text, default="", show_default=False).strip()


def _menu_add(ctx: click.Context, journal: Journal) -> None:
    key = _ask("Enter a key (e.g., Mood or 2025-06-29)").lower()
    if not key:
        click.echo("Key cannot be blank.")
        return

    existing = journal.get(key)
    if existing is not None:
        click.echo("An entry already exists for this key:")
        click.echo(f"→ {_format_pair(key, existing)}")
        if _ask("Do you want to overwrite it? (yes/no)").lower() != "yes":
            click.echo("Entry was not changed.")
            return

    note = _ask("Enter your mental fitness note")
    try:
        entry = journal.add(key, note)
    except (InvalidKeyError, BlankNoteError, InvalidNoteError) as e:
        click.echo(str(e))
        return
    click.echo(f"Entry saved! [{key} : {entry}]")


def _menu_remove(ctx: click.Context, journal: Journal) -> None:
    ctx.invoke(remove, key=_ask("Enter the key of the entry to remove"))


def _menu_modify(ctx: click.Context, journal: Journal) -> None:
    key = _ask("Enter key of the entry to modify")
    current = journal.get(key)
    if current is None:
        click.echo("No entry found with that key.")
        return

    click.echo(f"Current Entry: {current}")
    try:
        journal.modify(key, _ask("Enter the new value"))
    except (BlankNoteError, InvalidNoteError) as e:
        click.echo(str(e))
        return
    click.echo("Entry updated!")


def _menu_search(ctx: click.Context, journal: Journal) -> None:
    ctx.invoke(search, keyword=_ask("Enter keyword to search for"))


def _menu_save(ctx: click.Context, journal: Journal) -> None:
    if journal.save():
        click.echo(f"Entries saved to {journal.path}")


def _menu_export(ctx: click.Context, journal: Journal) -> None:
    path = resolve_export_path(ctx.obj["config"])
    try:
        journal.export(path)
    except StorageError as e:
        click.echo(str(e))
        return
    click.echo(f"Entries exported to {path}")


MENU_ACTIONS = {
    1: _menu_add,
    2: lambda ctx, journal: ctx.invoke(list_entries, as_json=False),
    3: _menu_remove,
    4: _menu_modify,
    6: _menu_search,
    7: lambda ctx, journal: ctx.invoke(sort, order="key"),
    8: _menu_save,
    9: _menu_export,
    10: lambda ctx, journal: ctx.invoke(sort, order="timestamp"),
    11: lambda ctx, journal: ctx.invoke(trends),
}


@main.command()
@click.pass_context
def menu(ctx: click.Context):
    """Run the interactive numbered menu."""
    journal: Journal = ctx.obj["journal"]

    while True:
        click.echo(MENU)
        raw = _ask("Choose an option")
        try:
            choice = int(raw)
        except ValueError:
            click.echo("Invalid input. Please enter a number between 1 and 11.")
            continue

        if choice == 5:
            journal.save()
            click.echo("Goodbye!")
            return

        action = MENU_ACTIONS.get(choice)
        if action is None:
            click.echo("Invalid option. Please choose 1-11.")
            continue
        action(ctx, journal)


if __name__ == "__main__":
    main()
