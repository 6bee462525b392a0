"""CLI for anamnesis - extract Anki flashcards from Obsidian notes."""

import argparse
import json
import logging
import platform
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .core.headings import ancestor_context
from .locate import char_offset_to_line, locate_card
from .note import cards_to_delete, id_markers
from .runtime import build_runtime


def _read_note(path: Path) -> str:
    if not path.is_file():
        raise FileNotFoundError(f"Note not found: {path}")
    return path.read_text(encoding="utf-8")


def _load_embeds(path: Path | None) -> dict[str, str]:
    if path is None:
        return {}
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: embeds file must hold a JSON object")
    return {str(k): str(v) for k, v in data.items()}


def cmd_extract(args: argparse.Namespace, rt: Any) -> int:
    """Print the cards found in a note."""
    text = _read_note(args.note)
    cards = rt.parser.parse_note(
        text,
        note_name=args.note.stem,
        embeds=_load_embeds(args.embeds),
        deck=args.deck,
    )

    if args.format == "tsv":
        for card in cards:
            print(locate_card(text, card, "tsv"))
    else:
        print(json.dumps([locate_card(text, card) for card in cards], indent=2, ensure_ascii=False))

    if not args.quiet:
        new = sum(1 for c in cards if not c.inserted)
        print(f"{len(cards)} card(s), {new} new", file=sys.stderr)

    return 0


def cmd_headings(args: argparse.Namespace, rt: Any) -> int:
    """Print the heading index with each heading's ancestor chain."""
    text = _read_note(args.note)
    headings = rt.parser.headings(text)
    separator = rt.parser.settings.context_separator

    for h in headings:
        line = char_offset_to_line(text, h.offset)
        context = ancestor_context(headings, h.offset, h.level)
        chain = separator.join([*context, h.text])
        print(f"{line}\t{'#' * h.level}\t{chain}")

    return 0


def cmd_ids(args: argparse.Namespace, rt: Any) -> int:
    """List id markers and the ids whose cards were deleted."""
    text = _read_note(args.note)
    grammar = rt.parser.grammar

    markers = id_markers(text, grammar)
    orphans = cards_to_delete(text, grammar)

    if args.json:
        print(json.dumps({
            "markers": [
                {"id": m.id, "line": char_offset_to_line(text, m.range.start)}
                for m in markers
            ],
            "deleted": orphans,
        }, indent=2))
        return 0

    for m in markers:
        status = "deleted" if m.id in orphans else "card"
        print(f"{m.id}\t{char_offset_to_line(text, m.range.start)}\t{status}")

    return 0


def _version_string() -> str:
    return (
        f"anamnesis {__version__} "
        f"(python {platform.python_version()}, platform {platform.platform()})"
    )


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="anam", description="Extract Anki flashcards from Obsidian notes"
    )
    parser.add_argument(
        "--version", action="version", version=_version_string()
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: search cwd/anamnesis.toml, vault/anamnesis.toml)",
    )
    parser.add_argument(
        "--vault",
        type=Path,
        default=None,
        help="Path to vault directory (overrides config)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Minimize output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log extraction details to stderr"
    )
    parser.add_argument(
        "--json", action="store_true", help="Machine-readable output"
    )

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    # extract command
    parser_extract = subparsers.add_parser("extract", help="Print the cards found in a note")
    parser_extract.add_argument("note", type=Path, help="Path to a markdown note")
    parser_extract.add_argument("--deck", help="Target deck (default: from note or config)")
    parser_extract.add_argument(
        "--embeds", type=Path, default=None,
        help="JSON object mapping embed references to markdown content",
    )
    parser_extract.add_argument(
        "--format", choices=["json", "tsv"], default="json",
        help="Output format (default: json)",
    )

    # headings command
    parser_headings = subparsers.add_parser("headings", help="Show heading context index")
    parser_headings.add_argument("note", type=Path, help="Path to a markdown note")

    # ids command
    parser_ids = subparsers.add_parser("ids", help="List card id markers")
    parser_ids.add_argument("note", type=Path, help="Path to a markdown note")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    handlers = {
        "extract": cmd_extract,
        "headings": cmd_headings,
        "ids": cmd_ids,
    }
    handler = handlers.get(args.cmd)
    if handler is None:
        print(f"Unknown command: {args.cmd}", file=sys.stderr)
        sys.exit(1)

    try:
        # Build runtime
        rt = build_runtime(vault_path=args.vault, config_path=args.config)
        exit_code = handler(args, rt)
        sys.exit(exit_code)
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
