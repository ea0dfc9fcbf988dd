"""
Command-line interface for Markdown/MDX editing commands.

Each subcommand loads a file, places the cursor (and optionally a
selection), runs one editing operation and writes the result.

Usage:
    # Print the metadata block
    python -m mdx_authoring.cli.edit metadata article.mdx

    # Cite a key at offset 120
    python -m mdx_authoring.cli.edit cite article.mdx doe2020 --cursor 120 --in-place

    # Add a page locator to the citation at offset 130
    python -m mdx_authoring.cli.edit locator article.mdx page --cursor 130 -o out.mdx

    # Sort the "Related entries" paragraph
    python -m mdx_authoring.cli.edit sort-related article.mdx --in-place
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from mdx_authoring.config import settings
from mdx_authoring.exceptions import MarkupNotSupportedError, PreconditionError
from mdx_authoring.logging_config import bind_edit_context, get_logger, setup_logging
from mdx_authoring.markup import (
    LOCATOR_TABLE,
    get_document_language,
    get_local_variables_block,
    get_metadata_block,
    insert_citation,
    insert_locator,
    insert_pair,
    locator_names,
    parse_local_variables,
)
from mdx_authoring.models import Span, TextDocument
from mdx_authoring.sorting import sort_paragraph_elements, sort_related_entries
from mdx_authoring.version import get_version_string


# Setup logging
setup_logging()
logger = get_logger(__name__)


class CommandAborted(Exception):
    """Command finished without a result worth writing."""


# ============================================================================
# DOCUMENT I/O
# ============================================================================

def load_document(args: argparse.Namespace) -> TextDocument:
    """
    Load the input file with cursor and selection from the command line.

    Args:
        args: Parsed arguments (file, cursor, selection)

    Returns:
        TextDocument ready for editing
    """
    selection = Span(*args.selection) if args.selection else None
    document = TextDocument.from_path(
        args.file,
        markup_extensions=tuple(settings.markup_extensions),
        cursor=args.cursor,
        selection=selection,
    )
    logger.debug(
        "document_loaded",
        path=str(args.file),
        length=len(document),
        cursor=document.cursor,
        markup=document.supports_markup(),
    )
    return document


def write_document(document: TextDocument, args: argparse.Namespace) -> None:
    """
    Write the edited document.

    Goes to --output, back to the input file with --in-place (only when
    something changed), or to stdout.
    """
    if args.in_place:
        if document.modified:
            Path(args.file).write_text(document.text, encoding="utf-8")
            logger.info("document_written", path=str(args.file))
        return

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(document.text, encoding="utf-8")
        logger.info("document_written", path=str(output_path))
        return

    sys.stdout.write(document.text)


# ============================================================================
# COMMANDS
# ============================================================================

def cmd_metadata(args: argparse.Namespace) -> None:
    """Print the metadata block."""
    block = get_metadata_block(load_document(args))
    if block is None:
        raise CommandAborted("No metadata block")
    print(block)


def cmd_local_vars(args: argparse.Namespace) -> None:
    """Print the local variables block, its parsed variables, or the language."""
    document = load_document(args)
    if args.language:
        language = get_document_language(document)
        if language is None:
            raise CommandAborted("No document language set")
        print(language)
        return

    block = get_local_variables_block(document)
    if block is None:
        raise CommandAborted("No local variables block")
    if args.json:
        print(json.dumps(parse_local_variables(block), ensure_ascii=False, indent=2))
    else:
        print(block)


def cmd_wrap(args: argparse.Namespace) -> None:
    """Wrap the selection in an element pair, or insert the pair at the cursor."""
    document = load_document(args)
    if not document.supports_markup():
        raise MarkupNotSupportedError()
    insert_pair(document, args.open, args.close, self_closing=args.self_closing)
    write_document(document, args)


def cmd_cite(args: argparse.Namespace) -> None:
    """Insert a citation, or retarget the citation key under the cursor."""
    document = load_document(args)
    old_key = insert_citation(document, args.key, short=args.short, body_form=args.body)
    if old_key is not None and old_key != args.key:
        # Anything describing the old key is now stale
        print(f"Replaced citation key '{old_key}' with '{args.key}'", file=sys.stderr)
    write_document(document, args)


def cmd_locator(args: argparse.Namespace) -> None:
    """Insert or replace a locator in the citation under the cursor."""
    document = load_document(args)
    insert_locator(document, args.name)
    write_document(document, args)


def cmd_locators(args: argparse.Namespace) -> None:
    """List the locator table."""
    if args.json:
        print(json.dumps([entry.model_dump() for entry in LOCATOR_TABLE], ensure_ascii=False, indent=2))
        return
    for entry in LOCATOR_TABLE:
        print(f"{entry.full_name}\t{entry.abbreviation}")


def cmd_sort_paragraph(args: argparse.Namespace) -> None:
    """Sort the elements of the paragraph at the cursor."""
    document = load_document(args)
    if sort_paragraph_elements(document, args.separator) is None:
        logger.info("sort_skipped", reason="no_paragraph", cursor=document.cursor)
    write_document(document, args)


def cmd_sort_related(args: argparse.Namespace) -> None:
    """Sort the "Related entries" paragraph."""
    document = load_document(args)
    if not sort_related_entries(document):
        logger.info("sort_skipped", reason="no_related_entries")
    write_document(document, args)


# ============================================================================
# MAIN CLI
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with one subparser per command."""
    parser = argparse.ArgumentParser(
        prog="mdx-edit",
        description="Markdown/MDX editing commands - citations, locators, element pairs, sorting",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Wrap characters 10-20 in <em>...</em>
  %(prog)s wrap notes.md --open "<em>" --close "</em>" --selection 10 20

  # Short citation at offset 42, written to a new file
  %(prog)s cite article.mdx doe2020 --short --cursor 42 -o out.mdx

  # Locators known to the engine
  %(prog)s locators
        """,
    )
    parser.add_argument("--version", action="version", version=get_version_string())

    document_args = argparse.ArgumentParser(add_help=False)
    document_args.add_argument("file", type=str, help="Markdown/MDX file to edit")
    document_args.add_argument(
        "--cursor", "-c", type=int, default=0, help="Cursor offset (default: 0)"
    )
    document_args.add_argument(
        "--selection",
        "-s",
        type=int,
        nargs=2,
        metavar=("START", "END"),
        default=None,
        help="Active selection; the cursor moves to END",
    )

    output_args = argparse.ArgumentParser(add_help=False)
    target = output_args.add_mutually_exclusive_group()
    target.add_argument("--output", "-o", type=str, default=None, help="Output file (default: stdout)")
    target.add_argument("--in-place", "-i", action="store_true", help="Rewrite the input file")

    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("metadata", parents=[document_args], help="Print the metadata block")
    p.set_defaults(func=cmd_metadata)

    p = subparsers.add_parser(
        "local-vars", parents=[document_args], help="Print the local variables block"
    )
    p.add_argument("--json", action="store_true", help="Print parsed variables as JSON")
    p.add_argument("--language", action="store_true", help="Print only the document language")
    p.set_defaults(func=cmd_local_vars)

    p = subparsers.add_parser(
        "wrap", parents=[document_args, output_args], help="Insert an element pair"
    )
    p.add_argument("--open", required=True, help='Opening tag, e.g. "<X>"')
    p.add_argument("--close", required=True, help='Closing tag, e.g. "</X>"')
    p.add_argument("--self-closing", action="store_true", help="Insert <X /> when nothing is selected")
    p.set_defaults(func=cmd_wrap)

    p = subparsers.add_parser(
        "cite", parents=[document_args, output_args], help="Insert or retarget a citation"
    )
    p.add_argument("key", help="Bibliography key")
    p.add_argument("--short", action="store_true", help="Add the short attribute")
    p.add_argument("--body", action="store_true", help="Use <Cite ...></Cite> instead of <Cite ... />")
    p.set_defaults(func=cmd_cite)

    p = subparsers.add_parser(
        "locator", parents=[document_args, output_args], help="Insert a locator into a citation"
    )
    p.add_argument("name", choices=locator_names(), metavar="NAME", help="Locator full name (see 'locators')")
    p.set_defaults(func=cmd_locator)

    p = subparsers.add_parser("locators", help="List known locators")
    p.add_argument("--json", action="store_true", help="Print as JSON")
    p.set_defaults(func=cmd_locators)

    p = subparsers.add_parser(
        "sort-paragraph", parents=[document_args, output_args], help="Sort the paragraph at the cursor"
    )
    p.add_argument(
        "--separator",
        default=settings.related_entries_separator,
        help=f"Element separator (default: {settings.related_entries_separator!r})",
    )
    p.set_defaults(func=cmd_sort_paragraph)

    p = subparsers.add_parser(
        "sort-related", parents=[document_args, output_args], help="Sort the Related entries paragraph"
    )
    p.set_defaults(func=cmd_sort_related)

    return parser


def main(argv: Optional[List[str]] = None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if getattr(args, "file", None) and not Path(args.file).is_file():
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        sys.exit(1)

    bind_edit_context(args.command, getattr(args, "file", None))

    try:
        args.func(args)
    except PreconditionError as e:
        logger.warning("command_rejected", error_code=e.error_code)
        print(f"Error: {e.message}", file=sys.stderr)
        sys.exit(1)
    except CommandAborted as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)
    except ValueError as e:
        logger.error("command_failed", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
