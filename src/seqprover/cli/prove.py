#!/usr/bin/env python3
"""
Prove propositional sequents.

USAGE:
    seqprover "A ∧ B ⊦ B ∧ A"
    seqprover "A & B > B & A" --format ascii --rules
    seqprover "⊦ A ∨ ¬A" --json proof.json
    seqprover --file sequents.seq
    seqprover --list-formats
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from tqdm import tqdm

from seqprover.core.exceptions import SequentSyntaxError
from seqprover.fileformats import get_format_handler, list_formats
from seqprover.proofs import derivation_to_dict, save_derivation
from seqprover.search import get_search
from seqprover.utils.config import get_config

logger = logging.getLogger(__name__)

EXIT_PROVED = 0
EXIT_SYNTAX_ERROR = 1
EXIT_NOT_PROVED = 2


def highlight_error(text: str, error: SequentSyntaxError) -> str:
    """Return the input with a caret under the offending character.

    A position at the end of the string points at a trailing blank.
    """
    return f"  {text}\n  {' ' * error.position}^"


def setup_logging(config, verbose: bool):
    level = "DEBUG" if verbose else str(config.get("logging.level", "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format=config.get("logging.format", "%(levelname)s %(name)s: %(message)s"),
    )


def prove_one(text: str, search, handler, args, show_rules: bool) -> int:
    """Parse, prove and report a single sequent. Returns an exit code."""
    try:
        sequent = handler.parse_string(text)
    except SequentSyntaxError as e:
        print(f"Syntax error: {e.message}", file=sys.stderr)
        print(highlight_error(text, e), file=sys.stderr)
        return EXIT_SYNTAX_ERROR

    root = search.prove(sequent)
    verdict = "✓ Provable" if root.is_proved else "✗ Not provable"

    if args.quiet:
        print(verdict)
    else:
        print(root.pretty(show_rules=show_rules, glyphs=handler.glyphs))
        print()
        print(verdict)
        if not root.is_proved:
            for failed in root.failed_sequents():
                print(f"  Counterexample branch: {handler.format_sequent(failed)}")

    if args.json_output:
        save_derivation(root, args.json_output)
        print(f"Derivation saved to {args.json_output}")

    return EXIT_PROVED if root.is_proved else EXIT_NOT_PROVED


def prove_file(path: Path, search, handler, args) -> int:
    """Prove every sequent in a file and print one verdict per line."""
    try:
        entries = list(handler.iter_file(path))
    except SequentSyntaxError as e:
        print(f"Syntax error: {e.message} (column {e.position + 1})", file=sys.stderr)
        return EXIT_SYNTAX_ERROR

    results = []
    for line_number, sequent in tqdm(entries, desc="Proving", disable=args.quiet):
        root = search.prove(sequent)
        results.append((line_number, sequent, root))

    proved = 0
    for line_number, sequent, root in results:
        proved += root.is_proved
        mark = "✓" if root.is_proved else "✗"
        print(f"{line_number:>4}  {mark}  {handler.format_sequent(sequent)}")
    print(f"\n{proved}/{len(results)} provable")

    if args.json_output:
        with open(args.json_output, 'w', encoding='utf-8') as f:
            json.dump([
                {"line": line_number, "proved": root.is_proved,
                 "derivation": derivation_to_dict(root, handler.glyphs)}
                for line_number, _, root in results
            ], f, indent=2, ensure_ascii=False)
        print(f"Derivations saved to {args.json_output}")

    return EXIT_PROVED if proved == len(results) else EXIT_NOT_PROVED


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Prove a propositional sequent",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("sequent", nargs="?", help="Sequent to prove, e.g. 'A, B ⊦ A ∧ B'")
    parser.add_argument("--file", type=Path, help="Prove every sequent in a file (one per line)")
    parser.add_argument("--format", dest="output_format", help="Output format (see --list-formats)")
    parser.add_argument("--rules", action="store_true", help="Show the rule applied at each step")
    parser.add_argument("--json", dest="json_output", help="Export the derivation to a JSON file")
    parser.add_argument("--config", help="Path to a YAML configuration file")
    parser.add_argument("--list-formats", action="store_true", help="List available formats")
    parser.add_argument("--no-fail-exit", action="store_true",
                        help="Exit with status 0 even if a sequent is not provable")
    parser.add_argument("--quiet", action="store_true", help="Only print the verdict")
    parser.add_argument("--verbose", action="store_true", help="Log each rule application")

    args = parser.parse_args(argv)

    if args.list_formats:
        print("Available formats:")
        for name in list_formats():
            handler = get_format_handler(name)
            print(f"  {name:<10} {', '.join(handler.extensions)}")
        return EXIT_PROVED

    if args.sequent is None and args.file is None:
        parser.error("a sequent or --file is required")

    try:
        config = get_config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_SYNTAX_ERROR
    setup_logging(config, args.verbose)

    try:
        handler = get_format_handler(args.output_format or config.get("format.output", "sequent"))
        search = get_search(config.get("search.strategy", "backward"))
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_SYNTAX_ERROR
    show_rules = args.rules or bool(config.get("output.show_rules", False))

    if args.file is not None:
        if not args.file.exists():
            print(f"Error: File not found: {args.file}", file=sys.stderr)
            return EXIT_SYNTAX_ERROR
        logger.debug("Proving sequents from %s", args.file)
        status = prove_file(args.file, search, handler, args)
    else:
        status = prove_one(args.sequent, search, handler, args, show_rules)

    if status == EXIT_NOT_PROVED and args.no_fail_exit:
        return EXIT_PROVED
    return status


if __name__ == "__main__":
    sys.exit(main())
