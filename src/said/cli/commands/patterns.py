"""Lists the pattern library in matching order."""

import sys

from rich.console import Console
from rich.markup import escape

from said.cli.loader import load_interpreter
from said.core.grammar_lang import GrammarParseError
from said.core.pattern_lang import MalformedPatternDefinition

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("patterns", help="List patterns in matching order")
    parser.add_argument("-a", "--action", help="Only patterns for this action")
    parser.add_argument("--regex", action="store_true", help="Show the compiled regex")
    parser.set_defaults(func=run_patterns)


def run_patterns(args):
    try:
        interpreter = load_interpreter(args)
    except (FileNotFoundError, GrammarParseError, MalformedPatternDefinition) as e:
        console.print(f"[red]✗ Error: {escape(str(e))}[/red]")
        sys.exit(1)

    library = interpreter.library
    for i, pattern in enumerate(library):
        if args.action and pattern.action != args.action.upper():
            continue
        dead = " [red](dead)[/red]" if i in library.dead_patterns else ""
        console.print(f"#{i:<3} [bold]{pattern.action:16}[/bold] {escape(pattern.source)}{dead}", highlight=False)
        if args.regex:
            console.print(f"[dim]     {escape(pattern.regex.pattern)}[/dim]", highlight=False)

    console.print(f"\n[dim]{len(library)} patterns, {len(library.actions())} actions[/dim]")
