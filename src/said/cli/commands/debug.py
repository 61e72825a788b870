"""Shows how every pattern in the library responds to one input."""

import sys

from rich.console import Console
from rich.markup import escape

from said.cli.loader import load_interpreter
from said.core.grammar_lang import GrammarParseError
from said.core.pattern_lang import MalformedPatternDefinition

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("debug", help="Trace an input through every pattern")
    parser.add_argument("text", help="Player input")
    parser.add_argument("-a", "--all", action="store_true", dest="show_all",
                        help="List patterns that did not match too")
    parser.set_defaults(func=run_debug)


def run_debug(args):
    try:
        interpreter = load_interpreter(args)
    except (FileNotFoundError, GrammarParseError, MalformedPatternDefinition) as e:
        console.print(f"[red]✗ Error: {escape(str(e))}[/red]")
        sys.exit(1)

    words = interpreter.normalize(args.text)
    console.print(f"[dim]normalized: {escape(' '.join(words))}[/dim]")
    console.print(f"[dim]verb: {interpreter.lexicon.find_verb(words)}[/dim]\n")

    winner = None
    for probe in interpreter.debug(args.text):
        if probe.matched and winner is None:
            winner = probe.index
            console.print(f"[green]→ #{probe.index:<3} {probe.action:16} {escape(probe.pattern)}  {escape(str(probe.captures))}[/green]")
        elif probe.matched:
            console.print(f"  #{probe.index:<3} {probe.action:16} {escape(probe.pattern)}  {escape(str(probe.captures))}")
        elif args.show_all:
            console.print(f"[dim]  #{probe.index:<3} {probe.action:16} {escape(probe.pattern)}[/dim]")

    if winner is None:
        console.print("[yellow]No pattern matched.[/yellow]")
