"""Looks a word up in the lexicon."""

import sys

from rich import print_json
from rich.console import Console
from rich.markup import escape

from said.cli.loader import load_interpreter
from said.core.grammar_lang import GrammarParseError
from said.core.pattern_lang import MalformedPatternDefinition

console = Console()

ROLES = ("article", "filler", "preposition", "pronoun", "all")


def add_subparser(subparsers):
    parser = subparsers.add_parser("lexicon", help="Look up a word, or dump the whole lexicon")
    parser.add_argument("word", nargs="?", help="Word or phrase to look up")
    parser.set_defaults(func=run_lexicon)


def run_lexicon(args):
    try:
        lexicon = load_interpreter(args).lexicon
    except (FileNotFoundError, GrammarParseError, MalformedPatternDefinition) as e:
        console.print(f"[red]✗ Error: {escape(str(e))}[/red]")
        sys.exit(1)

    if not args.word:
        print_json(data=lexicon.to_dict())
        return

    info = lexicon.describe(args.word)
    roles = [role for role in ROLES if info[role]]

    console.print(f"[bold]{escape(info['word'])}[/bold]")
    if info["verb"]:
        console.print(f"  verb: {info['verb']}")
    if info["direction"]:
        console.print(f"  direction: {info['direction']}")
    if info["abbreviation"]:
        console.print(f"  abbreviation for: {info['abbreviation']}")
    if roles:
        console.print(f"  {', '.join(roles)}")
    if not (info["verb"] or info["direction"] or info["abbreviation"] or roles):
        console.print("[dim]  not in the lexicon[/dim]")
