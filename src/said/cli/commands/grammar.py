"""
Grammar file commands.
"""

import sys

from rich.console import Console
from rich.markup import escape

from said.core.default_grammar import DEFAULT_GRAMMAR
from said.core.grammar_lang import GrammarParseError, format_grammar, load_grammar
from said.core.library import PatternLibrary
from said.core.pattern_lang import MalformedPatternDefinition

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("grammar", help="Grammar file tools")
    grammar_sub = parser.add_subparsers(dest="grammar_command", required=True)

    # check - parse, build and report defects
    check_p = grammar_sub.add_parser("check", help="Validate a .grammar file")
    check_p.add_argument("file", help="Path to .grammar file")
    check_p.add_argument("--strict", action="store_true", help="Treat dead patterns and literal collisions as errors")
    check_p.set_defaults(func=grammar_check)

    # show - normalized form
    show_p = grammar_sub.add_parser("show", help="Print a .grammar file in normalized form")
    show_p.add_argument("file", help="Path to .grammar file")
    show_p.set_defaults(func=grammar_show)

    # example - the built-in grammar
    example_p = grammar_sub.add_parser("example", help="Print the built-in grammar")
    example_p.set_defaults(func=grammar_example)


def grammar_check(args):
    try:
        doc = load_grammar(args.file)
        lexicon = doc.lexicon()
        library = PatternLibrary.build(doc.patterns(), lexicon, strict=args.strict)
    except (FileNotFoundError, GrammarParseError, MalformedPatternDefinition) as e:
        console.print(f"[red]✗ Error: {escape(str(e))}[/red]")
        sys.exit(1)

    problems = lexicon.validate()

    console.print(f"=== {escape(args.file)} ===")
    console.print(f"Verbs: {len(doc.verbs)}")
    console.print(f"Directions: {len(doc.directions)}")
    console.print(f"Abbreviations: {len(doc.abbreviations)}")
    console.print(f"Patterns: {len(library)} ({len(library.actions())} actions)")

    for problem in problems:
        console.print(f"[yellow]  warning: {escape(problem)}[/yellow]")
    for i in library.dead_patterns:
        pattern = library.patterns[i]
        console.print(f"[yellow]  warning: pattern #{i} ({pattern.action}) can never match: {escape(pattern.source)}[/yellow]")
    for collision in library.collisions:
        console.print(f"[yellow]  warning: {escape(collision)}[/yellow]")

    if problems or library.dead_patterns or library.collisions:
        sys.exit(1)
    console.print("[green]✓ OK[/green]")


def grammar_show(args):
    try:
        doc = load_grammar(args.file)
    except (FileNotFoundError, GrammarParseError, MalformedPatternDefinition) as e:
        console.print(f"[red]✗ Error: {escape(str(e))}[/red]")
        sys.exit(1)
    print(format_grammar(doc), end="")


def grammar_example(args):
    print(DEFAULT_GRAMMAR, end="")
