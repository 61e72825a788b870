"""
Interpret commands: one line, or an interactive loop.
"""

import sys

from rich import print_json
from rich.console import Console
from rich.markup import escape

from said.cli.loader import load_interpreter
from said.core.command import command_from_match
from said.core.grammar_lang import GrammarParseError
from said.core.interpreter import Interpreter, MatchResult
from said.core.pattern_lang import MalformedPatternDefinition

console = Console()


def add_subparser(subparsers):
    interpret_p = subparsers.add_parser("interpret", help="Interpret one input line")
    interpret_p.add_argument("text", help="Player input, e.g. 'take the key'")
    interpret_p.add_argument("--json", action="store_true", help="Print the result as JSON")
    interpret_p.add_argument("--no-strip-fillers", action="store_false", dest="strip_fillers",
                             help="Keep filler words such as 'please'")
    interpret_p.set_defaults(func=run_interpret)

    repl_p = subparsers.add_parser("repl", help="Interpret lines from the terminal until EOF")
    repl_p.add_argument("--no-strip-fillers", action="store_false", dest="strip_fillers",
                        help="Keep filler words such as 'please'")
    repl_p.set_defaults(func=run_repl)


def build(args) -> Interpreter:
    try:
        return load_interpreter(args, strip_fillers=args.strip_fillers)
    except (FileNotFoundError, GrammarParseError, MalformedPatternDefinition) as e:
        console.print(f"[red]✗ Error: {escape(str(e))}[/red]")
        sys.exit(1)


def show_result(interpreter: Interpreter, result: MatchResult):
    if result.matched:
        console.print(f"[green]✓ {result.action}[/green]")
        for name, value in result.captures.items():
            console.print(f"  {name}: {escape(value)}")
        return

    console.print(f"[yellow]✗ {escape(interpreter.explain(result))}[/yellow]")
    console.print(f"[dim]  {result.hint.value}[/dim]")


def run_interpret(args):
    interpreter = build(args)
    result = interpreter.interpret(args.text)

    if args.json:
        command = command_from_match(result, interpreter.lexicon)
        data = result.to_dict()
        data["message"] = interpreter.explain(result)
        data["command"] = command.to_dict() if command else None
        print_json(data=data)
        return

    show_result(interpreter, result)


def run_repl(args):
    interpreter = build(args)
    console.print(f"[dim]{len(interpreter.library)} patterns loaded. Ctrl-D to exit.[/dim]")

    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not line.strip():
            continue
        show_result(interpreter, interpreter.interpret(line))
