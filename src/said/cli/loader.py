"""
Builds the interpreter the CLI commands run against.
"""

from said.core.grammar_lang import load_grammar
from said.core.interpreter import Interpreter


def load_interpreter(args, strip_fillers: bool = True) -> Interpreter:
    if getattr(args, "grammar", None):
        doc = load_grammar(args.grammar)
        return Interpreter.from_grammar(doc, strip_fillers=strip_fillers)
    return Interpreter.default(strip_fillers=strip_fillers)
