"""
Shared dependencies for routes.
"""

import logging
import os
from functools import lru_cache

from said.core.grammar_lang import load_grammar
from said.core.interpreter import Interpreter

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_interpreter() -> Interpreter:
    """The catalogue is fixed for the life of the process."""
    path = os.environ.get("SAID_GRAMMAR")
    if path:
        logger.info("Loading grammar from %s", path)
        return Interpreter.from_grammar(load_grammar(path))
    return Interpreter.default()


def get_interpreter_for(strip_fillers: bool = True) -> Interpreter:
    interpreter = get_interpreter()
    if interpreter.strip_fillers == strip_fillers:
        return interpreter
    return Interpreter(interpreter.lexicon, interpreter.library, strip_fillers=strip_fillers)
