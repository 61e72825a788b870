"""
Interpretation routes: /api/interpret
"""

from fastapi import APIRouter
from pydantic import BaseModel

from said.core.command import command_from_match
from said.server.deps import get_interpreter_for


router = APIRouter(prefix="/api/interpret", tags=["interpret"])


class InterpretRequest(BaseModel):
    text: str
    strip_fillers: bool = True


@router.post("")
async def interpret(req: InterpretRequest):
    """Interpret one line of player input."""
    interpreter = get_interpreter_for(req.strip_fillers)
    result = interpreter.interpret(req.text)
    command = command_from_match(result, interpreter.lexicon)

    data = result.to_dict()
    data["message"] = interpreter.explain(result)
    data["command"] = command.to_dict() if command else None
    return data


@router.post("/debug")
async def debug(req: InterpretRequest):
    """Show how every pattern responds to the normalized input."""
    interpreter = get_interpreter_for(req.strip_fillers)
    words = interpreter.normalize(req.text)
    return {
        "text": " ".join(words),
        "verb": interpreter.lexicon.find_verb(words),
        "probes": [p.to_dict() for p in interpreter.debug(req.text)],
    }
