"""
Grammar routes: /api/grammars
"""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from said.core.default_grammar import DEFAULT_GRAMMAR
from said.core.grammar_lang import GrammarParseError, parse_grammar
from said.core.library import PatternLibrary
from said.core.pattern_lang import MalformedPatternDefinition


router = APIRouter(prefix="/api/grammars", tags=["grammars"])


class CheckGrammarRequest(BaseModel):
    text: str
    strict: bool = False


@router.post("/check")
async def check_grammar(req: CheckGrammarRequest):
    """Parse and build a grammar without installing it."""
    try:
        doc = parse_grammar(req.text)
        lexicon = doc.lexicon()
        library = PatternLibrary.build(doc.patterns(), lexicon, strict=req.strict)
    except (GrammarParseError, MalformedPatternDefinition) as e:
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "verb_count": len(doc.verbs),
        "direction_count": len(doc.directions),
        "pattern_count": len(library),
        "actions": library.actions(),
        "problems": lexicon.validate(),
        "dead_patterns": [
            {"index": i, "action": library.patterns[i].action, "pattern": library.patterns[i].source}
            for i in library.dead_patterns
        ],
        "collisions": list(library.collisions),
    }


@router.get("/default")
async def get_default_grammar():
    """The built-in grammar as DSL text."""
    return {"name": "default", "dsl": DEFAULT_GRAMMAR}
