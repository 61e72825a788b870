"""
Catalogue routes: /api/patterns, /api/lexicon
"""

from fastapi import APIRouter

from said.server.deps import get_interpreter


router = APIRouter(prefix="/api", tags=["catalogue"])


@router.get("/patterns")
async def list_patterns(action: str | None = None):
    """List patterns in matching order."""
    library = get_interpreter().library
    return {
        "patterns": [
            {"index": i, "action": p.action, "pattern": p.source, "canonical": p.canonical,
             "slots": list(p.slots), "dead": i in library.dead_patterns}
            for i, p in enumerate(library)
            if action is None or p.action == action.upper()
        ]
    }


@router.get("/lexicon")
async def get_lexicon():
    """The whole lexicon."""
    return get_interpreter().lexicon.to_dict()


@router.get("/lexicon/{word}")
async def lookup_word(word: str):
    """Every role a word plays in the lexicon."""
    return get_interpreter().lexicon.describe(word)
