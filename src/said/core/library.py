# src/said/core/library.py
"""
Ordered pattern library.

Patterns are tried front to back and the first one that accepts the
synonym-expanded input wins. Declaration order is the disambiguation
policy, so the library is always a sequence, never a mapping.
"""

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable

from said.core.lexicon import Lexicon
from said.core.pattern_lang import (
    CompiledPattern, MalformedPatternDefinition, compile_pattern, identity,
    is_required, node_words,
)

logger = logging.getLogger(__name__)


class DeadPatternError(MalformedPatternDefinition):
    """A pattern that can never win because an identical one precedes it."""


@dataclass(frozen=True)
class LibraryMatch:
    index: int
    pattern: CompiledPattern
    captures: dict[str, str]
    spans: dict[str, tuple[int, int]]

    @property
    def action(self) -> str:
        return self.pattern.action


@dataclass(frozen=True)
class ProbeResult:
    index: int
    pattern: str
    action: str
    matched: bool
    captures: dict[str, str] | None

    def to_dict(self) -> dict:
        return {
            "index": self.index,
            "pattern": self.pattern,
            "action": self.action,
            "matched": self.matched,
            "captures": self.captures,
        }


@dataclass(frozen=True)
class PatternLibrary:
    patterns: tuple[CompiledPattern, ...]
    lexicon: Lexicon | None = None
    dead_patterns: tuple[int, ...] = field(default=())
    collisions: tuple[str, ...] = field(default=())

    @classmethod
    def build(
        cls,
        sources: Iterable[tuple[str, str]],
        lexicon: Lexicon | None = None,
        strict: bool = False,
    ) -> "PatternLibrary":
        """
        Compile (pattern, action) pairs in order.

        Raises MalformedPatternDefinition on the first bad source; nothing is
        built in that case. A pattern identical to an earlier one after
        compilation is dead, and a literal that synonym expansion turns into
        another patterned verb is a collision: both are logged, or raised
        when strict.
        """
        canonicalize = lexicon.canonical_word if lexicon else identity
        compiled = []
        for i, (source, action) in enumerate(sources):
            try:
                compiled.append(compile_pattern(source, action, canonicalize))
            except MalformedPatternDefinition as e:
                raise MalformedPatternDefinition(
                    f"Pattern #{i} ({action}): {e.message}", e.pattern, e.position
                ) from e
        return cls._assemble(tuple(compiled), lexicon, strict)

    @classmethod
    def _assemble(cls, compiled, lexicon, strict) -> "PatternLibrary":
        seen: dict[str, int] = {}
        dead = []
        for i, pattern in enumerate(compiled):
            key = pattern.regex.pattern
            if key in seen:
                earlier = compiled[seen[key]]
                message = (
                    f"Pattern #{i} ({pattern.action}) is shadowed by "
                    f"#{seen[key]} ({earlier.action})"
                )
                if strict:
                    raise DeadPatternError(message, pattern.source)
                logger.warning("%s: %s", message, pattern.source)
                dead.append(i)
            else:
                seen[key] = i

        collisions = literal_collisions(compiled, lexicon)
        for i, message in collisions:
            if strict:
                raise MalformedPatternDefinition(message, compiled[i].source)
            logger.warning("%s: %s", message, compiled[i].source)

        logger.debug("Built pattern library: %d patterns, %d dead", len(compiled), len(dead))
        return cls(
            patterns=compiled,
            lexicon=lexicon,
            dead_patterns=tuple(dead),
            collisions=tuple(message for _, message in collisions),
        )

    def extended(self, sources: Iterable[tuple[str, str]], strict: bool = False) -> "PatternLibrary":
        """A new library with extra patterns appended; this one is left untouched."""
        extra = PatternLibrary.build(sources, self.lexicon, strict=strict)
        return self._assemble(self.patterns + extra.patterns, self.lexicon, strict)

    def __len__(self) -> int:
        return len(self.patterns)

    def __iter__(self):
        return iter(self.patterns)

    def find_match(
        self,
        text: str,
        accept: Callable[[LibraryMatch], bool] | None = None,
    ) -> LibraryMatch | None:
        """First pattern accepting the whole (already expanded) text, and `accept` if given."""
        for i, pattern in enumerate(self.patterns):
            spans = pattern.match_spans(text)
            if spans is None:
                continue
            captures = {name: text[s:e].strip() for name, (s, e) in spans.items()}
            match = LibraryMatch(i, pattern, captures, spans)
            if accept is None or accept(match):
                return match
        return None

    def probe(self, text: str) -> list[ProbeResult]:
        results = []
        for i, pattern in enumerate(self.patterns):
            captures = pattern.match(text)
            results.append(ProbeResult(
                index=i,
                pattern=pattern.source,
                action=pattern.action,
                matched=captures is not None,
                captures=captures,
            ))
        return results

    def actions(self) -> list[str]:
        seen = []
        for pattern in self.patterns:
            if pattern.action not in seen:
                seen.append(pattern.action)
        return seen


def pattern_verbs(patterns: Iterable[CompiledPattern], lexicon: Lexicon) -> set[str]:
    """Verbs that head a pattern under their own canonical spelling."""
    verbs = set()
    for pattern in patterns:
        head = next((e for e in pattern.sequence.elements if is_required(e)), None)
        if head is not None:
            verbs.update(w for w in node_words(head) if lexicon.canonical_verb(w) == w)
    return verbs


def literal_collisions(patterns: tuple[CompiledPattern, ...], lexicon: Lexicon | None) -> list[tuple[int, str]]:
    """
    Literals that synonym expansion rewrites into a different verb with patterns of its own.

    "get in <vehicle>" with get -> take compiles to "take in <vehicle>" and
    steals input meant for the take patterns. An alternation that lists the
    canonical verb itself ("give/offer/hand") is a deliberate merge.
    """
    if lexicon is None:
        return []

    verbs = pattern_verbs(patterns, lexicon)
    collisions = []
    for i, pattern in enumerate(patterns):
        for node in pattern.sequence.elements:
            words = node_words(node)
            for word in words:
                verb = lexicon.canonical_verb(word)
                if verb and verb != word and verb not in words and verb in verbs:
                    collisions.append((i, (
                        f"Pattern #{i} ({pattern.action}): literal '{word}' is a synonym "
                        f"of '{verb}', which has patterns of its own"
                    )))
    return collisions
