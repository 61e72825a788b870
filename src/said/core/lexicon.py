# src/said/core/lexicon.py
"""
Canonical vocabulary for the command interpreter.

Two independent namespaces:
  verbs       take: take get grab "pick up" ...
  directions  north: north n

plus abbreviations (whole-input substitutions), articles, fillers,
prepositions and the error-message templates shown to the player.

A Lexicon is immutable once built. Unknown words are never errors here;
they simply have no canonical form.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping

logger = logging.getLogger(__name__)


DEFAULT_ERRORS = {
    "unknownVerb": "I don't understand that verb.",
    "noVerb": "Please start your command with a verb.",
    "ambiguousObject": "Which {object} do you mean?",
    "objectNotFound": "You don't see any {object} here.",
    "cantDoThat": "You can't {verb} that.",
    "needMoreInfo": "What do you want to {verb}?",
    "needIndirectObject": "What do you want to {verb} the {object} {preposition}?",
}


@dataclass(frozen=True)
class LexicalEntry:
    """A canonical token and every surface form that maps to it."""
    canonical: str
    synonyms: frozenset[str]

    @property
    def forms(self) -> frozenset[str]:
        return self.synonyms | {self.canonical}


def _norm(word: str) -> str:
    return " ".join(word.split()).casefold()


def _entries(table: Mapping[str, Iterable[str]]) -> tuple[LexicalEntry, ...]:
    return tuple(
        LexicalEntry(_norm(canonical), frozenset(_norm(s) for s in synonyms))
        for canonical, synonyms in table.items()
    )


def _reverse_index(entries: tuple[LexicalEntry, ...]) -> Mapping[str, str]:
    # First canonical to claim a surface form keeps it; overlaps are reported by validate()
    index: dict[str, str] = {}
    for entry in entries:
        index.setdefault(entry.canonical, entry.canonical)
    for entry in entries:
        for form in entry.synonyms:
            index.setdefault(form, entry.canonical)
    return MappingProxyType(index)


@dataclass(frozen=True)
class Lexicon:
    verbs: tuple[LexicalEntry, ...] = ()
    directions: tuple[LexicalEntry, ...] = ()
    abbreviations: Mapping[str, str] = field(default_factory=dict)
    multi_word_verbs: tuple[str, ...] = ()
    articles: frozenset[str] = frozenset()
    fillers: frozenset[str] = frozenset()
    prepositions: tuple[str, ...] = ()
    pronouns: frozenset[str] = frozenset()
    all_words: frozenset[str] = frozenset()
    errors: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "abbreviations", MappingProxyType(
            {_norm(k): _norm(v) for k, v in self.abbreviations.items()}
        ))
        object.__setattr__(self, "errors", MappingProxyType(dict(self.errors)))
        object.__setattr__(self, "_verb_index", _reverse_index(self.verbs))
        object.__setattr__(self, "_direction_index", _reverse_index(self.directions))

        phrases = {_norm(p) for p in self.multi_word_verbs}
        phrases.update(f for f in self._verb_index if " " in f)
        # Longest phrases first so "pick up" wins over "pick"
        object.__setattr__(self, "_phrases", tuple(
            sorted(phrases, key=lambda p: (-len(p.split()), p))
        ))

    @classmethod
    def from_tables(
        cls,
        verbs: Mapping[str, Iterable[str]],
        directions: Mapping[str, Iterable[str]] | None = None,
        abbreviations: Mapping[str, str] | None = None,
        multi_word_verbs: Iterable[str] = (),
        articles: Iterable[str] = (),
        fillers: Iterable[str] = (),
        prepositions: Iterable[str] = (),
        pronouns: Iterable[str] = (),
        all_words: Iterable[str] = (),
        errors: Mapping[str, str] | None = None,
    ) -> "Lexicon":
        return cls(
            verbs=_entries(verbs),
            directions=_entries(directions or {}),
            abbreviations=dict(abbreviations or {}),
            multi_word_verbs=tuple(_norm(p) for p in multi_word_verbs),
            articles=frozenset(_norm(w) for w in articles),
            fillers=frozenset(_norm(w) for w in fillers),
            prepositions=tuple(_norm(w) for w in prepositions),
            pronouns=frozenset(_norm(w) for w in pronouns),
            all_words=frozenset(_norm(w) for w in all_words),
            errors=dict(errors or {}),
        )

    @classmethod
    def from_dict(cls, data: dict) -> "Lexicon":
        return cls.from_tables(
            verbs=data.get("verbs", {}),
            directions=data.get("directions", {}),
            abbreviations=data.get("abbreviations", {}),
            multi_word_verbs=data.get("multi_word_verbs", []),
            articles=data.get("articles", []),
            fillers=data.get("fillers", []),
            prepositions=data.get("prepositions", []),
            pronouns=data.get("pronouns", []),
            all_words=data.get("all", []),
            errors=data.get("errors", {}),
        )

    def to_dict(self) -> dict:
        return {
            "verbs": {e.canonical: sorted(e.synonyms) for e in self.verbs},
            "directions": {e.canonical: sorted(e.synonyms) for e in self.directions},
            "abbreviations": dict(self.abbreviations),
            "multi_word_verbs": list(self.multi_word_verbs),
            "articles": sorted(self.articles),
            "fillers": sorted(self.fillers),
            "prepositions": list(self.prepositions),
            "pronouns": sorted(self.pronouns),
            "all": sorted(self.all_words),
            "errors": dict(self.errors),
        }

    # === Lookups ===

    def canonical_verb(self, word: str) -> str | None:
        return self._verb_index.get(_norm(word))

    def canonical_direction(self, word: str) -> str | None:
        return self._direction_index.get(_norm(word))

    def expand_abbreviation(self, word: str) -> str | None:
        return self.abbreviations.get(_norm(word))

    def is_article_or_filler(self, word: str) -> bool:
        w = _norm(word)
        return w in self.articles or w in self.fillers

    def is_filler(self, word: str) -> bool:
        return _norm(word) in self.fillers

    def is_preposition(self, word: str) -> bool:
        return _norm(word) in self.prepositions

    def canonical_word(self, word: str) -> str:
        """Word-local expansion: canonical verb, else canonical direction, else the word."""
        w = _norm(word)
        return self._verb_index.get(w) or self._direction_index.get(w) or w

    def expand_words(self, words: Iterable[str]) -> list[str]:
        return [self.canonical_word(w) for w in words]

    def find_verb(self, words: list[str]) -> str | None:
        """First verb recognized in a word list, multi-word phrases before single words."""
        text = " ".join(_norm(w) for w in words)
        padded = f" {text} "
        for phrase in self._phrases:
            if f" {phrase} " in padded:
                return (
                    self.canonical_verb(phrase)
                    or self.canonical_verb(phrase.split()[0])
                    or phrase
                )
        for w in words:
            verb = self.canonical_verb(w)
            if verb:
                return verb
        return None

    def describe(self, word: str) -> dict:
        """Every role a word or phrase plays in this lexicon."""
        w = _norm(word)
        return {
            "word": w,
            "verb": self.canonical_verb(w),
            "direction": self.canonical_direction(w),
            "abbreviation": self.expand_abbreviation(w),
            "canonical": self.canonical_word(w),
            "article": w in self.articles,
            "filler": w in self.fillers,
            "preposition": w in self.prepositions,
            "pronoun": w in self.pronouns,
            "all": w in self.all_words,
        }

    # === Errors ===

    def format_error(self, key: str, **values) -> str:
        message = self.errors.get(key) or DEFAULT_ERRORS.get(key)
        if message is None:
            raise KeyError(f"Unknown error template: {key}")
        for name in ("object", "verb", "preposition"):
            if name in values and values[name] is not None:
                message = message.replace("{" + name + "}", str(values[name]))
        return message

    # === Validation ===

    def validate(self) -> list[str]:
        """Return authoring defects; an empty list means the lexicon is consistent."""
        problems = []
        problems.extend(_overlaps("verb", self.verbs))
        problems.extend(_overlaps("direction", self.directions))

        for entry in self.verbs + self.directions:
            if " " in entry.canonical:
                problems.append(f"Canonical form '{entry.canonical}' must be a single word")

        for abbrev, phrase in self.abbreviations.items():
            if not 1 <= len(abbrev) <= 2 or " " in abbrev:
                problems.append(f"Abbreviation '{abbrev}' must be a 1-2 character token")
            if not phrase:
                problems.append(f"Abbreviation '{abbrev}' expands to nothing")

        for key in self.errors:
            if key not in DEFAULT_ERRORS:
                problems.append(f"Unknown error template key: {key}")

        return problems

    def warn_on_defects(self) -> list[str]:
        problems = self.validate()
        for problem in problems:
            logger.warning("lexicon: %s", problem)
        return problems


def _overlaps(namespace: str, entries: tuple[LexicalEntry, ...]) -> list[str]:
    problems = []
    owner: dict[str, str] = {}
    for entry in entries:
        for form in sorted(entry.forms):
            other = owner.get(form)
            if other is not None and other != entry.canonical:
                problems.append(
                    f"'{form}' maps to both {namespace} '{other}' and '{entry.canonical}'"
                )
            else:
                owner[form] = entry.canonical
    return problems
