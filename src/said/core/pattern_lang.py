# src/said/core/pattern_lang.py
"""
The pattern DSL that describes acceptable phrasings for one action.

Syntax:
  get/take/grab        alternation of bare words
  [the]                optional text (words and alternations only)
  <item>               named capture of one or more words
  *                    wildcard, any text (possibly none)

Grammar:
  pattern   := element (SPACE element)*
  element   := word_alt | optional | capture | '*'
  word_alt  := WORD ('/' WORD)*
  optional  := '[' word_alt (SPACE word_alt)* ']'
  capture   := '<' NAME '>'

Compilation is staged: tokens -> AST (Sequence of nodes) -> anchored regex.
Literal words go through a canonicalize function when the regex is rendered,
so patterns stay in step with the lexicon's synonym expansion.
"""

import re
from dataclasses import dataclass, field, replace
from typing import Callable, Union


WORD = r"[\w'-]+"
NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")

TOKEN_RE = re.compile(r"""
    (?P<space>\s+)
  | (?P<capture><(?P<name>[^<>]*)>)
  | (?P<word>[A-Za-z0-9'-]+)
  | (?P<slash>/)
  | (?P<lbracket>\[)
  | (?P<rbracket>\])
  | (?P<star>\*)
""", re.VERBOSE)


class MalformedPatternDefinition(Exception):
    def __init__(self, message: str, pattern: str, position: int | None = None):
        self.message = message
        self.pattern = pattern
        self.position = position
        if position is None:
            super().__init__(f"{message}\n  {pattern}")
        else:
            super().__init__(
                f"Column {position}: {message}\n  {pattern}\n  {' ' * position}^"
            )


# === Tokens ===

@dataclass(frozen=True)
class PatternToken:
    kind: str      # space, capture, word, slash, lbracket, rbracket, star
    text: str
    position: int  # character offset in the pattern source


def tokenize_pattern(source: str) -> list[PatternToken]:
    tokens = []
    pos = 0
    while pos < len(source):
        match = TOKEN_RE.match(source, pos)
        if not match:
            char = source[pos]
            if char == "<":
                message = "Unterminated capture, expected '>'"
            elif char == ">":
                message = "Unbalanced '>'"
            else:
                message = f"Unexpected character {char!r}"
            raise MalformedPatternDefinition(message, source, pos)

        kind = match.lastgroup
        if kind == "name":
            kind = "capture"
        text = match.group("name") if kind == "capture" else match.group()
        tokens.append(PatternToken(kind, text, pos))
        pos = match.end()
    return tokens


# === AST ===

@dataclass(frozen=True)
class Literal:
    word: str


@dataclass(frozen=True)
class Alternation:
    words: tuple[str, ...]


@dataclass(frozen=True)
class OptionalPhrase:
    items: tuple[Union[Literal, Alternation], ...]


@dataclass(frozen=True)
class Capture:
    name: str


@dataclass(frozen=True)
class Wildcard:
    pass


PatternNode = Union[Literal, Alternation, OptionalPhrase, Capture, Wildcard]


@dataclass(frozen=True)
class Sequence:
    elements: tuple[PatternNode, ...]

    @property
    def slots(self) -> tuple[str, ...]:
        return tuple(e.name for e in self.elements if isinstance(e, Capture))


def is_required(node: PatternNode) -> bool:
    return isinstance(node, (Literal, Alternation, Capture))


# === Parser ===

class PatternParser:
    def __init__(self, source: str):
        self.source = source
        self.tokens = tokenize_pattern(source)
        self.index = 0

    def error(self, message: str, token: PatternToken | None = None):
        position = token.position if token else len(self.source)
        return MalformedPatternDefinition(message, self.source, position)

    def peek(self) -> PatternToken | None:
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    def advance(self) -> PatternToken:
        token = self.tokens[self.index]
        self.index += 1
        return token

    def skip_space(self) -> bool:
        token = self.peek()
        if token and token.kind == "space":
            self.index += 1
            return True
        return False

    def parse(self) -> Sequence:
        self.skip_space()
        if self.peek() is None:
            raise self.error("Empty pattern")

        elements = []
        while self.peek() is not None:
            elements.append(self.parse_element())
            had_space = self.skip_space()
            token = self.peek()
            if token is not None and not had_space:
                raise self.error("Expected whitespace between pattern elements", token)

        names = set()
        for element in elements:
            if isinstance(element, Capture):
                if element.name in names:
                    raise self.error(f"Duplicate capture name <{element.name}>")
                names.add(element.name)

        if not any(is_required(e) for e in elements):
            raise self.error("Pattern needs at least one word or capture outside [] and *")

        return Sequence(tuple(elements))

    def parse_element(self) -> PatternNode:
        token = self.peek()
        if token.kind == "word":
            return self.parse_word_alt()
        if token.kind == "lbracket":
            return self.parse_optional()
        if token.kind == "capture":
            self.advance()
            name = token.text.strip()
            if not name:
                raise self.error("Empty capture <>", token)
            if not NAME_RE.fullmatch(name):
                raise self.error(f"Invalid capture name <{name}>", token)
            self.reject_slash(token)
            return Capture(name)
        if token.kind == "star":
            self.advance()
            self.reject_slash(token)
            return Wildcard()
        if token.kind == "rbracket":
            raise self.error("Unbalanced ']'", token)
        if token.kind == "slash":
            raise self.error("'/' must join two words", token)
        raise self.error(f"Unexpected {token.text!r}", token)

    def reject_slash(self, after: PatternToken):
        token = self.peek()
        if token and token.kind == "slash":
            raise self.error("Only bare words can be alternatives", after)

    def parse_word_alt(self) -> Union[Literal, Alternation]:
        words = [self.advance().text.casefold()]
        while self.peek() and self.peek().kind == "slash":
            slash = self.advance()
            token = self.peek()
            if token is None or token.kind != "word":
                raise self.error("'/' must join two words", slash)
            words.append(self.advance().text.casefold())
        if len(words) == 1:
            return Literal(words[0])
        return Alternation(tuple(words))

    def parse_optional(self) -> OptionalPhrase:
        open_token = self.advance()
        items = []
        while True:
            self.skip_space()
            token = self.peek()
            if token is None:
                raise self.error("Unbalanced '[', expected ']'", open_token)
            if token.kind == "rbracket":
                self.advance()
                break
            if token.kind == "word":
                items.append(self.parse_word_alt())
                continue
            if token.kind == "lbracket":
                raise self.error("Optional spans cannot be nested", token)
            if token.kind in ("capture", "star"):
                raise self.error("Only words and alternations are allowed inside []", token)
            raise self.error(f"Unexpected {token.text!r} inside []", token)

        if not items:
            raise self.error("Empty optional []", open_token)
        return OptionalPhrase(tuple(items))


def parse_pattern(source: str) -> Sequence:
    parser = PatternParser(source)
    return parser.parse()


# === Formatting ===

def format_node(node: PatternNode) -> str:
    if isinstance(node, Literal):
        return node.word
    if isinstance(node, Alternation):
        return "/".join(node.words)
    if isinstance(node, OptionalPhrase):
        return "[" + " ".join(format_node(i) for i in node.items) + "]"
    if isinstance(node, Capture):
        return f"<{node.name}>"
    return "*"


def format_pattern(seq: Sequence) -> str:
    return " ".join(format_node(e) for e in seq.elements)


# === Regex rendering ===

def identity(word: str) -> str:
    return word


def node_words(node: PatternNode) -> list[str]:
    if isinstance(node, Literal):
        return [node.word]
    if isinstance(node, Alternation):
        return list(node.words)
    if isinstance(node, OptionalPhrase):
        return [w for item in node.items for w in node_words(item)]
    return []


def excluded_words(seq: Sequence, index: int) -> list[str]:
    """
    Words a capture may not contain.

    Between two captures separated only by optional text the first capture
    stops as early as it can, so the second one must not absorb the words
    of the skipped optionals ("give [the] <item> [to] <character>").
    """
    between = []
    for element in reversed(seq.elements[:index]):
        if isinstance(element, Capture):
            if any(isinstance(e, OptionalPhrase) for e in between):
                return [w for e in between for w in node_words(e)]
            return []
        if is_required(element):
            return []
        between.append(element)
    return []


def render_capture(excluded: list[str]) -> str:
    word = WORD
    if excluded:
        alternatives = "|".join(dict.fromkeys(re.escape(w) for w in excluded))
        word = rf"(?!(?:{alternatives})(?![\w'-])){WORD}"
    return rf"({word}(?:\s+{word})*?)"


def render_node(node: PatternNode, canonicalize: Callable[[str], str]) -> str:
    if isinstance(node, Literal):
        return re.escape(canonicalize(node.word))
    if isinstance(node, Alternation):
        alternatives = list(dict.fromkeys(re.escape(canonicalize(w)) for w in node.words))
        if len(alternatives) == 1:
            return alternatives[0]
        return "(?:" + "|".join(alternatives) + ")"
    if isinstance(node, OptionalPhrase):
        return r"\s+".join(render_node(i, canonicalize) for i in node.items)
    if isinstance(node, Capture):
        return render_capture([])
    return r".+?"


def render_regex(seq: Sequence, canonicalize: Callable[[str], str] = identity) -> str:
    """
    Lay out the elements with flexible whitespace between them.

    Optional and wildcard elements carry their separator inside their own
    group: before the first required element the separator trails them,
    after it the separator leads. Leaving one out never doubles the spacing.
    """
    first = next(i for i, e in enumerate(seq.elements) if is_required(e))
    parts = []
    for i, element in enumerate(seq.elements):
        if isinstance(element, Capture):
            body = render_capture([canonicalize(w) for w in excluded_words(seq, i)])
        else:
            body = render_node(element, canonicalize)

        if i < first:
            parts.append(rf"(?:{body}\s+)?")
        elif i == first:
            parts.append(body)
        elif is_required(element):
            parts.append(rf"\s+{body}")
        else:
            parts.append(rf"(?:\s+{body})?")
    return "".join(parts)


# === Compiled patterns ===

@dataclass(frozen=True)
class CompiledPattern:
    source: str
    action: str
    sequence: Sequence
    regex: re.Pattern = field(compare=False)

    @property
    def slots(self) -> tuple[str, ...]:
        return self.sequence.slots

    @property
    def canonical(self) -> str:
        return format_pattern(self.sequence)

    def match_spans(self, text: str) -> dict[str, tuple[int, int]] | None:
        """Character span of each capture for a whole-input match, or None."""
        m = self.regex.fullmatch(text)
        if m is None:
            return None
        return {name: m.span(i + 1) for i, name in enumerate(self.slots)}

    def match(self, text: str) -> dict[str, str] | None:
        spans = self.match_spans(text)
        if spans is None:
            return None
        return {name: text[start:end].strip() for name, (start, end) in spans.items()}

    def bind(self, canonicalize: Callable[[str], str]) -> "CompiledPattern":
        return replace(self, regex=compile_regex(self.sequence, canonicalize))


def compile_regex(seq: Sequence, canonicalize: Callable[[str], str] = identity) -> re.Pattern:
    return re.compile(render_regex(seq, canonicalize), re.IGNORECASE)


def compile_pattern(
    source: str,
    action: str,
    canonicalize: Callable[[str], str] = identity,
) -> CompiledPattern:
    seq = parse_pattern(source)
    return CompiledPattern(
        source=source,
        action=action,
        sequence=seq,
        regex=compile_regex(seq, canonicalize),
    )
