# src/said/core/command.py
"""
Command view of a successful match.

Maps an action tag and its captures onto the verb / direct object /
indirect object shape a command executor works with. Noun phrases are
left as text; deciding which game object they denote is the executor's job.
"""

from dataclasses import dataclass, field

from said.core.interpreter import MatchResult
from said.core.lexicon import Lexicon


ACTION_VERBS = {
    "GIVE": "give",
    "WAVE_WAND": "wave",
    "PLAY_INSTRUMENT": "play",
    "INSERT": "put",
    "PUT_ON": "put",
    "SCAN": "examine",
    "PUSH_BUTTON": "push",
    "ASK_ABOUT": "ask",
    "TELL_ABOUT": "tell",
    "SET_CONTROL": "set",
    "INSPECT": "examine",
    "LOOK_IN": "search",
    "TAKE": "take",
    "DROP": "drop",
    "EXAMINE": "examine",
    "ENTER": "enter",
    "EXIT": "exit",
    "GO": "go",
    "RUN": "go",
}

# Capture names, in priority order, for each command field
DIRECT_SLOTS = ("item", "object", "clothing", "device", "door", "food", "beverage",
                "text", "control", "equipment", "button", "message")
TARGET_SLOTS = ("character", "target", "person")
INDIRECT_SLOTS = ("container", "vendor", "key", "surface", "seat", "vehicle",
                  "destination", "weapon")
VALUE_SLOTS = ("value", "depth")


@dataclass
class Command:
    action: str
    verb: str
    direct_object: str | None = None
    indirect_object: str | None = None
    topic: str | None = None
    value: str | None = None
    spell: str | None = None
    modifiers: list[str] = field(default_factory=list)
    captures: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "action": self.action,
            "verb": self.verb,
            "direct_object": self.direct_object,
            "indirect_object": self.indirect_object,
            "topic": self.topic,
            "value": self.value,
            "spell": self.spell,
            "modifiers": list(self.modifiers),
            "captures": dict(self.captures),
        }


def verb_for_action(action: str) -> str:
    return ACTION_VERBS.get(action, action.lower())


def first_capture(captures: dict[str, str], names: tuple[str, ...]) -> str | None:
    for name in names:
        if captures.get(name):
            return captures[name]
    return None


def strip_articles(phrase: str | None, lexicon: Lexicon | None) -> str | None:
    if phrase is None or lexicon is None:
        return phrase
    words = phrase.split()
    while len(words) > 1 and words[0] in lexicon.articles:
        words = words[1:]
    return " ".join(words)


def command_from_match(result: MatchResult, lexicon: Lexicon | None = None) -> Command | None:
    if not result.matched:
        return None

    captures = {k: strip_articles(v, lexicon) for k, v in result.captures.items()}
    command = Command(
        action=result.action,
        verb=verb_for_action(result.action),
        captures=dict(result.captures),
    )

    command.direct_object = first_capture(captures, DIRECT_SLOTS)

    target = first_capture(captures, TARGET_SLOTS)
    if target:
        if command.direct_object:
            command.indirect_object = target
        else:
            command.direct_object = target

    indirect = first_capture(captures, INDIRECT_SLOTS)
    if indirect:
        if command.direct_object:
            command.indirect_object = indirect
        else:
            command.direct_object = indirect

    command.topic = captures.get("topic")
    command.spell = captures.get("spell")
    command.value = first_capture(captures, VALUE_SLOTS)

    direction = captures.get("direction")
    if direction:
        canonical = lexicon.canonical_direction(direction) if lexicon else None
        command.direct_object = canonical or direction

    if lexicon and command.direct_object in lexicon.all_words:
        command.modifiers.append("all")

    return command
