# tests/test_command.py
"""Tests for the command view of a match."""

import pytest

from said.core.command import Command, command_from_match, verb_for_action
from said.core.interpreter import Interpreter


@pytest.fixture(scope="module")
def interpreter():
    return Interpreter.default()


def command(interpreter, raw: str) -> Command:
    return command_from_match(interpreter.interpret(raw), interpreter.lexicon)


def test_verb_for_action():
    assert verb_for_action("PUT_ON") == "put"
    assert verb_for_action("SCAN") == "examine"
    assert verb_for_action("WEAR") == "wear"


def test_direct_and_indirect_objects(interpreter):
    cmd = command(interpreter, "give the sword to wizard")

    assert cmd.action == "GIVE"
    assert cmd.verb == "give"
    assert cmd.direct_object == "sword"
    assert cmd.indirect_object == "wizard"


def test_tool_is_indirect_object(interpreter):
    cmd = command(interpreter, "unlock the door with the key")

    assert cmd.direct_object == "door"
    assert cmd.indirect_object == "key"


def test_lone_character_is_direct_object(interpreter):
    cmd = command(interpreter, "ask the wizard about the ring")

    assert cmd.verb == "ask"
    assert cmd.direct_object == "wizard"
    assert cmd.indirect_object is None
    assert cmd.topic == "ring"


def test_direction_is_canonical(interpreter):
    assert command(interpreter, "n").direct_object == "north"
    assert command(interpreter, "go n").direct_object == "north"
    assert command(interpreter, "run upstairs").verb == "go"


def test_leading_article_is_stripped(interpreter):
    cmd = command(interpreter, "take a lamp")

    assert cmd.direct_object == "lamp"
    assert cmd.captures == {"item": "a lamp"}


def test_all_modifier(interpreter):
    cmd = command(interpreter, "take everything")

    assert cmd.direct_object == "everything"
    assert cmd.modifiers == ["all"]


def test_value_and_spell(interpreter):
    assert command(interpreter, "dive to 30 feet").value == "30"
    assert command(interpreter, "set the dial to 5").value == "5"
    assert command(interpreter, "cast fireball at troll").spell == "fireball"


def test_unmatched_has_no_command(interpreter):
    assert command(interpreter, "xyzzy") is None


def test_to_dict(interpreter):
    data = command(interpreter, "take the lamp").to_dict()

    assert data["action"] == "TAKE"
    assert data["direct_object"] == "lamp"
    assert data["modifiers"] == []
