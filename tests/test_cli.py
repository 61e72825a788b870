# tests/test_cli.py
"""Tests for the said CLI; remote commands run against a stubbed client."""

import pytest

from said.cli.main import main
from said.core.default_grammar import DEFAULT_GRAMMAR


def test_interpret(capsys):
    main(["interpret", "take the lamp"])
    out = capsys.readouterr().out

    assert "✓ TAKE" in out
    assert "item: lamp" in out


def test_interpret_failure_message(capsys):
    main(["interpret", "xyzzy"])
    out = capsys.readouterr().out

    assert "I don't understand that verb." in out
    assert "NoVerbRecognized" in out


def test_interpret_json(capsys):
    main(["interpret", "n", "--json"])
    out = capsys.readouterr().out

    assert '"action": "GO"' in out
    assert '"direct_object": "north"' in out


def test_interpret_with_grammar_file(tmp_path, capsys):
    path = tmp_path / "tiny.grammar"
    path.write_text("verb take: grab\npattern TAKE: take <item>\n")

    main(["--grammar", str(path), "interpret", "grab lamp"])

    assert "✓ TAKE" in capsys.readouterr().out


def test_missing_grammar_file_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--grammar", str(tmp_path / "nope.grammar"), "interpret", "look"])

    assert exc.value.code == 1
    assert "✗ Error" in capsys.readouterr().out


def test_lexicon_lookup(capsys):
    main(["lexicon", "grab"])
    assert "verb: take" in capsys.readouterr().out


def test_grammar_check_ok(tmp_path, capsys):
    path = tmp_path / "tiny.grammar"
    path.write_text("verb take: grab\npattern TAKE: take <item>\n")

    main(["grammar", "check", str(path)])

    assert "✓ OK" in capsys.readouterr().out


def test_grammar_check_dead_pattern_fails(tmp_path):
    path = tmp_path / "dead.grammar"
    path.write_text("verb take: grab\npattern TAKE: take <item>\npattern GRAB: grab <item>\n")

    with pytest.raises(SystemExit) as exc:
        main(["grammar", "check", str(path)])

    assert exc.value.code == 1


def test_grammar_example(capsys):
    main(["grammar", "example"])
    assert capsys.readouterr().out == DEFAULT_GRAMMAR


# === Remote ===

def test_remote_check_sends_file_text(tmp_path, capsys, monkeypatch):
    path = tmp_path / "tiny.grammar"
    path.write_text("verb take: grab\npattern TAKE: take <item>\n")
    sent = []

    def fake_check(text):
        sent.append(text)
        return {"verb_count": 1, "direction_count": 0, "pattern_count": 1, "actions": ["TAKE"],
                "problems": [], "dead_patterns": [], "collisions": []}

    monkeypatch.setattr("said.cli.client.check_grammar", fake_check)
    main(["remote", "check", str(path)])

    assert sent == [path.read_text()]
    assert "✓ OK" in capsys.readouterr().out


def test_remote_check_reports_collisions(tmp_path, capsys, monkeypatch):
    path = tmp_path / "clash.grammar"
    path.write_text("verb take: get\npattern ENTER: get in <vehicle>\npattern TAKE: take <item>\n")
    report = {"verb_count": 1, "direction_count": 0, "pattern_count": 2, "actions": ["ENTER", "TAKE"],
              "problems": [], "dead_patterns": [],
              "collisions": ["Pattern #0 (ENTER): literal 'get' is a synonym of 'take', which has patterns of its own"]}
    monkeypatch.setattr("said.cli.client.check_grammar", lambda text: report)

    with pytest.raises(SystemExit) as exc:
        main(["remote", "check", str(path)])

    assert exc.value.code == 1
    assert "literal 'get' is a synonym of 'take'" in capsys.readouterr().out


def test_grammar_check_collision_fails(tmp_path, capsys):
    path = tmp_path / "clash.grammar"
    path.write_text("verb take: get\npattern ENTER: get in <vehicle>\npattern TAKE: take <item>\n")

    with pytest.raises(SystemExit) as exc:
        main(["grammar", "check", str(path)])

    assert exc.value.code == 1
    assert "synonym of 'take'" in capsys.readouterr().out
