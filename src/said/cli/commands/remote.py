"""
Commands that run against a said API server.
"""

import sys

import httpx
from rich import print_json

from said.cli import client


def add_subparser(subparsers):
    parser = subparsers.add_parser("remote", help="Talk to a running said server")
    remote_sub = parser.add_subparsers(dest="remote_command", required=True)

    # interpret
    interpret_p = remote_sub.add_parser("interpret", help="Interpret one line on the server")
    interpret_p.add_argument("text", help="Player input")
    interpret_p.add_argument("--no-strip-fillers", action="store_false", dest="strip_fillers")
    interpret_p.set_defaults(func=remote_interpret)

    # debug
    debug_p = remote_sub.add_parser("debug", help="Trace one line through the server's patterns")
    debug_p.add_argument("text", help="Player input")
    debug_p.set_defaults(func=remote_debug)

    # patterns
    patterns_p = remote_sub.add_parser("patterns", help="List the server's patterns")
    patterns_p.set_defaults(func=remote_patterns)

    # lexicon
    lexicon_p = remote_sub.add_parser("lexicon", help="Look up a word on the server")
    lexicon_p.add_argument("word", help="Word to look up")
    lexicon_p.set_defaults(func=remote_lexicon)

    # check
    check_p = remote_sub.add_parser("check", help="Validate a .grammar file on the server")
    check_p.add_argument("file", help="Path to .grammar file")
    check_p.set_defaults(func=remote_check)


def remote_interpret(args):
    try:
        result = client.interpret(args.text, strip_fillers=args.strip_fillers)
    except httpx.HTTPError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    if result["matched"]:
        print(f"✓ {result['action']}")
        for name, value in result["captures"].items():
            print(f"  {name}: {value}")
    else:
        print(f"✗ {result['message']}")
        print(f"  {result['hint']}")


def remote_debug(args):
    try:
        print_json(data=client.debug(args.text))
    except httpx.HTTPError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def remote_patterns(args):
    try:
        patterns = client.list_patterns()
    except httpx.HTTPError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    if not patterns:
        print("No patterns.")
        return
    for p in patterns:
        print(f"#{p['index']:<3} {p['action']:16} {p['pattern']}")


def remote_lexicon(args):
    try:
        print_json(data=client.lookup_word(args.word))
    except httpx.HTTPError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)


def remote_check(args):
    try:
        with open(args.file) as f:
            text = f.read()
    except FileNotFoundError:
        print(f"✗ Error: File not found: {args.file}")
        sys.exit(1)

    try:
        report = client.check_grammar(text)
    except httpx.HTTPError as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    print(f"=== {args.file} ===")
    print(f"Verbs: {report['verb_count']}")
    print(f"Directions: {report['direction_count']}")
    print(f"Patterns: {report['pattern_count']} ({len(report['actions'])} actions)")

    warnings = list(report["problems"])
    warnings += [f"pattern #{d['index']} ({d['action']}) can never match: {d['pattern']}"
                 for d in report["dead_patterns"]]
    warnings += report.get("collisions", [])
    for warning in warnings:
        print(f"  warning: {warning}")

    if warnings:
        sys.exit(1)
    print("✓ OK")
