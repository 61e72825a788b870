"""
HTTP client for the said API.
"""

import os

import httpx

BASE_URL = os.environ.get("SAID_API_URL", "http://localhost:8000/api")


# === Interpret ===

def interpret(text: str, strip_fillers: bool = True) -> dict:
    payload = {"text": text, "strip_fillers": strip_fillers}
    r = httpx.post(f"{BASE_URL}/interpret", json=payload, timeout=30)
    r.raise_for_status()
    return r.json()


def debug(text: str) -> dict:
    r = httpx.post(f"{BASE_URL}/interpret/debug", json={"text": text}, timeout=30)
    r.raise_for_status()
    return r.json()


# === Catalogue ===

def list_patterns() -> list[dict]:
    r = httpx.get(f"{BASE_URL}/patterns")
    r.raise_for_status()
    return r.json()["patterns"]


def lookup_word(word: str) -> dict:
    r = httpx.get(f"{BASE_URL}/lexicon/{word}")
    r.raise_for_status()
    return r.json()


def check_grammar(text: str) -> dict:
    r = httpx.post(f"{BASE_URL}/grammars/check", json={"text": text}, timeout=30)
    r.raise_for_status()
    return r.json()
