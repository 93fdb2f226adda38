"""Tenant helpers: short vulnerability prefixes derived from tenant names."""

from __future__ import annotations

import re

VULN_PREFIX_MIN_LENGTH = 2
VULN_PREFIX_MAX_LENGTH = 4

_NON_LETTERS = re.compile(r"[^A-Z]+")
_VOWELS = re.compile(r"[AEIOU]")


def remove_consecutive_duplicates(text: str) -> str:
    """Collapse runs of the same character into one."""
    result = []
    last = "\0"
    for char in text:
        if char != last:
            result.append(char)
            last = char
    return "".join(result)


def generate_vuln_prefix(name: str) -> str:
    """Derive a two- to four-letter vulnerability prefix from a tenant name."""
    prefix = name.upper()
    if len(prefix) <= VULN_PREFIX_MAX_LENGTH:
        return prefix

    prefix = _NON_LETTERS.sub("", prefix)
    prefix = _VOWELS.sub("", prefix)
    prefix = remove_consecutive_duplicates(prefix)[:VULN_PREFIX_MAX_LENGTH]

    if len(prefix) < VULN_PREFIX_MIN_LENGTH:
        prefix = _VOWELS.sub("", name.upper())[:VULN_PREFIX_MAX_LENGTH]

    return prefix