"""Trimming and tokenising of strings."""

from __future__ import annotations

import re

from genfunctions.chararray import STRING_SIZE

MAX_TOKENS_IN_ARRAY = 200

# The characters the C locale treats as white space.
_WHITESPACE = " \t\n\v\f\r"


def trim(text: str) -> str:
    """Remove leading and trailing white space."""
    return text.strip(_WHITESPACE)


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on any character of ``delimiter`` and trim each token.

    Runs of delimiters yield no empty tokens, at most ``MAX_TOKENS_IN_ARRAY``
    tokens are returned and each is cut to ``STRING_SIZE - 1`` characters.
    """
    if delimiter:
        pattern = "[" + "".join(re.escape(ch) for ch in set(delimiter)) + "]"
        raw = (part for part in re.split(pattern, text) if part)
    else:
        raw = iter([text] if text else [])

    tokens: list[str] = []
    for part in raw:
        if len(tokens) >= MAX_TOKENS_IN_ARRAY:
            break
        tokens.append(trim(part)[: STRING_SIZE - 1])
    return tokens