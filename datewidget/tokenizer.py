from typing import List, Optional

import regex as re

QUOTE = '"'

RE_SPACES = re.compile(r"\s+")


def tokenize(raw: Optional[str]) -> List[str]:
    """Split an option string into option tokens.

    The string is split on whitespace runs. A quoted explicit format containing
    a space, e.g. ``-f"yy/MM/dd hh:mm"``, is broken in two by that split, so a
    token holding a double quote is merged back with the token that follows it.
    Only one following token is merged; a quote in the last token is left
    alone.

    >>> tokenize('-t -f"yy/MM/dd hh:mm"')
    ['-t', '-f"yy/MM/dd hh:mm"']
    """
    if raw is None:
        return []
    raw = raw.strip()
    if not raw:
        return []

    parts = RE_SPACES.split(raw)
    tokens = []
    i = 0
    while i < len(parts):
        token = parts[i]
        if QUOTE in token and i + 1 < len(parts):
            token = token + " " + parts[i + 1]
            i += 1
        tokens.append(token)
        i += 1
    return tokens
