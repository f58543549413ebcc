from __future__ import annotations
from typing import List


def _is_letter(ch: str) -> bool:
    """Unicode letters (categories Lu, Ll, Lt, Lm, Lo). Everything else delimits."""
    return ch.isalpha()


def tokenize(document: str) -> List[str]:
    """
    Split a document on runs of one or more non-letter characters.
    Rules:
      * case and letters are kept exactly as written
      * a delimiter run at the very start yields one leading "" token
        (only when letters follow it)
      * trailing delimiter runs yield nothing
      * empty or delimiter-only input yields []
    """
    tokens: List[str] = []
    run: list[str] = []

    for ch in document:
        if _is_letter(ch):
            run.append(ch)
        elif run:
            tokens.append(''.join(run))
            run = []
    if run:
        tokens.append(''.join(run))

    if tokens and not _is_letter(document[0]):
        tokens.insert(0, '')
    return tokens


def document_length(document: str) -> int:
    """Number of tokens in a document, as counted for term frequency."""
    return len(tokenize(document))
