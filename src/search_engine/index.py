from __future__ import annotations
import logging
from collections import Counter, defaultdict
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

from .tokenizer import tokenize

log = logging.getLogger(__name__)


class InvertedIndex:
    """
    Inverted index + occurrence table over a fixed set of documents.

    postings:    lowercase token -> documents containing it (insertion order, no dups)
    occurrences: token as written -> {document: count of exact matches}

    Both tables are filled in one pass by the constructor and exposed
    read-only afterwards; there is no add/remove API.
    """
    def __init__(self, documents: Iterable[str]) -> None:
        self._documents: Tuple[str, ...] = tuple(dict.fromkeys(documents))
        self._postings: Mapping[str, Tuple[str, ...]] = MappingProxyType({})
        self._occurrences: Mapping[str, Mapping[str, int]] = MappingProxyType({})
        self._lengths: Dict[str, int] = {}
        self._build()

    # ---- Build (once) ----
    def _build(self) -> None:
        buckets: Dict[str, Dict[str, None]] = defaultdict(dict)   # dict as ordered set
        counts: Dict[str, Counter] = defaultdict(Counter)

        for doc in self._documents:
            toks = tokenize(doc)
            self._lengths[doc] = len(toks)
            for tok in toks:
                counts[tok][doc] += 1
                if tok:  # leading "" from a delimiter-first document is counted, not indexed
                    buckets[tok.lower()][doc] = None

        self._postings = MappingProxyType({k: tuple(v) for k, v in buckets.items()})
        self._occurrences = MappingProxyType(
            {w: MappingProxyType(dict(c)) for w, c in counts.items()}
        )
        log.info("Indexed %d documents: terms=%d raw_tokens=%d",
                 len(self._documents), len(self._postings), len(self._occurrences))

    # ---- Query ----
    def lookup(self, key: str) -> Tuple[str, ...]:
        """Documents filed under an already-lowercased key; () when absent."""
        return self._postings.get(key, ())

    def occurrence_count(self, word: str, document: str) -> int:
        """Exact-case occurrences of `word` in `document` (0 when absent)."""
        return self._occurrences.get(word, {}).get(document, 0)

    def document_frequency(self, word: str) -> int:
        """Documents whose tokenization contains `word` exactly (case-sensitive)."""
        return len(self._occurrences.get(word, ()))

    def document_length(self, document: str) -> int:
        """Token count of a document; falls back to tokenizing unknown text."""
        n = self._lengths.get(document)
        return n if n is not None else len(tokenize(document))

    def vocabulary(self) -> Tuple[str, ...]:
        return tuple(sorted(self._postings))

    # ---- Getters ----
    @property
    def documents(self) -> Tuple[str, ...]:
        return self._documents

    @property
    def postings(self) -> Mapping[str, Tuple[str, ...]]:
        return self._postings

    @property
    def occurrences(self) -> Mapping[str, Mapping[str, int]]:
        return self._occurrences

    def __len__(self) -> int:
        return len(self._documents)

    def __contains__(self, key: object) -> bool:
        return key in self._postings
