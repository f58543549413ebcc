# src/search_engine/models.py
"""
Data models for the search engine.

- Corpus: the fixed, insertion-ordered set of documents plus display labels.
- SearchHit: one ranked result as handed to the CLI and web front-ends.

These classes hold no indexing logic; the index and ranker only read them.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional, Tuple


@dataclass(frozen=True, eq=False)
class Corpus:
    """
    Documents are identified by their exact text. Duplicates are collapsed
    on construction (first occurrence wins) and the order never changes.

    Attributes
    ----------
    documents : tuple[str, ...]
        Unique documents in insertion order.
    labels : Mapping[str, str]
        Document -> display label (e.g. "document1" or "notes.txt:3"), read-only.
    """
    documents: Tuple[str, ...] = ()
    labels: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))

    @classmethod
    def from_documents(cls, documents: Iterable[str],
                       labels: Optional[Mapping[str, str]] = None) -> "Corpus":
        docs = tuple(dict.fromkeys(documents))
        given = dict(labels or {})
        return cls(
            documents=docs,
            labels={d: given.get(d, f"document{i}") for i, d in enumerate(docs, start=1)},
        )

    @classmethod
    def from_labelled(cls, pairs: Iterable[Tuple[str, str]]) -> "Corpus":
        """Build from (label, document) pairs; the first label of a duplicate is kept."""
        labels: Dict[str, str] = {}
        for label, doc in pairs:
            labels.setdefault(doc, label)
        return cls(documents=tuple(labels), labels=labels)

    def label_for(self, document: str) -> str:
        return self.labels.get(document, document)

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self):
        return iter(self.documents)


@dataclass(frozen=True)
class SearchHit:
    document: str
    label: str
    score: float
    rank: int          # 1-based position in the result list

    def to_dict(self) -> dict:
        return {
            "document": self.document,
            "label": self.label,
            "score": self.score,
            "rank": self.rank,
        }
