from __future__ import annotations
import math
from typing import List, Mapping, Sequence, Tuple

from . import config as CFG
from .index import InvertedIndex
from .models import SearchHit


def tfidf(word: str, document: str, index: InvertedIndex) -> float:
    """
    TF-IDF of `word` in `document`.
      TF  = exact-case occurrences of word / token count of document
      IDF = log10(N / (1 + documents containing word exactly))
    `word` is matched verbatim here; callers pass the lowercased query.
    """
    n_docs = len(index)
    length = index.document_length(document)
    if n_docs == 0 or length == 0:
        return 0.0
    tf = index.occurrence_count(word, document) / length
    idf = math.log10(n_docs / (1 + index.document_frequency(word)))
    return tf * idf


def _ordered(word: str, documents: Sequence[str],
             index: InvertedIndex) -> List[Tuple[str, float]]:
    """(document, score) pairs in ranking order; sorted() is stable so ties keep input order."""
    scores = {doc: tfidf(word, doc, index) for doc in documents}
    ordered = sorted(documents, key=scores.__getitem__, reverse=CFG.MOST_RELEVANT_FIRST)
    return [(doc, scores[doc]) for doc in ordered]


def rank(word: str, documents: Sequence[str], index: InvertedIndex) -> List[str]:
    """
    Stable sort by TF-IDF. Lowest score first unless CFG.MOST_RELEVANT_FIRST;
    ties keep their input order either way.
    """
    return [doc for doc, _ in _ordered(word, documents, index)]


def score_all(word: str, documents: Sequence[str], index: InvertedIndex,
              labels: Mapping[str, str] | None = None) -> List[SearchHit]:
    """Same order as rank(), with scores and labels attached."""
    labels = labels or {}
    return [
        SearchHit(document=d, label=labels.get(d, d), score=s, rank=i)
        for i, (d, s) in enumerate(_ordered(word, documents, index), start=1)
    ]
