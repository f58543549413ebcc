# search_engine/engine.py
from __future__ import annotations

import logging
import os
from typing import Iterable, List, Mapping, Optional, Tuple

from . import config as CFG
from .index import InvertedIndex
from .loader import load_corpus
from .models import Corpus, SearchHit
from .ranking import rank, score_all, tfidf

log = logging.getLogger(__name__)


def _configure_logging(verbose: bool) -> None:
    if verbose or os.environ.get(CFG.VERBOSE_ENV) == "1":
        logging.basicConfig(level=logging.INFO)


class Engine:
    """
    Thin orchestration layer that glues together:
      - the corpus (documents + display labels),
      - the inverted index / occurrence table (InvertedIndex),
      - TF-IDF ranking (ranking.rank).

    Public API (used by CLI/Flask):
      * Engine.from_documents(docs) / Engine.from_roots(roots): build once
      * search(query):      ranked documents, [] when nothing matches
      * search_hits(query): same order, with labels and scores
      * score(word, doc):   the TF-IDF value used for ordering

    Everything is built in the constructor and never mutated afterwards,
    so one Engine can be read from several threads without locking.
    """

    # ------------- lifecycle -------------

    def __init__(self, corpus: Corpus, *, verbose: bool = False) -> None:
        _configure_logging(verbose)
        self._corpus = corpus
        log.info("Building inverted index over %d documents", len(corpus))
        self._index = InvertedIndex(corpus.documents)
        log.info("Engine build complete: terms=%d", len(self._index.postings))

    @classmethod
    def from_documents(cls, documents: Iterable[str], *,
                       labels: Optional[Mapping[str, str]] = None,
                       verbose: bool = False) -> "Engine":
        return cls(Corpus.from_documents(documents, labels), verbose=verbose)

    @classmethod
    def from_labelled(cls, pairs: Iterable[Tuple[str, str]], *, verbose: bool = False) -> "Engine":
        return cls(Corpus.from_labelled(pairs), verbose=verbose)

    @classmethod
    def from_roots(cls, roots: Iterable[str], *, unit: Optional[str] = None,
                   verbose: bool = False) -> "Engine":
        _configure_logging(verbose)
        roots = list(roots)
        if not roots:
            raise ValueError("from_roots(): at least one root folder is required")
        log.info("Loading corpus from %s", roots)
        return cls(load_corpus(roots, unit=unit), verbose=verbose)

    # ------------- query -------------

    # /* ~~~ whole query is one key: lowercased, never split into terms ~~~ */
    def search(self, query: str) -> List[str]:
        key = query.lower()
        matches = self._index.lookup(key)
        if len(matches) > 1:
            return rank(key, matches, self._index)
        return list(matches)

    def search_hits(self, query: str) -> List[SearchHit]:
        key = query.lower()
        matches = self._index.lookup(key)
        if not matches:
            return []
        if len(matches) == 1:
            doc = matches[0]
            return [SearchHit(doc, self.label_for(doc), self.score(key, doc), 1)]
        return score_all(key, matches, self._index, labels=self._corpus.labels)

    def score(self, word: str, document: str) -> float:
        """TF-IDF of `word` (matched case-sensitively) in `document`."""
        return tfidf(word, document, self._index)

    # ------------- getters -------------

    def label_for(self, document: str) -> str:
        return self._corpus.label_for(document)

    @property
    def corpus(self) -> Corpus:
        return self._corpus

    @property
    def index(self) -> InvertedIndex:
        return self._index

    @property
    def documents(self) -> Tuple[str, ...]:
        return self._corpus.documents

    def __len__(self) -> int:
        return len(self._corpus)


def build(documents: Iterable[str], **kwargs) -> Engine:
    """Build an Engine over an ordered collection of documents (duplicates collapse)."""
    return Engine.from_documents(documents, **kwargs)
