"""
TF-IDF Search Engine

A small full-text search engine over a fixed, in-memory corpus. Documents are
tokenized on runs of non-letter characters, filed in an inverted index under
their lowercase tokens, and multi-document answers are ordered by TF-IDF.

Main API:
    build(documents): build an Engine once over a corpus
    Engine.search(query): documents matching the single-word query

Example Usage:
    from search_engine import build

    engine = build([
        "the brown fox jumped over the brown dog",
        "the red fox bit the lazy dog",
    ])
    engine.search("fox")
"""

# src/search_engine/__init__.py
from .engine import Engine, build  # re-export
from .models import Corpus, SearchHit
from .tokenizer import tokenize

__version__ = "1.0.0"
__all__ = ["Engine", "build", "Corpus", "SearchHit", "tokenize"]
