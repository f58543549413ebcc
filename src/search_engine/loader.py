from __future__ import annotations
import logging
import os
from typing import Iterable, Iterator, List, Tuple

from . import config as CFG
from .models import Corpus

log = logging.getLogger(__name__)


def _iter_txt_files(roots: Iterable[str]) -> Iterator[Tuple[str, str]]:
    """Yield (root, path) for corpus files recursively under each root, in a stable order."""
    for root in roots:
        root = os.path.abspath(root)
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames.sort()
            for fn in sorted(filenames):
                if fn.lower().endswith(CFG.INCLUDE_EXTS):
                    yield root, os.path.join(dirpath, fn)


def _rel_to_root(path: str, root: str) -> str:
    return os.path.relpath(path, root).replace("\\", "/")


def _yield_line_units(lines: List[str], path_rel: str) -> Iterator[Tuple[str, str]]:
    for i, raw in enumerate(lines):
        if raw.strip():
            yield f"{path_rel}:{i}", raw


def _yield_paragraph_units(lines: List[str], path_rel: str) -> Iterator[Tuple[str, str]]:
    block: List[str] = []
    block_start_line = 0
    for i, raw in enumerate(lines):
        if raw.strip() == "":
            if block:
                yield f"{path_rel}:{block_start_line}", "\n".join(block)
                block = []
        else:
            if not block:
                block_start_line = i
            block.append(raw)
    if block:
        yield f"{path_rel}:{block_start_line}", "\n".join(block)


def load_corpus(roots: List[str], unit: str | None = None) -> Corpus:
    """
    Scan roots for *.txt and build a Corpus, one document per text unit.
    unit: "line" (default) or "paragraph". Labels are "<relpath>:<line_no>".
    """
    roots = list(roots)
    if not roots:
        raise ValueError("load_corpus(): at least one root folder is required")
    for r in roots:
        if not os.path.isdir(r):
            raise FileNotFoundError(r)

    unit = (unit or CFG.TEXT_UNIT).lower()
    if unit not in ("line", "paragraph"):
        raise ValueError(f"Unsupported text unit: {unit!r}")

    pairs: List[Tuple[str, str]] = []
    file_count = 0
    for root, path in _iter_txt_files(roots):
        rel = _rel_to_root(path, root)
        try:
            with open(path, "r", encoding="utf-8", errors="ignore") as f:
                raw_lines = [ln.rstrip("\r\n") for ln in f]
        except OSError as e:
            log.warning("Skipping unreadable file %s: %s", path, e)
            continue

        gen = _yield_line_units(raw_lines, rel) if unit == "line" else _yield_paragraph_units(raw_lines, rel)
        pairs.extend(gen)
        file_count += 1

    corpus = Corpus.from_labelled(pairs)
    log.info("Loaded corpus: files=%d units=%d documents=%d", file_count, len(pairs), len(corpus))
    return corpus
