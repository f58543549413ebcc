from __future__ import annotations

# Demo corpus served when no --roots are given: (label, document)
DEMO_CORPUS: tuple[tuple[str, str], ...] = (
    ("document1", "the brown fox jumped over the brown dog"),
    ("document2", "the lazy brown dog sat in the corner"),
    ("document3", "the red fox bit the lazy dog"),
)

# Interactive shell
PROMPT: str = "Input: "
EXIT_COMMAND: str = "q"

# Text unit for loading .txt corpora: "line" or "paragraph"
TEXT_UNIT: str = "line"
INCLUDE_EXTS = (".txt",)

# /* ~~~ ranking direction: False keeps lowest TF-IDF first ~~~ */
MOST_RELEVANT_FIRST: bool = False

# Progress logging (set SEARCH_ENGINE_VERBOSE=1 to enable)
VERBOSE_ENV: str = "SEARCH_ENGINE_VERBOSE"

# Web front-end
DEFAULT_HOST: str = "127.0.0.1"
DEFAULT_PORT: int = 8000
