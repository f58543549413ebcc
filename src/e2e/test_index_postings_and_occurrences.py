import pytest
from search_engine import config as CFG
from search_engine.index import InvertedIndex
from search_engine.tokenizer import tokenize

DOCS = [doc for _, doc in CFG.DEMO_CORPUS]
D1, D2, D3 = DOCS


@pytest.fixture
def idx():
    return InvertedIndex(DOCS)


def test_lookup_returns_documents_in_insertion_order(idx):
    assert idx.lookup("fox") == (D1, D3)
    assert idx.lookup("corner") == (D2,)
    assert idx.lookup("the") == (D1, D2, D3)


def test_lookup_missing_key_is_empty(idx):
    assert idx.lookup("zebra") == ()
    assert idx.lookup("") == ()


def test_every_token_lowercased_points_back_to_its_document(idx):
    for doc in DOCS:
        for tok in tokenize(doc):
            assert doc in idx.lookup(tok.lower())


def test_occurrence_counts_match_tokenization(idx):
    for doc in DOCS:
        toks = tokenize(doc)
        for word in set(toks):
            assert idx.occurrence_count(word, doc) == toks.count(word)
    assert idx.occurrence_count("brown", D1) == 2
    assert idx.occurrence_count("fox", D2) == 0


def test_document_frequency_and_length(idx):
    assert idx.document_frequency("dog") == 3
    assert idx.document_frequency("fox") == 2
    assert idx.document_frequency("zebra") == 0
    assert idx.document_length(D1) == 8
    assert idx.document_length(D3) == 7


def test_index_keys_are_lowercase_but_occurrences_keep_case():
    a, b = "quick fox", "Fox trot"
    idx = InvertedIndex([a, b])
    assert idx.lookup("fox") == (a, b)
    assert "Fox" not in idx
    assert dict(idx.occurrences["Fox"]) == {b: 1}
    assert dict(idx.occurrences["fox"]) == {a: 1}
    assert idx.document_frequency("fox") == 1


def test_duplicates_collapse_and_empty_token_is_not_indexed():
    idx = InvertedIndex(["x y", "x y", " hi", "", "!!!"])
    assert idx.documents == ("x y", " hi", "", "!!!")
    assert len(idx) == 4
    assert idx.lookup("") == ()
    assert idx.lookup("hi") == (" hi",)
    assert idx.document_length(" hi") == 2
    assert idx.document_length("!!!") == 0


def test_tables_are_read_only(idx):
    with pytest.raises(TypeError):
        idx.postings["zebra"] = (D1,)
    with pytest.raises(TypeError):
        idx.occurrences["fox"][D2] = 1


def test_vocabulary_is_sorted(idx):
    vocab = idx.vocabulary()
    assert list(vocab) == sorted(vocab)
    assert "corner" in vocab


LEADING = [" hi there", "hi", "...hi hi"]


def test_occurrence_counts_include_leading_empty_token():
    idx = InvertedIndex(LEADING)
    for doc in LEADING:
        toks = tokenize(doc)
        for word in set(toks):
            assert idx.occurrence_count(word, doc) == toks.count(word)
    assert idx.occurrence_count("", " hi there") == 1
    assert idx.occurrence_count("", "hi") == 0
    assert idx.document_frequency("") == 2
    # counted, but never searchable
    assert idx.lookup("") == ()
    assert idx.document_length(" hi there") == 3
