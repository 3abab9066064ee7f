import pytest

from keyword_search import DocumentNotFoundError, KeywordExtractor, Occurrence


@pytest.fixture
def extractor(cfg):
    return KeywordExtractor(cfg, noise_words=["the", "And"])


@pytest.mark.parametrize("word, expected", [
    ("cat", "cat"),
    ("Cat.", "cat"),
    ("CAT!?;", "cat"),
    ("fast!", "fast"),
    ("hello123", "hello"),
    ("end...)", "end"),
    ("café,", "café"),
    ("don't", None),
    ("'quoted", None),
    ("well-known", None),
    ("3d", None),
    ("42", None),
    ("...", None),
    ("", None),
    ("the", None),
    ("The,", None),
    ("AND", None),
])
def test_get_keyword(extractor, word, expected):
    assert extractor.get_keyword(word) == expected


def test_extract_keywords_counts_per_document(extractor):
    keywords = extractor.extract_keywords("d1", "The cat sat. The cat, the CAT! and a dog")
    assert keywords == {
        "cat": Occurrence("d1", 3),
        "sat": Occurrence("d1", 1),
        "a": Occurrence("d1", 1),
        "dog": Occurrence("d1", 1),
    }


def test_extract_keywords_empty_text(extractor):
    assert extractor.extract_keywords("d1", "  \n the 123 ") == {}


def test_load_keywords_names_document(extractor, tmp_path):
    path = tmp_path / "story.txt"
    path.write_text("Once upon a time.\nA time of cats.\n", encoding="utf-8")

    keywords = extractor.load_keywords("story", path)
    assert keywords["time"] == Occurrence("story", 2)
    assert all(occ.document == "story" for occ in keywords.values())


def test_load_keywords_missing_file(extractor, tmp_path):
    missing = tmp_path / "nowhere.txt"
    with pytest.raises(DocumentNotFoundError) as excinfo:
        extractor.load_keywords("nowhere.txt", missing)

    assert isinstance(excinfo.value, FileNotFoundError)
    assert excinfo.value.path == str(missing)
    assert "nowhere.txt" in str(excinfo.value)


def test_load_noise_words_replaces_set(extractor, tmp_path):
    path = tmp_path / "noise.txt"
    path.write_text("A\nof\n\n  upon \n", encoding="utf-8")

    assert extractor.load_noise_words(path) == {"a", "of", "upon"}
    assert extractor.get_keyword("the") == "the"
    assert extractor.get_keyword("Of") is None


def test_read_manifest(extractor, tmp_path):
    path = tmp_path / "docs.txt"
    path.write_text("one.txt\ntwo.txt\n\nthree.txt\n", encoding="utf-8")
    assert extractor.read_manifest(path) == ["one.txt", "two.txt", "three.txt"]


def test_read_manifest_missing(extractor, tmp_path):
    with pytest.raises(DocumentNotFoundError):
        extractor.read_manifest(tmp_path / "docs.txt")
