import logging

import pytest

from keyword_search import DocumentNotFoundError, DuplicateDocumentError, KeywordSearchEngine
from main import main


@pytest.fixture
def cat_corpus(corpus):
    return corpus({"d1": "the cat sat.", "d2": "the cat ran fast!"}, ["the"])


@pytest.fixture
def engine(cat_corpus):
    engine = KeywordSearchEngine()
    engine.make_index(cat_corpus["docs"], cat_corpus["noise"])
    return engine


def test_end_to_end_example(engine):
    cat = engine.index.get_occurrences("cat")
    assert [(occ.document, occ.frequency) for occ in cat] == [("d2", 1), ("d1", 1)]
    assert "the" not in engine.index
    assert engine.index.documents == {"d1", "d2"}

    assert engine.top5search("cat", "fast") == ["d2", "d1"]
    assert engine.top5search("ran", "sat") == ["d2", "d1"]
    assert engine.top5search("the", "dog") is None


def test_build_logs_progress(cat_corpus, caplog):
    engine = KeywordSearchEngine()
    with caplog.at_level(logging.INFO, logger="keyword_search"):
        engine.make_index(cat_corpus["docs"], cat_corpus["noise"])
    assert "Built keyword index: 4 keywords across 2 documents" in caplog.text


def test_missing_document_aborts_build(corpus, tmp_path):
    files = corpus({"d1": "the cat sat."}, ["the"])
    files["docs"].write_text("d1\nghost\n", encoding="utf-8")

    engine = KeywordSearchEngine()
    with pytest.raises(DocumentNotFoundError) as excinfo:
        engine.make_index(files["docs"], files["noise"])

    assert excinfo.value.path == str(tmp_path / "ghost")
    assert engine.index is None
    with pytest.raises(RuntimeError):
        engine.top5search("cat", "sat")


def test_failed_rebuild_keeps_previous_index(engine, tmp_path):
    with pytest.raises(DocumentNotFoundError):
        engine.make_index(tmp_path / "missing.txt", tmp_path / "noisewords.txt")
    assert engine.top5search("cat", "fast") == ["d2", "d1"]


def test_missing_noise_words_file(cat_corpus, tmp_path):
    engine = KeywordSearchEngine()
    with pytest.raises(DocumentNotFoundError):
        engine.make_index(cat_corpus["docs"], tmp_path / "absent.txt")


def test_document_listed_twice(corpus):
    files = corpus({"d1": "the cat sat."}, ["the"])
    files["docs"].write_text("d1\nd1\n", encoding="utf-8")
    with pytest.raises(DuplicateDocumentError):
        KeywordSearchEngine().make_index(files["docs"], files["noise"])


def test_build_index_from_paths(tmp_path):
    first = tmp_path / "first.txt"
    first.write_text("Dogs bark. Dogs run.", encoding="utf-8")
    second = tmp_path / "second.txt"
    second.write_text("A dog, a cat.", encoding="utf-8")

    engine = KeywordSearchEngine()
    engine.build_index([str(first), str(second)], noise_words=["a"])
    assert engine.top5search("dogs", "dog") == [str(first), str(second)]
    assert "a" not in engine.index


def test_search_normalizes_query(engine):
    keywords, ranked = engine.search("Cat or FAST!")
    assert keywords == ["cat", "fast"]
    assert [occ.document for occ in ranked] == ["d2", "d1"]


def test_search_noise_word_matches_nothing(engine):
    keywords, ranked = engine.search("the fast")
    assert keywords == ["", "fast"]
    assert [occ.document for occ in ranked] == ["d2"]


def test_search_single_keyword(engine):
    keywords, ranked = engine.search("sat")
    assert keywords == ["sat", ""]
    assert [occ.document for occ in ranked] == ["d1"]


def test_search_autocorrects_unknown_keyword(engine):
    keywords, ranked = engine.search("catt or fastt")
    assert keywords == ["cat", "fast"]
    assert [occ.document for occ in ranked] == ["d2", "d1"]


def test_search_without_autocorrect(cat_corpus):
    engine = KeywordSearchEngine(config_dict={"AUTO_CORRECT_ENABLED": False})
    engine.make_index(cat_corpus["docs"], cat_corpus["noise"])
    assert engine.config.TOP_K_RESULTS == 5

    keywords, ranked = engine.search("catt or fastt")
    assert keywords == ["catt", "fastt"]
    assert ranked == []


def test_search_before_build():
    with pytest.raises(RuntimeError, match="Index not built"):
        KeywordSearchEngine().search("cat dog")


def test_get_stats(engine):
    stats = engine.get_stats()
    assert stats["documents"] == 2
    assert stats["keywords"] == 4
    assert stats["noise_words"] == 1
    assert KeywordSearchEngine().get_stats() == {"error": "Index not built"}


def test_cli_query(cat_corpus, capsys):
    code = main(["--docs", str(cat_corpus["docs"]), "--noise-words", str(cat_corpus["noise"]),
                 "--query", "cat", "or", "fast", "--log-level", "WARNING"])
    out = capsys.readouterr().out
    assert code == 0
    assert "=== Top Results ===" in out
    assert out.index("d2") < out.index("d1")


def test_cli_build_only_with_stats(cat_corpus, capsys):
    code = main(["--docs", str(cat_corpus["docs"]), "--noise-words", str(cat_corpus["noise"]),
                 "--build-only", "--stats", "--log-level", "WARNING"])
    out = capsys.readouterr().out
    assert code == 0
    assert "keywords: 4" in out


def test_cli_missing_input(tmp_path, capsys):
    code = main(["--docs", str(tmp_path / "nope.txt"), "--noise-words", str(tmp_path / "nope.txt"),
                 "--build-only", "--log-level", "WARNING"])
    assert code == 1
    assert "Error building index" in capsys.readouterr().out
