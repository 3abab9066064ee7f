from pathlib import Path
from typing import Dict, List

import pytest

import config
from keyword_search import KeywordIndex, Occurrence


@pytest.fixture
def cfg():
    return config


@pytest.fixture
def build_index():
    """Build an index from {document: {keyword: frequency}}, merged in order."""

    def _build(documents: Dict[str, Dict[str, int]]) -> KeywordIndex:
        index = KeywordIndex()
        for document, counts in documents.items():
            index.merge({kw: Occurrence(document, f) for kw, f in counts.items()}, document=document)
        return index

    return _build


@pytest.fixture
def corpus(tmp_path: Path):
    """Write documents, a manifest and a noise-word file under tmp_path."""

    def _write(documents: Dict[str, str], noise_words: List[str] = ()) -> Dict[str, Path]:
        for name, text in documents.items():
            (tmp_path / name).write_text(text, encoding="utf-8")
        docs_file = tmp_path / "docs.txt"
        docs_file.write_text("\n".join(documents) + "\n", encoding="utf-8")
        noise_file = tmp_path / "noisewords.txt"
        noise_file.write_text("\n".join(noise_words) + "\n", encoding="utf-8")
        return {"docs": docs_file, "noise": noise_file}

    return _write
