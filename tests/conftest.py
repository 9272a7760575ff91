"""
Shared test fixtures.

Available fixtures:
- write_corpus: factory writing a UTF-8 corpus file under tmp_path
- small_corpus: a few lines of mixed-frequency words
"""

import pytest


@pytest.fixture
def write_corpus(tmp_path):
    def _write(text, name="corpus.txt"):
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path
    return _write


@pytest.fixture
def small_corpus(write_corpus):
    return write_corpus(
        "the cat sat on the mat\n"
        "the dog sat on the log\n"
        "\n"
        "a cat and a dog\n"
    )
