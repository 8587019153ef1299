# tests/conftest.py
import json

import pytest

from app import create_app
from storage import MemStorage


def _entry(book, book_name, chapter, verse, text):
    return {"book": book, "book_name": book_name, "chapter": chapter, "verse": verse, "text": text}


# Genesis 1 is stored out of verse order and has more verses than a book
# search returns
GENESIS_ONE = [12, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11]

DATASET_ENTRIES = (
    [_entry(1, "Genesis", 1, n, f"Genesis one verse {n} and God saw it") for n in GENESIS_ONE]
    + [
        _entry(1, "Genesis", 2, 1, "Thus the heavens and the earth were finished."),
        _entry(1, "Genesis", 50, 26, "So Joseph died, being an hundred and ten years old."),
        _entry(19, "Psalms", 23, 1, "The LORD is my shepherd; I shall not want."),
        _entry(40, "Matthew", 5, 3, "Blessed are the poor in spirit: for theirs is the kingdom of heaven."),
        _entry(43, "John", 1, 1, "In the beginning was the Word, and the Word was with God."),
        _entry(43, "John", 3, 16, "For God so loved the world, that he gave his only begotten Son."),
        _entry(46, "1 Corinthians", 13, 4, "Charity suffereth long, and is kind."),
        _entry(62, "1 John", 4, 8, "He that loveth not knoweth not God; for God is love."),
    ]
)


def write_dataset(path, entries):
    document = {"verses": {str(i): entry for i, entry in enumerate(entries)}}
    path.write_text(json.dumps(document), encoding="utf-8")
    return path


@pytest.fixture
def dataset_path(tmp_path):
    return write_dataset(tmp_path / "bible-data.json", DATASET_ENTRIES)


@pytest.fixture
def storage(dataset_path):
    return MemStorage(data_path=str(dataset_path))


@pytest.fixture
def app(storage):
    return create_app(storage=storage, config={'TESTING': True})


@pytest.fixture
def client(app):
    return app.test_client()
