# utils/bible_loader.py
"""
Loads the bundled Bible dataset into Book and Verse records.

The dataset is a JSON document whose ``verses`` member maps arbitrary keys
(or holds a list) of entries shaped like::

    {"book": 43, "book_name": "John", "chapter": 3, "verse": 16, "text": "..."}

``book`` is the canonical ordinal of the book (1-66) and decides the
testament. Books and verses get sequential ids in document order.
"""
import json
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from models.bible import Book, Verse, testament_for

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ('book', 'book_name', 'chapter', 'verse', 'text')


class CorpusLoadError(ValueError):
    """Raised when the dataset is readable but not in the expected shape."""


@dataclass
class Corpus:
    books: Dict[int, Book] = field(default_factory=dict)
    verses: Dict[Tuple[str, int, int], Verse] = field(default_factory=dict)


def _is_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


def _validate_entry(entry, position):
    if not isinstance(entry, dict):
        raise CorpusLoadError(f"Verse entry {position} is not an object")

    missing = [name for name in REQUIRED_FIELDS if name not in entry]
    if missing:
        raise CorpusLoadError(f"Verse entry {position} is missing fields: {', '.join(missing)}")

    if not all(_is_int(entry[name]) for name in ('book', 'chapter', 'verse')):
        raise CorpusLoadError(f"Verse entry {position} has non-integer book, chapter or verse")
    if not isinstance(entry['book_name'], str) or not isinstance(entry['text'], str):
        raise CorpusLoadError(f"Verse entry {position} has non-string book_name or text")
    if entry['chapter'] < 1 or entry['verse'] < 1:
        raise CorpusLoadError(f"Verse entry {position} has chapter or verse below 1")


def _entries(document):
    if not isinstance(document, dict) or 'verses' not in document:
        raise CorpusLoadError("Dataset has no 'verses' member")

    verses = document['verses']
    if isinstance(verses, dict):
        entries = list(verses.values())
    elif isinstance(verses, list):
        entries = verses
    else:
        raise CorpusLoadError("Dataset 'verses' member must be an object or a list")

    if not entries:
        raise CorpusLoadError("Dataset contains no verses")
    return entries


def build_corpus(entries: List[dict]) -> Corpus:
    """Build books and verses from already decoded dataset entries."""
    for position, entry in enumerate(entries):
        _validate_entry(entry, position)

    # Chapter count of a book is the highest chapter seen for it anywhere
    max_chapters = {}
    for entry in entries:
        name = entry['book_name']
        max_chapters[name] = max(max_chapters.get(name, 0), entry['chapter'])

    corpus = Corpus()
    seen_books = set()
    for verse_id, entry in enumerate(entries, start=1):
        name = entry['book_name']
        if name not in seen_books:
            book_id = len(corpus.books) + 1
            corpus.books[book_id] = Book(
                id=book_id,
                name=name,
                testament=testament_for(entry['book']),
                chapters=max_chapters[name],
                order=entry['book']
            )
            seen_books.add(name)

        key = (name, entry['chapter'], entry['verse'])
        if key in corpus.verses:
            logger.warning(f"Replacing duplicate verse {name}:{entry['chapter']}:{entry['verse']}")

        # A repeated key keeps its slot and takes the later entry
        corpus.verses[key] = Verse(
            id=verse_id,
            book=name,
            chapter=entry['chapter'],
            verse=entry['verse'],
            text=entry['text']
        )

    return corpus


def load_corpus(path) -> Corpus:
    """Read and parse the dataset at ``path``.

    Raises OSError for unreadable files, json.JSONDecodeError for invalid
    JSON and CorpusLoadError for documents in the wrong shape.
    """
    logger.info(f"Loading Bible data from {path}")
    with open(path, 'r', encoding='utf-8') as f:
        document = json.load(f)

    corpus = build_corpus(_entries(document))
    logger.info(f"Loaded {len(corpus.books)} books and {len(corpus.verses)} verses from Bible data")
    return corpus


SAMPLE_BOOKS = [
    # (name, order, chapters)
    ("Genesis", 1, 50),
    ("Matthew", 40, 28),
    ("John", 43, 21),
]

SAMPLE_VERSES = [
    ("Genesis", 1, 1, "In the beginning God created the heavens and the earth."),
    ("Matthew", 5, 3, "Blessed are the poor in spirit, for theirs is the kingdom of heaven."),
    ("John", 3, 16, "For God so loved the world that he gave his one and only Son, "
                    "that whoever believes in him shall not perish but have eternal life."),
]


def sample_corpus() -> Corpus:
    """Minimal fixed corpus used when the dataset cannot be loaded."""
    corpus = Corpus()
    for book_id, (name, order, chapters) in enumerate(SAMPLE_BOOKS, start=1):
        corpus.books[book_id] = Book(
            id=book_id,
            name=name,
            testament=testament_for(order),
            chapters=chapters,
            order=order
        )
    for verse_id, (book, chapter, verse, text) in enumerate(SAMPLE_VERSES, start=1):
        corpus.verses[(book, chapter, verse)] = Verse(
            id=verse_id,
            book=book,
            chapter=chapter,
            verse=verse,
            text=text
        )
    return corpus
