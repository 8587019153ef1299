# storage.py
import logging
import threading
from itertools import count
from typing import Dict, List, Optional

from flask import current_app

from config import Config
from models import Book, Verse, Highlight, Bookmark
from utils.bible_loader import Corpus, load_corpus, sample_corpus
from utils.search import resolve_query

logger = logging.getLogger(__name__)

DEFAULT_USER_ID = Config.DEFAULT_USER_ID


class MemStorage:
    """In-memory store for the Bible corpus and per-user highlights/bookmarks.

    Books and verses are loaded once on construction and never change.
    Highlights and bookmarks are created and deleted by users; their id
    counters only move forward.
    """

    def __init__(self, data_path=None):
        self.data_path = data_path or Config.BIBLE_DATA_PATH
        self._books: Dict[int, Book] = {}
        self._verses: Dict[tuple, Verse] = {}
        self._highlights: Dict[int, Highlight] = {}
        self._bookmarks: Dict[int, Bookmark] = {}
        self._highlight_ids = count(1)
        self._bookmark_ids = count(1)
        self._lock = threading.Lock()
        self.source = None

        self._initialize_bible_data()

    def _initialize_bible_data(self):
        try:
            corpus = load_corpus(self.data_path)
            self.source = 'dataset'
        except Exception as e:
            logger.error(f"Error loading Bible data from {self.data_path}: {str(e)}", exc_info=True)
            logger.warning("Falling back to sample Bible data")
            corpus = sample_corpus()
            self.source = 'sample'
        self._install_corpus(corpus)

    def _install_corpus(self, corpus: Corpus):
        self._books = corpus.books
        self._verses = corpus.verses

    @property
    def book_count(self):
        return len(self._books)

    @property
    def verse_count(self):
        return len(self._verses)

    # Bible books

    def get_all_books(self) -> List[Book]:
        return sorted(self._books.values(), key=lambda book: book.order)

    def get_book_by_name(self, name) -> Optional[Book]:
        return next((book for book in self._books.values() if book.name == name), None)

    # Bible verses

    def get_verses_by_book(self, book, chapter=None) -> List[Verse]:
        verses = [
            verse for verse in self._verses.values()
            if verse.book == book and (not chapter or verse.chapter == chapter)
        ]
        return sorted(verses, key=lambda verse: verse.verse)

    def get_verse(self, book, chapter, verse) -> Optional[Verse]:
        return self._verses.get((book, chapter, verse))

    def search_verses(self, query) -> List[Verse]:
        return resolve_query(query, self._verses.values())

    # Highlights

    def get_highlights(self, user_id=DEFAULT_USER_ID) -> List[Highlight]:
        user_id = DEFAULT_USER_ID if user_id is None else user_id
        with self._lock:
            return [h for h in self._highlights.values() if h.user_id == user_id]

    def create_highlight(self, data) -> Highlight:
        """Store a new highlight from a validated HighlightCreate."""
        with self._lock:
            highlight = Highlight(
                id=next(self._highlight_ids),
                verse_id=data.verse_id,
                color=data.color,
                user_id=data.user_id or DEFAULT_USER_ID
            )
            self._highlights[highlight.id] = highlight
        logger.info(f"Created highlight {highlight.id} on {highlight.verse_id} for user {highlight.user_id}")
        return highlight

    def delete_highlight(self, verse_id, user_id=DEFAULT_USER_ID):
        user_id = DEFAULT_USER_ID if user_id is None else user_id
        with self._lock:
            highlight = next(
                (h for h in self._highlights.values() if h.verse_id == verse_id and h.user_id == user_id),
                None
            )
            if highlight:
                del self._highlights[highlight.id]
                logger.info(f"Deleted highlight {highlight.id} on {verse_id} for user {user_id}")

    # Bookmarks

    def get_bookmarks(self, user_id=DEFAULT_USER_ID) -> List[Bookmark]:
        user_id = DEFAULT_USER_ID if user_id is None else user_id
        with self._lock:
            return [b for b in self._bookmarks.values() if b.user_id == user_id]

    def create_bookmark(self, data) -> Bookmark:
        """Store a new bookmark from a validated BookmarkCreate."""
        with self._lock:
            bookmark = Bookmark(
                id=next(self._bookmark_ids),
                verse_id=data.verse_id,
                user_id=data.user_id or DEFAULT_USER_ID
            )
            self._bookmarks[bookmark.id] = bookmark
        logger.info(f"Created bookmark {bookmark.id} on {bookmark.verse_id} for user {bookmark.user_id}")
        return bookmark

    def delete_bookmark(self, verse_id, user_id=DEFAULT_USER_ID):
        user_id = DEFAULT_USER_ID if user_id is None else user_id
        with self._lock:
            bookmark = next(
                (b for b in self._bookmarks.values() if b.verse_id == verse_id and b.user_id == user_id),
                None
            )
            if bookmark:
                del self._bookmarks[bookmark.id]
                logger.info(f"Deleted bookmark {bookmark.id} on {verse_id} for user {user_id}")


def get_storage():
    """Get the store attached to the running Flask app."""
    return current_app.extensions['storage']
