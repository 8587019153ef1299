# models/bible.py
from dataclasses import dataclass

OLD_TESTAMENT = 'Old'
NEW_TESTAMENT = 'New'

# Books 1-39 are the Old Testament, 40-66 the New
LAST_OLD_TESTAMENT_BOOK = 39


def testament_for(order):
    return OLD_TESTAMENT if order <= LAST_OLD_TESTAMENT_BOOK else NEW_TESTAMENT


@dataclass(frozen=True)
class Book:
    id: int
    name: str
    testament: str
    chapters: int
    order: int

    def to_json(self):
        return {
            "id": self.id,
            "name": self.name,
            "testament": self.testament,
            "chapters": self.chapters,
            "order": self.order
        }


@dataclass(frozen=True)
class Verse:
    id: int
    book: str
    chapter: int
    verse: int
    text: str

    @property
    def key(self):
        """Composite lookup key (book, chapter, verse)."""
        return (self.book, self.chapter, self.verse)

    def to_json(self):
        return {
            "id": self.id,
            "book": self.book,
            "chapter": self.chapter,
            "verse": self.verse,
            "text": self.text
        }
