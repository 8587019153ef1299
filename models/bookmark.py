# models/bookmark.py
from dataclasses import dataclass


@dataclass
class Bookmark:
    id: int
    verse_id: str  # format: "book:chapter:verse"
    user_id: str = 'default'

    def to_json(self):
        return {
            "id": self.id,
            "verseId": self.verse_id,
            "userId": self.user_id
        }

    def __repr__(self):
        return f'<Bookmark {self.id} User: {self.user_id} - {self.verse_id}>'
