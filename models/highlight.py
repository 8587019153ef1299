# models/highlight.py
from dataclasses import dataclass


@dataclass
class Highlight:
    id: int
    verse_id: str  # format: "book:chapter:verse"
    color: str
    user_id: str = 'default'

    def to_json(self):
        return {
            "id": self.id,
            "verseId": self.verse_id,
            "color": self.color,
            "userId": self.user_id
        }

    def __repr__(self):
        return f'<Highlight {self.id} {self.user_id} {self.verse_id} {self.color}>'
