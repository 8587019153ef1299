# This file makes the models directory a Python package
from .bible import Book, Verse, testament_for
from .highlight import Highlight
from .bookmark import Bookmark

__all__ = [
    'Book',
    'Verse',
    'testament_for',
    'Highlight',
    'Bookmark',
]
