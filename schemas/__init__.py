from .highlight_schemas import HighlightCreate
from .bookmark_schemas import BookmarkCreate

__all__ = [
    'HighlightCreate',
    'BookmarkCreate',
]
