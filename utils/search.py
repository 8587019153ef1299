# utils/search.py
"""
Free-form verse search.

A query is tried against three matchers in a fixed order, so a single
search box accepts a reference ("john 3:16"), a book name ("genesis") or a
phrase from the text ("love"). Each matcher returns a list of verses, or
None when the query is not its kind of query.
"""
import re

# "<optional 1-3><book words><chapter>:<verse>", e.g. "1 corinthians 13:4"
VERSE_REF_PATTERN = re.compile(r'^([1-3]?\s*[a-zA-Z\s]+)\s*(\d+):(\d+)$')

BOOK_SEARCH_MIN_LENGTH = 3
BOOK_SEARCH_LIMIT = 10


def normalize_query(query):
    return query.strip().lower()


def match_reference(query, verses):
    """Exact verse lookup for reference-shaped queries.

    The book part only has to be contained in the book name, so "john 1:1"
    may resolve to "1 John" when that comes first in storage order.
    """
    ref_match = VERSE_REF_PATTERN.match(query)
    if not ref_match:
        return None

    book_name = ref_match.group(1).strip()
    chapter = int(ref_match.group(2))
    verse_number = int(ref_match.group(3))

    for verse in verses:
        if book_name in verse.book.lower() and verse.chapter == chapter and verse.verse == verse_number:
            return [verse]
    return []


def match_book_name(query, verses):
    """First verses of chapter 1 of the first book whose name contains the query."""
    if len(query) < BOOK_SEARCH_MIN_LENGTH:
        return None

    first_match = next((verse for verse in verses if query in verse.book.lower()), None)
    if first_match is None:
        return None

    # Storage order, not re-sorted by verse number
    chapter_one = [verse for verse in verses if verse.book == first_match.book and verse.chapter == 1]
    return chapter_one[:BOOK_SEARCH_LIMIT]


def match_text(query, verses):
    return [verse for verse in verses if query in verse.text.lower() or query in verse.book.lower()]


MATCHERS = (match_reference, match_book_name, match_text)


def resolve_query(query, verses, matchers=MATCHERS):
    """Run ``query`` through ``matchers`` and return the first applicable result."""
    normalized = normalize_query(query)
    verses = list(verses)
    for matcher in matchers:
        results = matcher(normalized, verses)
        if results is not None:
            return results
    return []
