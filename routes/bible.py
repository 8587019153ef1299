# routes/bible.py
from flask import Blueprint, jsonify, request
import logging
from storage import get_storage

bible_bp = Blueprint('bible', __name__)

logger = logging.getLogger(__name__)

@bible_bp.route('/books', methods=['GET'])
def get_books():
    try:
        books = get_storage().get_all_books()
        return jsonify([book.to_json() for book in books])
    except Exception as e:
        logger.error(f"Error in get_books: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to fetch books"}), 500

@bible_bp.route('/books/<name>', methods=['GET'])
def get_book(name):
    try:
        book = get_storage().get_book_by_name(name)
        if not book:
            return jsonify({"error": "Book not found"}), 404
        return jsonify(book.to_json())
    except Exception as e:
        logger.error(f"Error fetching book {name}: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to fetch book"}), 500

@bible_bp.route('/verses/<book>', methods=['GET'])
def get_verses(book):
    try:
        # A non-integer chapter comes back as None and means "whole book"
        chapter = request.args.get('chapter', type=int)
        verses = get_storage().get_verses_by_book(book, chapter)
        return jsonify([verse.to_json() for verse in verses])
    except Exception as e:
        logger.error(f"Error fetching verses for {book}: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to fetch verses"}), 500

@bible_bp.route('/verses/<book>/<int:chapter>/<int:verse>', methods=['GET'])
def get_single_verse(book, chapter, verse):
    try:
        verse_obj = get_storage().get_verse(book, chapter, verse)
        if not verse_obj:
            return jsonify({"error": "Verse not found"}), 404
        return jsonify(verse_obj.to_json())
    except Exception as e:
        logger.error(f"Error fetching verse {book} {chapter}:{verse}: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to fetch verse"}), 500

@bible_bp.route('/search', methods=['GET'])
def search_bible():
    query_str = request.args.get('q', '')
    if not query_str:
        return jsonify({"error": "Search query is required"}), 400

    try:
        results = get_storage().search_verses(query_str)
        logger.info(f"Search for '{query_str}' returned {len(results)} verses")
        return jsonify([verse.to_json() for verse in results])
    except Exception as e:
        logger.error(f"Search error: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to search verses"}), 500
