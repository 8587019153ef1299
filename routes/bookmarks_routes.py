# routes/bookmarks_routes.py
from flask import Blueprint, request, jsonify
from pydantic import ValidationError
from schemas import BookmarkCreate
from storage import get_storage
import logging

logger = logging.getLogger(__name__)
bookmarks_bp = Blueprint('bookmarks_bp', __name__, url_prefix='/api/bookmarks')

@bookmarks_bp.route("/", methods=['POST'])
def create_bookmark():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid bookmark data"}), 400

    try:
        validated = BookmarkCreate.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Rejected bookmark payload: {e.errors()}")
        return jsonify({"error": "Invalid bookmark data"}), 400

    try:
        bookmark = get_storage().create_bookmark(validated)
        return jsonify(bookmark.to_json()), 201
    except Exception as e:
        logger.error(f"Error creating bookmark: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to create bookmark"}), 500

@bookmarks_bp.route("/", methods=['GET'])
def get_bookmarks():
    try:
        bookmarks = get_storage().get_bookmarks(request.args.get('userId'))
        return jsonify([b.to_json() for b in bookmarks]), 200
    except Exception as e:
        logger.error(f"Error fetching bookmarks: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to fetch bookmarks"}), 500

@bookmarks_bp.route("/<path:verse_id>", methods=['DELETE'])
def delete_bookmark(verse_id):
    try:
        get_storage().delete_bookmark(verse_id, request.args.get('userId'))
        return '', 204
    except Exception as e:
        logger.error(f"Error deleting bookmark {verse_id}: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to delete bookmark"}), 500
