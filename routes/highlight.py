# routes/highlight.py
from flask import Blueprint, request, jsonify
from pydantic import ValidationError
from schemas import HighlightCreate
from storage import get_storage
import logging

logger = logging.getLogger(__name__)

highlight_bp = Blueprint('highlight_bp', __name__)

@highlight_bp.route("/api/highlights", methods=['GET'])
def get_highlights():
    try:
        highlights = get_storage().get_highlights(request.args.get('userId'))
        return jsonify([h.to_json() for h in highlights]), 200
    except Exception as e:
        logger.error(f"Error fetching highlights: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to fetch highlights"}), 500

@highlight_bp.route("/api/highlights", methods=['POST'])
def create_highlight():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        return jsonify({"error": "Invalid highlight data"}), 400

    try:
        validated = HighlightCreate.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Rejected highlight payload: {e.errors()}")
        return jsonify({"error": "Invalid highlight data"}), 400

    try:
        highlight = get_storage().create_highlight(validated)
        return jsonify(highlight.to_json()), 201
    except Exception as e:
        logger.error(f"Error creating highlight: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to create highlight"}), 500

@highlight_bp.route("/api/highlights/<path:verse_id>", methods=['DELETE'])
def delete_highlight(verse_id):
    try:
        get_storage().delete_highlight(verse_id, request.args.get('userId'))
        return '', 204
    except Exception as e:
        logger.error(f"Error deleting highlight {verse_id}: {str(e)}", exc_info=True)
        return jsonify({"error": "Failed to delete highlight"}), 500
