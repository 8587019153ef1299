# app.py
from flask import Flask, jsonify, request, g
from flask_cors import CORS
from routes.bible import bible_bp
from routes.highlight import highlight_bp
from routes.bookmarks_routes import bookmarks_bp
from config import Config
from storage import MemStorage
import logging
import time
import sys
from werkzeug.middleware.proxy_fix import ProxyFix

# Configure logging to output to stdout
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def create_app(storage=None, config=None):
    """Build the Flask app around a store.

    The store lives as long as the app; when none is passed one is loaded
    from Config.BIBLE_DATA_PATH.
    """
    app = Flask(__name__)

    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    app.json.sort_keys = False  # Preserve order of keys in JSON responses
    app.json.compact = True
    app.config['MAX_CONTENT_LENGTH'] = Config.MAX_CONTENT_LENGTH
    app.config['CORS_HEADERS'] = 'Content-Type'
    if config:
        app.config.update(config)

    CORS(app, resources={
        r"/api/*": {
            "origins": "*",
            "methods": ["GET", "POST", "DELETE", "OPTIONS"],
            "allow_headers": ["Content-Type"],
            "expose_headers": ["Content-Type"]
        }
    })

    # Ensure URLs with or without trailing slashes are handled the same way
    app.url_map.strict_slashes = False

    if storage is None:
        logger.info("Initializing in-memory Bible storage...")
        storage = MemStorage()
        logger.info(f"Storage ready with {storage.book_count} books and {storage.verse_count} verses ({storage.source})")
    app.extensions['storage'] = storage

    app.register_blueprint(bible_bp, url_prefix='/api')
    app.register_blueprint(highlight_bp)
    app.register_blueprint(bookmarks_bp)

    @app.before_request
    def before_request():
        g.start_time = time.time()

    @app.after_request
    def after_request(response):
        duration = time.time() - g.get('start_time', time.time())
        logger.info(f"Request to {request.path} took {duration:.2f} seconds")
        return response

    @app.errorhandler(404)
    def not_found(error):
        return jsonify({"error": "Not found"}), 404

    @app.route('/health', methods=['GET'])
    def health():
        """Health check endpoint that also reports the loaded corpus"""
        store = app.extensions['storage']
        return jsonify({
            'status': 'healthy',
            'books': store.book_count,
            'verses': store.verse_count,
            'source': store.source,
            'timestamp': time.time()
        })

    return app


if __name__ == '__main__':
    print("Starting Flask server...")
    create_app().run(debug=True, port=Config.PORT)
