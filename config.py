# config.py
import os
from pathlib import Path
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

load_dotenv()

class Config:
    BIBLE_DATA_PATH = os.getenv('BIBLE_DATA_PATH', os.path.join(BASE_DIR, 'data', 'bible-data.json'))
    DEFAULT_USER_ID = 'default'
    PORT = int(os.getenv('PORT', 5001))
    MAX_CONTENT_LENGTH = 1 * 1024 * 1024  # Highlight/bookmark payloads are tiny
