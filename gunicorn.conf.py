# gunicorn.conf.py
import os
import logging
import sys
import multiprocessing

wsgi_app = "app:create_app()"

# Configure logging to stdout
accesslog = '-'
errorlog = '-'
loglevel = 'info'

# Get PORT from environment or use default
port = os.getenv('PORT', '8080')
bind = f"0.0.0.0:{port}"

# Highlights and bookmarks live in process memory, so every request
# must reach the same process: one worker, several threads
workers = 1
cores = multiprocessing.cpu_count()
threads = min(cores * 2, 8)

# Log configuration on startup
def on_starting(server):
    logger = logging.getLogger('gunicorn.error')
    logger.setLevel(logging.INFO)
    logger.addHandler(logging.StreamHandler(sys.stdout))
    logger.info(f"Starting gunicorn with {workers} worker and {threads} threads on port {port}")

timeout = 30
keepalive = 5
worker_class = "gthread"

# Process naming
proc_name = "bible_app"
default_proc_name = "bible_app"

# Graceful server restart
graceful_timeout = 30
