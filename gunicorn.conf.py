"""Gunicorn config for the CSV Charts API."""
import os

# Bind to the platform's PORT or default 8000
bind = f"0.0.0.0:{os.environ.get('PORT', '8000')}"

# Uvicorn async workers; each holds its own copy of the parsed datasets.
# Tune via WEB_CONCURRENCY env var.
worker_class = "uvicorn.workers.UvicornWorker"
workers = int(os.environ.get("WEB_CONCURRENCY", "2"))

# Large CSV exports can take a while to build
timeout = 60

graceful_timeout = 30

# Keep-alive must exceed a typical proxy keep-alive (60s)
keepalive = 65

# Logging
accesslog = "-"
errorlog = "-"
loglevel = "info"
