"""WSGI entrypoint for Gunicorn.

Usage:
  gunicorn -w 1 --threads 4 -b 0.0.0.0:8000 wsgi:app

Screen state lives in process memory, so run a single worker.
"""

from lotto_viewer import create_app

app = create_app()
