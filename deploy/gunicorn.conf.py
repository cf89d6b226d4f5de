"""
Gunicorn configuration for the habit tracker.

    gunicorn -c deploy/gunicorn.conf.py habittracker.wsgi:app
"""

import os

bind = os.environ.get("GUNICORN_BIND", "0.0.0.0:3333")

# gthread: requests spend their time waiting on the database
worker_class = "gthread"
workers = int(os.environ.get("GUNICORN_WORKERS", "2"))
threads = int(os.environ.get("GUNICORN_THREADS", "4"))
timeout = int(os.environ.get("GUNICORN_TIMEOUT", "30"))

accesslog = "-"
errorlog = "-"
loglevel = os.environ.get("GUNICORN_LOGLEVEL", "info")
proc_name = "habittracker"
