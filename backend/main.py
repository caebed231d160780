"""
main.py — Convenience entry point for the Museum Events backend.

The FastAPI application is defined in api/main.py.
This file re-exports `app` so uvicorn can be invoked from backend/ as:

    uvicorn main:app --reload --port 8000

The canonical import path (api.main:app) is the one gunicorn.conf.py and
run_dev.py use.
"""

from api.main import app  # noqa: F401  (re-export)
