"""
BayesLens API entry point.

Usage:
    uvicorn bayeslens.api.app:app --host 0.0.0.0 --port 8010

Re-exports the app from bayeslens.main so that both entry points work.
"""

from bayeslens.main import app

__all__ = ["app"]
