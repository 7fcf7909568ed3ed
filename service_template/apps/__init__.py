"""Module-level ASGI apps, one per service, for ``uvicorn module:app``."""
