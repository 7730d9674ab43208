"""Shared service helpers."""

from flask import current_app

from ..models.store import Store

STORE_EXTENSION = "rental_store"


def _store() -> Store:
    """Get the Store bound to the current app."""
    return current_app.extensions[STORE_EXTENSION]


def init_store(app) -> Store:
    """Create the app's Store, pointing at the configured data file."""
    store = Store(app.config["DATA_FILE"])
    app.extensions[STORE_EXTENSION] = store
    return store
