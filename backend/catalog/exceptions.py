"""catalog/exceptions.py — Errors raised by the event catalog."""


class CatalogError(Exception):
    """Base class for catalog errors."""


class CatalogNotReadyError(CatalogError):
    """A filter, search, render or dispatch was attempted before load() finished."""

    def __init__(self, state):
        super().__init__(f"Event catalog is not ready (state: {state.value})")
        self.state = state


class EventSourceError(CatalogError):
    """The event source could not be reached or returned an unusable document."""
