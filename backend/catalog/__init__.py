"""Event catalog: load, filter, search, render and act on museum events."""
