"""Single-user ticket tracker with an in-memory ticket store."""

__version__ = "0.1.0"
