"""Play one track on a loop from a long soundtrack, with track boundaries read from a timestamps file."""

__version__ = "0.1.0"