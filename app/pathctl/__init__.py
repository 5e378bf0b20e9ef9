"""pathctl - inspect and edit PATH-like environment variables."""

__version__ = "0.1.0"
