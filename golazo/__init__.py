"""golazo: live football match dashboard for the terminal."""

__version__ = "0.4.0"
