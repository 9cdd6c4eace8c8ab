"""Cave Gallery - store and browse cave paintings with their stories."""

__version__ = "0.1.0"
