"""Project-wide configuration constants."""
