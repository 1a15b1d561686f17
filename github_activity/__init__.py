"""Show a GitHub user's recent public activity in the terminal."""

__version__ = "1.0.0"
