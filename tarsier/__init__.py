"""tarsier: read the article of a web page in the terminal."""

__version__ = "0.1.0"
