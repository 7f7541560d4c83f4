"""Small applications: command-line tools and Flask web services."""

__version__ = "0.1.0"