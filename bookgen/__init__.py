"""bookgen: prepare, build and preview an mdBook from a docs/ Markdown tree."""

__version__ = "0.1.0"
