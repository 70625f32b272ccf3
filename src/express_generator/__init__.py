"""Application generator for TypeScript Express projects."""

__version__ = "0.1.0"
