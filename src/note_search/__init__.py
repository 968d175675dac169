"""
In-memory full-text search and relevance ranking for personal notes.
"""

__version__ = "1.0.0"
