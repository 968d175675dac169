"""Application services"""

from note_search.services.notebook import Notebook

__all__ = ["Notebook"]
