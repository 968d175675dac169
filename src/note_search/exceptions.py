"""
Custom exception hierarchy for note search.

All exceptions inherit from NoteSearchError base class.
"""


class NoteSearchError(Exception):
    """Base exception for all note search errors"""
    pass


class SearchError(NoteSearchError):
    """Error during search operations"""
    pass


class SearchCancelledError(SearchError):
    """Result requested from a cancelled background search"""
    pass


class DocumentStoreError(NoteSearchError):
    """Error in the document store collaborator"""
    pass


class FileHandlerError(NoteSearchError):
    """Error during file operations"""
    pass


class ConfigurationError(NoteSearchError):
    """Error in configuration"""
    pass
