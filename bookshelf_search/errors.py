# bookshelf_search/errors.py
import builtins


class BookshelfError(Exception):
    """Base class for every failure the command runner reports."""


class ConfigurationError(BookshelfError):
    pass


class ConnectionError(BookshelfError, builtins.ConnectionError):
    """The Elasticsearch client handle could not be built or reached."""


class ServiceQueryError(BookshelfError):
    """An index-existence check failed on the service side."""


class FileReadError(BookshelfError):
    pass


class IndexCreationError(BookshelfError):
    def __init__(self, index: str, message: str):
        super().__init__(f"Error creating the index [{index}]: {message}")
        self.index = index


class DocumentInsertError(BookshelfError):
    pass


class SearchError(BookshelfError):
    pass


class MappingFetchError(BookshelfError):
    pass
