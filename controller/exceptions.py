"""Custom exception classes for the Controller."""


class NamespaceException(Exception):
    """
    Base exception class for all namespace errors.
    """
    pass


class StoreError(NamespaceException):
    """
    Raised when the metadata store fails to read or write a record.
    """
    pass


class StoreUnavailableError(NamespaceException):
    """
    Raised when an operation could not complete because the store failed.
    """
    pass


class MalformedPathError(NamespaceException):
    """
    Raised when a path cannot be decomposed into segments.
    """
    pass


class PathAlreadyExistsError(NamespaceException):
    """
    Raised when creating a file or directory at a path that already exists.
    """
    pass


class PathNotFoundError(NamespaceException):
    """
    Raised when a requested path has no metadata record.
    """
    pass


class AncestorNotFoundError(NamespaceException):
    """
    Raised when an ancestor directory is missing and parents were not requested.
    """
    pass


class AncestorIsFileError(NamespaceException):
    """
    Raised when a component of the ancestor chain is a file.
    """
    pass
