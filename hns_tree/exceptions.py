"""Errors raised by hns-tree."""


class HnsTreeError(Exception):
    """Base class for all hns-tree errors."""


class FetchError(HnsTreeError):
    """Listing namespaces from the cluster failed."""


class SerializationError(HnsTreeError):
    """The forest could not be marshaled to a structured format."""
