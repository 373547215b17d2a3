"""
Exceptions raised by the gazetteer module.
"""


class GazetteerError(Exception):
    """The gazetteer service rejected a request or returned unusable data."""


class NetworkError(GazetteerError):
    """The gazetteer service could not be reached or answered with an HTTP error."""
