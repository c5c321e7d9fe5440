class UriHelperError(Exception):
    """Base class for errors raised by urihelper."""


class ConfigurationError(UriHelperError):
    """The host supplied a base URI that cannot be used."""


class InvalidArgument(UriHelperError, ValueError):
    """A caller passed a URI that breaks an operation's contract."""
