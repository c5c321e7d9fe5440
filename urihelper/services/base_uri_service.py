import logging
from urllib.parse import urlsplit

from urihelper.errors import ConfigurationError, InvalidArgument
from urihelper.services.host_bridge import HostBridge
from urihelper.state import NavigationState
from urihelper.utils.base_uri_prefix import to_base_uri_prefix
from urihelper.utils.resolve_reference import has_authority, resolve_reference

logger = logging.getLogger(__name__)

# Schemes whose URIs always name a host.
NETWORK_SCHEMES = ("http", "https", "ws", "wss", "ftp")


def parse_base_uri(base_uri_prefix: str):
    """
    Parse a non-empty base URI prefix, raising ConfigurationError when it
    isn't an absolute URI.
    """
    try:
        parsed = urlsplit(base_uri_prefix)
        # Accessing the port validates it.
        parsed.port
    except ValueError as e:
        raise ConfigurationError(
            f"The base URI '{base_uri_prefix}' is malformed: {e}"
        ) from e

    if not parsed.scheme:
        raise ConfigurationError(
            f"The base URI '{base_uri_prefix}' is not an absolute URI."
        )

    # A base like 'https://example.com' (no path) leaves 'https:/' behind.
    if not parsed.netloc and (
        parsed.scheme in NETWORK_SCHEMES
        or base_uri_prefix.lower() == parsed.scheme + ":/"
    ):
        raise ConfigurationError(
            f"The base URI '{base_uri_prefix}' has no host."
        )
    return parsed


def ensure_base_uri_populated(state: NavigationState, bridge: HostBridge):
    # The base URI is fixed for the lifetime of the page, so cache it.
    if state.base_uri_prefix is not None:
        return

    raw_base_uri = bridge.get_base_uri()
    base_uri_prefix = to_base_uri_prefix(raw_base_uri)
    if base_uri_prefix:
        base_uri = parse_base_uri(base_uri_prefix)
    else:
        base_uri = urlsplit("")

    state.base_uri_prefix = base_uri_prefix
    state.base_uri = base_uri
    logger.info("[navigation] base URI prefix is '%s'", base_uri_prefix)


def get_base_uri_prefix(state: NavigationState, bridge: HostBridge) -> str:
    ensure_base_uri_populated(state, bridge)
    return state.base_uri_prefix


def to_absolute_uri(
    state: NavigationState, bridge: HostBridge, relative_uri: str
) -> str:
    """
    Resolve relative_uri against the page's base URI, following the usual
    rules for relative references and '.'/'..' segments.
    """
    ensure_base_uri_populated(state, bridge)
    if not state.base_uri_prefix:
        raise ConfigurationError(
            "The host did not supply a base URI to resolve against."
        )

    try:
        return resolve_reference(
            state.base_uri,
            has_authority(state.base_uri_prefix),
            relative_uri,
        )
    except ValueError as e:
        raise InvalidArgument(
            f"The URI '{relative_uri}' is malformed: {e}"
        ) from e
