import base64
import binascii
import logging
import ssl
from typing import Any, Callable, Optional

import requests
from requests.adapters import HTTPAdapter

from urihelper import settings

logger = logging.getLogger(__name__)


class HostBridge:
    """
    The functions the browsing context's host makes available to us.
    Each call is a synchronous round trip returning a single value.
    """

    def get_location_href(self) -> str:
        raise NotImplementedError

    def get_base_uri(self) -> str:
        raise NotImplementedError

    def enable_navigation_interception(self) -> None:
        raise NotImplementedError


class RegisteredFunctionBridge(HostBridge):
    """
    Calls host functions registered by name, e.g.
    'urihelper.uri_helper.UriHelper.getLocationHref'.
    """

    def __init__(
        self,
        invoke: Callable[[str], Any],
        function_prefix: Optional[str] = None,
    ):
        self._invoke = invoke
        self.function_prefix = function_prefix or settings.FUNCTION_PREFIX

    def function_name(self, name: str) -> str:
        return f"{self.function_prefix}.{name}"

    def get_location_href(self) -> str:
        return self._invoke(self.function_name("getLocationHref"))

    def get_base_uri(self) -> str:
        return self._invoke(self.function_name("getBaseURI"))

    def enable_navigation_interception(self) -> None:
        # The host registers this function under its historical spelling.
        self._invoke(self.function_name("enableNavigationInteception"))


class _SSLContextAdapter(HTTPAdapter):
    def __init__(self, ssl_context=None, **kwargs):
        self.ssl_context = ssl_context
        super().__init__(**kwargs)

    def init_poolmanager(self, *args, **kwargs):
        kwargs["ssl_context"] = self.ssl_context
        return super().init_poolmanager(*args, **kwargs)

    def proxy_manager_for(self, *args, **kwargs):
        kwargs["ssl_context"] = self.ssl_context
        return super().proxy_manager_for(*args, **kwargs)


def load_ca_data(raw):
    """
    HOST_BRIDGE_TLS_CA holds a PEM chain, inline with literal '\\n' or
    base64-encoded.
    """
    pem = raw.strip().replace("\\n", "\n")
    if "BEGIN CERTIFICATE" not in pem:
        try:
            pem = base64.b64decode(pem, validate=True).decode("ascii")
        except (binascii.Error, UnicodeDecodeError):
            pem = ""
    if "BEGIN CERTIFICATE" not in pem:
        raise ValueError("HOST_BRIDGE_TLS_CA is not a PEM certificate chain")
    return pem


def bridge_session(tls_ca=None) -> requests.Session:
    """Build a requests.Session, pinned to tls_ca when one is given."""
    session = requests.Session()
    if tls_ca:
        ctx = ssl.create_default_context()
        ctx.load_verify_locations(cadata=load_ca_data(tls_ca))
        session.mount("https://", _SSLContextAdapter(ctx))
    return session


class HttpHostBridge(RegisteredFunctionBridge):
    """Invokes host functions over HTTP: POST {base_url}/invoke."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        function_prefix: Optional[str] = None,
    ):
        super().__init__(self._post_invoke, function_prefix)
        self.base_url = (base_url or settings.HOST_BRIDGE_URL).rstrip("/")
        self.session = session or bridge_session(settings.HOST_BRIDGE_TLS_CA)
        self.timeout = (
            timeout if timeout is not None else settings.HOST_BRIDGE_TIMEOUT
        )

    def _post_invoke(self, function_name: str):
        logger.debug("[bridge] invoking %s", function_name)
        resp = self.session.post(
            f"{self.base_url}/invoke",
            json={"function": function_name},
            timeout=self.timeout,
        )
        resp.raise_for_status()
        if not resp.content:
            return None
        body = resp.json()
        if not isinstance(body, dict):
            raise ValueError(
                f"{function_name} returned {body!r}, expected an object"
            )
        return body.get("result")
