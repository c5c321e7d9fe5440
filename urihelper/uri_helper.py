from typing import Optional

from urihelper.services import base_uri_service
from urihelper.services import interception_service
from urihelper.services import location_service
from urihelper.services.host_bridge import HostBridge
from urihelper.state import (
    ListenerHandle,
    LocationChangedCallback,
    NavigationState,
    default_state,
)
from urihelper.utils.base_relative_path import to_base_relative_path


class UriHelper:
    """
    Tracks the browsing context's location and converts between absolute
    URIs and paths relative to the page's base URI.

    Helpers built without an explicit state share default_state, so
    creating more than one is fine: they see the same navigation state.
    """

    def __init__(
        self, bridge: HostBridge, state: Optional[NavigationState] = None
    ):
        self.bridge = bridge
        self.state = state if state is not None else default_state

    def add_listener(
        self, callback: LocationChangedCallback
    ) -> ListenerHandle:
        """
        Register callback(new_absolute_uri) for location changes. The first
        registration enables navigation interception in the host.
        """
        return interception_service.add_listener(
            self.state, self.bridge, callback
        )

    def remove_listener(self, handle: ListenerHandle) -> None:
        interception_service.remove_listener(self.state, handle)

    def dispatch(self, new_absolute_uri: str) -> None:
        interception_service.dispatch(self.state, new_absolute_uri)

    def get_base_uri_prefix(self) -> str:
        return base_uri_service.get_base_uri_prefix(self.state, self.bridge)

    def get_absolute_uri(self) -> str:
        return location_service.get_absolute_uri(self.state, self.bridge)

    def to_absolute_uri(self, relative_uri: str) -> str:
        return base_uri_service.to_absolute_uri(
            self.state, self.bridge, relative_uri
        )

    def to_base_relative_path(
        self, base_uri_prefix: str, absolute_uri: str
    ) -> str:
        return to_base_relative_path(base_uri_prefix, absolute_uri)

    @property
    def interception_armed(self) -> bool:
        return self.state.interception_armed
