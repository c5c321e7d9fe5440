from urihelper.services.host_bridge import HostBridge
from urihelper.state import NavigationState


def get_absolute_uri(state: NavigationState, bridge: HostBridge) -> str:
    if state.current_absolute_uri is None:
        state.current_absolute_uri = bridge.get_location_href()
    return state.current_absolute_uri


def set_absolute_uri(state: NavigationState, new_absolute_uri: str) -> None:
    # Trusted verbatim from the host.
    state.current_absolute_uri = new_absolute_uri
