import logging

from urihelper.services.host_bridge import HostBridge
from urihelper.services.location_service import set_absolute_uri
from urihelper.state import (
    ArmState,
    ListenerHandle,
    LocationChangedCallback,
    NavigationState,
)

logger = logging.getLogger(__name__)


def ensure_navigation_interception_enabled(
    state: NavigationState, bridge: HostBridge
) -> None:
    """
    Arm the host's navigation interception unless it is already armed or
    being armed. A failed attempt is left in ARM_FAILED so the next call
    tries again; the bridge's error is re-raised as is.
    """
    if state.arm_state in (ArmState.ARMED, ArmState.ARMING):
        return

    retrying = state.arm_state is ArmState.ARM_FAILED
    state.arm_state = ArmState.ARMING
    try:
        bridge.enable_navigation_interception()
    except Exception:
        state.arm_state = ArmState.ARM_FAILED
        logger.warning("[navigation] enabling navigation interception failed")
        raise

    state.arm_state = ArmState.ARMED
    logger.info(
        "[navigation] navigation interception enabled%s",
        " after retry" if retrying else "",
    )


def add_listener(
    state: NavigationState,
    bridge: HostBridge,
    callback: LocationChangedCallback,
) -> ListenerHandle:
    ensure_navigation_interception_enabled(state, bridge)
    handle = ListenerHandle(callback)
    state.listeners.append(handle)
    return handle


def remove_listener(state: NavigationState, handle: ListenerHandle) -> None:
    # Interception stays armed even with no listeners left.
    for index, registered in enumerate(state.listeners):
        if registered is handle:
            del state.listeners[index]
            return


def dispatch(state: NavigationState, new_absolute_uri: str) -> None:
    """
    Called by the host when the browsing context's location changes.
    The cached location is updated before any listener runs.
    """
    set_absolute_uri(state, new_absolute_uri)
    logger.debug(
        "[navigation] location changed to %s, notifying %d listener(s)",
        new_absolute_uri,
        len(state.listeners),
    )
    for handle in list(state.listeners):
        handle(new_absolute_uri)
