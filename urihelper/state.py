# Navigation state for a single browsing context.
# There is only one browsing context per process in normal use, so
# default_state is shared by every UriHelper that isn't handed its own.
from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Callable, List, Optional
from urllib.parse import SplitResult

LocationChangedCallback = Callable[[str], None]


class ArmState(enum.Enum):
    UNARMED = "unarmed"
    ARMING = "arming"
    ARMED = "armed"
    ARM_FAILED = "arm_failed"


class ListenerHandle:
    """Registration token returned by add_listener; removal is by identity."""

    __slots__ = ("callback",)

    def __init__(self, callback: LocationChangedCallback):
        self.callback = callback

    def __call__(self, new_absolute_uri: str) -> None:
        self.callback(new_absolute_uri)

    def __repr__(self):
        return f"<ListenerHandle callback={self.callback!r}>"


@dataclass
class NavigationState:
    arm_state: ArmState = ArmState.UNARMED
    current_absolute_uri: Optional[str] = None
    listeners: List[ListenerHandle] = field(default_factory=list)
    base_uri_prefix: Optional[str] = None
    base_uri: Optional[SplitResult] = None

    @property
    def interception_armed(self) -> bool:
        return self.arm_state is ArmState.ARMED


default_state = NavigationState()
