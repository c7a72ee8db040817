from typing import Protocol

from placefinder.core.config import logger


class LocationSource(Protocol):
    """Platform side of location access: permission and the update stream."""

    def request_authorization(self) -> None: ...

    def start_updates(self) -> None: ...

    def stop_updates(self) -> None: ...


class BrowserLocationSource:
    """
    Location source driven by the browser's geolocation API.

    The server cannot start or stop the browser's position watch directly.
    It records the desired state instead, and the page script clears its
    watch once `updates_active` comes back False in an API response.
    """

    def __init__(self) -> None:
        self.authorization_requested = False
        self.updates_active = False

    def request_authorization(self) -> None:
        logger.debug("Location authorization requested from browser.")
        self.authorization_requested = True

    def start_updates(self) -> None:
        logger.debug("Browser location updates started.")
        self.updates_active = True

    def stop_updates(self) -> None:
        if self.updates_active:
            logger.debug("Browser location updates stopped.")
        self.updates_active = False
