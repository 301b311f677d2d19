"""
Container change watcher.

Subscribes to child-list changes of the host container (not the subtree,
not attributes) and forwards each notification to ``on_change``.
"""

import logging
from typing import Callable

from .error_handler import WatcherSetupError, format_error_for_logging

logger = logging.getLogger(__name__)


class ChangeWatcher:
    def __init__(self, document, selector: str, on_change: Callable[[], None]):
        self.document = document
        self.selector = selector
        self.on_change = on_change
        self.subscribed = False
        self.notifications = 0

    async def subscribe(self) -> bool:
        """
        Start observing the container.

        Returns:
            False when the container is missing; the restyler then runs
            without reacting to host re-renders.
        """
        try:
            if not await self.document.observe_child_list(self.selector, self._notify):
                raise WatcherSetupError(f"Cannot find container {self.selector} to observe")
        except WatcherSetupError as e:
            logger.error(format_error_for_logging(e, "watcher"))
            return False

        self.subscribed = True
        logger.debug(f"Watching {self.selector} for host re-renders")
        return True

    async def set_enabled(self, enabled: bool) -> None:
        """Mirror the tracking flag into the page."""
        if self.subscribed:
            await self.document.set_observer_enabled(enabled)

    def _notify(self) -> None:
        self.notifications += 1
        self.on_change()
