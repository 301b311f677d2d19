"""
Content wait utilities

The host renders the checklist table asynchronously, so the restyler polls
for it before extracting anything.
"""

import asyncio
import logging
from typing import Any, Optional

from .error_handler import ContentTimeoutError

logger = logging.getLogger(__name__)


class ContentWaiter:
    """Poll the document until ``selector`` exists."""

    def __init__(
        self,
        document,
        selector: str,
        interval: float = 0.1,
        timeout: Optional[float] = 30.0,
    ):
        """
        Args:
            document: HostDocument to poll
            selector: Locator of the source structure
            interval: Seconds between checks
            timeout: Seconds before giving up; None or 0 waits forever
        """
        self.document = document
        self.selector = selector
        self.interval = interval
        self.timeout = timeout or None
        self.attempts = 0

    async def wait(self) -> Any:
        """
        Resolve with the element handle once the structure exists.

        Raises:
            ContentTimeoutError: if ``timeout`` elapses first
        """
        loop = asyncio.get_running_loop()
        start_time = loop.time()
        self.attempts = 0

        while True:
            self.attempts += 1
            element = await self.document.query(self.selector)
            if element is not None:
                logger.debug(f"{self.selector} found after {self.attempts} check(s)")
                return element

            if self.timeout is not None and loop.time() - start_time >= self.timeout:
                logger.debug(f"Gave up on {self.selector} after {self.attempts} check(s)")
                raise ContentTimeoutError(self.selector, self.timeout)

            await asyncio.sleep(self.interval)
