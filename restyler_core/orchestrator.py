"""
Checklist orchestrator

Drives the render pass (wait -> extract -> render -> remove source) and
re-runs it whenever the host re-renders its container.

States:
    INITIALIZING -> RENDERING -> RENDERED (or FAILED)
    RENDERED/FAILED -> RENDERING on a debounced host change

Tracking is off for the whole duration of a pass: the pass's own
mutations (detaching the source table in particular) would otherwise be
reported by the watcher and start the next pass, forever.

Usage:
    orchestrator = ChecklistOrchestrator(PlaywrightDocument(page))
    await orchestrator.start()
"""

import logging
from enum import Enum
from typing import Any, Dict, List, Optional

from .config import Config, config as default_config
from .cosmetics import CosmeticAdjuster, RoutePredicate, path_equals
from .debounce import Debouncer
from .error_handler import format_error_for_logging
from .extractor import ChecklistExtractor
from .models import ChecklistItem
from .renderer import ChecklistRenderer
from .waiter import ContentWaiter
from .watcher import ChangeWatcher

logger = logging.getLogger(__name__)


class RenderState(str, Enum):
    INITIALIZING = "initializing"
    RENDERING = "rendering"
    RENDERED = "rendered"
    FAILED = "failed"


class ChecklistOrchestrator:
    def __init__(
        self,
        document,
        config: Optional[Config] = None,
        cosmetics: Optional[Any] = None,
        route_predicate: Optional[RoutePredicate] = None,
    ):
        """
        Args:
            document: HostDocument of the host page
            config: Naming contract and timings (defaults to the global config)
            cosmetics: One-shot page styler (defaults to CosmeticAdjuster)
            route_predicate: Decides from the page path whether the page
                layout (title, footer) applies
        """
        self.document = document
        self.config = config or default_config
        self.cosmetics = cosmetics if cosmetics is not None else CosmeticAdjuster(document)
        self.route_predicate = route_predicate or path_equals(self.config.application_path)

        self.waiter = ContentWaiter(
            document,
            self.config.selector(self.config.table_id),
            interval=self.config.poll_interval,
            timeout=self.config.wait_timeout,
        )
        self.extractor = ChecklistExtractor(document, self.config)
        self.renderer = ChecklistRenderer(document, self.config)
        self.watcher = ChangeWatcher(
            document, self.config.selector(self.config.container_id), self.notify_change
        )
        self.debouncer = Debouncer(self.config.debounce_window, self.rerender)

        self.state = RenderState.INITIALIZING
        self.tracking = False
        self.reactive = False
        self.startup_styles_applied = False
        self.first_render_done = False
        self.render_count = 0
        self.failed_passes = 0
        self.items: List[ChecklistItem] = []
        self.last_error: Optional[Exception] = None

    async def start(self) -> bool:
        """
        Initial run: subscribe to host changes, style the page once, render.

        Returns:
            True if the initial pass rendered the checklist
        """
        await self.document.wait_until_ready()
        self.reactive = await self.watcher.subscribe()
        await self._apply_startup_styles()
        return await self.run_pass()

    async def run_pass(self) -> bool:
        """One full render pass. Errors are reported, never raised."""
        self.state = RenderState.RENDERING
        await self._set_tracking(False)

        try:
            table = await self.waiter.wait()
            items = await self.extractor.extract(table)
            await self.renderer.render(items)
            await self.renderer.remove_source(table)
            await self._apply_page_layout()
        except Exception as e:
            # RestylerError or a browser error; either way the loop must go on
            self._record_failure(e)
            rendered = False
        else:
            self.items = items
            self.render_count += 1
            self.last_error = None
            self.state = RenderState.RENDERED
            logger.info(f"Rendered {len(items)} checklist item(s) (pass {self.render_count})")
            rendered = True
        finally:
            await self.document.release_handles()
            # only host changes from here on
            await self._set_tracking(True)
        return rendered

    def notify_change(self) -> None:
        """Watcher callback: coalesce host changes into one re-render."""
        if not self.tracking:
            return
        self.debouncer.schedule()

    async def rerender(self) -> bool:
        if self.state is RenderState.RENDERING:
            logger.debug("Render pass already running, ignoring host change")
            return False
        logger.info("Host re-rendered the checklist container, rendering again")
        return await self.run_pass()

    async def stop(self) -> None:
        await self._set_tracking(False)
        self.debouncer.cancel()
        await self.debouncer.wait_idle()

    def summary(self) -> Dict[str, Any]:
        return {
            "state": self.state.value,
            "reactive": self.reactive,
            "render_count": self.render_count,
            "failed_passes": self.failed_passes,
            "items": [item.to_dict() for item in self.items],
            "error": str(self.last_error) if self.last_error else None,
        }

    def _record_failure(self, error: Exception) -> None:
        self.failed_passes += 1
        self.last_error = error
        self.state = RenderState.FAILED
        logger.error(format_error_for_logging(error, "render_pass"))

    async def _set_tracking(self, enabled: bool) -> None:
        self.tracking = enabled
        await self.watcher.set_enabled(enabled)

    async def _apply_startup_styles(self) -> None:
        if self.startup_styles_applied:
            return
        await self.cosmetics.apply_startup_styles()
        self.startup_styles_applied = True

    async def _apply_page_layout(self) -> None:
        if self.first_render_done:
            return
        if not self.route_predicate(await self.document.pathname()):
            return
        await self.cosmetics.apply_page_layout()
        self.first_render_done = True
