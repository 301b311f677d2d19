"""
Checklist renderer

Appends one panel per item to the target section and fills its slots.
Host nodes (description content, action controls) are moved into the
panels with ``insert_element``; they are never cloned, so the handlers the
host bound to them keep working.
"""

import logging
from typing import Any, Dict, List, Optional

from .config import Config, config as default_config
from .contract import (
    PANEL_CLASS,
    SLOT_ACTION,
    SLOT_DESCRIPTION,
    SLOT_ICON,
    SLOT_PREFIXES,
    SLOT_TITLE,
    slot_class,
    slot_selector,
)
from .error_handler import SlotResolutionError
from .models import ChecklistAction, ChecklistItem
from .templates import ICON_PENDING, ICON_SUCCESS, panel_html, title_html

logger = logging.getLogger(__name__)


class ChecklistRenderer:
    def __init__(self, document, config: Optional[Config] = None):
        self.document = document
        self.config = config or default_config

    async def render(self, items: List[ChecklistItem]) -> int:
        """
        Render every item, in order, into the target section.

        Returns:
            Number of panels rendered

        Raises:
            SlotResolutionError: if the section or a panel slot is missing
        """
        section = await self.document.query(self.config.selector(self.config.section_id))
        if section is None:
            raise SlotResolutionError(f"Cannot find target section #{self.config.section_id}")

        removed = await self._remove_stale_panels(section)
        if removed:
            logger.debug(f"Removed {removed} panel(s) left by a previous pass")

        for index, item in enumerate(items):
            await self.document.insert_html(section, "beforeend", panel_html(index))
            panel = await self.document.last_element_child(section)
            slots = await self._resolve_slots(panel, index)

            await self._insert_icon(slots[SLOT_ICON], item)
            if item.title:
                await self._insert_title(slots[SLOT_TITLE], item)
            if item.action is not None:
                await self._insert_action(slots[SLOT_ACTION], item.action)
            if item.description_node is not None:
                await self.document.insert_element(
                    slots[SLOT_DESCRIPTION], "afterbegin", item.description_node
                )

        logger.debug(f"Rendered {len(items)} panel(s) into #{self.config.section_id}")
        return len(items)

    async def remove_source(self, table: Any) -> None:
        """Detach the now-empty source table from its parent."""
        await self.document.remove(table)

    async def _resolve_slots(self, panel: Any, index: int) -> Dict[str, Any]:
        if panel is None:
            raise SlotResolutionError(f"Panel {index} was not inserted", index=index)
        slots = {}
        for prefix in SLOT_PREFIXES:
            slot = await self.document.query(slot_selector(prefix, index), root=panel)
            if slot is None:
                raise SlotResolutionError(
                    f"Cannot find slot .{slot_class(prefix, index)} in panel {index}",
                    slot=prefix,
                    index=index,
                )
            slots[prefix] = slot
        return slots

    async def _insert_icon(self, slot: Any, item: ChecklistItem) -> None:
        icon = ICON_SUCCESS if item.is_received else ICON_PENDING
        await self.document.insert_html(slot, "afterbegin", icon)

    async def _insert_title(self, slot: Any, item: ChecklistItem) -> None:
        await self.document.insert_html(
            slot, "afterbegin", title_html(item.title, item.title_is_required)
        )

    async def _insert_action(self, slot: Any, action: ChecklistAction) -> None:
        """
        Move the controls into the action slot.

        Items from ChecklistExtractor always carry a correlation id and get
        the wrapper row. Items built by callers of ``render()`` may leave it
        out, for controls whose handlers do not look up a host row; those
        controls go straight into the slot.
        """
        target = slot
        if action.correlation_id:
            # host handlers resolve the clicked control through its ancestor row
            row = await self.document.create_element(
                "tr",
                attributes={self.config.correlation_attribute: action.correlation_id},
                style={"display": "block"},
            )
            target = await self.document.insert_element(slot, "afterbegin", row)

        for control in action.controls:
            await self.document.insert_element(target, "beforeend", control)

    async def _remove_stale_panels(self, section: Any) -> int:
        removed = 0
        for child in await self.document.children(section):
            if await self.document.has_class(child, PANEL_CLASS):
                await self.document.remove(child)
                removed += 1
        return removed
