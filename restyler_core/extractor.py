"""
Checklist extraction from the host's supplemental items table.

The table has three columns ("Item", "Submission Status", "Action") and
its rows are grouped in pairs: the first row carries title, status and
action controls, the second row carries the description.

Extraction only reads the document. Handles to the live nodes that will be
moved (description content, action controls) are captured on the items.
"""

import logging
from typing import Any, List, Optional

from .config import Config, config as default_config
from .error_handler import DataModelError
from .models import ChecklistAction, ChecklistItem, SubmissionStatus

logger = logging.getLogger(__name__)

TITLE_COLUMN = 0
STATUS_COLUMN = 1
ACTION_COLUMN = 2


class ChecklistExtractor:
    def __init__(self, document, config: Optional[Config] = None):
        self.document = document
        self.config = config or default_config

    async def extract(self, table: Any) -> List[ChecklistItem]:
        """
        Build the ordered item list from the source table.

        Raises:
            DataModelError: when the table does not have the two-rows-per-item shape
        """
        if table is None:
            raise DataModelError(f"Cannot find root element with id: {self.config.table_id}")

        body = await self._find_child(table, "TBODY")
        if body is None:
            raise DataModelError(
                f"Cannot build data model: #{self.config.table_id} has no TBODY"
            )

        rows = await self.document.children(body)
        if not rows:
            raise DataModelError("Cannot build data model: the table has no rows")
        if len(rows) % 2:
            raise DataModelError(
                f"Cannot build data model: {len(rows)} rows cannot be grouped in pairs"
            )

        items = []
        for index, start in enumerate(range(0, len(rows), 2)):
            items.append(await self._build_item(index, rows[start], rows[start + 1]))

        logger.debug(f"Extracted {len(items)} checklist item(s)")
        return items

    async def _build_item(self, index: int, first_row: Any, second_row: Any) -> ChecklistItem:
        cells = await self.document.children(first_row)
        if len(cells) <= ACTION_COLUMN:
            raise DataModelError(
                f"Cannot build data model: row pair {index} has {len(cells)} column(s), expected 3"
            )

        title_cell = cells[TITLE_COLUMN]
        raw_status = await self._text(cells[STATUS_COLUMN])

        return ChecklistItem(
            index=index,
            title=await self._text(title_cell),
            title_is_required=await self.document.has_class(title_cell, self.config.required_class),
            description=await self._text(second_row),
            description_node=await self._description_node(second_row),
            submission_status=SubmissionStatus.from_text(raw_status, self.config.received_status),
            raw_status=raw_status,
            action=await self._action(index, first_row, cells[ACTION_COLUMN]),
        )

    async def _action(self, index: int, row: Any, cell: Any) -> Optional[ChecklistAction]:
        if not await self._text(cell):
            return None

        correlation_id = await self.document.get_attribute(row, self.config.correlation_attribute)
        if not correlation_id:
            # host upload handlers look the row up by this attribute
            raise DataModelError(
                f"Cannot build data model: row pair {index} has an action "
                f"but no {self.config.correlation_attribute}"
            )

        controls = await self.document.children(cell)
        return ChecklistAction(controls=controls, correlation_id=correlation_id)

    async def _description_node(self, row: Any) -> Optional[Any]:
        cell = await self._find_child(row, "TD")
        if cell is None:
            return None
        return await self.document.first_element_child(cell)

    async def _find_child(self, node: Any, tag: str) -> Optional[Any]:
        for child in await self.document.children(node):
            if (await self.document.tag_name(child)).upper() == tag:
                return child
        return None

    async def _text(self, node: Any) -> str:
        return (await self.document.text_content(node)).strip()
