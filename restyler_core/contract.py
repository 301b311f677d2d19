"""
Naming contract between the renderer and its panel templates.

Each rendered panel exposes four slots addressed by ``<prefix>-<index>``.
"""

SLOT_ICON = "pg-checklist-icon"
SLOT_TITLE = "pg-checklist-item-title-container"
SLOT_ACTION = "pg-action-container"
SLOT_DESCRIPTION = "pg-description-row"

SLOT_PREFIXES = (SLOT_ICON, SLOT_TITLE, SLOT_ACTION, SLOT_DESCRIPTION)

PANEL_CLASS = "pg-checklist-panel"


def slot_class(prefix: str, index: int) -> str:
    return f"{prefix}-{index}"


def slot_selector(prefix: str, index: int) -> str:
    return f".{slot_class(prefix, index)}"
