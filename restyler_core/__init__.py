"""
restyler_core package: restyles a host application's checklist table into
panels and keeps it restyled while the host re-renders it.

Usage:
    from restyler_core import ChecklistOrchestrator, PlaywrightDocument

    orchestrator = ChecklistOrchestrator(PlaywrightDocument(page))
    await orchestrator.start()
"""
from .config import Config, config
from .cosmetics import CosmeticAdjuster, path_equals, path_startswith
from .debounce import Debouncer
from .document import HostDocument, PlaywrightDocument
from .error_handler import (
    ContentTimeoutError,
    DataModelError,
    RestylerError,
    SlotResolutionError,
    WatcherSetupError,
)
from .extractor import ChecklistExtractor
from .models import ChecklistAction, ChecklistItem, SubmissionStatus
from .orchestrator import ChecklistOrchestrator, RenderState
from .renderer import ChecklistRenderer
from .waiter import ContentWaiter
from .watcher import ChangeWatcher

__all__ = [
    # Core
    "Config",
    "config",
    "ChecklistOrchestrator",
    "RenderState",
    # Pipeline
    "ContentWaiter",
    "ChecklistExtractor",
    "ChecklistRenderer",
    "ChangeWatcher",
    "Debouncer",
    "CosmeticAdjuster",
    "path_equals",
    "path_startswith",
    # Document
    "HostDocument",
    "PlaywrightDocument",
    # Model
    "ChecklistItem",
    "ChecklistAction",
    "SubmissionStatus",
    # Errors
    "RestylerError",
    "DataModelError",
    "SlotResolutionError",
    "WatcherSetupError",
    "ContentTimeoutError",
]
