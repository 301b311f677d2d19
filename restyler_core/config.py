#!/usr/bin/env python3
from dataclasses import dataclass
import os
from typing import Optional
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Config:
    """Restyler configuration"""
    # Naming contract with the host page
    container_id: str = os.getenv("RESTYLER_CONTAINER_ID", "supplemental-items")
    section_id: str = os.getenv("RESTYLER_SECTION_ID", "sectionSupplemental")
    table_id: str = os.getenv("RESTYLER_TABLE_ID", "supplementalTable")
    correlation_attribute: str = os.getenv("RESTYLER_CORRELATION_ATTRIBUTE", "data-submissionid")
    required_class: str = os.getenv("RESTYLER_REQUIRED_CLASS", "required")
    received_status: str = os.getenv("RESTYLER_RECEIVED_STATUS", "received")

    # Page layout adjustments only happen on this route
    application_path: str = os.getenv("RESTYLER_APPLICATION_PATH", "/Apply/Application/Application")

    # Timing
    poll_interval_ms: int = int(os.getenv("RESTYLER_POLL_INTERVAL_MS", "100"))
    wait_timeout_ms: int = int(os.getenv("RESTYLER_WAIT_TIMEOUT_MS", "30000"))
    debounce_ms: int = int(os.getenv("RESTYLER_DEBOUNCE_MS", "300"))

    # Browser
    headless: bool = os.getenv("RESTYLER_HEADLESS", "true").lower() == "true"
    navigation_timeout_ms: int = int(os.getenv("RESTYLER_NAVIGATION_TIMEOUT_MS", "30000"))
    enable_debug: bool = os.getenv("RESTYLER_DEBUG", "false").lower() == "true"

    @property
    def poll_interval(self) -> float:
        return self.poll_interval_ms / 1000

    @property
    def wait_timeout(self) -> Optional[float]:
        # 0 or negative means wait forever
        if self.wait_timeout_ms <= 0:
            return None
        return self.wait_timeout_ms / 1000

    @property
    def debounce_window(self) -> float:
        return self.debounce_ms / 1000

    def selector(self, element_id: str) -> str:
        return f"#{element_id}"

config = Config()
