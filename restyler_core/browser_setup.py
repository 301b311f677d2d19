#!/usr/bin/env python3
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from .config import Config, config as default_config


def resolve_target(target: str) -> str:
    """Local HTML files become file:// URLs, everything else is used as-is."""
    if "://" in target:
        return target
    path = Path(target)
    if path.exists():
        return path.resolve().as_uri()
    return target


@asynccontextmanager
async def open_page(config: Optional[Config] = None, headless: Optional[bool] = None):
    """Launch Chromium and yield a fresh page; the browser is closed on exit."""
    from playwright.async_api import async_playwright

    config = config or default_config
    launch_args = {
        "headless": config.headless if headless is None else headless,
        "args": [
            "--no-sandbox",
            "--disable-dev-shm-usage",
        ],
    }

    async with async_playwright() as playwright:
        browser = await playwright.chromium.launch(**launch_args)
        try:
            context = await browser.new_context(viewport={"width": 1366, "height": 900})
            page = await context.new_page()
            page.set_default_navigation_timeout(config.navigation_timeout_ms)
            yield page
        finally:
            await browser.close()
