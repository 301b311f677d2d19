"""
Restyle CLI

Opens a host page in Chromium, restyles its application checklist and keeps
re-rendering it while the host re-renders the container.

Usage:
    restyler https://apply.example.edu/Apply/Application/Application
    restyler saved_page.html --html-out restyled.html
    restyler https://apply.example.edu/... --watch 120 --screenshot checklist.png
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from playwright.async_api import Error as PlaywrightError

from ..browser_setup import open_page, resolve_target
from ..config import config
from ..diagnostics import get_logger, set_debug
from ..document import PlaywrightDocument
from ..error_handler import create_error_response, format_error_for_logging
from ..orchestrator import ChecklistOrchestrator


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="restyler",
        description="Restyle the application checklist of a host page"
    )
    parser.add_argument("target", help="Page URL or path to a saved HTML file")
    parser.add_argument("-w", "--watch", type=float, default=0.0,
                        help="Keep re-rendering host changes for this many seconds")
    parser.add_argument("-s", "--screenshot", help="Write a full-page screenshot here")
    parser.add_argument("-o", "--html-out", help="Write the restyled HTML here")
    parser.add_argument("--headed", action="store_true", help="Show the browser window")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser


async def run(args: argparse.Namespace) -> int:
    logger = get_logger("restyler_core")
    set_debug(args.debug or config.enable_debug)

    url = resolve_target(args.target)
    async with open_page(config, headless=False if args.headed else None) as page:
        try:
            await page.goto(url, wait_until="domcontentloaded")
        except PlaywrightError as e:
            logger.error(format_error_for_logging(e, "navigation"))
            print(json.dumps(create_error_response(e, "navigation"), indent=2))
            return 1

        orchestrator = ChecklistOrchestrator(PlaywrightDocument(page), config)
        rendered = await orchestrator.start()

        if args.watch > 0:
            logger.info(f"Watching for host re-renders for {args.watch:.0f}s")
            await asyncio.sleep(args.watch)
        await orchestrator.stop()

        if args.screenshot:
            await page.screenshot(path=args.screenshot, full_page=True)
            logger.info(f"Screenshot saved to {args.screenshot}")
        if args.html_out:
            with open(args.html_out, "w", encoding="utf-8") as f:
                f.write(await page.content())
            logger.info(f"Restyled HTML saved to {args.html_out}")

    print(json.dumps(orchestrator.summary(), indent=2))
    # later re-renders may fail while watching; the initial pass decides
    return 0 if rendered else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        return asyncio.run(run(args))
    except KeyboardInterrupt:
        return 130


if __name__ == "__main__":
    sys.exit(main())
