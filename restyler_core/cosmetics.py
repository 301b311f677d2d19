"""
One-shot page cosmetics.

Static restyling of page regions unrelated to the checklist: fonts, nav
bar, dashboard card, content width, application title and footer. None of
it depends on extracted data; every step is skipped when its element is
missing.
"""

import logging
from typing import Callable

from .templates import (
    APPLICATION_TITLE,
    FONT_STYLESHEETS,
    FOOTER,
    NAVBAR_STYLE,
    stylesheet_link,
)

logger = logging.getLogger(__name__)

RoutePredicate = Callable[[str], bool]


def path_equals(path: str) -> RoutePredicate:
    return lambda pathname: pathname == path


def path_startswith(prefix: str) -> RoutePredicate:
    return lambda pathname: pathname.startswith(prefix)


class CosmeticAdjuster:
    def __init__(self, document):
        self.document = document

    async def apply_startup_styles(self) -> None:
        await self._inject_styles()
        await self._navbar_styles()
        await self._dashboard_card_styles()
        await self._container_styles()

    async def apply_page_layout(self) -> bool:
        """
        Reorder the application nav, add the page title and the footer.

        Returns:
            True when the layout was applied
        """
        content = await self.document.query("#app-details")
        if content is None:
            logger.debug("No #app-details on this page, skipping page layout")
            return False

        wrapper = await self.document.parent(content)
        app_nav = None
        title_tag = None
        for child in await self.document.children(wrapper):
            if app_nav is None and await self.document.has_class(child, "app-nav"):
                app_nav = child
            if title_tag is None and (await self.document.tag_name(child)).upper() == "H1":
                title_tag = child

        if app_nav is not None:
            for entry in reversed(await self.document.children(app_nav)):
                await self.document.insert_element(app_nav, "beforeend", entry)

        if title_tag is not None:
            await self.document.insert_html(title_tag, "beforebegin", APPLICATION_TITLE)
            await self.document.set_style(title_tag, "fontSize", "22px")

        await self.document.insert_html(wrapper, "afterend", FOOTER)
        logger.debug("Applied application page layout")
        return True

    async def _inject_styles(self) -> None:
        head = await self.document.query("head")
        if head is None:
            return
        for href in FONT_STYLESHEETS:
            await self.document.insert_html(head, "beforeend", stylesheet_link(href))
        await self.document.insert_html(head, "beforeend", NAVBAR_STYLE)

    async def _navbar_styles(self) -> None:
        nav_items = await self.document.query("#elcn-nav-main")
        if nav_items is not None:
            await self.document.remove_class(nav_items, "navbar-left")
            await self.document.add_class(nav_items, "navbar-right")

        logo = await self.document.query("a.navbar-brand, a.recruit-navbar-logo")
        if logo is not None:
            await self.document.set_style(logo, "scale", "0.8")
            await self.document.set_style(logo, "height", "55px")

    async def _dashboard_card_styles(self) -> None:
        card = await self.document.query(".myaccount-contact-info")
        if card is not None:
            await self.document.remove_class(card, "elcn-colored-top")

    async def _container_styles(self) -> None:
        content = await self.document.query("#app-details")
        if content is None:
            return
        column = await self.document.first_element_child(content)
        if column is not None:
            await self.document.remove_class(column, "col-md-9")
            await self.document.add_class(column, "col-md-12")
