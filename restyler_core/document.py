"""
Host document adapter.

All DOM reads and writes of the restyler go through ``HostDocument``. The
Playwright implementation works on ``ElementHandle`` objects, so moving a
handle relocates the real node and every listener the host attached to it.
Nothing here ever clones a node.
"""

import logging
from typing import Any, Callable, Dict, List, Optional, Protocol

from playwright.async_api import Error as PlaywrightError

logger = logging.getLogger(__name__)

OBSERVER_BINDING = "__restylerContainerChanged"
OBSERVER_FLAG = "__restylerTracking"
OBSERVER_HANDLE = "__restylerObserver"


class HostDocument(Protocol):
    """Operations the restyler needs from the hosted page."""

    async def query(self, selector: str, root: Any = None) -> Optional[Any]: ...

    async def children(self, node: Any) -> List[Any]: ...

    async def tag_name(self, node: Any) -> str: ...

    async def text_content(self, node: Any) -> str: ...

    async def get_attribute(self, node: Any, name: str) -> Optional[str]: ...

    async def has_class(self, node: Any, name: str) -> bool: ...

    async def first_element_child(self, node: Any) -> Optional[Any]: ...

    async def last_element_child(self, node: Any) -> Optional[Any]: ...

    async def parent(self, node: Any) -> Optional[Any]: ...

    async def insert_html(self, node: Any, position: str, markup: str) -> None: ...

    async def insert_element(self, node: Any, position: str, element: Any) -> Any: ...

    async def create_element(
        self,
        tag: str,
        attributes: Optional[Dict[str, str]] = None,
        style: Optional[Dict[str, str]] = None,
    ) -> Any: ...

    async def remove(self, node: Any) -> None: ...

    async def add_class(self, node: Any, name: str) -> None: ...

    async def remove_class(self, node: Any, name: str) -> None: ...

    async def set_style(self, node: Any, prop: str, value: str) -> None: ...

    async def pathname(self) -> str: ...

    async def wait_until_ready(self) -> None: ...

    async def observe_child_list(self, selector: str, callback: Callable[[], None]) -> bool: ...

    async def set_observer_enabled(self, enabled: bool) -> None: ...

    async def release_handles(self) -> None: ...


class PlaywrightDocument:
    """``HostDocument`` backed by a Playwright async ``Page``."""

    def __init__(self, page):
        self.page = page
        self._callbacks: List[Callable[[], None]] = []
        self._binding_installed = False
        # element handles handed out since the last release_handles()
        self._handles: List[Any] = []

    async def query(self, selector: str, root: Any = None) -> Optional[Any]:
        if root is not None:
            return self._track(await root.query_selector(selector))
        return self._track(await self.page.query_selector(selector))

    async def children(self, node: Any) -> List[Any]:
        array = await node.evaluate_handle("el => Array.from(el.children)")
        try:
            properties = await array.get_properties()
            keys = sorted((k for k in properties if k.isdigit()), key=int)
            return [self._track(properties[k].as_element()) for k in keys]
        finally:
            await array.dispose()

    async def tag_name(self, node: Any) -> str:
        return await node.evaluate("el => el.tagName")

    async def text_content(self, node: Any) -> str:
        return (await node.text_content()) or ""

    async def get_attribute(self, node: Any, name: str) -> Optional[str]:
        return await node.get_attribute(name)

    async def has_class(self, node: Any, name: str) -> bool:
        return bool(await node.evaluate("(el, name) => el.classList.contains(name)", name))

    async def first_element_child(self, node: Any) -> Optional[Any]:
        return await self._element(node, "el => el.firstElementChild")

    async def last_element_child(self, node: Any) -> Optional[Any]:
        return await self._element(node, "el => el.lastElementChild")

    async def parent(self, node: Any) -> Optional[Any]:
        return await self._element(node, "el => el.parentElement")

    async def insert_html(self, node: Any, position: str, markup: str) -> None:
        await node.evaluate(
            "(el, [position, markup]) => el.insertAdjacentHTML(position, markup)",
            [position, markup],
        )

    async def insert_element(self, node: Any, position: str, element: Any) -> Any:
        # insertAdjacentElement moves the node, listeners included
        await node.evaluate(
            "(el, [position, child]) => el.insertAdjacentElement(position, child)",
            [position, element],
        )
        return element

    async def create_element(
        self,
        tag: str,
        attributes: Optional[Dict[str, str]] = None,
        style: Optional[Dict[str, str]] = None,
    ) -> Any:
        handle = await self.page.evaluate_handle(
            """([tag, attributes, style]) => {
                const el = document.createElement(tag);
                for (const [name, value] of Object.entries(attributes)) {
                    el.setAttribute(name, value);
                }
                for (const [prop, value] of Object.entries(style)) {
                    el.style[prop] = value;
                }
                return el;
            }""",
            [tag, attributes or {}, style or {}],
        )
        return self._track(handle.as_element())

    async def remove(self, node: Any) -> None:
        await node.evaluate("el => { if (el.parentNode) el.parentNode.removeChild(el); }")

    async def add_class(self, node: Any, name: str) -> None:
        await node.evaluate("(el, name) => el.classList.add(name)", name)

    async def remove_class(self, node: Any, name: str) -> None:
        await node.evaluate("(el, name) => el.classList.remove(name)", name)

    async def set_style(self, node: Any, prop: str, value: str) -> None:
        await node.evaluate("(el, [prop, value]) => { el.style[prop] = value; }", [prop, value])

    async def pathname(self) -> str:
        return await self.page.evaluate("() => window.location.pathname")

    async def wait_until_ready(self) -> None:
        await self.page.wait_for_load_state("domcontentloaded")

    async def observe_child_list(self, selector: str, callback: Callable[[], None]) -> bool:
        """
        Watch direct child additions/removals of ``selector``.

        The page-side observer only forwards records while the tracking
        flag is on, so changes made by the restyler itself never reach
        Python. Returns False when the container does not exist.
        """
        self._callbacks.append(callback)
        if not self._binding_installed:
            await self.page.expose_binding(OBSERVER_BINDING, self._dispatch)
            self._binding_installed = True

        installed = await self.page.evaluate(
            """([selector, binding, flag, handle]) => {
                const container = document.querySelector(selector);
                if (!container) return false;
                if (window[handle]) window[handle].disconnect();
                if (window[flag] === undefined) window[flag] = false;
                const observer = new MutationObserver(() => {
                    if (window[flag]) window[binding]();
                });
                observer.observe(container, {attributes: false, subtree: false, childList: true});
                window[handle] = observer;
                return true;
            }""",
            [selector, OBSERVER_BINDING, OBSERVER_FLAG, OBSERVER_HANDLE],
        )
        if not installed:
            self._callbacks.remove(callback)
        return bool(installed)

    async def set_observer_enabled(self, enabled: bool) -> None:
        await self.page.evaluate(
            """([flag, handle, enabled]) => {
                // drop records queued by our own mutations before listening again
                if (enabled && window[handle]) window[handle].takeRecords();
                window[flag] = enabled;
            }""",
            [OBSERVER_FLAG, OBSERVER_HANDLE, enabled],
        )

    async def release_handles(self) -> None:
        """
        Dispose every element handle handed out so far.

        Called at the end of each render pass. Disposing only drops the
        reference; moved nodes stay where the pass put them.
        """
        handles, self._handles = self._handles, []
        for handle in handles:
            try:
                await handle.dispose()
            except PlaywrightError as e:
                # context already gone (navigation, closed page)
                logger.debug(f"Could not dispose element handle: {e}")
        if handles:
            logger.debug(f"Released {len(handles)} element handle(s)")

    def _dispatch(self, source, *args) -> None:
        for callback in list(self._callbacks):
            callback()

    def _track(self, element: Optional[Any]) -> Optional[Any]:
        if element is not None:
            self._handles.append(element)
        return element

    async def _element(self, node: Any, expression: str) -> Optional[Any]:
        handle = await node.evaluate_handle(expression)
        element = handle.as_element()
        if element is None:
            await handle.dispose()
        return self._track(element)
