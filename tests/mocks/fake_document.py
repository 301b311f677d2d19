"""
In-memory HostDocument for unit tests.

A tiny element tree with just enough of the DOM to run the restyler
without a browser: simple selectors, insertAdjacentHTML/Element semantics
and a child-list observer that honours the tracking flag like the page
side of PlaywrightDocument does.
"""

from html.parser import HTMLParser
from typing import Callable, Dict, List, Optional

VOID_TAGS = {"area", "base", "br", "col", "hr", "img", "input", "link", "meta", "source", "wbr"}


class FakeNode:
    def __init__(self, tag: Optional[str] = None, attrs: Optional[Dict[str, str]] = None, text: str = ""):
        self.tag = tag.upper() if tag else None
        self.attrs: Dict[str, str] = dict(attrs or {})
        self.text = text
        self.nodes: List["FakeNode"] = []
        self.parent: Optional["FakeNode"] = None
        self.style: Dict[str, str] = {}
        # stands in for listeners the host bound to the node
        self.listeners: Dict[str, Callable] = {}

    @property
    def is_element(self) -> bool:
        return self.tag is not None

    @property
    def element_children(self) -> List["FakeNode"]:
        return [n for n in self.nodes if n.is_element]

    @property
    def classes(self) -> List[str]:
        return self.attrs.get("class", "").split()

    def set_classes(self, classes: List[str]) -> None:
        self.attrs["class"] = " ".join(classes)

    def text_content(self) -> str:
        if not self.is_element:
            return self.text
        return "".join(n.text_content() for n in self.nodes)

    def descendants(self):
        for node in self.element_children:
            yield node
            yield from node.descendants()

    def closest_with_attribute(self, name: str) -> Optional["FakeNode"]:
        node = self
        while node is not None:
            if node.is_element and name in node.attrs:
                return node
            node = node.parent
        return None

    def dispatch(self, event: str):
        return self.listeners[event](self)

    def outer_html(self) -> str:
        if not self.is_element:
            return self.text
        attrs = "".join(f' {k}="{v}"' for k, v in self.attrs.items())
        tag = self.tag.lower()
        if tag in VOID_TAGS:
            return f"<{tag}{attrs}>"
        inner = "".join(n.outer_html() for n in self.nodes)
        return f"<{tag}{attrs}>{inner}</{tag}>"

    def __repr__(self) -> str:
        return f"<FakeNode {self.tag} {self.attrs}>"


class _TreeBuilder(HTMLParser):
    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.root = FakeNode("fragment")
        self.stack = [self.root]

    def handle_starttag(self, tag, attrs):
        node = FakeNode(tag, {k: (v if v is not None else "") for k, v in attrs})
        _append(self.stack[-1], node)
        if tag not in VOID_TAGS:
            self.stack.append(node)

    def handle_startendtag(self, tag, attrs):
        _append(self.stack[-1], FakeNode(tag, {k: (v if v is not None else "") for k, v in attrs}))

    def handle_endtag(self, tag):
        for i in range(len(self.stack) - 1, 0, -1):
            if self.stack[i].tag == tag.upper():
                del self.stack[i:]
                break

    def handle_data(self, data):
        _append(self.stack[-1], FakeNode(text=data))


def _append(parent: FakeNode, node: FakeNode) -> None:
    node.parent = parent
    parent.nodes.append(node)


def parse_fragment(markup: str) -> List[FakeNode]:
    builder = _TreeBuilder()
    builder.feed(markup)
    builder.close()
    nodes = list(builder.root.nodes)
    for node in nodes:
        node.parent = None
    return nodes


def _matches(node: FakeNode, simple: str) -> bool:
    simple = simple.strip()
    if simple.startswith("#"):
        return node.attrs.get("id") == simple[1:]
    tag, _, cls = simple.partition(".")
    if tag and node.tag != tag.upper():
        return False
    if cls and cls not in node.classes:
        return False
    return True


class FakeDocument:
    """HostDocument over FakeNode trees."""

    def __init__(self, markup: str, pathname: str = "/"):
        self.root = FakeNode("#document")
        for node in parse_fragment(markup):
            _append(self.root, node)
        self.path = pathname
        self.observers: List[tuple] = []
        self.observer_enabled = False
        self.delivered = 0
        self.dropped = 0
        self.created: List[FakeNode] = []
        self.releases = 0

    # --- test helpers ---------------------------------------------------

    def find(self, selector: str, root: Optional[FakeNode] = None) -> Optional[FakeNode]:
        found = self.find_all(selector, root)
        return found[0] if found else None

    def find_all(self, selector: str, root: Optional[FakeNode] = None) -> List[FakeNode]:
        base = root or self.root
        parts = [p for p in selector.split(",") if p.strip()]
        return [n for n in base.descendants() if any(_matches(n, p) for p in parts)]

    def host_rerender(self, selector: str, markup: str) -> None:
        """Replace the children of ``selector`` the way the host does."""
        container = self.find(selector)
        for child in list(container.nodes):
            self._detach(child)
        for node in parse_fragment(markup):
            self._attach(container, len(container.nodes), node)

    # --- HostDocument ---------------------------------------------------

    async def query(self, selector: str, root=None):
        return self.find(selector, root)

    async def children(self, node):
        return list(node.element_children)

    async def tag_name(self, node):
        return node.tag

    async def text_content(self, node):
        return node.text_content()

    async def get_attribute(self, node, name):
        return node.attrs.get(name)

    async def has_class(self, node, name):
        return name in node.classes

    async def first_element_child(self, node):
        children = node.element_children
        return children[0] if children else None

    async def last_element_child(self, node):
        children = node.element_children
        return children[-1] if children else None

    async def parent(self, node):
        return node.parent if node.parent is not self.root else None

    async def insert_html(self, node, position, markup):
        for offset, new in enumerate(parse_fragment(markup)):
            parent, index = self._position(node, position)
            if position in ("afterbegin", "afterend"):
                index += offset
            self._attach(parent, index, new)

    async def insert_element(self, node, position, element):
        if element.parent is not None:
            self._detach(element)
        parent, index = self._position(node, position)
        self._attach(parent, index, element)
        return element

    async def create_element(self, tag, attributes=None, style=None):
        node = FakeNode(tag, attributes)
        node.style.update(style or {})
        self.created.append(node)
        return node

    async def remove(self, node):
        if node.parent is not None:
            self._detach(node)

    async def add_class(self, node, name):
        if name not in node.classes:
            node.set_classes(node.classes + [name])

    async def remove_class(self, node, name):
        node.set_classes([c for c in node.classes if c != name])

    async def set_style(self, node, prop, value):
        node.style[prop] = value

    async def pathname(self):
        return self.path

    async def wait_until_ready(self):
        return None

    async def observe_child_list(self, selector, callback):
        container = self.find(selector)
        if container is None:
            return False
        self.observers.append((container, callback))
        return True

    async def set_observer_enabled(self, enabled):
        self.observer_enabled = enabled

    async def release_handles(self):
        self.releases += 1

    # --- internals ------------------------------------------------------

    def _position(self, node: FakeNode, position: str):
        if position == "beforeend":
            return node, len(node.nodes)
        if position == "afterbegin":
            return node, 0
        parent = node.parent
        index = parent.nodes.index(node)
        if position == "beforebegin":
            return parent, index
        if position == "afterend":
            return parent, index + 1
        raise ValueError(position)

    def _attach(self, parent: FakeNode, index: int, node: FakeNode) -> None:
        node.parent = parent
        parent.nodes.insert(index, node)
        self._notify(parent)

    def _detach(self, node: FakeNode) -> None:
        parent = node.parent
        parent.nodes.remove(node)
        node.parent = None
        self._notify(parent)

    def _notify(self, parent: FakeNode) -> None:
        for container, callback in self.observers:
            if container is parent:
                if self.observer_enabled:
                    self.delivered += 1
                    callback()
                else:
                    self.dropped += 1
