"""Structured view nodes serialized to HTML.

Text and attribute values are always escaped; there is no raw-markup node.
"""

from dataclasses import dataclass, field
from html import escape

VOID_TAGS = frozenset({"br", "hr", "img", "input", "meta", "link"})


@dataclass
class ViewNode:
    tag: str
    text: str = ""
    classes: list[str] = field(default_factory=list)
    attrs: dict[str, str] = field(default_factory=dict)
    children: list["ViewNode"] = field(default_factory=list)

    def add(self, *nodes: "ViewNode") -> "ViewNode":
        self.children.extend(nodes)
        return self

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def find_all(self, class_name: str) -> list["ViewNode"]:
        """Depth-first search for descendants carrying a class."""
        found = []
        for child in self.children:
            if child.has_class(class_name):
                found.append(child)
            found.extend(child.find_all(class_name))
        return found

    def to_html(self) -> str:
        attrs = dict(self.attrs)
        if self.classes:
            attrs = {"class": " ".join(self.classes), **attrs}
        rendered = "".join(
            f' {name}="{escape(value, quote=True)}"' for name, value in attrs.items()
        )
        if self.tag in VOID_TAGS:
            return f"<{self.tag}{rendered}>"
        inner = escape(self.text, quote=False) + "".join(
            c.to_html() for c in self.children
        )
        return f"<{self.tag}{rendered}>{inner}</{self.tag}>"


def el(tag: str, text: str = "", *children: ViewNode, cls: str = "", **attrs: str) -> ViewNode:
    """Shorthand constructor. `cls` is a space separated class list.

    Keyword attributes use a trailing underscore for reserved words and
    underscores for dashes, e.g. `aria_label`, `for_`.
    """
    return ViewNode(
        tag=tag,
        text=text,
        classes=cls.split(),
        attrs={k.rstrip("_").replace("_", "-"): v for k, v in attrs.items()},
        children=list(children),
    )
