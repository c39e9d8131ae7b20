from __future__ import annotations

from dataclasses import dataclass

from lxml import etree

from .. import t


def escapeAttr(text: str) -> str:
    return text.replace("&", "&amp;").replace("'", "&apos;").replace('"', "&quot;")


def startTagStr(tagName: str, attrs: t.Iterable[tuple[str, str]]) -> str:
    s = f"<{tagName}"
    for k, v in attrs:
        s += f' {k}="{escapeAttr(v)}"'
    s += ">"
    return s


@dataclass(frozen=True)
class Element:
    """
    A parsed element.

    Attributes stay in the order they were written,
    duplicates included;
    nothing here validates or merges them.
    The grammar only reads opening tags so far,
    so `children` is always empty when it comes out of the parser.
    """

    name: str
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[Element, ...] = ()

    @classmethod
    def fromStart(cls, start: tuple[str, t.Iterable[tuple[str, str]]]) -> Element:
        name, attrs = start
        return cls(name=name, attributes=tuple((k, v) for k, v in attrs))

    def __str__(self) -> str:
        return startTagStr(self.name, self.attributes)

    def __json__(self) -> dict[str, t.Any]:
        return {
            "name": self.name,
            "attributes": [[k, v] for k, v in self.attributes],
            "children": [child.__json__() for child in self.children],
        }

    def toEtree(self) -> t.ElementT:
        el = etree.Element(self.name)
        for k, v in self.attributes:
            el.set(k, v)
        for child in self.children:
            el.append(child.toEtree())
        return el
