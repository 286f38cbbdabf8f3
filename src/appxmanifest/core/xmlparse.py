"""Strict XML parsing and serialization helpers shared by the container and manifest layers.

ElementTree keeps names in `{uri}local` form and forgets the prefixes of the
source document. `parse_xml` records the `xmlns` declarations it meets so that
`serialize_xml` can write the document back with its own prefixes (`uap:`,
`rescap:`, default namespace) rather than generated `ns0:` ones.
"""

from __future__ import annotations

import copy
import io
from typing import Iterable, Iterator
from xml.etree import ElementTree

from .errors import XmlParseError

XML_NAMESPACE = "http://www.w3.org/XML/1998/namespace"


class XmlDocument(ElementTree.ElementTree):
    """ElementTree that remembers the namespace declarations of its source.

    `namespaces` holds `(prefix, uri)` pairs in document order; `""` is the
    default namespace.
    """

    def __init__(self, element: ElementTree.Element, namespaces: Iterable[tuple[str, str]] = ()):
        super().__init__(element)
        self.namespaces = list(namespaces)


def parse_xml(data: bytes, *, where: str) -> XmlDocument:
    """Parse `data` as a complete XML document.

    Malformed input raises XmlParseError (the ParseError is chained); there is
    no best-effort recovery.
    """
    namespaces: list[tuple[str, str]] = []
    try:
        events = ElementTree.iterparse(io.BytesIO(data), events=("start-ns",))
        for _event, (prefix, uri) in events:
            namespaces.append((prefix, uri))
        root = events.root
    except ElementTree.ParseError as e:
        raise XmlParseError(where, str(e)) from e
    return XmlDocument(root, namespaces)


def _free_prefix(taken: set[str]) -> str:
    i = 0
    while f"ns{i}" in taken:
        i += 1
    return f"ns{i}"


def _split(qname: str) -> tuple[str, str]:
    if qname.startswith("{"):
        uri, local = qname[1:].split("}", 1)
        return uri, local
    return "", qname


def serialize_xml(doc: ElementTree.ElementTree) -> str:
    """Serialize `doc` as UTF-8 XML text with a declaration.

    All declarations are written on the root element. Prefixes come from
    `XmlDocument.namespaces` when available; a namespace without a usable
    prefix gets a fresh `nsN` one. The default namespace is only reused when no
    element is unqualified.
    """
    root = doc.getroot()
    declared = getattr(doc, "namespaces", [])
    elements = list(root.iter())
    has_unqualified = any(isinstance(e.tag, str) and not e.tag.startswith("{") for e in elements)

    # uri -> prefix, for element names and for attribute names
    tag_prefixes: dict[str, str] = {XML_NAMESPACE: "xml"}
    attr_prefixes: dict[str, str] = {XML_NAMESPACE: "xml"}
    decls: dict[str, str] = {}  # prefix -> uri, written on the root
    for prefix, uri in declared:
        if not uri or prefix in decls or (prefix == "" and has_unqualified):
            continue
        decls[prefix] = uri
        tag_prefixes.setdefault(uri, prefix)
        if prefix:
            attr_prefixes.setdefault(uri, prefix)

    def prefix_for(uri: str, table: dict[str, str]) -> str:
        if uri not in table:
            prefix = _free_prefix(set(decls))
            decls[prefix] = uri
            table[uri] = prefix
            if table is tag_prefixes:
                attr_prefixes.setdefault(uri, prefix)
        return table[uri]

    def rename(qname: str, table: dict[str, str]) -> str:
        uri, local = _split(qname)
        if not uri:
            return local
        prefix = prefix_for(uri, table)
        return f"{prefix}:{local}" if prefix else local

    def rebuild(elem: ElementTree.Element) -> ElementTree.Element:
        if not isinstance(elem.tag, str):
            return copy.copy(elem)
        out = ElementTree.Element(
            rename(elem.tag, tag_prefixes),
            {rename(k, attr_prefixes): v for k, v in elem.attrib.items()},
        )
        out.text = elem.text
        out.tail = elem.tail
        for child in elem:
            out.append(rebuild(child))
        return out

    new_root = rebuild(root)
    attrs = dict(new_root.attrib)
    new_root.attrib.clear()
    for prefix, uri in decls.items():
        new_root.set("xmlns:" + prefix if prefix else "xmlns", uri)
    for key, value in attrs.items():
        new_root.set(key, value)
    return ElementTree.tostring(new_root, encoding="utf-8", xml_declaration=True).decode("utf-8")


def local_name(tag: str) -> str:
    """Strip a `{namespace}` prefix from an element or attribute name."""
    if tag.startswith("{"):
        return tag.rsplit("}", 1)[1]
    return tag


def iter_local(elem: ElementTree.Element, name: str) -> Iterator[ElementTree.Element]:
    """Yield direct children of `elem` whose local name is `name`."""
    for child in elem:
        if isinstance(child.tag, str) and local_name(child.tag) == name:
            yield child


def get_local_attr(elem: ElementTree.Element, name: str) -> str | None:
    """Return attribute `name` regardless of namespace qualification."""
    if name in elem.attrib:
        return elem.attrib[name]
    for key, value in elem.attrib.items():
        if local_name(key) == name:
            return value
    return None
