from __future__ import annotations

from lxml import etree

from src.cordova_common.config import write_xml_declaration, xml_indent


def parse_elementtree_sync(path: str) -> etree._ElementTree:
    """Parse an XML file, dropping ignorable whitespace so rewrites re-indent cleanly."""
    parser = etree.XMLParser(remove_blank_text=True)
    return etree.parse(path, parser)


def write_elementtree_sync(
    tree: etree._ElementTree, path: str, *, indent: int | None = None
) -> None:
    width = xml_indent() if indent is None else max(0, int(indent))
    if width:
        etree.indent(tree, space=" " * width)
    data = etree.tostring(
        tree,
        encoding="utf-8",
        xml_declaration=write_xml_declaration(),
        pretty_print=bool(width),
    )
    with open(path, "wb") as f:
        f.write(data)


def local_name(el: etree._Element) -> str:
    tag = el.tag
    if not isinstance(tag, str):
        # Comments and processing instructions.
        return ""
    return etree.QName(tag).localname


def children_named(el: etree._Element, name: str) -> list[etree._Element]:
    """Direct children whose local tag name is `name`, in any namespace."""
    return [c for c in el if local_name(c) == name]
