"""Helpers for building and reading Intacct XML fragments.

Serializers append to a caller-owned list and skip absent values, so an
operation can describe its payload as a flat sequence of optional fields.
"""
from __future__ import annotations

import xml.etree.ElementTree as ET
from decimal import Decimal, InvalidOperation
from typing import Any, Iterable, List, Optional, Sequence

from intacct.services.errors import MalformedResponseError


def text_element(name: str, value: Any) -> ET.Element:
    element = ET.Element(name)
    element.text = format_value(value)
    return element


def format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Decimal):
        return format(value, "f")
    return str(value)


def serialize_string(value: Optional[str], name: str, elements: List[ET.Element]) -> None:
    """Append ``<name>value</name>`` unless value is None or empty."""
    if value is None or value == "":
        return
    elements.append(text_element(name, value))


def serialize_child(child: Any, name: str, elements: List[ET.Element]) -> None:
    """Append ``<name>`` wrapping the child's own elements unless child is None."""
    if child is None:
        return
    wrapper = ET.Element(name)
    wrapper.extend(child.to_xml_elements())
    elements.append(wrapper)


def serialize_children(
    children: Optional[Sequence[Any]],
    list_name: str,
    item_name: str,
    elements: List[ET.Element],
) -> None:
    """Append ``<list_name><item_name/>*</list_name>``; omitted for None or empty."""
    if not children:
        return
    items: List[ET.Element] = []
    for child in children:
        serialize_child(child, item_name, items)
    elements.append(wrap(list_name, items))


def wrap(name: str, children: Iterable[ET.Element], **attrib: str) -> ET.Element:
    element = ET.Element(name, attrib)
    element.extend(children)
    return element


def child_text(element: ET.Element, path: str) -> Optional[str]:
    """Stripped text of a child element, or None when missing or blank."""
    value = element.findtext(path)
    if value is None:
        return None
    value = value.strip()
    return value or None


def child_decimal(element: ET.Element, path: str) -> Optional[Decimal]:
    value = child_text(element, path)
    if value is None:
        return None
    try:
        return Decimal(value)
    except InvalidOperation as exc:
        raise MalformedResponseError(f"Not a decimal: {value!r}", element=path) from exc


def to_bytes(element: ET.Element) -> bytes:
    return ET.tostring(element, encoding="utf-8", xml_declaration=True)


def parse_bytes(body: bytes | str) -> ET.Element:
    try:
        return ET.fromstring(body)
    except ET.ParseError as exc:
        raise MalformedResponseError(str(exc)) from exc
