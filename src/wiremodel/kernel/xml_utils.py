"""Convert XML bodies into plain nested dicts and lists."""

import xml.etree.ElementTree as ET
from typing import Any, Dict, Union

from .errors import ResponseDecodeError

ATTRIBUTES_KEY = "@attributes"
TEXT_KEY = "#text"


def _local_name(tag: str) -> str:
    """Strip a ``{namespace}`` prefix from a tag or attribute name."""
    return tag.rsplit("}", 1)[-1] if tag.startswith("{") else tag


def element_to_dict(element: ET.Element) -> Union[Dict[str, Any], str]:
    """Convert an element to a dict keyed by child tag.

    Rules:
    - A leaf with no attributes becomes its stripped text ("" when empty)
    - Attributes are collected under ``@attributes``
    - A leaf with attributes keeps its text under ``#text``
    - Repeated child tags become a list, in document order
    """
    attributes = {_local_name(k): v for k, v in element.attrib.items()}
    children = list(element)
    text = (element.text or "").strip()

    if not children and not attributes:
        return text

    result: Dict[str, Any] = {}
    if attributes:
        result[ATTRIBUTES_KEY] = attributes

    for child in children:
        tag = _local_name(child.tag)
        value = element_to_dict(child)
        if tag in result:
            existing = result[tag]
            if isinstance(existing, list):
                existing.append(value)
            else:
                result[tag] = [existing, value]
        else:
            result[tag] = value

    if not children and text:
        result[TEXT_KEY] = text

    return result


def parse_xml(content: bytes, content_type: str = "application/xml") -> Dict[str, Any]:
    """Parse an XML document and convert its root element.

    The root tag itself is dropped; a root without children or attributes
    yields an empty dict.

    Raises:
        ResponseDecodeError: If the content is not well-formed XML
    """
    try:
        root = ET.fromstring(content)
    except ET.ParseError as e:
        raise ResponseDecodeError(content_type, str(e)) from e

    converted = element_to_dict(root)
    return converted if isinstance(converted, dict) else {}
