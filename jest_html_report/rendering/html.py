"""Construction and serialization of the HTML element tree."""

import xml.etree.ElementTree as ET

DOCTYPE = "<!DOCTYPE html>"


def create_html_base(page_title: str, stylesheet: str) -> tuple[ET.Element, ET.Element]:
    """Create the ``<html>`` root with its head filled in.

    Returns:
        The root element and the empty ``<body>`` to render into

    """
    root = ET.Element("html")
    head = ET.SubElement(root, "head")
    ET.SubElement(head, "meta", {"charset": "utf-8"})
    ET.SubElement(head, "title").text = page_title
    ET.SubElement(head, "style", {"type": "text/css"}).text = stylesheet
    body = ET.SubElement(root, "body")
    return root, body


def serialize(root: ET.Element) -> str:
    """Serialize the element tree to an HTML document string."""
    return f"{DOCTYPE}\n{ET.tostring(root, encoding='unicode', method='html')}\n"
