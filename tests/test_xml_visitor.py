"""Tests for XML conversion and XmlVisitor."""

import pytest

from wiremodel.kernel.errors import ResponseDecodeError
from wiremodel.kernel.registry import VisitorRegistry
from wiremodel.kernel.xml_utils import parse_xml
from wiremodel.parser import OperationResponseParser

from conftest import make_command, make_description, xml_response

DOCUMENT = """<?xml version="1.0"?>
<Result xmlns="urn:example" id="abc">
  <Name>widget</Name>
  <Tags><Tag>a</Tag><Tag>b</Tag></Tags>
  <Single><Tag>only</Tag></Single>
  <Owner type="user">ann</Owner>
  <Empty/>
</Result>
"""


def _parse(model, text):
    parser = OperationResponseParser(VisitorRegistry.with_defaults())
    return parser.parse(make_command(make_description(model)), xml_response(text))


def test_parse_xml_structure():
    """Root tag is dropped, attributes and repeated tags are preserved."""
    assert parse_xml(DOCUMENT.encode("utf-8")) == {
        "@attributes": {"id": "abc"},
        "Name": "widget",
        "Tags": {"Tag": ["a", "b"]},
        "Single": {"Tag": "only"},
        "Owner": {"@attributes": {"type": "user"}, "#text": "ann"},
        "Empty": "",
    }


def test_parse_xml_rejects_malformed_documents():
    """Malformed XML raises ResponseDecodeError."""
    with pytest.raises(ResponseDecodeError) as exc_info:
        parse_xml(b"<Result><Open></Result>", "text/xml")

    assert exc_info.value.content_type == "text/xml"


def test_xml_object_model():
    """Attributes, wrapped collections and nested objects are mapped."""
    model = {
        "type": "object",
        "properties": {
            "requestId": {"location": "xml", "sentAs": "id", "data": {"xmlAttribute": True}},
            "name": {"location": "xml", "sentAs": "Name", "type": "string"},
            "tags": {
                "location": "xml",
                "sentAs": "Tags",
                "type": "array",
                "items": {"sentAs": "Tag", "type": "string"},
            },
            "single": {
                "location": "xml",
                "sentAs": "Single",
                "type": "array",
                "items": {"sentAs": "Tag", "type": "string"},
            },
            "owner": {
                "location": "xml",
                "sentAs": "Owner",
                "type": "object",
                "properties": {"kind": {"sentAs": "type", "data": {"xmlAttribute": True}}},
            },
            "empty": {"location": "xml", "sentAs": "Empty", "type": "array"},
        },
    }

    result = _parse(model, DOCUMENT)

    assert result.data == {
        "requestId": "abc",
        "name": "widget",
        "tags": ["a", "b"],
        "single": ["only"],
        "owner": {"#text": "ann", "kind": "user"},
        "empty": [],
    }


def test_xml_string_with_only_attributes_becomes_empty():
    """A string property whose element has only attributes maps to ''."""
    model = {
        "type": "object",
        "properties": {"link": {"location": "xml", "sentAs": "Link", "type": "string"}},
    }

    result = _parse(model, '<Result><Link href="/x"/></Result>')

    assert result.data == {"link": ""}


def test_xml_array_model():
    """Top-level array models unwrap repeated item elements."""
    model = {
        "type": "array",
        "location": "xml",
        "items": {
            "type": "object",
            "sentAs": "Item",
            "properties": {"id": {"sentAs": "Id", "filters": ["int"]}},
        },
    }

    many = _parse(model, "<Items><Item><Id>1</Id></Item><Item><Id>2</Id></Item></Items>")
    one = _parse(model, "<Items><Item><Id>1</Id></Item></Items>")

    assert many.data == [{"id": 1}, {"id": 2}]
    assert one.data == [{"id": 1}]


def test_xml_visitor_propagates_decode_errors():
    """Malformed bodies fail the parse."""
    model = {"type": "object", "properties": {"name": {"location": "xml"}}}

    with pytest.raises(ResponseDecodeError):
        _parse(model, "<Result>")


def test_xml_string_with_attributes_keeps_text():
    """A string element with attributes maps to its text."""
    model = {
        "type": "object",
        "properties": {"name": {"location": "xml", "sentAs": "Name", "type": "string"}},
    }

    result = _parse(model, '<Result><Name lang="en">Bob</Name></Result>')

    assert result.data == {"name": "Bob"}
