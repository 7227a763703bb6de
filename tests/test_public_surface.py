"""Test public API surface - ensure imports work correctly and no side effects.

This test verifies:
- the package root exports the parser, registry and model types
- visitor modules named json/xml do not shadow the standard library
- the end-to-end flow works from root imports alone
"""

import types

import httpx


def test_root_exports():
    """Everything in __all__ is importable from the package root."""
    import wiremodel

    for name in wiremodel.__all__:
        assert hasattr(wiremodel, name), f"wiremodel.{name} missing"

    assert callable(wiremodel.OperationResponseParser)
    assert callable(wiremodel.default_registry)


def test_visitor_modules_do_not_shadow_stdlib():
    """wiremodel.visitors.json / .xml leave the stdlib modules alone."""
    import json
    import xml.etree.ElementTree as ET

    import wiremodel.visitors.json as json_visitor_module
    import wiremodel.visitors.xml as xml_visitor_module

    assert isinstance(json_visitor_module, types.ModuleType)
    assert isinstance(xml_visitor_module, types.ModuleType)
    assert json_visitor_module is not json
    assert callable(json.loads)
    assert callable(ET.fromstring)


def test_end_to_end_from_root_imports():
    """A description, command and parser built from root imports map a response."""
    from wiremodel import Command, OperationResponseParser, ResultModel, ServiceDescription, VisitorRegistry

    description = ServiceDescription(**{
        "operations": {"GetUser": {"responseClass": "User"}},
        "models": {
            "User": {
                "type": "object",
                "properties": {
                    "login": {"location": "json", "sentAs": "user_login"},
                    "status": {"location": "statusCode"},
                },
            }
        },
    })
    parser = OperationResponseParser(VisitorRegistry.with_defaults())
    command = Command(description.get_operation("GetUser"))

    result = parser.parse(command, httpx.Response(200, json={"user_login": "ann"}))

    assert isinstance(result, ResultModel)
    assert result.to_dict() == {"login": "ann", "status": 200}
