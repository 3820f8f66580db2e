"""Tests for JSON Pointer parsing and resolution."""

import pytest

from ndsel.errors import ConfigurationError, PointerResolutionError, PointerSyntaxError
from ndsel.pointer import JsonPointer, parse_pointers

DOC = {
    "a": 1,
    "b": "x",
    "list": [10, {"deep": True}],
    "a/b": "slash",
    "m~n": "tilde",
    "": "empty key",
    "7": "numeric key",
}


def test_empty_pointer_selects_whole_document():
    assert JsonPointer.parse("").resolve(DOC) is DOC


def test_member_and_index_tokens():
    assert JsonPointer.parse("/a").resolve(DOC) == 1
    assert JsonPointer.parse("/list/0").resolve(DOC) == 10
    assert JsonPointer.parse("/list/1/deep").resolve(DOC) is True


def test_escaped_tokens():
    assert JsonPointer.parse("/a~1b").resolve(DOC) == "slash"
    assert JsonPointer.parse("/m~0n").resolve(DOC) == "tilde"
    assert JsonPointer.parse("/~01").tokens == ("~1",)


def test_empty_and_numeric_object_keys():
    assert JsonPointer.parse("/").resolve(DOC) == "empty key"
    assert JsonPointer.parse("/7").resolve(DOC) == "numeric key"


@pytest.mark.parametrize(
    "text",
    ["/missing", "/list/2", "/list/-", "/list/01", "/list/x", "/a/b", "/b/0"],
)
def test_unresolvable_pointers(text):
    with pytest.raises(PointerResolutionError):
        JsonPointer.parse(text).resolve(DOC)


@pytest.mark.parametrize("text", ["a", "a/b", "/a~2", "/a~"])
def test_invalid_pointer_syntax(text):
    with pytest.raises(PointerSyntaxError):
        JsonPointer.parse(text)


def test_parse_pointers_keeps_order_and_duplicates():
    pointers = parse_pointers("/b,/a,/b")
    assert [str(p) for p in pointers] == ["/b", "/a", "/b"]


def test_parse_pointers_requires_a_field():
    with pytest.raises(ConfigurationError):
        parse_pointers("")


def test_parse_pointers_rejects_bad_entry():
    with pytest.raises(PointerSyntaxError):
        parse_pointers("/a,b")
