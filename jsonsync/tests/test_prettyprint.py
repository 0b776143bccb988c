# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

import io

import colorama

from jsonsync import difference
from jsonsync.nodes import Missing
from jsonsync.prettyprint import (
    PrettyPrintConfig, pretty_print_patch, pretty_print_document,
    pretty_print_document_patch, pretty_print_replacement,
)


def _config(use_color=False, **kwargs):
    return PrettyPrintConfig(out=io.StringIO(), use_color=use_color, **kwargs)


def test_pretty_print_replaced_value():
    config = _config()
    pretty_print_patch({"id": 1, "name": "a"}, {"id": 1, "name": "b"}, "", config)
    assert config.out.getvalue() == (
        "## replaced /name:\n"
        "-  a\n"
        "+  b\n"
        "\n"
    )


def test_pretty_print_type_change():
    config = _config()
    pretty_print_patch({"a": 1}, {"a": "x"}, "", config)
    text = config.out.getvalue()
    assert text.startswith("## replaced (type changed from int to str) /a:\n")
    assert "-  1\n" in text
    assert "+  x\n" in text


def test_pretty_print_root_replacement():
    config = _config()
    pretty_print_patch(1, 2, "", config)
    assert config.out.getvalue() == "## replaced /:\n-  1\n+  2\n\n"


def test_pretty_print_added_value():
    config = _config()
    pretty_print_replacement(Missing, 5, "/x", config)
    assert config.out.getvalue() == "## added /x:\n+  5\n\n"


def test_pretty_print_record_list_patch():
    a = {"items": [{"id": 1, "v": 1}]}
    b = {"items": [{"id": 2, "v": 3}, {"id": 1, "v": 2}]}
    config = _config()
    pretty_print_patch(a, difference(a, b), "", config)
    text = config.out.getvalue()
    assert "## replaced /items/0/v:\n-  1\n+  2\n" in text
    assert "## inserted /items:\n+  [{'id': 2, 'v': 3}]\n" in text


def test_pretty_print_unchanged_records_are_silent():
    a = {"items": [{"id": 1, "v": 1}, {"id": 2, "v": 2}]}
    b = {"items": [{"id": 1, "v": 1}, {"id": 2, "v": 3}]}
    config = _config()
    pretty_print_patch(a, difference(a, b), "", config)
    text = config.out.getvalue()
    assert "/items/0" not in text
    assert "## replaced /items/1/v:" in text


def test_pretty_print_emptied_list():
    config = _config()
    pretty_print_patch({"tags": ["a"]}, {"tags": []}, "", config)
    assert config.out.getvalue() == "## emptied /tags:\n-  ['a']\n\n"


def test_pretty_print_custom_identity_key():
    a = {"items": [{"uid": 7, "v": 1}]}
    config = _config(id_key="uid")
    pretty_print_patch(a, {"items": [{"uid": 7, "v": 2}]}, "", config)
    assert "## replaced /items/0/v:" in config.out.getvalue()


def test_pretty_print_colors():
    config = _config(use_color=True)
    pretty_print_patch({"a": 1}, {"a": 2}, "", config)
    text = config.out.getvalue()
    assert colorama.Fore.GREEN in text
    assert colorama.Fore.RED in text


def test_pretty_print_document():
    config = _config()
    pretty_print_document({"b": {"c": 2}, "a": 1}, config)
    assert config.out.getvalue() == "a: 1\nb:\n  c: 2\n"


def test_pretty_print_document_patch_header():
    config = _config()
    pretty_print_document_patch("a.json", "b.json", {"a": 1}, {"a": 2}, config)
    text = config.out.getvalue()
    assert text.startswith("jsonsync diff a.json b.json\n--- a.json  (no timestamp)\n")
    assert "+++ b.json  (no timestamp)\n" in text

    config = _config()
    pretty_print_document_patch("a.json", "b.json", {"a": 1}, None, config)
    assert config.out.getvalue() == ""


def test_pretty_print_unhashable_identities():
    a = {"items": [{"id": [1, 2], "v": 1}, {"id": {"k": 3}, "v": 2}]}
    p = {"items": [{"id": {"k": 3}, "v": 5}, {"id": [4], "v": 6}]}
    config = _config()
    pretty_print_patch(a, p, "", config)
    text = config.out.getvalue()
    assert "## replaced /items/1/v:\n-  2\n+  5\n" in text
    assert "## inserted /items:\n+  [{'id': [4], 'v': 6}]\n" in text


def test_pretty_print_boolean_identity_is_not_numeric():
    a = {"items": [{"id": 1, "v": 1}]}
    config = _config()
    pretty_print_patch(a, {"items": [{"id": True, "v": 2}]}, "", config)
    assert "## inserted /items:" in config.out.getvalue()
