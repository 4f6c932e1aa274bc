"""Tests for CLI output formatting."""

import json

import yaml

from creational_patterns.cli.formatters import format_list_output, format_output, format_sections

DATA = {"prototype": {"primitive": 245, "component_cloned": True}}


def test_json_format():
    assert json.loads(format_output(DATA, "json")) == DATA


def test_yaml_format():
    assert yaml.safe_load(format_output(DATA, "yaml")) == DATA


def test_text_format_uses_rendered_text():
    assert format_output(DATA, "text", text="line one\nline two") == "line one\nline two"


def test_text_format_without_rendering_lists_data():
    output = format_output({"name": "1", "aliases": ["first"]}, "text")

    assert output == "name: 1\naliases:\n  - first"


def test_unknown_format_falls_back_to_json():
    assert json.loads(format_output(DATA, "xml")) == DATA


def test_format_sections_with_blank_lines():
    sections = [["a", "b"], ["c"]]

    assert format_sections(sections) == "a\nb\n\nc"
    assert format_sections(sections, blank_line_between=False) == "a\nb\nc"


def test_format_list_output_empty():
    assert format_list_output({}) == ""
