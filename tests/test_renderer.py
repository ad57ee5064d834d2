"""
Tests for tree, JSON and YAML rendering.
"""

import io
import json
from unittest.mock import patch

import pytest
import yaml

from hns_tree.config import OutputFormat
from hns_tree.exceptions import SerializationError
from hns_tree.forest import build_forest
from hns_tree.models import Node, Resource
from hns_tree.renderer import (
    print_forest,
    print_json,
    print_tree,
    print_yaml,
    render,
    render_json,
    render_tree,
    render_yaml,
)


@pytest.fixture
def forest():
    return build_forest([
        Resource("team-a"),
        Resource("default"),
        Resource("team-a-prod", parent_name="team-a"),
        Resource("team-a-dev", parent_name="team-a"),
        Resource("team-a-prod-eu", parent_name="team-a-prod"),
        Resource("team-a-prod-us", parent_name="team-a-prod"),
        Resource("team-a-zz", parent_name="team-a"),
    ])


class TestRenderTree:
    """Test suite for the indented tree renderer."""

    def test_single_root_with_children(self):
        roots = [Node("a", [Node("b"), Node("c", [Node("d")])])]

        assert render_tree(roots) == (
            "a\n"
            "├── b\n"
            "└── c\n"
            "    └── d\n"
        )

    def test_nested_branches(self, forest):
        assert render_tree(forest) == (
            "default\n"
            "team-a\n"
            "├── team-a-dev\n"
            "├── team-a-prod\n"
            "│   ├── team-a-prod-eu\n"
            "│   └── team-a-prod-us\n"
            "└── team-a-zz\n"
        )

    def test_empty_forest(self):
        assert render_tree([]) == ""

    def test_print_tree_writes_stdout(self, capsys):
        print_tree([Node("a"), Node("b")])

        assert capsys.readouterr().out == "a\nb\n"


class TestRenderJson:
    """Test suite for the JSON renderer."""

    def test_leaf_has_no_children_key(self):
        roots = [Node("a", [Node("b")])]

        assert json.loads(render_json(roots)) == [
            {"name": "a", "children": [{"name": "b"}]}
        ]

    def test_two_space_indent(self):
        assert render_json([Node("a", [Node("b")])]) == (
            "[\n"
            "  {\n"
            '    "name": "a",\n'
            '    "children": [\n'
            "      {\n"
            '        "name": "b"\n'
            "      }\n"
            "    ]\n"
            "  }\n"
            "]"
        )

    def test_empty_forest(self):
        assert render_json([]) == "[]"

    def test_round_trip(self, forest):
        restored = [Node.from_dict(d) for d in json.loads(render_json(forest))]

        assert restored == forest

    def test_print_json_ends_with_newline(self, capsys):
        print_json([Node("a")])

        assert capsys.readouterr().out == '[\n  {\n    "name": "a"\n  }\n]\n'

    def test_encode_failure_raises_serialization_error(self):
        with patch("hns_tree.renderer.json.dumps", side_effect=TypeError("boom")):
            with pytest.raises(SerializationError, match="boom"):
                render_json([Node("a")])


class TestRenderYaml:
    """Test suite for the YAML renderer."""

    def test_block_style(self):
        assert render_yaml([Node("a", [Node("b")])]) == (
            "- name: a\n"
            "  children:\n"
            "  - name: b\n"
        )

    def test_round_trip(self, forest):
        restored = [Node.from_dict(d) for d in yaml.safe_load(render_yaml(forest))]

        assert restored == forest

    def test_agrees_with_json(self, forest):
        assert yaml.safe_load(render_yaml(forest)) == json.loads(render_json(forest))

    def test_print_yaml_writes_stdout(self, capsys):
        print_yaml([Node("a")])

        assert capsys.readouterr().out == "- name: a\n"

    def test_encode_failure_raises_serialization_error(self):
        with patch(
            "hns_tree.renderer.yaml.safe_dump",
            side_effect=yaml.representer.RepresenterError("cannot represent"),
        ):
            with pytest.raises(SerializationError, match="cannot represent"):
                render_yaml([Node("a")])


class TestRenderDispatch:

    @pytest.mark.parametrize(
        "output_format, expected",
        [
            (OutputFormat.TREE, "a\n└── b\n"),
            (OutputFormat.JSON, None),
            (OutputFormat.YAML, "- name: a\n  children:\n  - name: b\n"),
        ],
    )
    def test_render_matches_format(self, output_format, expected):
        roots = [Node("a", [Node("b")])]
        text = render(roots, output_format)

        if expected is None:
            assert text == render_json(roots) + "\n"
        else:
            assert text == expected

    def test_print_forest_to_stream(self):
        stream = io.StringIO()
        print_forest([Node("a")], OutputFormat.YAML, stream)

        assert stream.getvalue() == "- name: a\n"

    def test_renderers_do_not_mutate(self, forest):
        before = [n.to_dict() for n in forest]
        for output_format in OutputFormat:
            render(forest, output_format)

        assert [n.to_dict() for n in forest] == before
