"""Tests for the Thrift formatter."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Any

import pytest
from yang_thrift.formatters import format_struct, format_thrift, render_struct, render_thrift
from yang_thrift.formatters.thrift import field_type, render_field
from yang_thrift.models import SchemaNode, load_schema_tree

DEVICE_THRIFT = """
// A managed network device.
// One entry per chassis.
struct device {
    // Fully qualified host name.
    1: optional string host_name; // device.yang:14:5
    // One network interface.
    2: list<interface> interface; // device.yang:22:5
    3: list<TODO-uint16> ip_addr; // device.yang:18:5
}

struct interface {
    1: optional bool enabled; // device.yang:31:7
    2: optional i32 mtu; // device.yang:28:7
    3: optional string name; // device.yang:25:7
}
"""


def _node(data: dict[str, Any]) -> SchemaNode:
    return SchemaNode.model_validate(data)


class TestRenderStruct:
    """Tests for render_struct."""

    def test_device_scenario(self, device_node: SchemaNode) -> None:
        """Fields are sorted by name and numbered from 1."""
        assert render_struct(device_node) == (
            "\n"
            "struct Device {\n"
            "    1: optional string host_name; // dev.yang:4:5\n"
            "    2: list<TODO-uint16> ip_addr; // dev.yang:7:5\n"
            "}\n"
        )

    def test_order_independent_of_insertion(self, device_data: dict[str, Any]) -> None:
        """Reordering children does not change the output."""
        reordered = dict(device_data)
        reordered["children"] = dict(reversed(list(device_data["children"].items())))

        assert render_struct(_node(reordered)) == render_struct(_node(device_data))

    def test_field_numbers_contiguous(self) -> None:
        """Field tags run 1..k over the non-RPC children."""
        children: dict[str, Any] = {
            name: {"kind": "leaf", "type": "string"} for name in ["d", "b", "a", "c"]
        }
        children["zap"] = {"kind": "rpc"}
        text = render_struct(_node({"name": "s", "children": children}))

        tags = [line.split(":")[0].strip() for line in text.splitlines() if ": " in line]
        assert tags == ["1", "2", "3", "4"]
        assert "zap" not in text

    def test_sort_is_code_point_order(self) -> None:
        """Upper case sorts before lower case, digits before letters."""
        children = {name: {"kind": "leaf", "type": "string"} for name in ["b", "B", "a", "1x"]}
        text = render_struct(_node({"name": "s", "children": children}))

        names = [line.split()[-2].rstrip(";") for line in text.splitlines() if ": " in line]
        assert names == ["1x", "B", "a", "b"]

    def test_rpc_only_container_skipped(self) -> None:
        """A container whose only children are RPCs emits nothing at all."""
        node = _node({"name": "ops", "children": {"reset": {"kind": "rpc"}}})
        assert render_struct(node) == ""

    def test_empty_container_skipped(self) -> None:
        """A container without children emits nothing."""
        assert render_struct(SchemaNode(name="empty")) == ""

    def test_fieldless_children_dropped(self) -> None:
        """Empty and RPC-only containers get no field and no number."""
        node = _node(
            {
                "name": "top",
                "children": {
                    "a": {"kind": "leaf", "type": "string"},
                    "box": {},
                    "ops": {"children": {"reset": {"kind": "rpc"}}},
                    "z": {"kind": "leaf", "type": "int32"},
                },
            }
        )
        assert render_struct(node) == (
            "\nstruct top {\n"
            "    1: optional string a; // \n"
            "    2: optional i32 z; // \n"
            "}\n"
        )

    def test_only_fieldless_children(self) -> None:
        """A container whose children all lack fields emits nothing."""
        node = _node({"name": "top", "children": {"outer": {"children": {"inner": {}}}}})
        assert render_struct(node) == ""

    def test_order_and_names_follow_keys(self) -> None:
        """Fields are sorted and named by mapping key, not by node name."""
        node = _node(
            {
                "name": "top",
                "children": {
                    "a": {"name": "z", "kind": "leaf", "type": "string"},
                    "b": {"name": "y", "kind": "leaf", "type": "string"},
                },
            }
        )
        lines = render_struct(node).splitlines()
        assert lines[2:4] == [
            "    1: optional string a; // ",
            "    2: optional string b; // ",
        ]

    def test_leaf_skipped(self) -> None:
        """Leaves do not produce structs."""
        assert render_struct(_node({"name": "mtu", "kind": "leaf", "type": "uint16"})) == ""

    def test_rpc_node_skipped(self) -> None:
        """RPC nodes are not rendered even when they carry children."""
        node = _node(
            {
                "name": "reboot",
                "kind": "rpc",
                "children": {"delay": {"kind": "leaf", "type": "int32"}},
            }
        )
        assert render_struct(node) == ""

    def test_struct_description(self) -> None:
        """The struct description is emitted line by line before the header."""
        node = _node(
            {
                "name": "s",
                "description": "First line.\nSecond line.",
                "children": {"a": {"kind": "leaf", "type": "string"}},
            }
        )
        lines = render_struct(node).splitlines()
        assert lines[:4] == ["", "// First line.", "// Second line.", "struct s {"]

    def test_empty_field_description(self) -> None:
        """An empty field description emits no comment line."""
        node = _node(
            {
                "name": "s",
                "children": {"a": {"kind": "leaf", "type": "string", "description": ""}},
            }
        )
        assert render_struct(node) == "\nstruct s {\n    1: optional string a; // \n}\n"

    def test_field_description(self) -> None:
        """A field description is emitted as an indented comment block."""
        node = _node(
            {
                "name": "s",
                "children": {
                    "a": {"kind": "leaf", "type": "string", "description": "One.\nTwo."}
                },
            }
        )
        assert render_struct(node) == (
            "\nstruct s {\n"
            "    // One.\n"
            "    // Two.\n"
            "    1: optional string a; // \n"
            "}\n"
        )

    def test_struct_name_normalized(self) -> None:
        """The struct header uses the normalized name."""
        node = _node({"name": "if:stats", "children": {"a": {"kind": "leaf", "type": "int8"}}})
        assert render_struct(node).splitlines()[1] == "struct if_stats {"

    def test_container_field_references_struct(self) -> None:
        """A container child is typed by its normalized struct name."""
        node = _node(
            {
                "name": "top",
                "children": {
                    "if.config": {"children": {"mtu": {"kind": "leaf", "type": "uint16"}}},
                    "peer-list": {
                        "kind": "list",
                        "children": {"addr": {"kind": "leaf", "type": "string"}},
                    },
                },
            }
        )
        lines = render_struct(node).splitlines()
        assert lines[2] == "    1: optional if_config if.config; // "
        assert lines[3] == "    2: list<peer_list> peer_list; // "


class TestFieldType:
    """Tests for field_type."""

    def test_leaf(self) -> None:
        """Leaves use the type table."""
        assert field_type(_node({"name": "a", "kind": "leaf", "type": "int64"})) == "i64"

    def test_leaf_list(self) -> None:
        """Leaf-lists wrap the token in list<>."""
        assert field_type(_node({"name": "a", "kind": "leaf-list", "type": "bits"})) == (
            "list<TODO-bits>"
        )

    def test_untyped_childless_node(self) -> None:
        """A node with neither type nor children degrades to a placeholder."""
        assert field_type(SchemaNode(name="odd")) == "UNKNOWN TYPE"

    def test_typed_container_uses_struct_name(self) -> None:
        """A node with children is a container even if it carries a type."""
        node = _node(
            {
                "name": "odd-one",
                "type": "string",
                "children": {"a": {"kind": "leaf", "type": "string"}},
            }
        )
        assert field_type(node) == "odd_one"

    def test_placeholder_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """Placeholder types are logged at debug level."""
        with caplog.at_level(logging.DEBUG, logger="yang_thrift.formatters.thrift"):
            field_type(_node({"name": "port", "kind": "leaf", "type": "uint16"}))
        assert "No Thrift type for port (uint16)" in caplog.text


class TestRenderField:
    """Tests for render_field."""

    def test_source_always_emitted(self) -> None:
        """The trailing comment is present even without a source location."""
        line = render_field(3, "a-b", _node({"name": "a-b", "kind": "leaf", "type": "boolean"}))
        assert line == "    3: optional bool a_b; // \n"

    def test_list_has_no_optional(self) -> None:
        """Repeated fields use list<> instead of optional."""
        node = _node({"name": "xs", "kind": "leaf-list", "type": "int8", "source": "x.yang:1:1"})
        line = render_field(1, "xs", node)
        assert line == "    1: list<byte> xs; // x.yang:1:1\n"

    def test_named_after_key(self) -> None:
        """The field name comes from the key the child is stored under."""
        node = _node({"name": "ifname", "kind": "leaf", "type": "string"})
        line = render_field(1, "if-name", node)
        assert line == "    1: optional string if_name; // \n"


class TestFormatThrift:
    """Tests for format_thrift and render_thrift."""

    def test_device_file(self, device_yaml: Path) -> None:
        """The device fixture renders to the expected IDL."""
        assert render_thrift(load_schema_tree(device_yaml)) == DEVICE_THRIFT

    def test_format_struct_single_write(self, device_node: SchemaNode) -> None:
        """Each struct is written with one call."""
        writes: list[str] = []

        class Recorder(io.StringIO):
            def write(self, s: str) -> int:
                writes.append(s)
                return super().write(s)

        format_struct(Recorder(), device_node)

        assert writes == [render_struct(device_node)]

    def test_format_struct_nothing_written(self) -> None:
        """Nodes without output do not touch the stream."""
        out = io.StringIO()
        format_struct(out, SchemaNode(name="empty"))
        assert out.getvalue() == ""

    def test_roots_in_order(self) -> None:
        """Roots render in the given order, each in pre-order."""
        first = _node(
            {
                "name": "b-root",
                "children": {
                    "inner": {"children": {"x": {"kind": "leaf", "type": "string"}}},
                },
            }
        )
        second = _node({"name": "a-root", "children": {"y": {"kind": "leaf", "type": "string"}}})
        out = io.StringIO()

        format_thrift(out, [first, second])

        headers = [line for line in out.getvalue().splitlines() if line.startswith("struct")]
        assert headers == ["struct b_root {", "struct inner {", "struct a_root {"]

    def test_rpc_sibling_still_rendered(self) -> None:
        """A skipped RPC-only container does not affect its siblings."""
        root = _node(
            {
                "name": "top",
                "children": {
                    "ops": {"children": {"reset": {"kind": "rpc"}}},
                    "state": {"children": {"up": {"kind": "leaf", "type": "boolean"}}},
                },
            }
        )
        text = render_thrift([root])

        assert "struct ops" not in text
        assert "struct state {" in text
        assert "struct top {" in text

    def test_every_struct_preceded_by_blank_line(self, device_yaml: Path) -> None:
        """Each struct starts with a blank separator line, including the first."""
        text = render_thrift(load_schema_tree(device_yaml))
        blocks = text.split("\n\n")
        assert text.startswith("\n")
        assert len(blocks) == 2

    def test_no_entries(self) -> None:
        """No roots produce no output."""
        assert render_thrift([]) == ""

    def test_fieldless_containers_leave_no_trace(self) -> None:
        """Empty and RPC-only containers appear neither as structs nor as fields."""
        root = _node(
            {
                "name": "top",
                "children": {
                    "a": {"kind": "leaf", "type": "string"},
                    "box": {},
                    "ops": {"children": {"reset": {"kind": "rpc"}}},
                },
            }
        )

        text = render_thrift([root])

        assert "box" not in text
        assert "ops" not in text
        assert "UNKNOWN TYPE" not in text
        assert text == "\nstruct top {\n    1: optional string a; // \n}\n"
