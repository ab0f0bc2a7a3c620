"""Unit tests for the formatting module."""

from __future__ import annotations

import pytest

from refinery.core.formatting import (
    MODE_RULES,
    FormatOptions,
    OutputMode,
    Quoting,
    format_flat,
    format_with,
    needs_quoting,
    render_value,
)
from refinery.core.refine import refine


class TestOutputMode:
    """Test suite for OutputMode."""

    @pytest.mark.parametrize(
        "name", ["unix-t1", "UNIX_T1", ":unix-t1", " Unix-T1 ", OutputMode.UNIX_T1]
    )
    def test_parse(self, name):
        """Test the accepted spellings of a mode name."""
        assert OutputMode.parse(name) is OutputMode.UNIX_T1

    def test_parse_unknown(self):
        """Test that unknown names are rejected."""
        with pytest.raises(ValueError, match="Unknown output mode"):
            OutputMode.parse("unix-t2")

    def test_every_mode_has_rules(self):
        """Test that the rule table covers the enumeration."""
        assert set(MODE_RULES) == set(OutputMode)


class TestRenderValue:
    """Test suite for render_value."""

    def test_scalars(self):
        """Test scalar rendering."""
        assert render_value(True) == "True"
        assert render_value(False) == "False"
        assert render_value(128) == "128"
        assert render_value(1.5) == "1.5"
        assert render_value("a b") == "a b"
        assert render_value(None) == ""

    def test_arrays(self):
        """Test array joining."""
        assert render_value([1, 2, 3]) == "1,2,3"
        assert render_value(["a", "b"], glue=" ") == "a b"
        assert render_value([True, None, 2]) == "True,,2"
        assert render_value([]) == ""

    def test_nested_arrays_share_glue(self):
        """Test that nested arrays are flattened with the same glue."""
        assert render_value([[1, 2], [3]], glue=";") == "1;2;3"

    def test_table_inside_array(self):
        """Test that mappings inside arrays render as compact JSON."""
        assert render_value([{"a": 1}]) == '{"a":1}'


class TestNeedsQuoting:
    """Test suite for needs_quoting."""

    def test_never(self):
        """Test that NEVER does not quote."""
        assert needs_quoting("a b", Quoting.NEVER) is False

    def test_whitespace(self):
        """Test plain whitespace detection including tabs and newlines."""
        assert needs_quoting("a b", Quoting.WHITESPACE) is True
        assert needs_quoting("a\tb", Quoting.WHITESPACE) is True
        assert needs_quoting("a\nb", Quoting.WHITESPACE) is True
        assert needs_quoting("ab", Quoting.WHITESPACE) is False
        assert needs_quoting("`a b`", Quoting.WHITESPACE) is True

    def test_shell_balanced_backticks(self):
        """Test that whitespace inside backtick spans is ignored."""
        assert needs_quoting("`hostname -f`", Quoting.SHELL) is False
        assert needs_quoting("pre`a b`post", Quoting.SHELL) is False
        assert needs_quoting("`a b` c", Quoting.SHELL) is True
        assert needs_quoting("`a` `b`", Quoting.SHELL) is True

    def test_shell_odd_backticks_pass_through(self):
        """Test that an odd backtick count is never quoted."""
        assert needs_quoting("`a b c", Quoting.SHELL) is False
        assert needs_quoting("a b ` c", Quoting.SHELL) is False


class TestFormatFlat:
    """Test suite for format_flat."""

    def test_uri_t1_profile(self, layered_root):
        """Test formatting a refined profile as query parameters."""
        flat = refine(layered_root, ["options", "plugin2", "deploy"])
        result = format_flat(flat, mode=OutputMode.URI_T1, glue=",")
        assert result == ["key1=val1", "key1a=True", "key3=val3", "key4=1,2,3,4"]

    def test_unix_t1_filtered_server(self, mongod_root):
        """Test that filtered false flags disappear before negation."""
        flat = refine(mongod_root, ["mongod", "replica"])
        result = format_flat(flat, mode=OutputMode.UNIX_T1, filter=True)
        assert result == ["--fork", "--oplogSize=128", "--port=65010"]

    def test_unix_t1_unfiltered_negates(self, mongod_root):
        """Test that false flags are negated when not filtered."""
        flat = refine(mongod_root, ["mongod"])
        result = format_flat(flat, mode="unix-t1")
        assert result == ["--fork", "--nojournal", "--oplogSize=128", "--port=27017"]

    @pytest.mark.parametrize(
        "mode,expected",
        [
            (OutputMode.URI_T1, ["on=True", "off=False"]),
            (OutputMode.URI_T2, ["on=True", "off=False"]),
            (OutputMode.UNIX_T1, ["--on", "--nooff"]),
            (OutputMode.UNIX_T3, ["--on", "--/off"]),
        ],
    )
    def test_booleans(self, mode, expected):
        """Test boolean rendering per mode."""
        assert format_flat({"on": True, "off": False}, mode=mode) == expected

    @pytest.mark.parametrize(
        "mode,expected",
        [
            (OutputMode.URI_T1, ["on=True"]),
            (OutputMode.URI_T2, ["on=True"]),
            (OutputMode.UNIX_T1, ["--on"]),
            (OutputMode.UNIX_T3, ["--on", "--/off"]),
        ],
    )
    def test_booleans_filtered(self, mode, expected):
        """Test that only UNIX-T3 keeps false booleans when filtering."""
        flat = {"on": True, "off": False, "gone": None}
        assert format_flat(flat, mode=mode, filter=True) == expected

    @pytest.mark.parametrize(
        "mode,expected",
        [
            (OutputMode.URI_T1, "dir='/data/my db'"),
            (OutputMode.URI_T2, "dir=/data/my db"),
            (OutputMode.UNIX_T1, "--dir='/data/my db'"),
            (OutputMode.UNIX_T3, "--dir='/data/my db'"),
        ],
    )
    def test_whitespace_strings(self, mode, expected):
        """Test quoting of strings containing whitespace."""
        assert format_flat({"dir": "/data/my db"}, mode=mode) == [expected]

    def test_backticks_in_unix_modes(self):
        """Test backtick spans in flag values."""
        flat = {
            "host": "`hostname -f`",
            "mixed": "`id -u` user",
            "odd": "`echo a b",
        }
        for mode in (OutputMode.UNIX_T1, OutputMode.UNIX_T3):
            assert format_flat(flat, mode=mode) == [
                "--host=`hostname -f`",
                "--mixed='`id -u` user'",
                "--odd=`echo a b",
            ]

    def test_single_character_keys(self):
        """Test that single-character keys take one dash."""
        flat = {"v": True, "p": 80, "x": [1, 2], "n": "a b"}
        assert format_flat(flat, mode=OutputMode.UNIX_T1) == [
            "-v",
            "-p=80",
            "-x=1,2",
            "-n='a b'",
        ]

    def test_single_character_negation(self):
        """Test negated single-character keys in both UNIX modes."""
        assert format_flat({"q": False}, mode=OutputMode.UNIX_T1) == ["--noq"]
        assert format_flat({"q": False}, mode=OutputMode.UNIX_T3) == ["-/q"]

    def test_single_character_keys_in_uri_modes(self):
        """Test that URI modes ignore key length."""
        assert format_flat({"v": True, "p": 1}, mode=OutputMode.URI_T1) == ["v=True", "p=1"]

    def test_arrays_with_glue(self):
        """Test array joining with a custom glue."""
        flat = {"hosts": ["a", "b"], "ports": [1, 2]}
        assert format_flat(flat, mode=OutputMode.UNIX_T1, glue=";") == [
            "--hosts=a;b",
            "--ports=1;2",
        ]

    def test_array_values_are_not_quoted(self):
        """Test that a joined array is never quoted."""
        assert format_flat({"k": ["a b", "c"]}, mode=OutputMode.URI_T1) == ["k=a b,c"]

    def test_undefined_unfiltered(self):
        """Test rendering of undefined values when not filtered."""
        assert format_flat({"k": None}, mode=OutputMode.URI_T1) == ["k="]
        assert format_flat({"key": None}, mode=OutputMode.UNIX_T1) == ["--key="]
        assert format_flat({"k": None}, mode=OutputMode.UNIX_T1) == ["-k="]
        assert format_flat({"k": None}, mode=OutputMode.UNIX_T3, filter=True) == []

    def test_true_and_string_differ_only_in_value(self):
        """Test that URI-T2 renders booleans and strings the same way."""
        result = format_flat({"a": True, "b": "text"}, mode=OutputMode.URI_T2)
        assert result == ["a=True", "b=text"]

    def test_order_follows_refine(self, layered_root):
        """Test that output order matches the flat mapping order."""
        flat = refine(layered_root, ["options", "plugin1", "test"])
        result = format_flat(flat, mode=OutputMode.URI_T2)
        assert [item.split("=", 1)[0] for item in result] == list(flat)

    def test_empty(self):
        """Test with an empty mapping."""
        assert format_flat({}) == []

    def test_input_not_modified(self):
        """Test that filtering inside format_flat leaves the input alone."""
        flat = {"a": False}
        format_flat(flat, filter=True)
        assert flat == {"a": False}

    def test_format_with_options(self):
        """Test the FormatOptions entry point and its defaults."""
        opts = FormatOptions()
        assert opts.mode is OutputMode.URI_T1
        assert opts.glue == ","
        assert opts.filter is False
        flat = {"a": [1, 2], "b": False}
        assert format_with(flat, opts) == ["a=1,2", "b=False"]
        opts = FormatOptions(mode=OutputMode.UNIX_T1, glue=":", filter=True)
        assert format_with(flat, opts) == ["-a=1:2"]
        flat = {"arr": [1, 2], "off": False}
        assert format_with(flat, opts) == ["--arr=1:2"]


class TestPublicHelpers:
    """Test suite for the smaller public helpers."""

    def test_documented(self):
        """Test that helper names carry docstrings."""
        from refinery.core.types import is_mapping

        for obj in (Quoting, format_with, is_mapping):
            assert obj.__doc__ and obj.__doc__.strip()

    def test_is_mapping(self):
        """Test nested-level detection."""
        from refinery.core.types import is_mapping

        assert is_mapping({}) is True
        assert is_mapping([]) is False
        assert is_mapping(None) is False
