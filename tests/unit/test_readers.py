"""Tests for portable_i18n.readers text, JSON and YAML readers."""

import io
import os

import pytest
import yaml

from portable_i18n.readers import JsonKvpReader, TextKvpReader, YamlKvpReader


def _stream(text, encoding="utf-8"):
    return io.BytesIO(text.encode(encoding))


class TestTextKvpReader:
    """Tests for the default key = value reader."""

    def test_reads_key_value_pairs(self, en_txt):
        """read() parses every key = value line."""
        translations = TextKvpReader().read(_stream(en_txt))
        assert translations["one"] == "one"
        assert translations["Mailbox.Notification"] == "Hello {0}, you´ve got {1} emails"
        assert translations["Animals.Rat"] == "Rat"

    def test_ignores_comments_and_blank_lines(self):
        """read() skips comment and blank lines."""
        text = "# comment\n\n   # indented comment\none = uno\n"
        assert TextKvpReader().read(_stream(text)) == {"one": "uno"}

    def test_escaped_line_breaks_become_line_separators(self, en_txt):
        """read() renders escaped line breaks as os.linesep."""
        translations = TextKvpReader().read(_stream(en_txt))
        expected = os.linesep.join(["Line One", "Line Two", "Line Three"])
        assert translations["TextWithLineBreakCharacters"] == expected

    def test_multiline_values(self, es_txt):
        """read() joins bracketed values spanning several lines."""
        translations = TextKvpReader().read(_stream(es_txt))
        expected = os.linesep.join(["Línea Uno", "Línea Dos", "Línea Tres"])
        assert translations["Multiline"] == expected
        assert translations["Animals.Dog"] == "Perro"

    def test_single_line_brackets_are_unwrapped(self):
        """read() unwraps a bracketed value closed on the same line."""
        assert TextKvpReader().read(_stream("key = [value]")) == {"key": "value"}

    def test_bracketed_prefix_is_literal(self):
        """read() keeps a value like '[beta] feature' and the keys after it."""
        text = "hint = [beta] feature\none = uno\ntwo = dos]\nthree = tres"
        assert TextKvpReader().read(_stream(text)) == {
            "hint": "[beta] feature",
            "one": "uno",
            "two": "dos]",
            "three": "tres",
        }

    def test_escaped_backslash(self):
        """read() turns a doubled backslash into one backslash."""
        translations = TextKvpReader().read(_stream("path = C:\\\\new\nmixed = x\\\\\\ny"))
        assert translations["path"] == "C:\\new"
        assert translations["mixed"] == "x\\" + os.linesep + "y"

    def test_lone_backslash_is_kept(self):
        """read() leaves backslashes that start no escape untouched."""
        assert TextKvpReader().read(_stream("path = C:\\temp")) == {"path": "C:\\temp"}

    def test_splits_on_first_separator(self):
        """read() keeps '=' characters inside values."""
        assert TextKvpReader().read(_stream("equation = a = b")) == {"equation": "a = b"}

    def test_tolerates_bom(self):
        """read() strips a UTF-8 byte order mark."""
        translations = TextKvpReader().read(_stream("one = uno", encoding="utf-8-sig"))
        assert translations == {"one": "uno"}

    def test_empty_stream(self):
        """read() returns an empty mapping for empty content."""
        assert TextKvpReader().read(_stream("")) == {}

    def test_later_keys_override(self):
        """read() keeps the last value of a duplicated key."""
        assert TextKvpReader().read(_stream("a = 1\na = 2")) == {"a": "2"}

    def test_line_without_separator_raises(self):
        """read() raises ValueError for a line that is not a pair."""
        with pytest.raises(ValueError):
            TextKvpReader().read(_stream("one = uno\nbroken line"))

    def test_unclosed_multiline_raises(self):
        """read() raises ValueError when a multiline value never closes."""
        with pytest.raises(ValueError):
            TextKvpReader().read(_stream("key = [first\nsecond"))


class TestJsonKvpReader:
    """Tests for the JSON reader."""

    def test_flattens_nested_objects(self):
        """read() turns nested objects into dotted keys."""
        text = '{"one": "uno", "Mailbox": {"Notification": "Hola {0}"}}'
        assert JsonKvpReader().read(_stream(text)) == {
            "one": "uno",
            "Mailbox.Notification": "Hola {0}",
        }

    def test_scalars_are_strings(self):
        """read() converts scalar values to strings."""
        assert JsonKvpReader().read(_stream('{"count": 3, "empty": null}')) == {
            "count": "3",
            "empty": "",
        }

    def test_empty_document_returns_none(self):
        """read() returns None for empty content."""
        assert JsonKvpReader().read(_stream("  ")) is None

    def test_invalid_json_raises(self):
        """read() lets JSON errors propagate."""
        with pytest.raises(ValueError):
            JsonKvpReader().read(_stream("{not json"))

    def test_non_mapping_raises(self):
        """read() rejects documents that are not objects."""
        with pytest.raises(ValueError):
            JsonKvpReader().read(_stream('["a", "b"]'))


class TestYamlKvpReader:
    """Tests for the YAML reader."""

    def test_flattens_namespaces(self):
        """read() turns namespaces into dotted keys."""
        data = {"Animals": {"Dog": "Perro", "Cat": "Gato"}, "one": "uno"}
        translations = YamlKvpReader().read(_stream(yaml.dump(data, allow_unicode=True)))
        assert translations == {"Animals.Dog": "Perro", "Animals.Cat": "Gato", "one": "uno"}

    def test_empty_document_returns_none(self):
        """read() returns None for an empty document."""
        assert YamlKvpReader().read(_stream("")) is None

    def test_invalid_yaml_raises(self):
        """read() lets YAML errors propagate."""
        with pytest.raises(yaml.YAMLError):
            YamlKvpReader().read(_stream("key: [unclosed"))
