"""
Document Model Tests - parsing, querying and serializing .con files.
"""

import pytest

from conman.core.con_document import (
    ConDocument,
    ConValue,
    KeyNotFoundError,
    is_quoted,
)

GLOBAL_CON_PATH = "C:\\Users\\default\\Documents\\Battlefield 2\\Profiles\\Global.con"
GENERAL_CON_PATH = "C:\\Users\\default\\Documents\\Battlefield 2\\Profiles\\0001\\General.con"


# =============================================================================
# ConValue
# =============================================================================

class TestConValue:

    def test_quoted_value(self):
        assert ConValue.quoted("abc").content == '"abc"'

    def test_from_list(self):
        assert ConValue.from_list(["x", "y"]).content == "x;y"

    def test_quoted_from_list(self):
        assert ConValue.quoted_from_list(["x", "y"]).content == '"x";"y"'

    def test_as_string_strips_quotes(self):
        assert ConValue('"abc"').as_string() == "abc"

    def test_as_string_plain(self):
        assert ConValue("abc").as_string() == "abc"

    def test_as_string_leaves_partially_quoted_value(self):
        assert ConValue('"a" b').as_string() == '"a" b'

    def test_as_string_leaves_value_with_embedded_quotes(self):
        value = ConValue('"server name" "map"')
        assert value.as_string() == '"server name" "map"'

    def test_as_string_empty_quotes(self):
        assert ConValue('""').as_string() == ""

    def test_as_list_single_value(self):
        assert ConValue('"abc"').as_list() == ["abc"]

    def test_as_list_unquotes_each_element(self):
        assert ConValue('"HUD_HELP_A";HUD_HELP_B;"a" b').as_list() == ["HUD_HELP_A", "HUD_HELP_B", '"a" b']

    def test_as_raw_list_keeps_quotes(self):
        assert ConValue('"x";"y"').as_raw_list() == ['"x"', '"y"']

    def test_list_round_trip(self):
        assert ConValue.from_list(["x", "y"]).as_list() == ["x", "y"]
        assert ConValue.quoted_from_list(["x", "y"]).as_list() == ["x", "y"]

    def test_equality(self):
        assert ConValue("a") == ConValue("a")
        assert ConValue("a") != ConValue('"a"')


class TestIsQuoted:

    @pytest.mark.parametrize("value, expected", [
        ('"abc"', True),
        ('""', True),
        ("abc", False),
        ('"abc', False),
        ('abc"', False),
        ('"a"b"', False),
        ('"', False),
        ("", False),
    ])
    def test_is_quoted(self, value, expected):
        assert is_quoted(value) is expected


# =============================================================================
# Parsing
# =============================================================================

class TestFromBytes:

    def test_parses_unix_line_breaks(self):
        doc = ConDocument.from_bytes(
            GLOBAL_CON_PATH,
            b'GlobalSettings.setDefaultUser "0010"\nGlobalSettings.setNamePrefix "=PRE="\n',
        )
        assert doc == ConDocument(GLOBAL_CON_PATH, {
            "GlobalSettings.setDefaultUser": ConValue('"0010"'),
            "GlobalSettings.setNamePrefix": ConValue('"=PRE="'),
        })

    def test_parses_windows_line_breaks(self):
        doc = ConDocument.from_bytes(
            GLOBAL_CON_PATH,
            b'GlobalSettings.setDefaultUser "0010"\r\nGlobalSettings.setNamePrefix "=PRE="\r\n',
        )
        assert doc == ConDocument(GLOBAL_CON_PATH, {
            "GlobalSettings.setDefaultUser": ConValue('"0010"'),
            "GlobalSettings.setNamePrefix": ConValue('"=PRE="'),
        })

    def test_folds_repeated_keys_in_order(self):
        doc = ConDocument.from_bytes(
            GENERAL_CON_PATH,
            b'GeneralSettings.setPlayedVOHelp "HUD_HELP_A"\nGeneralSettings.setPlayedVOHelp "HUD_HELP_B"\n',
        )
        assert doc.entries == {
            "GeneralSettings.setPlayedVOHelp": ConValue('"HUD_HELP_A";"HUD_HELP_B"'),
        }

    def test_parses_empty_input(self):
        doc = ConDocument.from_bytes(GENERAL_CON_PATH, b"")
        assert doc.path == GENERAL_CON_PATH
        assert doc.entries == {}

    def test_drops_lines_without_space(self):
        doc = ConDocument.from_bytes(
            GENERAL_CON_PATH,
            b"rem-header-without-value\r\nGeneralSettings.setHUDTransparency 50\r\n\r\ngarbage\r\nGeneralSettings.setViewIntroMovie 0\r\n",
        )
        assert doc.entries == {
            "GeneralSettings.setHUDTransparency": ConValue("50"),
            "GeneralSettings.setViewIntroMovie": ConValue("0"),
        }

    def test_splits_on_first_space_only(self):
        doc = ConDocument.from_bytes(
            GENERAL_CON_PATH,
            b'GeneralSettings.addServerHistory "1.2.3.4" 16567 "some server" 0\n',
        )
        assert doc.get_value("GeneralSettings.addServerHistory").content == '"1.2.3.4" 16567 "some server" 0'

    def test_keeps_empty_value_after_space(self):
        doc = ConDocument.from_bytes(GENERAL_CON_PATH, b"Some.key \n")
        assert doc.get_value("Some.key") == ConValue("")

    def test_undecodable_bytes_survive_round_trip(self):
        data = b'LocalProfile.setName "caf\xe9"\r\n'
        doc = ConDocument.from_bytes(GENERAL_CON_PATH, data)
        assert doc.to_bytes() == data


# =============================================================================
# Querying and mutating
# =============================================================================

class TestAccess:

    @pytest.fixture
    def doc(self):
        return ConDocument(GENERAL_CON_PATH, {"some-key": ConValue("some-value")})

    def test_has_key(self, doc):
        assert doc.has_key("some-key")
        assert not doc.has_key("some-other-key")

    def test_get_value(self, doc):
        assert doc.get_value("some-key") == ConValue("some-value")

    def test_get_value_missing_key(self, doc):
        with pytest.raises(KeyNotFoundError, match="no such key") as exc_info:
            doc.get_value("some-other-key")
        assert exc_info.value.key == "some-other-key"
        assert exc_info.value.path == GENERAL_CON_PATH

    def test_missing_key_is_lookup_error(self, doc):
        with pytest.raises(LookupError):
            doc.get_value("some-other-key")

    def test_set_value_adds_key(self, doc):
        doc.set_value("other-key", ConValue("other-value"))
        assert doc.entries == {
            "some-key": ConValue("some-value"),
            "other-key": ConValue("other-value"),
        }

    def test_set_value_overwrites(self, doc):
        doc.set_value("some-key", ConValue("new-value"))
        assert doc.get_value("some-key") == ConValue("new-value")

    def test_delete(self, doc):
        doc.delete("some-key")
        assert not doc.has_key("some-key")

    def test_delete_missing_key_is_noop(self, doc):
        doc.delete("some-other-key")
        assert doc.entries == {"some-key": ConValue("some-value")}

    def test_keys_sorted(self):
        doc = ConDocument(GENERAL_CON_PATH, {"b": ConValue("1"), "a": ConValue("2")})
        assert doc.keys() == ["a", "b"]


# =============================================================================
# Serialization
# =============================================================================

class TestToBytes:

    def test_sorts_lines_and_appends_empty_line(self):
        doc = ConDocument(GLOBAL_CON_PATH, {
            "GlobalSettings.setNamePrefix": ConValue('"=PRE="'),
            "GlobalSettings.setDefaultUser": ConValue('"0010"'),
        })
        assert doc.to_bytes() == (
            b'GlobalSettings.setDefaultUser "0010"\r\n'
            b'GlobalSettings.setNamePrefix "=PRE="\r\n'
        )

    def test_expands_multi_values(self):
        doc = ConDocument(GENERAL_CON_PATH, {
            "GeneralSettings.setPlayedVOHelp": ConValue.quoted_from_list(["HUD_HELP_B", "HUD_HELP_A"]),
        })
        assert doc.to_bytes() == (
            b'GeneralSettings.setPlayedVOHelp "HUD_HELP_A"\r\n'
            b'GeneralSettings.setPlayedVOHelp "HUD_HELP_B"\r\n'
        )

    def test_multi_value_from_list_gives_two_lines(self):
        doc = ConDocument(GENERAL_CON_PATH, {"key": ConValue.from_list(["x", "y"])})
        assert doc.to_bytes().split(b"\r\n") == [b"key x", b"key y", b""]

    def test_sorts_by_full_line(self):
        doc = ConDocument(GENERAL_CON_PATH, {
            "a.b": ConValue("2"),
            "a": ConValue("1"),
        })
        # "a 1" < "a.b 2" because space sorts before "."
        assert doc.to_bytes() == b"a 1\r\na.b 2\r\n"

    def test_emits_stored_quotes(self):
        doc = ConDocument(GENERAL_CON_PATH, {"key": ConValue('"a" b')})
        assert doc.to_bytes() == b'key "a" b\r\n'

    def test_empty_document(self):
        assert ConDocument(GENERAL_CON_PATH).to_bytes() == b""

    def test_independent_of_insertion_order(self):
        items = [
            ("GeneralSettings.setViewIntroMovie", ConValue("0")),
            ("GeneralSettings.addServerHistory", ConValue.from_list(['"1.2.3.4" 16567', '"5.6.7.8" 16567'])),
            ("GeneralSettings.setHUDTransparency", ConValue("50")),
        ]
        forward = ConDocument(GENERAL_CON_PATH, dict(items))
        backward = ConDocument(GENERAL_CON_PATH, dict(reversed(items)))

        assert forward.to_bytes() == backward.to_bytes()
        assert forward.to_bytes() == forward.to_bytes()

    def test_round_trip(self):
        doc = ConDocument(GENERAL_CON_PATH, {
            "GeneralSettings.setViewIntroMovie": ConValue("0"),
            "LocalProfile.setName": ConValue.quoted("some name"),
            "GeneralSettings.setPlayedVOHelp": ConValue.quoted_from_list(["HUD_HELP_A", "HUD_HELP_B"]),
        })

        parsed = ConDocument.from_bytes(GENERAL_CON_PATH, doc.to_bytes())

        for key in doc.keys():
            assert parsed.get_value(key).as_list() == doc.get_value(key).as_list()
            assert parsed.get_value(key).as_string() == doc.get_value(key).as_string()

    def test_parse_normalizes_line_breaks(self):
        doc = ConDocument.from_bytes(GENERAL_CON_PATH, b"b 2\na 1\n")
        assert doc.to_bytes() == b"a 1\r\nb 2\r\n"
