"""Tests for portable_i18n.culture module."""

import pytest

from portable_i18n import Culture, current_culture
from portable_i18n.culture import CULTURE_ENV_VARS, native_name, normalize_tag


class TestNormalizeTag:
    """Tests for culture tag normalization."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("es_ES.UTF-8", "es-ES"),
            ("pt_br", "pt-BR"),
            ("en-US", "en-US"),
            ("de_DE@euro", "de-DE"),
            ("fr:en", "fr"),
            ("C", ""),
            ("POSIX", ""),
            (None, ""),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_tag(raw) == expected


class TestCulture:
    """Tests for the Culture value object."""

    def test_parts(self):
        culture = Culture("es_ES.UTF-8")
        assert culture.name == "es-ES"
        assert culture.two_letter_language == "es"

    def test_invariant(self):
        culture = Culture.parse(None)
        assert culture.name == ""
        assert culture.two_letter_language == ""

    def test_equality(self):
        assert Culture("pt_BR") == Culture("pt-BR")

    def test_native_name_capitalized(self):
        """native_name is the Babel name with a capital first letter."""
        assert Culture("es").native_name == "Español"
        assert native_name("en") == "English"

    def test_unknown_native_name(self):
        assert native_name("xx") is None
        assert native_name("") is None


class TestCurrentCulture:
    """Tests for host culture detection."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for var in CULTURE_ENV_VARS:
            monkeypatch.delenv(var, raising=False)

    def test_reads_lang(self, monkeypatch):
        monkeypatch.setenv("LANG", "es_ES.UTF-8")
        assert current_culture().name == "es-ES"

    def test_lc_all_wins(self, monkeypatch):
        monkeypatch.setenv("LANG", "es_ES.UTF-8")
        monkeypatch.setenv("LC_ALL", "pt_BR.UTF-8")
        assert current_culture().name == "pt-BR"

    def test_skips_posix_locale(self, monkeypatch):
        monkeypatch.setenv("LC_ALL", "C")
        monkeypatch.setenv("LANG", "fr_FR.UTF-8")
        assert current_culture().name == "fr-FR"
