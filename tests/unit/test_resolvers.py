"""Tests for portable_i18n.resolvers module."""

import pytest

from portable_i18n import LocaleNotAvailableError, LocaleResolver, NoLocalesAvailableError


class TestLocaleResolver:
    """Tests for the locale fallback chain."""

    @pytest.fixture
    def logs(self):
        return []

    @pytest.fixture
    def resolver(self, logs):
        return LocaleResolver(logs.append)

    def test_requested_locale_wins(self, resolver):
        """resolve() returns an available requested locale first."""
        result = resolver.resolve(["en", "es"], "es-ES", "es", requested="en", fallback="es")
        assert result == "en"

    def test_requested_locale_not_available(self, resolver):
        """resolve() raises for an unavailable requested locale."""
        with pytest.raises(LocaleNotAvailableError):
            resolver.resolve(["en", "es"], "en-US", "en", requested="fr", fallback="en")

    def test_exact_culture_before_language(self, resolver):
        """resolve() prefers the exact culture tag."""
        result = resolver.resolve(["es", "es-ES", "en"], "es-ES", "es")
        assert result == "es-ES"

    def test_language_only_match(self, resolver):
        """resolve() matches the culture language without region."""
        assert resolver.resolve(["en", "es"], "es-ES", "es") == "es"

    def test_language_match_before_fallback(self, resolver):
        """resolve() prefers the culture language over the fallback."""
        assert resolver.resolve(["en", "es"], "es-MX", "es", fallback="en") == "es"

    def test_fallback_when_culture_unsupported(self, resolver, logs):
        """resolve() uses the fallback when the culture has no match."""
        assert resolver.resolve(["en", "es"], "pt-BR", "pt", fallback="en") == "en"
        assert logs == ["Loading fallback locale: en"]

    def test_fallback_before_first_available(self, resolver):
        """resolve() prefers the fallback over the first locale."""
        assert resolver.resolve(["en", "es"], "pt-BR", "pt", fallback="es") == "es"

    def test_unavailable_fallback_ignored(self, resolver, logs):
        """resolve() takes the first locale when the fallback is unavailable."""
        assert resolver.resolve(["es", "en"], "pt-BR", "pt", fallback="fr") == "es"
        assert logs == ["Loading first locale on the list: es"]

    def test_first_available_without_fallback(self, resolver):
        """resolve() takes the first locale in provider order."""
        assert resolver.resolve(["es", "en"], "pt-BR", "pt") == "es"

    def test_invariant_culture(self, resolver):
        """resolve() handles an empty culture."""
        assert resolver.resolve(["es", "en"], "", "", fallback="en") == "en"

    def test_no_locales(self, resolver):
        """resolve() raises when nothing is available."""
        with pytest.raises(NoLocalesAvailableError):
            resolver.resolve([], "en-US", "en", fallback="en")

    def test_culture_matching_is_exact(self, resolver):
        """resolve() does not match tags case-insensitively."""
        assert resolver.resolve(["EN", "es"], "en-US", "en") == "EN"

    def test_default_locale(self):
        """default_locale() only applies the culture steps."""
        assert LocaleResolver.default_locale(["en", "es"], "es-ES", "es") == "es"
        assert LocaleResolver.default_locale(["en", "es"], "pt-BR", "pt") is None
