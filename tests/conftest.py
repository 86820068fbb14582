"""Shared fixtures for i18n tests.

Provides temporary locale folders and a ready-to-use I18N facade.
"""

import pytest

from portable_i18n import DirectoryLocaleProvider, I18N, I18NSettings

EN_TXT = """\
# English test translations
one = one
two = two
three = three
Mailbox.Notification = Hello {0}, you´ve got {1} emails
TextWithLineBreakCharacters = Line One\\nLine Two\\nLine Three
Multiline = [Line One
Line Two
Line Three]
Animals.Dog = Dog
Animals.Cat = Cat
Animals.Rat = Rat
Animals.Snake = Good\\nSnake
"""

ES_TXT = """\
# Traducciones de prueba
one = uno
two = dos
three = tres
Mailbox.Notification = Hola {0}, tienes {1} emails
TextWithLineBreakCharacters = Línea Uno\\nLínea Dos\\nLínea Tres
Multiline = [Línea Uno
Línea Dos
Línea Tres]
Animals.Dog = Perro
Animals.Cat = Gato
Animals.Rat = Rata
"""


@pytest.fixture
def en_txt():
    return EN_TXT


@pytest.fixture
def es_txt():
    return ES_TXT


@pytest.fixture
def locales_root(tmp_path):
    """Create a temporary root with a Locales folder.

    Returns a directory structure like:
    - Locales/en.txt
    - Locales/es.txt
    """
    folder = tmp_path / "Locales"
    folder.mkdir()
    (folder / "en.txt").write_text(EN_TXT, encoding="utf-8")
    (folder / "es.txt").write_text(ES_TXT, encoding="utf-8")
    return tmp_path


@pytest.fixture
def settings():
    """Default settings, independent of the environment."""
    return I18NSettings(
        not_found_symbol="?",
        throw_when_key_not_found=False,
        fallback_locale=None,
        resources_folder="Locales",
        culture=None,
    )


@pytest.fixture
def make_i18n(locales_root, settings):
    """Build I18N facades over the temporary locales, disposing them afterwards."""
    created = []

    def _make(culture="en-US", root=None):
        instance = I18N(
            DirectoryLocaleProvider(root or locales_root),
            settings=settings,
            culture=culture,
        )
        created.append(instance)
        return instance

    yield _make

    for instance in created:
        instance.dispose()


@pytest.fixture
def i18n(make_i18n):
    """Initialized facade with "en" loaded."""
    return make_i18n().set_not_found_symbol("?").set_throw_when_key_not_found(False).init()
