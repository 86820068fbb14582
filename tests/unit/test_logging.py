"""Tests for portable_i18n.logging module."""

import logging

import structlog

from portable_i18n.logging import (
    LOG_TAG,
    LOGGER_NAME,
    I18NLog,
    add_library_tag,
    build_processors,
    configure_logging,
)


class TestLibraryTag:
    """Tests for the processor marking I18N events."""

    def test_adds_namespace_and_tag(self):
        event = add_library_tag(None, "info", {"event": "locale_loaded"})
        assert event["library"] == "portable_i18n"
        assert event["tag"] == "[I18N]"

    def test_keeps_existing_values(self):
        event = add_library_tag(None, "info", {"event": "x", "library": "host"})
        assert event["library"] == "host"
        assert event["tag"] == LOG_TAG


class TestBuildProcessors:
    """Tests for the processor chain."""

    def test_chain_includes_library_tag(self):
        assert add_library_tag in build_processors(prod_mode=False)

    def test_production_renders_json(self):
        assert isinstance(build_processors(prod_mode=True)[-1], structlog.processors.JSONRenderer)

    def test_development_renders_console(self):
        assert isinstance(build_processors(prod_mode=False)[-1], structlog.dev.ConsoleRenderer)


class TestConfigureLogging:
    """Tests for configure_logging under pytest."""

    def test_silences_library_namespace(self):
        configure_logging()
        assert logging.getLogger(LOGGER_NAME).level > logging.CRITICAL


class TestI18NLog:
    """Tests for the facade log sink."""

    def test_callback_receives_tagged_line(self):
        lines = []
        log = I18NLog(structlog.stdlib.get_logger(LOGGER_NAME), lines.append)
        log("Disposed")
        assert lines == ["[I18N] Disposed"]

    def test_without_callback(self):
        log = I18NLog(structlog.stdlib.get_logger(LOGGER_NAME))
        log("Disposed")
        assert log.callback is None
