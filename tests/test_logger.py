"""
Tests for log formatting and translation context.
"""

import json
import logging
from fallback import FallbackResolver
from logger import ContextFormatter, JSONFormatter, get_logger, setup_logging, translation_context
from remote import RemoteUnavailable
from translator import Translator


class FailingRemote:
    def resolve(self, text, source_lang, target_lang):
        raise RemoteUnavailable("HTTP 503", provider="libretranslate")


def make_record(**extra):
    record = logging.LogRecord("linguabridge.test", logging.WARNING, __file__, 1, "remote down", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_translation_context_drops_unset_and_unknown():
    assert translation_context(provider="mymemory", source_lang=None, user="x") == {"provider": "mymemory"}


def test_json_formatter_includes_context():
    record = make_record(**translation_context(
        provider="mymemory", source_lang="en", target_lang="ja", reason="Timeout"
    ))
    data = json.loads(JSONFormatter().format(record))

    assert data["level"] == "WARNING"
    assert data["message"] == "remote down"
    assert data["provider"] == "mymemory"
    assert data["source_lang"] == "en"
    assert data["target_lang"] == "ja"
    assert data["reason"] == "Timeout"
    assert "strategy" not in data


def test_json_formatter_keeps_non_ascii():
    record = make_record(strategy="exact_match")
    record.msg = "こんにちは"
    assert "こんにちは" in JSONFormatter().format(record)


def test_context_formatter_appends_pairs():
    line = ContextFormatter("%(message)s").format(make_record(strategy="placeholder", target_lang="de"))
    assert line == "remote down [target_lang=de strategy=placeholder]"


def test_context_formatter_without_context():
    assert ContextFormatter("%(message)s").format(make_record()) == "remote down"


def test_fallback_warning_carries_context(caplog):
    caplog.set_level(logging.DEBUG, logger="linguabridge")
    translator = Translator(remote=FailingRemote(), fallback=FallbackResolver())

    assert translator.translate("hello", "en", "fr") == "bonjour"

    warning = next(r for r in caplog.records if r.levelno == logging.WARNING)
    assert warning.provider == "libretranslate"
    assert warning.source_lang == "en"
    assert warning.target_lang == "fr"
    assert warning.reason == "HTTP 503"

    used = next(r for r in caplog.records if getattr(r, "strategy", None))
    assert used.strategy == "exact_match"


def test_setup_logging_json_file(tmp_path):
    log_file = tmp_path / "logs" / "linguabridge.log"
    setup_logging(log_file=str(log_file), log_level="INFO", console_output=False, json_format=True)
    try:
        get_logger("test").info("ready", extra=translation_context(provider="mymemory"))
        for handler in get_logger().handlers:
            handler.flush()

        data = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert data["logger"] == "linguabridge.test"
        assert data["provider"] == "mymemory"
    finally:
        for handler in get_logger().handlers:
            handler.close()
        get_logger().handlers.clear()
