"""
Tests for the remote-first translator.
"""

import asyncio
import pytest
from fallback import FallbackResolver
from metrics import get_metrics
from remote import RemoteUnavailable
from translator import Translator


class StubRemote:
    def __init__(self, result=None, reason=None):
        self.result = result
        self.reason = reason
        self.calls = []

    def resolve(self, text, source_lang, target_lang):
        self.calls.append((text, source_lang, target_lang))
        if self.reason:
            raise RemoteUnavailable(self.reason)
        return self.result


class StubAsyncRemote(StubRemote):
    async def resolve(self, text, source_lang, target_lang):
        return StubRemote.resolve(self, text, source_lang, target_lang)


class CountingFallback(FallbackResolver):
    def __init__(self):
        super().__init__()
        self.calls = 0

    def resolve(self, text, target_lang):
        self.calls += 1
        return super().resolve(text, target_lang)


@pytest.mark.parametrize("text", ["hello", "  spaced  ", "日本語", "anything at all"])
def test_same_language_returns_text(text):
    remote = StubRemote(result="should not be used")
    fallback = CountingFallback()
    translator = Translator(remote=remote, fallback=fallback)

    assert translator.translate(text, "fr", "fr") == text
    assert remote.calls == []
    assert fallback.calls == 0


def test_remote_result_returned_verbatim():
    remote = StubRemote(result="  Hola, ¿qué tal?  ")
    fallback = CountingFallback()
    translator = Translator(remote=remote, fallback=fallback)

    assert translator.translate("Hi, how is it going?", "en", "es") == "  Hola, ¿qué tal?  "
    assert remote.calls == [("Hi, how is it going?", "en", "es")]
    assert fallback.calls == 0


def test_remote_failure_uses_fallback():
    remote = StubRemote(reason="HTTP 503")
    fallback = CountingFallback()
    translator = Translator(remote=remote, fallback=fallback)

    result = translator.translate("well hello there", "en", "es")

    assert result == FallbackResolver().resolve("well hello there", "es")
    assert result == "hola (contains: hello)"
    assert len(remote.calls) == 1
    assert fallback.calls == 1


def test_offline_translator():
    translator = Translator()
    assert translator.translate("supercalifragilistic", "en", "de") == \
        '[German translation of: "supercalifragilistic"]'


def test_other_exceptions_are_not_swallowed():
    """Test only RemoteUnavailable triggers the fallback."""
    class Broken:
        def resolve(self, *args):
            raise KeyError("bug")

    with pytest.raises(KeyError):
        Translator(remote=Broken()).translate("hello", "en", "es")


def test_translate_async_remote_first():
    remote = StubAsyncRemote(result="Bonjour")
    fallback = CountingFallback()
    translator = Translator(async_remote=remote, fallback=fallback)

    assert asyncio.run(translator.translate_async("Hello", "en", "fr")) == "Bonjour"
    assert fallback.calls == 0


def test_translate_async_fallback():
    remote = StubAsyncRemote(reason="Timeout")
    translator = Translator(async_remote=remote)
    assert asyncio.run(translator.translate_async("hello", "en", "it")) == "ciao"


def test_translate_async_same_language():
    translator = Translator(async_remote=StubAsyncRemote(result="x"))
    assert asyncio.run(translator.translate_async("hello", "en", "en")) == "hello"
    assert get_metrics().get_counter("same_language") == 1
