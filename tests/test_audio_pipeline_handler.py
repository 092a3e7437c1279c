import asyncio
import os

import pytest

from audio_translator.exceptions import (
    ConversionError,
    TranscriptionTimeoutError,
    TranslationError,
    UnsupportedFormatError,
)
from audio_translator.handlers import AudioPipelineHandler

from conftest import FakeConverter, FakeTranscriber, FakeTranslator


def _handler(converter=None, transcriber=None, translator=None, **kwargs):
    return AudioPipelineHandler(
        converter or FakeConverter(),
        transcriber or FakeTranscriber(),
        translator or FakeTranslator(),
        **kwargs,
    )


@pytest.mark.parametrize("name", ["notes.ogg", "notes.flac", "notes", "notes.wav.exe"])
def test_unsupported_extension_rejected_before_any_work(make_asset, name):
    asset = make_asset(name)
    converter, transcriber, translator = FakeConverter(), FakeTranscriber(), FakeTranslator()
    assert os.path.exists(asset.path)

    with pytest.raises(UnsupportedFormatError):
        asyncio.run(_handler(converter, transcriber, translator).process(asset))

    assert not os.path.exists(asset.path)
    assert converter.calls == []
    assert transcriber.calls == []
    assert translator.calls == []


@pytest.mark.parametrize("name", ["a.wav", "a.mp3", "a.m4a", "A.MP3"])
def test_supported_extensions_are_accepted(make_asset, name):
    result = asyncio.run(_handler().process(make_asset(name)))

    assert result.transcript_text == "hello world"


def test_success_returns_both_texts_and_removes_all_files(make_asset):
    asset = make_asset("speech.mp3")
    transcriber, translator = FakeTranscriber("hello world"), FakeTranslator("hola mundo")
    normalized_path = f"{asset.path}.wav"

    result = asyncio.run(_handler(transcriber=transcriber, translator=translator).process(asset))

    assert result.transcript_text == "hello world"
    assert result.translated_text == "hola mundo"
    assert result.target_language == "es"
    assert transcriber.calls == [normalized_path]
    assert translator.calls == [("hello world", "es")]
    assert not os.path.exists(asset.path)
    assert not os.path.exists(normalized_path)


def test_target_language_override_and_default(make_asset):
    translator = FakeTranslator()
    handler = _handler(translator=translator, default_target_language="de")

    asyncio.run(handler.process(make_asset("a.wav")))
    asyncio.run(handler.process(make_asset("b.wav"), target_language="fr"))

    assert [call[1] for call in translator.calls] == ["de", "fr"]


def test_transcription_error_propagates_after_cleanup(make_asset):
    asset = make_asset("speech.m4a")
    translator = FakeTranslator()
    transcriber = FakeTranscriber(error=TranscriptionTimeoutError("job-9", 30.0))

    with pytest.raises(TranscriptionTimeoutError):
        asyncio.run(_handler(transcriber=transcriber, translator=translator).process(asset))

    assert translator.calls == []
    assert not os.path.exists(asset.path)
    assert not os.path.exists(f"{asset.path}.wav")


def test_conversion_failure_removes_partial_output(make_asset):
    asset = make_asset("speech.mp3")
    converter = FakeConverter(error=ConversionError("speech.mp3"), leave_partial=True)
    transcriber = FakeTranscriber()

    with pytest.raises(ConversionError):
        asyncio.run(_handler(converter=converter, transcriber=transcriber).process(asset))

    assert transcriber.calls == []
    assert not os.path.exists(asset.path)
    assert not os.path.exists(f"{asset.path}.wav")


def test_translation_error_propagates_after_cleanup(make_asset):
    asset = make_asset("speech.wav")
    translator = FakeTranslator(error=TranslationError("es", "HTTP 500: boom"))

    with pytest.raises(TranslationError, match="boom"):
        asyncio.run(_handler(translator=translator).process(asset))

    assert not os.path.exists(asset.path)
    assert not os.path.exists(f"{asset.path}.wav")


def test_unexpected_exception_still_cleans_up(make_asset):
    asset = make_asset("speech.wav")
    transcriber = FakeTranscriber(error=RuntimeError("unexpected"))

    with pytest.raises(RuntimeError):
        asyncio.run(_handler(transcriber=transcriber).process(asset))

    assert not os.path.exists(asset.path)
    assert not os.path.exists(f"{asset.path}.wav")


def test_blank_transcript_skips_translation(make_asset):
    translator = FakeTranslator()

    result = asyncio.run(
        _handler(transcriber=FakeTranscriber("  "), translator=translator).process(
            make_asset("silence.wav")
        )
    )

    assert result.translated_text == ""
    assert translator.calls == []


def test_upload_already_removed_is_not_an_error(make_asset):
    asset = make_asset("speech.ogg")
    os.remove(asset.path)

    with pytest.raises(UnsupportedFormatError):
        asyncio.run(_handler().process(asset))
