import sys
import unittest
from types import SimpleNamespace
from unittest.mock import MagicMock, patch

from seriosity.core.errors import TranscriptionFailure
from seriosity.services.stt_whisper import make_transcriber, transcribe_buffer


class TestOpenAITranscription(unittest.TestCase):
    def setUp(self):
        patcher = patch("seriosity.services.stt_whisper.OpenAI")
        self.mock_openai = patcher.start()
        self.addCleanup(patcher.stop)
        self.create = self.mock_openai.return_value.audio.transcriptions.create
        self.cfg = {"provider": "openai", "model": "whisper-1", "language": "en", "timeout_sec": 30}

    def test_returns_stripped_text(self):
        self.create.return_value = "  I am looking for a flat near my job.  \n"
        text = transcribe_buffer(b"media", "video/webm", self.cfg)
        self.assertEqual(text, "I am looking for a flat near my job.")
        self.mock_openai.assert_called_once_with(timeout=30.0)
        kwargs = self.create.call_args.kwargs
        self.assertEqual(kwargs["model"], "whisper-1")
        self.assertEqual(kwargs["file"], ("interview.webm", b"media", "video/webm"))
        self.assertEqual(kwargs["response_format"], "text")
        self.assertEqual(kwargs["language"], "en")

    def test_upload_name_follows_media_type(self):
        self.create.return_value = "I am looking for a flat near my job."
        cases = (
            ("audio/wav", "interview.wav"),
            ("audio/ogg", "interview.ogg"),
            ("audio/mpeg", "interview.mp3"),
            ("audio/mp3", "interview.mp3"),
            ("video/quicktime", "interview.mov"),
            ("video/webm;codecs=vp9", "interview.webm"),
            ("audio/x-unheard-of", "interview.webm"),
        )
        for media_type, name in cases:
            with self.subTest(media_type=media_type):
                transcribe_buffer(b"media", media_type, self.cfg)
                self.assertEqual(self.create.call_args.kwargs["file"], (name, b"media", media_type))

    def test_object_response_with_text_attribute(self):
        self.create.return_value = SimpleNamespace(text="We need a room for two people.")
        self.assertEqual(
            transcribe_buffer(b"media", "video/webm", self.cfg), "We need a room for two people."
        )

    def test_too_short_text_fails(self):
        for text in ("", "   ", "Hi there"):
            with self.subTest(text=text):
                self.create.return_value = text
                with self.assertRaises(TranscriptionFailure):
                    transcribe_buffer(b"media", "video/webm", self.cfg)

    def test_provider_error_is_wrapped(self):
        self.create.side_effect = ConnectionError("network unreachable")
        with self.assertRaises(TranscriptionFailure) as ctx:
            transcribe_buffer(b"media", "video/webm", self.cfg)
        self.assertIsInstance(ctx.exception.__cause__, ConnectionError)
        self.assertIn("network unreachable", str(ctx.exception))

    def test_make_transcriber_binds_config(self):
        self.create.return_value = "A perfectly usable transcript."
        transcribe = make_transcriber(self.cfg)
        self.assertEqual(transcribe(b"media", "video/webm"), "A perfectly usable transcript.")


class TestLocalTranscription(unittest.TestCase):
    def test_faster_whisper_joins_segments(self):
        model = MagicMock()
        model.transcribe.return_value = (
            [SimpleNamespace(text=" I work as a teacher"), SimpleNamespace(text=" and need a home.")],
            SimpleNamespace(duration=4.0),
        )
        fake_module = SimpleNamespace(WhisperModel=MagicMock(return_value=model))
        with patch.dict(sys.modules, {"faster_whisper": fake_module}):
            text = transcribe_buffer(b"media", "video/webm", {"provider": "local", "model": "base"})
        self.assertEqual(text, "I work as a teacher and need a home.")
        fake_module.WhisperModel.assert_called_once_with("base", device="cpu", compute_type="int8")
        self.assertTrue(model.transcribe.call_args.args[0].endswith(".webm"))


if __name__ == "__main__":
    unittest.main()
