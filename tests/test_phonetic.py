"""
朗讀文字改寫測試
"""

import pytest

from wordparts.speech import PhoneticRenderer, to_speech_text


class TestPhoneticRenderer:
    @pytest.mark.parametrize(
        "chunk, expected",
        [
            ("tion", "shun"),
            ("sion", "shun"),
            ("ition", "ish-un"),
            ("ation", "ay-shun"),
            ("ble", "bul"),
            ("cle", "kul"),
            ("ence", "ents"),
            ("ance", "ants"),
            ("ough", "oh"),
        ],
    )
    def test_overrides(self, chunk, expected):
        assert to_speech_text(chunk) == expected

    def test_case_insensitive(self):
        assert to_speech_text("TION") == "shun"
        assert to_speech_text("Ble") == "bul"

    def test_reduced_ion(self):
        """ion 與 tion 讀法不同"""
        assert to_speech_text("ion") == "yun"
        assert to_speech_text("ion") != to_speech_text("tion")

    def test_unknown_chunk_unchanged(self):
        assert to_speech_text("port") == "port"
        assert to_speech_text("Vis") == "Vis"

    def test_only_exact_matches(self):
        """只比對整個片段，不做子字串替換"""
        assert to_speech_text("station") == "station"

    def test_custom_table(self):
        renderer = PhoneticRenderer({"ous": "us"})
        assert renderer.to_speech_text("OUS") == "us"
        assert renderer.to_speech_text("tion") == "tion"
        assert renderer.to_speech_text("ion") == "yun"
