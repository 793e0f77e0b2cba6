"""
日誌工具測試
"""

import logging

import wordparts.config as config_module
import wordparts.core.component as component_module
from wordparts.config import TrainerConfig, configure_logging
from wordparts.core.models import WordCard
from wordparts.core.protocols.speech import HypothesisBatch
from wordparts.dataset import parse_dataset
from wordparts.decomposition import WordDecompositionEngine
from wordparts.selection import CardSelectionFilter
from wordparts.speech import FuzzyVoiceMatcher
from wordparts.utils.logger import TimingContext, get_logger, log_timing


class TestGetLogger:
    def test_namespaced(self):
        assert get_logger("speech").name == "wordparts.speech"
        assert get_logger("wordparts.quiz").name == "wordparts.quiz"
        assert get_logger().name == "wordparts"


class TestTimingContext:
    def test_callback_receives_elapsed(self):
        seen = []
        with TimingContext("op", callback=lambda name, elapsed: seen.append((name, elapsed))):
            pass
        assert seen[0][0] == "op"
        assert seen[0][1] >= 0.0

    def test_callback_error_swallowed(self):
        def broken(name, elapsed):
            raise RuntimeError("boom")

        with TimingContext("op", callback=broken):
            pass


class TestComponentLogging:
    def test_state_changes_logged(self, caplog):
        class Recognizer:
            def is_supported(self):
                return True

            def create_session(self, **options):
                self.options = options
                return self

            def start(self):
                pass

            def stop(self):
                pass

        recognizer = Recognizer()
        matcher = FuzzyVoiceMatcher(recognizer, "port")
        with caplog.at_level(logging.DEBUG, logger="wordparts"):
            matcher.start()
            recognizer.options["on_result"]([HypothesisBatch.of("port", is_final=True)])
        assert "listening -> success" in caplog.text

    def test_on_timing_callback(self):
        timings = []

        class Recognizer:
            def is_supported(self):
                return True

            def create_session(self, **options):
                self.options = options
                return self

            def start(self):
                pass

            def stop(self):
                pass

        recognizer = Recognizer()
        matcher = FuzzyVoiceMatcher(recognizer, "port", on_timing=lambda op, t: timings.append(op))
        matcher.start()
        recognizer.options["on_result"]([HypothesisBatch.of("sport")])
        assert timings == ["FuzzyVoiceMatcher.results"]


class TestLogTimingDecorator:
    def test_logs_under_module_logger(self, caplog):
        @log_timing("demo.op")
        def work(x):
            return x * 2

        with caplog.at_level(logging.DEBUG, logger="wordparts"):
            assert work(21) == 42
        assert "[Timing] demo.op" in caplog.text

    def test_card_selection_timed(self, caplog):
        cards = [WordCard(id=f"w{i}", word=f"word{i}", student_friendly_meaning="m") for i in range(3)]
        with caplog.at_level(logging.DEBUG, logger="wordparts"):
            CardSelectionFilter().select(cards, "All", "Mixed")
        records = [r for r in caplog.records if "[Timing] CardSelectionFilter.select" in r.getMessage()]
        assert records
        assert records[0].name == "wordparts.selection.filter"

    def test_dataset_parse_timed(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="wordparts"):
            parse_dataset({"wordCards": []})
        assert "[Timing] parse_dataset" in caplog.text


class TestConfigureLogging:
    def test_verbose_sets_up_debug(self, monkeypatch):
        levels = []
        monkeypatch.setattr(config_module, "setup_logger", lambda level: levels.append(level))
        configure_logging(verbose=True)
        configure_logging(verbose=False)
        assert levels == [logging.DEBUG]

    def test_verbose_config_enables_logging(self, monkeypatch):
        levels = []
        monkeypatch.setattr(config_module, "setup_logger", lambda level: levels.append(level))
        TrainerConfig()
        assert levels == []
        TrainerConfig(verbose=True)
        assert levels == [logging.DEBUG]

    def test_component_honours_config_verbose(self, monkeypatch):
        calls = []
        monkeypatch.setattr(config_module, "setup_logger", lambda level: None)
        monkeypatch.setattr(component_module, "configure_logging", calls.append)
        WordDecompositionEngine()
        WordDecompositionEngine(verbose=True)
        FuzzyVoiceMatcher(None, "port", config=TrainerConfig(min_cards=3))
        FuzzyVoiceMatcher(None, "port", config=TrainerConfig(verbose=True))
        assert calls == [False, True, False, True]
