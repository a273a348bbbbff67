"""
Tests for the hierarchical QoE score calculator.
"""

import copy

import pytest

from qoe_engine.models import (
    DataSamples,
    HttpSamples,
    MetricsSnapshot,
    ScoreResult,
    TransferSamples,
)
from qoe_engine.scoring.engine import QoEScoreCalculator, compute_scores
from qoe_engine.snapshot import score_tree_to_dict


class TestQoEScoreCalculator:
    """Tests for QoEScoreCalculator.compute()."""

    def test_empty_snapshot(self, calculator):
        """Nothing measured yet: every node is unmeasured, nothing raises."""
        tree = calculator.compute(MetricsSnapshot())

        for node in (tree.voice, tree.http, tree.browsing, tree.streaming, tree.social, tree.latency):
            assert node.score is None
            assert node.applied_weight == 0.0
        assert tree.data == ScoreResult(score=None, applied_weight=0.0)
        assert tree.overall == ScoreResult(score=None, applied_weight=0.0)

    def test_none_snapshot(self, calculator):
        assert calculator.compute(None).overall.score is None

    def test_best_case_network(self, calculator, perfect_snapshot):
        """
        Given: every domain measured with its best recordable values
        When: the tree is computed
        Then: every data domain scores 1.0, voice caps at 0.85 (raw ms setup
              time) and HTTP enters data at 0.9 (0.27 of its 0.30 share)
        """
        tree = calculator.compute(perfect_snapshot)

        for node in (tree.http, tree.browsing, tree.streaming, tree.social, tree.latency):
            assert node.score == pytest.approx(1.0)
        assert tree.voice.score == pytest.approx(0.85)
        assert tree.http.applied_weight == pytest.approx(0.27)
        assert tree.data.score == pytest.approx(0.3 * 0.9 + 0.25 + 0.15 + 0.15 + 0.15)
        assert tree.data.applied_weight == pytest.approx(1.0)
        assert tree.overall.score == pytest.approx(0.4 * 0.85 + 0.6 * 0.97)
        assert tree.overall.applied_weight == pytest.approx(1.0)

    def test_partial_domain_coverage_is_penalized(self, calculator):
        """
        Given: only downloads measured, all at perfect values
        When: the tree is computed
        Then: HTTP scores 1.0 on half its weight and enters data as 0.5
        """
        snapshot = MetricsSnapshot(
            data=DataSamples(http=HttpSamples(dl=TransferSamples(requests=1, completed=1, throughputs=(300.0,))))
        )

        tree = calculator.compute(snapshot)

        assert tree.http.score == pytest.approx(1.0)
        assert tree.http.applied_weight == pytest.approx(0.15)
        assert tree.data.score == pytest.approx(0.5)
        assert tree.data.applied_weight == pytest.approx(0.30)
        # Voice unmeasured: overall is the data score on the data weight only
        assert tree.overall.score == pytest.approx(0.5)
        assert tree.overall.applied_weight == pytest.approx(0.6)

    def test_voice_only(self, calculator, reference_voice_samples):
        """Voice enters the overall score without coverage rescaling."""
        tree = calculator.compute(MetricsSnapshot(voice=reference_voice_samples))

        assert tree.data.score is None
        assert tree.overall.score == pytest.approx(tree.voice.score)
        assert tree.overall.applied_weight == pytest.approx(0.4)

    def test_voice_and_data_combination(self, calculator, perfect_snapshot, reference_voice_samples):
        snapshot = MetricsSnapshot(voice=reference_voice_samples, data=perfect_snapshot.data)

        tree = calculator.compute(snapshot)

        assert tree.overall.score == pytest.approx(0.4 * tree.voice.score + 0.6 * tree.data.score)
        assert tree.overall.applied_weight == pytest.approx(1.0)

    def test_mapping_input(self, calculator):
        payload = {
            "voice": {"attempts": 10, "setupOk": 9, "completed": 5, "dropped": 1},
            "data": {"browsing": {"requests": 4, "completed": 4, "durations": [1000, 2000]}},
        }

        tree = calculator.compute(payload)

        assert tree.voice.cssr == pytest.approx(0.9)
        assert tree.browsing.score == pytest.approx(0.75)

    def test_input_is_not_modified(self, calculator):
        payload = {
            "voice": {"attempts": 3, "setupOk": 3, "setupTimes": [3000, None], "mosSamples": [4.0]},
            "data": {"latency": {"requests": 2, "completed": 2, "scores": [90, 30]}},
        }
        original = copy.deepcopy(payload)

        calculator.compute(payload)

        assert payload == original

    def test_idempotent(self, calculator, perfect_snapshot, reference_voice_samples):
        """Scoring the same snapshot twice gives identical trees."""
        snapshot = MetricsSnapshot(voice=reference_voice_samples, data=perfect_snapshot.data)

        first = calculator.compute(snapshot)
        second = calculator.compute(snapshot)

        assert first == second
        assert score_tree_to_dict(first) == score_tree_to_dict(second)

    def test_scores_stay_in_unit_interval(self, calculator, perfect_snapshot):
        tree = calculator.compute(perfect_snapshot)
        for node in score_tree_to_dict(tree).values():
            assert 0.0 <= node["score"] <= 1.0 + 1e-9

    def test_custom_config(self, write_config, default_config_dict, perfect_snapshot, reference_voice_samples):
        from qoe_engine.config import Config

        default_config_dict["weights"]["overall"] = {"voice": 1.0, "data": 0.0}
        calculator = QoEScoreCalculator(Config(write_config(default_config_dict)))

        tree = calculator.compute(MetricsSnapshot(voice=reference_voice_samples, data=perfect_snapshot.data))

        assert tree.overall.score == pytest.approx(tree.voice.score)


class TestComputeScores:
    def test_wrapper_matches_calculator(self, calculator, perfect_snapshot):
        assert compute_scores(perfect_snapshot) == calculator.compute(perfect_snapshot)

    def test_default_configuration_with_mapping(self):
        """compute_scores works out of the box with the packaged configuration."""
        tree = compute_scores(
            {
                "voice": {
                    "attempts": 100,
                    "setupOk": 100,
                    "completed": 100,
                    "dropped": 0,
                    "setupTimes": [3000] * 10,
                    "mosSamples": [4.5] * 10,
                }
            }
        )

        assert tree.voice.score == pytest.approx(0.85)
        assert tree.overall.score == pytest.approx(0.85)
        assert tree.overall.applied_weight == pytest.approx(0.4)
