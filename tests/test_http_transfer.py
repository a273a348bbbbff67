"""
Unit tests for the HTTP/FTP transfer evaluator.
"""

import pytest

from qoe_engine.evaluators import HttpTransferEvaluator
from qoe_engine.models import HttpSamples, TransferSamples


@pytest.fixture
def evaluator(default_config):
    return HttpTransferEvaluator(default_config)


class TestHttpTransferEvaluator:
    """Tests for HttpTransferEvaluator.evaluate()."""

    def test_download_only(self, evaluator):
        """
        Given: 4 successful downloads at 10, 20, 30 and 40 Mbps
        When: the transfer domain is scored
        Then: only the success ratio and the download metrics carry weight
        """
        samples = HttpSamples(dl=TransferSamples(requests=4, completed=4, throughputs=(40.0, 10.0, 30.0, 20.0)))

        result = evaluator.evaluate(samples)

        assert result.dl_success == pytest.approx(1.0)
        assert result.ul_success is None
        assert result.dl_avg == pytest.approx(25.0)
        assert result.dl_p10 == pytest.approx(13.0)
        assert result.dl_p90 == pytest.approx(37.0)
        assert result.ul_avg is None

        expected_weight = 0.03 + 0.042 + 0.054 + 0.024
        expected = (
            0.03 * 1.0
            + 0.042 * (25.0 - 1.0) / (100.0 - 1.0)
            + 0.054 * (13.0 - 1.0) / (40.0 - 1.0)
            + 0.024 * (37.0 - 10.0) / (240.0 - 10.0)
        ) / expected_weight
        assert result.applied_weight == pytest.approx(expected_weight)
        assert result.score == pytest.approx(expected)

    def test_upload_ratio_used_without_downloads(self, evaluator):
        samples = HttpSamples(ul=TransferSamples(requests=2, completed=1))

        result = evaluator.evaluate(samples)

        assert result.dl_success is None
        assert result.ul_success == pytest.approx(0.5)
        # 50% success is below the 80% "bad" bound
        assert result.score == 0.0
        assert result.applied_weight == pytest.approx(0.03)

    def test_download_ratio_takes_precedence(self, evaluator):
        samples = HttpSamples(
            dl=TransferSamples(requests=1, completed=1),
            ul=TransferSamples(requests=2, completed=0),
        )
        result = evaluator.evaluate(samples)
        assert result.score == pytest.approx(1.0)

    def test_fast_links_score_full_marks(self, evaluator):
        samples = HttpSamples(
            dl=TransferSamples(requests=2, completed=2, throughputs=(300.0, 320.0)),
            ul=TransferSamples(requests=2, completed=2, throughputs=(150.0, 160.0)),
        )
        result = evaluator.evaluate(samples)
        assert result.score == pytest.approx(1.0)
        assert result.applied_weight == pytest.approx(0.27)

    def test_nothing_measured(self, evaluator):
        result = evaluator.evaluate(HttpSamples())
        assert result.score is None
        assert result.applied_weight == 0.0
