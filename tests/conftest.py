"""
Pytest fixtures and shared configuration for the QoE engine tests
"""

import copy
import logging
from pathlib import Path
from typing import Any, Callable, Dict

import pytest
import yaml

from qoe_engine.config import DEFAULT_CONFIG_PATH, Config
from qoe_engine.models import (
    BrowsingSamples,
    DataSamples,
    HttpSamples,
    LatencySamples,
    MetricsSnapshot,
    SocialSamples,
    StreamingSamples,
    TransferSamples,
    VoiceSamples,
)
from qoe_engine.scoring.engine import QoEScoreCalculator


@pytest.fixture(scope="session")
def default_config() -> Config:
    """Packaged scoring configuration"""
    return Config()


@pytest.fixture
def calculator(default_config) -> QoEScoreCalculator:
    return QoEScoreCalculator(default_config)


@pytest.fixture
def default_config_dict() -> Dict[str, Any]:
    """Raw content of the packaged config.yaml (safe to modify)"""
    with open(DEFAULT_CONFIG_PATH, encoding="utf-8") as f:
        return copy.deepcopy(yaml.safe_load(f))


@pytest.fixture
def write_config(tmp_path) -> Callable[[Any], Path]:
    """Write a configuration (mapping or raw text) to a temporary YAML file"""

    def _write(content: Any, name: str = "config.yaml") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(yaml.safe_dump(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def reference_voice_samples() -> VoiceSamples:
    """Voice session from the reference scenario (CSSR 0.9, CDR 1/6)"""
    return VoiceSamples(
        attempts=10,
        setup_ok=9,
        completed=5,
        dropped=1,
        setup_times=(3000, 4000),
        mos_samples=(4.0, 4.2),
    )


@pytest.fixture
def perfect_snapshot() -> MetricsSnapshot:
    """Every domain measured with the best values each evaluator can record"""
    return MetricsSnapshot(
        voice=VoiceSamples(
            attempts=10,
            setup_ok=10,
            completed=10,
            dropped=0,
            setup_times=(2000, 2500),
            mos_samples=(4.4, 4.5),
        ),
        data=DataSamples(
            browsing=BrowsingSamples(requests=3, completed=3, durations=(0, 0, 0)),
            streaming=StreamingSamples(requests=2, completed=2, mos_samples=(5.0, 5.0), setup_times=(0, 0)),
            http=HttpSamples(
                dl=TransferSamples(requests=2, completed=2, throughputs=(300.0, 320.0)),
                ul=TransferSamples(requests=2, completed=2, throughputs=(150.0, 160.0)),
            ),
            social=SocialSamples(requests=2, completed=2, durations=(0, 0)),
            latency=LatencySamples(requests=2, completed=2, scores=(100, 100)),
        ),
    )


@pytest.fixture
def restore_logging():
    """Restore the root logger after tests that reconfigure logging"""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
