"""
Configuration management for the QoE scoring engine.

Weight and threshold tables are data, not code: they are read from a YAML
document and validated once when loaded. Scoring calls never re-validate.
"""

import functools
import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .models import Threshold

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"

# Tolerance used when checking that a weight table sums to its declared total
WEIGHT_SUM_TOLERANCE = 1e-6

DATA_DOMAINS = ("http", "browsing", "streaming", "latency", "social")

# Sub-metrics each evaluator scores; every one needs a weight and a threshold
DOMAIN_METRICS: Dict[str, tuple] = {
    "voice": ("cssr", "cdr", "mos_avg", "mos_under_16", "cst_avg", "cst_over_10"),
    "http": ("success_ratio", "dl_avg", "dl_p10", "dl_p90", "ul_avg", "ul_p10", "ul_p90"),
    "browsing": ("success_ratio", "duration_avg"),
    "streaming": ("success_ratio", "mos_avg", "mos_under_38", "setup_avg", "setup_over_5"),
    "social": ("success_ratio", "duration_avg", "duration_over_5"),
    "latency": ("success_ratio", "avg_score"),
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class Config:
    """Scoring configuration (weights and thresholds)"""

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        """
        Load and validate the configuration.

        Args:
            config_path: Path to a YAML configuration file. Defaults to the
                         configuration shipped with the package.

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the file is empty, malformed or inconsistent
        """
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH

        self.config_path = Path(config_path)
        self.config = self._load_config()
        self._thresholds = self._build_thresholds(self.config["thresholds"])

    def _load_config(self) -> dict[str, Any]:
        """Read the YAML file and validate it"""
        if not self.config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, encoding="utf-8") as f:
                config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in {self.config_path}: {e}") from e

        if config is None:
            raise ValueError(
                f"Configuration file {self.config_path} is empty.\n"
                f"It must define at least the sections: weights, thresholds."
            )

        self._validate_config(config)
        logger.debug(f"Scoring configuration loaded from {self.config_path}")
        return config

    def _validate_config(self, config: dict[str, Any]) -> None:
        """
        Validate the configuration structure and weight totals.

        Args:
            config: Configuration loaded from the YAML file

        Raises:
            ValueError: If the configuration is invalid
        """
        if not isinstance(config, dict):
            raise ValueError(f"{self.config_path} must contain a mapping at top level")

        missing_sections = [s for s in ("weights", "thresholds") if s not in config]
        if missing_sections:
            raise ValueError(
                f"Missing sections in {self.config_path}: {', '.join(missing_sections)}\n"
                f"Required sections: weights, thresholds"
            )

        weights = config["weights"]
        thresholds = config["thresholds"]
        if not isinstance(weights, dict):
            raise ValueError("The 'weights' section must be a mapping")
        if not isinstance(thresholds, dict):
            raise ValueError("The 'thresholds' section must be a mapping")

        self._check_weight_table(weights, "overall", ("voice", "data"), 1.0)
        self._check_weight_table(weights, "data", DATA_DOMAINS, 1.0)
        self._check_weight_table(weights, "voice", DOMAIN_METRICS["voice"], 1.0)
        totals = self._check_declared_totals(weights)
        for domain in DATA_DOMAINS:
            # Data sub-metric weights are fractions of "data", so each table
            # adds up to the share its domain holds inside "data" unless a
            # smaller total is declared in weights.totals
            self._check_weight_table(weights, domain, DOMAIN_METRICS[domain], totals[domain])

        for domain, metrics in DOMAIN_METRICS.items():
            domain_thresholds = thresholds.get(domain)
            if not isinstance(domain_thresholds, dict):
                raise ValueError(f"Missing threshold table for '{domain}'")
            for metric in metrics:
                self._check_threshold(domain, metric, domain_thresholds.get(metric))

    def _check_weight_table(self, weights: dict[str, Any], name: str, expected_keys, total: float) -> None:
        table = weights.get(name)
        if not isinstance(table, dict):
            raise ValueError(f"Missing weight table 'weights.{name}'")

        missing = [k for k in expected_keys if k not in table]
        if missing:
            raise ValueError(f"Missing weights in 'weights.{name}': {', '.join(missing)}")

        unknown = [k for k in table if k not in expected_keys]
        if unknown:
            raise ValueError(f"Unknown weights in 'weights.{name}': {', '.join(unknown)}")

        for key, value in table.items():
            if not _is_number(value):
                raise ValueError(
                    f"Weight 'weights.{name}.{key}' must be a number, " f"got: {type(value).__name__} ({value})"
                )
            if value < 0:
                raise ValueError(f"Weight 'weights.{name}.{key}' cannot be negative: {value}")

        weight_sum = sum(table.values())
        if abs(weight_sum - total) > WEIGHT_SUM_TOLERANCE:
            raise ValueError(f"Weights in 'weights.{name}' sum to {weight_sum:.6f}, expected {total:.6f}")

    def _check_declared_totals(self, weights: dict[str, Any]) -> dict[str, float]:
        """
        Resolve the expected sub-metric total of each data domain.

        Returns:
            Domain -> declared total (the domain share when not declared)

        Raises:
            ValueError: If weights.totals is malformed or a total exceeds its share
        """
        declared = weights.get("totals", {})
        if not isinstance(declared, dict):
            raise ValueError("'weights.totals' must be a mapping")

        unknown = [k for k in declared if k not in DATA_DOMAINS]
        if unknown:
            raise ValueError(f"Unknown domains in 'weights.totals': {', '.join(unknown)}")

        shares = weights["data"]
        totals = {}
        for domain in DATA_DOMAINS:
            total = declared.get(domain, shares[domain])
            if not _is_number(total):
                raise ValueError(f"'weights.totals.{domain}' must be a number, got: {total!r}")
            if total < 0 or total > shares[domain] + WEIGHT_SUM_TOLERANCE:
                raise ValueError(
                    f"'weights.totals.{domain}' must be between 0 and the domain share "
                    f"{shares[domain]}, got: {total}"
                )
            totals[domain] = total
        return totals

    def _check_threshold(self, domain: str, metric: str, threshold: Any) -> None:
        path = f"thresholds.{domain}.{metric}"
        if not isinstance(threshold, dict):
            raise ValueError(f"Missing threshold '{path}'")

        for key in ("good", "bad"):
            if not _is_number(threshold.get(key)):
                raise ValueError(f"'{path}.{key}' must be a number, got: {threshold.get(key)!r}")
        if not isinstance(threshold.get("higher_is_better"), bool):
            raise ValueError(f"'{path}.higher_is_better' must be true or false")

        good, bad = threshold["good"], threshold["bad"]
        if good == bad:
            raise ValueError(f"'{path}': good and bad thresholds must differ (both {good})")
        if threshold["higher_is_better"] != (good > bad):
            raise ValueError(
                f"'{path}': higher_is_better={threshold['higher_is_better']} "
                f"contradicts good={good} / bad={bad}"
            )

    @staticmethod
    def _build_thresholds(raw: dict[str, Any]) -> dict[str, dict[str, Threshold]]:
        return {
            domain: {
                metric: Threshold(
                    good=float(raw[domain][metric]["good"]),
                    bad=float(raw[domain][metric]["bad"]),
                    higher_is_better=raw[domain][metric]["higher_is_better"],
                )
                for metric in metrics
            }
            for domain, metrics in DOMAIN_METRICS.items()
        }

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Fetch a raw configuration value by dotted path.

        Args:
            key_path: Dotted key (e.g. "weights.data.http")
            default: Value returned when the key does not exist

        Returns:
            The configuration value
        """
        keys = key_path.split(".")
        value = self.config

        for key in keys:
            if isinstance(value, dict) and key in value:
                value = value[key]
            else:
                return default

        return value

    @property
    def overall_weights(self) -> dict[str, float]:
        """Voice/data weights of the overall score"""
        return self.config["weights"]["overall"]

    @property
    def domain_shares(self) -> dict[str, float]:
        """Share of each data domain inside the data score"""
        return self.config["weights"]["data"]

    @property
    def voice_weights(self) -> dict[str, float]:
        return self.config["weights"]["voice"]

    def domain_weights(self, domain: str) -> Mapping[str, float]:
        """Sub-metric weights of one domain ("voice", "http", ...)"""
        return self.config["weights"][domain]

    def thresholds(self, domain: str) -> Mapping[str, Threshold]:
        return self._thresholds[domain]

    def threshold(self, domain: str, metric: str) -> Threshold:
        return self._thresholds[domain][metric]


@functools.lru_cache(maxsize=1)
def _default_config() -> Config:
    return Config()


def get_config(config_path: Optional[Union[str, Path]] = None) -> Config:
    """
    Create a configuration instance.

    Args:
        config_path: Path to the configuration file.
                     If None, the packaged config.yaml is used; it is
                     loaded and validated once, then shared.

    Returns:
        Config instance

    Raises:
        FileNotFoundError: If the configuration file does not exist
        ValueError: If the configuration is invalid
    """
    if config_path is None:
        return _default_config()
    return Config(config_path)
