"""Configuration file support for HTMLScan (.htmlscan.yml)."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

from htmlscan.models import Severity
from htmlscan.rules import DETECTORS

DEFAULT_CONFIG_NAME = ".htmlscan.yml"
DEFAULT_MAX_INPUT_SIZE = 1_000_000


@dataclass
class Config:
    """HTMLScan configuration loaded from .htmlscan.yml."""

    disabled_detectors: list[str] = field(default_factory=list)
    severity_threshold: str = "Suggestion"
    max_input_size: int = DEFAULT_MAX_INPUT_SIZE
    fail_under: int = 70

    @property
    def min_severity(self) -> Severity:
        return Severity(self.severity_threshold)


def load_config(config_path: str | None = None, project_root: str | None = None) -> Config:
    """Load configuration from a YAML file.

    Priority: explicit --config path > .htmlscan.yml in project root > defaults.
    """
    path = None

    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    elif project_root:
        candidate = Path(project_root) / DEFAULT_CONFIG_NAME
        if candidate.exists():
            path = candidate

    if path is None:
        return Config()

    try:
        raw = yaml.safe_load(path.read_text())
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc

    if raw is None:
        return Config()
    if not isinstance(raw, dict):
        raise ValueError(f"Config file {path} must be a YAML mapping, got {type(raw).__name__}")

    return _parse_config(raw)


def _parse_config(raw: dict) -> Config:
    """Parse and validate raw YAML dict into a Config object."""
    config = Config()

    if "disabled_detectors" in raw:
        names = raw["disabled_detectors"]
        if not isinstance(names, list):
            raise ValueError("disabled_detectors must be a list")
        if not all(isinstance(n, str) for n in names):
            raise ValueError("disabled_detectors must be a list of detector names")
        unknown = [n for n in names if n not in DETECTORS]
        if unknown:
            raise ValueError(f"disabled_detectors contains unknown detectors: {', '.join(unknown)}")
        config.disabled_detectors = names

    if "severity_threshold" in raw:
        sev = raw["severity_threshold"]
        valid = {s.value for s in Severity}
        if not isinstance(sev, str) or sev not in valid:
            raise ValueError(f"severity_threshold must be one of {valid}, got '{sev}'")
        config.severity_threshold = sev

    if "max_input_size" in raw:
        val = raw["max_input_size"]
        if not isinstance(val, int) or isinstance(val, bool) or val <= 0:
            raise ValueError("max_input_size must be a positive integer")
        config.max_input_size = val

    if "fail_under" in raw:
        val = raw["fail_under"]
        if not isinstance(val, int) or isinstance(val, bool) or not 0 <= val <= 100:
            raise ValueError("fail_under must be an integer between 0 and 100")
        config.fail_under = val

    return config
