"""Configuration settings for the hand ranking report."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_PROBABILITIES = (
    0.999, 0.99, 0.95, 0.9, 0.8, 0.7, 0.6, 0.5, 0.4, 0.3, 0.2, 0.1, 0.05, 0.01, 0.001,
)


@dataclass
class ReportConfig:
    """Report configuration."""

    sample_count: int = 10
    sample_multiplier: int = 1_000_000_007
    probabilities: tuple[float, ...] = DEFAULT_PROBABILITIES
    card_width: int = 4
    show_progress: bool = False

    def __post_init__(self) -> None:
        self.probabilities = tuple(float(p) for p in self.probabilities)
        for p in self.probabilities:
            if not 0.0 <= p <= 1.0:
                raise ValueError(f"Probability out of range [0, 1]: {p}")
        if self.sample_count < 0:
            raise ValueError(f"sample_count must be non-negative, got {self.sample_count}")
        if self.card_width < 1:
            raise ValueError(f"card_width must be at least 1, got {self.card_width}")
        if self.sample_multiplier < 0:
            raise ValueError(f"sample_multiplier must be non-negative, got {self.sample_multiplier}")


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "WARNING"
    log_file: str | None = None


@dataclass
class Config:
    """Complete configuration."""

    report: ReportConfig = field(default_factory=ReportConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path) -> Config:
    """Load configuration from YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    config = Config()

    if "report" in data:
        config.report = ReportConfig(**data["report"])
    if "logging" in data:
        config.logging = LoggingConfig(**data["logging"])

    return config


def save_config(config: Config, path: str | Path) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "report": {
            "sample_count": config.report.sample_count,
            "sample_multiplier": config.report.sample_multiplier,
            "probabilities": list(config.report.probabilities),
            "card_width": config.report.card_width,
            "show_progress": config.report.show_progress,
        },
        "logging": {
            "level": config.logging.level,
            "log_file": config.logging.log_file,
        },
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Default configuration
DEFAULT_CONFIG = Config()
