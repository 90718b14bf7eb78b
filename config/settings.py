"""Configuration settings for the hand engine CLI."""

from dataclasses import asdict, dataclass, field
from pathlib import Path

import yaml


@dataclass
class DealConfig:
    """Dealing configuration."""

    num_players: int = 4
    hand_size: int = 5
    seed: int | None = None  # None uses the system entropy source


@dataclass
class DisplayConfig:
    """Terminal rendering options."""

    use_symbols: bool = True  # ♠ instead of S
    show_scores: bool = True


@dataclass
class EngineConfig:
    """Engine-wide options."""

    log_level: str = "WARNING"


@dataclass
class Config:
    """Complete configuration."""

    deal: DealConfig = field(default_factory=DealConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    engine: EngineConfig = field(default_factory=EngineConfig)


def load_config(path: str | Path) -> Config:
    """Load configuration from YAML file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    config = Config()

    if "deal" in data:
        config.deal = DealConfig(**data["deal"])
    if "display" in data:
        config.display = DisplayConfig(**data["display"])
    if "engine" in data:
        config.engine = EngineConfig(**data["engine"])

    return config


def save_config(config: Config, path: str | Path) -> None:
    """Save configuration to YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "deal": asdict(config.deal),
        "display": asdict(config.display),
        "engine": asdict(config.engine),
    }

    with open(path, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=False)


# Default configuration
DEFAULT_CONFIG = Config()
