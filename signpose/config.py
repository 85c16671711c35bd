"""
Configuration management for the hand sign recognition system.
"""
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field


@dataclass
class RecognizerConfig:
    """Gesture scoring settings."""
    threshold: float = 8.0
    max_score: float = 10.0
    mismatch_penalty: float = 3.0


@dataclass
class CurlConfig:
    """Joint angle limits (degrees) separating the curl levels."""
    no_curl_start_limit: float = 130.0
    half_curl_start_limit: float = 60.0


@dataclass
class SessionConfig:
    """Recognition session settings."""
    history_size: int = 10


@dataclass
class ReplayConfig:
    """Frame replay settings."""
    interval_ms: int = 100


@dataclass
class Cfg:
    """Main configuration class."""
    recognizer: RecognizerConfig = field(default_factory=RecognizerConfig)
    curl: CurlConfig = field(default_factory=CurlConfig)
    session: SessionConfig = field(default_factory=SessionConfig)
    replay: ReplayConfig = field(default_factory=ReplayConfig)


def default_config() -> Cfg:
    """Configuration with built-in defaults, without reading any file."""
    return Cfg()


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses config.default.yaml

    Returns:
        Configuration object with all settings

    Raises:
        FileNotFoundError: if the file does not exist
        ValueError: if the file or one of its sections is not a mapping
    """
    if path is None:
        # Default config ships next to this module
        path = Path(__file__).parent / "config.default.yaml"

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    return _dict_to_config({} if data is None else data)


def _section(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Return one config section, an empty one if it is missing."""
    section = data.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{key}' must be a mapping, got {type(section).__name__}")
    return section


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object. Missing keys keep their defaults."""
    if not isinstance(data, dict):
        raise ValueError(f"Config must be a mapping, got {type(data).__name__}")
    defaults = Cfg()

    rec_data = _section(data, 'recognizer')
    recognizer = RecognizerConfig(
        threshold=float(rec_data.get('threshold', defaults.recognizer.threshold)),
        max_score=float(rec_data.get('max_score', defaults.recognizer.max_score)),
        mismatch_penalty=float(rec_data.get('mismatch_penalty', defaults.recognizer.mismatch_penalty))
    )

    curl_data = _section(data, 'curl')
    curl = CurlConfig(
        no_curl_start_limit=float(curl_data.get('no_curl_start_limit', defaults.curl.no_curl_start_limit)),
        half_curl_start_limit=float(curl_data.get('half_curl_start_limit', defaults.curl.half_curl_start_limit))
    )

    session_data = _section(data, 'session')
    session = SessionConfig(
        history_size=int(session_data.get('history_size', defaults.session.history_size))
    )

    replay_data = _section(data, 'replay')
    replay = ReplayConfig(
        interval_ms=int(replay_data.get('interval_ms', defaults.replay.interval_ms))
    )

    return Cfg(
        recognizer=recognizer,
        curl=curl,
        session=session,
        replay=replay
    )
