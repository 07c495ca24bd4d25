"""
Configuration management for Color Ambience
Handles all settings, defaults, clamping and persistence
"""

import copy
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable

# Default configuration
DEFAULT_CONFIG = {
    'capture': {
        'capture_name': '',
        'capture_percentage': 1.0,
        'capture_interval': 1000,
        'use_virtual_screen': False,
        'ignore_black_pixels': True,
        'resolution_width': 512,
        'resolution_height': 288,
        'kmeans_threshold': 5.0
    },

    'logging': {
        'level': 'INFO',
        'file_enabled': True,
        'log_filter': []
    }
}

# Allowed (min, max) for numeric capture settings
CAPTURE_LIMITS = {
    'capture_percentage': (0.05, 1.0),
    'capture_interval': (500, 60000),
    'resolution_width': (128, 1024),
    'resolution_height': (72, 576),
    'kmeans_threshold': (0.0, 20.0)
}


def clamp(value, low, high):
    """Clamp value into [low, high], low wins if the range is inverted"""
    if value < low:
        return low
    if value > high:
        return high
    return value


@dataclass(frozen=True)
class CaptureSettings:
    """Capture values handed to the pipeline components"""
    capture_name: str = ''
    capture_percentage: float = 1.0
    capture_interval: int = 1000
    use_virtual_screen: bool = False
    ignore_black_pixels: bool = True
    resolution_width: int = 512
    resolution_height: int = 288
    kmeans_threshold: float = 5.0


class ConfigManager:
    """Manages application configuration"""

    def __init__(self, config_file='config.json'):
        self.config_file = Path(config_file)
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        self.load_failed = False
        self.load_config()

    @property
    def exists(self) -> bool:
        return self.config_file.exists()

    @property
    def needs_setup(self) -> bool:
        """No usable config file: missing or unreadable"""
        return self.load_failed or not self.exists

    def load_config(self):
        """Load configuration from file"""
        self.load_failed = False
        try:
            if self.config_file.exists():
                with open(self.config_file, 'r', encoding='utf-8') as f:
                    saved_config = json.load(f)
                if not isinstance(saved_config, dict):
                    raise ValueError(f"expected a JSON object, got {type(saved_config).__name__}")
                self._merge_config(saved_config)
                self._sanitize()
                self._clamp_capture()
                logging.info(f"Configuration loaded from {self.config_file}")
            else:
                logging.info("Using default configuration")
        except (OSError, ValueError) as e:
            self.load_failed = True
            self.config = copy.deepcopy(DEFAULT_CONFIG)
            logging.error(f"Failed to load config: {e}")
            logging.info("Using default configuration")

    def save_config(self):
        """Save configuration to file"""
        try:
            self.config_file.parent.mkdir(parents=True, exist_ok=True)

            with open(self.config_file, 'w', encoding='utf-8') as f:
                json.dump(self.config, f, indent=2)
            logging.info(f"Configuration saved to {self.config_file}")
            return True
        except OSError as e:
            logging.error(f"Failed to save config: {e}")
            return False

    def _merge_config(self, saved_config):
        """Merge saved config with defaults, preserving structure"""

        def merge_dict(default, saved):
            for key, value in saved.items():
                if key in default:
                    if isinstance(default[key], dict) and isinstance(value, dict):
                        merge_dict(default[key], value)
                    else:
                        default[key] = value

        merge_dict(self.config, saved_config)

    def _sanitize(self):
        """Replace values whose type does not match the default"""
        for section, defaults in DEFAULT_CONFIG.items():
            values = self.config[section]
            if not isinstance(values, dict):
                logging.warning(f"Invalid section {section}: {values!r}, using defaults")
                self.config[section] = copy.deepcopy(defaults)
                continue
            for key, default in defaults.items():
                if not _same_kind(values.get(key), default):
                    logging.warning(f"Invalid {section}.{key}: {values.get(key)!r}, using {default!r}")
                    values[key] = copy.deepcopy(default)

        level = self.config['logging']['level']
        if not isinstance(logging.getLevelName(level.upper()), int):
            logging.warning(f"Invalid logging.level: {level!r}, using 'INFO'")
            self.config['logging']['level'] = 'INFO'

    def _clamp_capture(self):
        capture = self.config['capture']
        for key, (low, high) in CAPTURE_LIMITS.items():
            value = capture.get(key)
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                capture[key] = clamp(value, low, high)

    def get(self, section, key=None, default=None):
        """Get configuration value"""
        if key is None:
            return self.config.get(section, default)
        return self.config.get(section, {}).get(key, default)

    def set(self, section, key, value):
        """Set configuration value, numeric capture values are clamped"""
        if section not in self.config:
            self.config[section] = {}
        if section == 'capture' and key in CAPTURE_LIMITS:
            value = clamp(value, *CAPTURE_LIMITS[key])
        self.config[section][key] = value

    def capture_settings(self) -> CaptureSettings:
        """Snapshot of the capture section for injection into components"""
        capture = self.config['capture']
        return CaptureSettings(
            capture_name=str(capture['capture_name'] or ''),
            capture_percentage=float(capture['capture_percentage']),
            capture_interval=int(capture['capture_interval']),
            use_virtual_screen=bool(capture['use_virtual_screen']),
            ignore_black_pixels=bool(capture['ignore_black_pixels']),
            resolution_width=int(capture['resolution_width']),
            resolution_height=int(capture['resolution_height']),
            kmeans_threshold=float(capture['kmeans_threshold'])
        )

    def reset_to_defaults(self):
        """Reset configuration to defaults"""
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        logging.info("Configuration reset to defaults")

    def validate_config(self):
        """Validate configuration values"""
        errors = []

        capture = self.config['capture']
        for key, (low, high) in CAPTURE_LIMITS.items():
            value = capture.get(key)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                errors.append(f"Invalid {key}: {value!r}")
            elif not (low <= value <= high):
                errors.append(f"Invalid {key}: {value} (expected {low} - {high})")

        for key in ('use_virtual_screen', 'ignore_black_pixels'):
            if not isinstance(capture.get(key), bool):
                errors.append(f"Invalid {key}: {capture.get(key)!r}")

        level = self.config['logging'].get('level', 'INFO')
        if not isinstance(logging.getLevelName(str(level).upper()), int):
            errors.append(f"Invalid log level: {level}")

        return errors

    def interactive_setup(self, ask: Callable[[str], str] = input):
        """First-run questionnaire, saves the answers"""
        self.reset_to_defaults()

        self.set('capture', 'capture_name',
                 _ask_string(ask, "What is the name of the window? (Leave blank for whole screen)"))
        self.set('capture', 'capture_percentage',
                 _ask_number(ask, "How much % of the region should be captured? (5 - 100 %)", int) / 100)
        self.set('capture', 'capture_interval',
                 _ask_number(ask, "How often do you want captures to happen? (500 - 60000 ms)", int))
        self.set('capture', 'use_virtual_screen',
                 bool(_ask_string(ask, "Use virtual screen (all screens) as fallback instead of primary? (Blank for no)")))
        self.set('capture', 'ignore_black_pixels',
                 not _ask_string(ask, "Ignore black pixels in processing? (Blank for yes)"))

        self.save_config()


def _same_kind(value, default):
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, (int, float)):
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    return isinstance(value, type(default))


def _ask_string(ask, question):
    return (ask(f"{question}\n > ") or '').strip()


def _ask_number(ask, question, cast):
    while True:
        answer = _ask_string(ask, question)
        try:
            return cast(answer)
        except ValueError:
            continue


class LogMessageFilter(logging.Filter):
    """Drops records whose message contains one of the configured substrings"""

    def __init__(self, patterns: Iterable[str] = ()):
        super().__init__()
        self.patterns = [p.lower() for p in patterns if p]

    def filter(self, record):
        if not self.patterns:
            return True
        message = record.getMessage().lower()
        return not any(pattern in message for pattern in self.patterns)


def setup_logging(level=logging.INFO, log_dir='logs', log_filter=(), file_enabled=True):
    """Setup logging configuration"""
    message_filter = LogMessageFilter(log_filter)

    handlers = [logging.StreamHandler()]
    if file_enabled:
        log_dir = Path(log_dir)
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_dir / 'color_ambience.log', encoding='utf-8'))

    for handler in handlers:
        handler.addFilter(message_filter)

    unknown_level = None
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            unknown_level, resolved = level, logging.INFO
        level = resolved

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
        force=True
    )

    if unknown_level is not None:
        logging.warning(f"Unknown log level {unknown_level!r}, using INFO")
