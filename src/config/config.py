import os
import logging
from typing import Optional
import yaml

DEFAULT_SETTINGS_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'settings.yaml')

# Recursion depth of the expression search grows with the pool
HARD_MAX_DICE = 20

logger = logging.getLogger(__name__)


class Config:
    def __init__(self, settings_path: Optional[str] = None):
        self.settings_path = settings_path or os.getenv('SACRED_GEOMETRY_SETTINGS', DEFAULT_SETTINGS_PATH)
        settings = self._load_settings()

        self.max_dice = self._int_setting('SACRED_GEOMETRY_MAX_DICE', settings.get('max_dice', HARD_MAX_DICE))
        self.die_sides = self._int_setting('SACRED_GEOMETRY_DIE_SIDES', settings.get('die_sides', 6))
        self.seed = self._int_setting('SACRED_GEOMETRY_SEED', settings.get('seed'))
        self.log_level = str(os.getenv('LOG_LEVEL', settings.get('log_level', 'INFO'))).upper()

        # Validate settings
        if self.max_dice is None or not 1 <= self.max_dice <= HARD_MAX_DICE:
            raise ValueError(f"max_dice must be between 1 and {HARD_MAX_DICE}")
        if self.die_sides is None or self.die_sides < 1:
            raise ValueError("die_sides must be at least 1")
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    def _int_setting(self, env_name: str, default) -> Optional[int]:
        raw = os.getenv(env_name)
        if raw is not None and raw.strip() != '':
            try:
                return int(raw)
            except ValueError:
                raise ValueError(f"{env_name} must be an integer, got {raw!r}")

        # Values from YAML arrive already typed; don't coerce floats or booleans
        if default is None:
            return None
        if isinstance(default, bool) or not isinstance(default, int):
            raise ValueError(f"{env_name} must be an integer, got {default!r}")
        return default

    def _load_settings(self) -> dict:
        try:
            with open(self.settings_path, 'r', encoding='utf-8') as f:
                settings = yaml.safe_load(f)
        except FileNotFoundError:
            raise ValueError(f"Settings file not found: {self.settings_path}")
        except yaml.YAMLError as e:
            logger.error("YAML parsing error in %s: %s", self.settings_path, e)
            raise ValueError(f"Failed to load settings: {str(e)}")

        if not settings:
            logger.debug("Empty settings file %s, using defaults", self.settings_path)
            return {}
        if not isinstance(settings, dict):
            raise ValueError(f"Settings file must contain a mapping: {self.settings_path}")
        return settings
