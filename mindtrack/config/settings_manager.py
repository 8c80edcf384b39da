"""
Settings manager - reads and updates settings.yaml

Lookup order:
1. Environment variables (MINDTRACK_DB_PATH, ...)
2. settings.yaml
3. DEFAULTS
"""

import os
import yaml
from pathlib import Path
from typing import Any, Optional, List, Dict

from mindtrack.config.constants import DEFAULT_ACTIVITY_COLOR, DEFAULT_LEISURE_CATEGORIES


class SettingsManager:
    """Settings manager singleton"""

    _instance: Optional['SettingsManager'] = None
    _config: Dict[str, Any] = {}
    _config_path: Path

    # yaml_key -> env_var_name
    ENV_VAR_MAPPING = {
        'db_path': 'MINDTRACK_DB_PATH',
        'settings_path': 'MINDTRACK_SETTINGS',
    }

    DEFAULTS = {
        'db_path': str(Path.home() / '.mindtrack' / 'mindtrack.db'),
        'leisure_categories': list(DEFAULT_LEISURE_CATEGORIES),
        'default_activity_color': DEFAULT_ACTIVITY_COLOR,
        'cors_origins': [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:5173",
            "http://127.0.0.1:5173",
        ],
    }

    def __new__(cls) -> 'SettingsManager':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self) -> None:
        env_path = os.getenv(self.ENV_VAR_MAPPING['settings_path'])
        self._config_path = Path(env_path) if env_path else Path(__file__).parent / 'settings.yaml'
        self._load_config()

    def _load_config(self) -> None:
        """Load settings from the YAML file, if there is one"""
        if self._config_path.exists():
            with open(self._config_path, 'r', encoding='utf-8') as f:
                self._config = yaml.safe_load(f) or {}
        else:
            self._config = {}

    def get(self, key: str, default: Any = None) -> Any:
        """
        Read one setting

        Priority: environment variable > yaml > default

        Args:
            key: setting name
            default: fallback (DEFAULTS is used when omitted)

        Returns:
            the setting value
        """
        if key in self.ENV_VAR_MAPPING:
            env_value = os.getenv(self.ENV_VAR_MAPPING[key])
            if env_value:
                return env_value

        if key in self._config and self._config[key] is not None:
            return self._config[key]

        if default is not None:
            return default
        return self.DEFAULTS.get(key)

    # ===================== Property shortcuts =====================

    @property
    def db_path(self) -> str:
        return self.get('db_path')

    @property
    def leisure_categories(self) -> List[str]:
        return self.get('leisure_categories')

    @property
    def default_activity_color(self) -> str:
        return self.get('default_activity_color')

    @property
    def cors_origins(self) -> List[str]:
        return self.get('cors_origins')


# Global singleton
settings = SettingsManager()
