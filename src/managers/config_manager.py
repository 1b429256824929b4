"""
Config Manager

Main configuration manager with include system support.
Loads modular YAML files and builds the traffic light configuration.
"""

import yaml
from pathlib import Path
from typing import Dict, List, Union
from utils.logger import get_logger, LogLevel, LogCategory
from utils.enum_helper import EnumHelper
from managers.traffic_light_configuration import TrafficLightConfiguration, DEFAULT_CONFIGURATION

log = get_logger().for_category(LogCategory.CONFIG)


class ConfigManager:
    """
    Main configuration manager with include system support

    Loads config.yaml and processes include: directive to load modular YAML files.
    Falls back to factory_defaults.yaml when the main config can't be read.

    Example:
        config = ConfigManager()
        config.load()

        light_config = config.traffic_light_configuration
        level = config.log_level
    """

    def __init__(
        self,
        config_path: Union[str, Path] = "config/config.yaml",
        defaults_path: Union[str, Path] = "config/factory_defaults.yaml",
    ):
        """
        Initialize ConfigManager

        Args:
            config_path: Path to main config.yaml (relative to src/ unless absolute)
            defaults_path: Path to factory defaults fallback
        """
        self.config_path = self._resolve(config_path)
        self.factory_defaults_path = self._resolve(defaults_path)
        self.data: Dict = {}
        self.traffic_light_configuration: TrafficLightConfiguration = DEFAULT_CONFIGURATION

    @staticmethod
    def _resolve(path: Union[str, Path]) -> Path:
        path = Path(path)
        if path.is_absolute():
            return path
        src_dir = Path(__file__).parent.parent
        return src_dir / path

    def load(self) -> Dict:
        """
        Load YAML configuration with include system support

        Process:
        1. Load main config.yaml
        2. If it has 'include:' list, load and merge those files
        3. Otherwise treat as monolithic config
        4. Fallback to factory_defaults.yaml on failure
        5. Build TrafficLightConfiguration from 'traffic_light' section

        Returns:
            Merged config data dict
        """
        try:
            main_config = self._read_yaml(self.config_path)

            if 'include' in main_config:
                log.info("Using include-based configuration")
                self.data = self._load_with_includes(main_config['include'], self.config_path.parent)
            else:
                log.info("Using monolithic configuration")
                self.data = main_config

        except Exception as ex:
            log.error("Failed to load config.yaml", error=str(ex), error_type=type(ex).__name__)
            log.warn("Falling back to factory defaults")
            self.data = self._read_yaml(self.factory_defaults_path)

        self.traffic_light_configuration = self._build_traffic_light_configuration()
        return self.data

    @staticmethod
    def _read_yaml(path: Path) -> Dict:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"{path.name} must contain a mapping, got {type(data).__name__}")
        return data

    def _load_with_includes(self, include_list: List[str], config_dir: Path) -> Dict:
        """
        Load and merge multiple YAML files from include list

        Args:
            include_list: List of filenames to load (e.g., ["signal.yaml", "logging.yaml"])
            config_dir: Directory containing config files

        Returns:
            Merged config dict
        """
        merged = {}

        for filename in include_list:
            filepath = config_dir / filename
            try:
                file_data = self._read_yaml(filepath)
                if file_data:
                    merged.update(file_data)
                    log.info(f"Loaded {filename}", keys=str(list(file_data.keys())))
            except FileNotFoundError:
                log.error(f"File not found: {filename}")
                raise
            except Exception as ex:
                log.error(f"Error loading {filename}", error=str(ex))
                raise

        log.info("Config merge complete", total_keys=len(merged), keys=str(list(merged.keys())[:10]))
        return merged

    def _build_traffic_light_configuration(self) -> TrafficLightConfiguration:
        section = self.data.get("traffic_light")
        if not section:
            log.info("No traffic_light section, using built-in states")
            return DEFAULT_CONFIGURATION

        configuration = TrafficLightConfiguration.from_dict(section)
        log.info(
            f"Loaded {len(configuration.states())} signal states",
            cycle=" → ".join(state.color for state in configuration.states()),
            initial=configuration.initial_state().color,
        )
        return configuration

    # ===== Logging settings =====

    @property
    def logging(self) -> Dict:
        """Raw 'logging' section (empty dict when absent)"""
        return self.data.get("logging") or {}

    @property
    def log_level(self) -> LogLevel:
        """Configured minimum log level (default INFO)"""
        level = self.logging.get("level", "INFO")
        return EnumHelper.from_string(LogLevel, str(level))

    @property
    def use_colors(self) -> bool:
        """Whether log output uses ANSI colors (default True)"""
        return bool(self.logging.get("colors", True))
