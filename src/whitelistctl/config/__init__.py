"""Run configuration: CLI flags, config file and environment."""

from .context import OUTPUT_FORMATS, CheckConfig, OutputFormat
from .loader import CONFIG_KEYS, load_config_file

__all__ = ["CONFIG_KEYS", "OUTPUT_FORMATS", "CheckConfig", "OutputFormat", "load_config_file"]
