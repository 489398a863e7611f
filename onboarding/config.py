# -*- coding: utf-8 -*-
"""
Configuration constants for the onboarding wizard.
"""

# Default wizard surface visibility for a fresh base state
DEFAULT_WIZARD_STATE: str = "visible"

# Logging configuration is read from the environment
LOG_LEVEL_ENV: str = "ONBOARDING_LOG_LEVEL"
LOG_DIR_ENV: str = "ONBOARDING_LOG_DIR"
DEFAULT_LOG_LEVEL: str = "WARNING"

# Preset catalog files
JSON_CONFIG_SUFFIXES = (".json",)
YAML_CONFIG_SUFFIXES = (".yaml", ".yml")
