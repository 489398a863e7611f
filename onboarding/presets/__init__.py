# -*- coding: utf-8 -*-
"""
Preset catalog: presets, steps and hooks.
"""

from onboarding.presets.config import (
    StepConfig,
    PresetHooks,
    WizardHooks,
    PresetConfig,
    WizardConfig,
)

__all__ = [
    "StepConfig",
    "PresetHooks",
    "WizardHooks",
    "PresetConfig",
    "WizardConfig",
]
