# -*- coding: utf-8 -*-
"""
Onboarding wizard: presets, step hints and persisted progress.

Provides:
- Preset catalog: named guided flows made of ordered steps
- Controller: preset lifecycle, state persistence, hooks and hint scheduling
- State slices: session base state and durable progress state
"""

from onboarding.presets.config import (
    StepConfig,
    PresetHooks,
    WizardHooks,
    PresetConfig,
    WizardConfig,
)
from onboarding.state.types import WizardState, BaseState, ProgressState, ControllerState
from onboarding.state.store import SaveChannels
from onboarding.hints.types import HintContext
from onboarding.controller import Controller

__all__ = [
    "StepConfig",
    "PresetHooks",
    "WizardHooks",
    "PresetConfig",
    "WizardConfig",
    "WizardState",
    "BaseState",
    "ProgressState",
    "ControllerState",
    "SaveChannels",
    "HintContext",
    "Controller",
]
