# -*- coding: utf-8 -*-
"""
Wizard state slices and their persistence.
"""

from onboarding.state.types import (
    WizardState,
    BaseState,
    ProgressState,
    ControllerState,
)
from onboarding.state.store import SaveChannels, StateStore

__all__ = [
    "WizardState",
    "BaseState",
    "ProgressState",
    "ControllerState",
    "SaveChannels",
    "StateStore",
]
