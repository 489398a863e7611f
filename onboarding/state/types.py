# -*- coding: utf-8 -*-
"""
onboarding.state.types

The two state slices owned by the controller.

Base state is session relevant (which presets are known, running or
suggested, and whether the wizard surface is shown). Progress state is the
durable completion record. Each slice is persisted through its own channel,
always as a complete snapshot.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from onboarding.config import DEFAULT_WIZARD_STATE


class WizardState(str, Enum):
    """Visibility of the onboarding wizard surface."""

    VISIBLE = "visible"
    HIDDEN = "hidden"


def unique(items: Iterable[str]) -> List[str]:
    """Return items in first-seen order with duplicates dropped."""
    seen = set()
    result: List[str] = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result


def add_unique(items: List[str], item: str) -> bool:
    """Append ``item`` unless already present. Returns True if appended."""
    if item in items:
        return False
    items.append(item)
    return True


def remove_item(items: List[str], item: str) -> bool:
    """Remove ``item`` if present. Returns True if removed."""
    if item not in items:
        return False
    items.remove(item)
    return True


@dataclass
class BaseState:
    """
    Session-relevant wizard state.

    Attributes:
        available_presets: Presets the user may discover
        active_presets: Presets currently in progress
        suggested_presets: Presets the wizard has recommended
        wizard_state: Whether the wizard surface is shown
    """
    available_presets: List[str] = field(default_factory=list)
    active_presets: List[str] = field(default_factory=list)
    suggested_presets: List[str] = field(default_factory=list)
    wizard_state: WizardState = WizardState(DEFAULT_WIZARD_STATE)

    def __post_init__(self):
        self.wizard_state = WizardState(self.wizard_state)
        self.available_presets = unique(self.available_presets)
        self.active_presets = unique(self.active_presets)
        self.suggested_presets = unique(self.suggested_presets)

    def to_dict(self) -> dict:
        """Serialize state to the persisted payload."""
        return {
            "availablePresets": list(self.available_presets),
            "activePresets": list(self.active_presets),
            "suggestedPresets": list(self.suggested_presets),
            "wizardState": self.wizard_state.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "BaseState":
        """Deserialize state from the persisted payload."""
        return cls(
            available_presets=list(data.get("availablePresets", [])),
            active_presets=list(data.get("activePresets", [])),
            suggested_presets=list(data.get("suggestedPresets", [])),
            wizard_state=data.get("wizardState", DEFAULT_WIZARD_STATE),
        )


@dataclass
class ProgressState:
    """
    Durable completion record.

    Attributes:
        finished_presets: Presets the user completed
        preset_passed_steps: Step slugs already passed, per preset
    """
    finished_presets: List[str] = field(default_factory=list)
    preset_passed_steps: Dict[str, List[str]] = field(default_factory=dict)

    def __post_init__(self):
        self.finished_presets = unique(self.finished_presets)
        self.preset_passed_steps = {
            preset: unique(steps) for preset, steps in self.preset_passed_steps.items()
        }

    def passed_steps(self, preset: str) -> List[str]:
        """Passed slugs for ``preset``; a missing entry reads as empty."""
        return self.preset_passed_steps.get(preset, [])

    def to_dict(self) -> dict:
        """Serialize state to the persisted payload."""
        return {
            "finishedPresets": list(self.finished_presets),
            "presetPassedSteps": {
                preset: list(steps) for preset, steps in self.preset_passed_steps.items()
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ProgressState":
        """Deserialize state from the persisted payload."""
        passed = data.get("presetPassedSteps") or {}
        return cls(
            finished_presets=list(data.get("finishedPresets", [])),
            preset_passed_steps={preset: list(steps) for preset, steps in passed.items()},
        )


@dataclass
class ControllerState:
    """Read-only snapshot of both slices."""
    base: BaseState
    progress: ProgressState


def coerce_base_state(value: Optional[Any]) -> BaseState:
    if value is None:
        return BaseState()
    if isinstance(value, BaseState):
        return BaseState(
            available_presets=list(value.available_presets),
            active_presets=list(value.active_presets),
            suggested_presets=list(value.suggested_presets),
            wizard_state=value.wizard_state,
        )
    return BaseState.from_dict(value)


def coerce_progress_state(value: Optional[Any]) -> ProgressState:
    if value is None:
        return ProgressState()
    if isinstance(value, ProgressState):
        return ProgressState.from_dict(value.to_dict())
    return ProgressState.from_dict(value)
