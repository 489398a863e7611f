# -*- coding: utf-8 -*-
"""
onboarding.hints.types
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

from onboarding.presets.config import StepConfig


@dataclass(frozen=True)
class HintContext:
    """What the hint renderer gets: the preset, its expected step and the anchor."""

    preset: str
    step: StepConfig
    element: Any

    @property
    def step_slug(self) -> str:
        return self.step.slug

    def hook_payload(self) -> Dict[str, Any]:
        return {"preset": self.preset, "step": self.step.slug}
