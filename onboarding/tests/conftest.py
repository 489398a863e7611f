"""
Shared fixtures for the onboarding wizard tests.

The catalog has two presets, ``createProject`` and ``createQueue``. The
default base state has ``createProject`` available, active and suggested.
"""
import asyncio
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent.parent))

from onboarding.controller import Controller
from onboarding.presets.config import PresetConfig, StepConfig, WizardConfig, WizardHooks
from onboarding.state.store import SaveChannels
from onboarding.state.types import BaseState, ProgressState


def build_config(with_hooks: bool = False) -> WizardConfig:
    presets = {
        "createProject": PresetConfig(
            name="createProject",
            steps=[
                StepConfig(slug="createSprint"),
                StepConfig(slug="createIssue"),
                StepConfig(slug="assignIssue"),
            ],
        ),
        "createQueue": PresetConfig(
            name="createQueue",
            steps=[
                StepConfig(slug="queueButton"),
                StepConfig(slug="queueForm"),
            ],
        ),
    }
    hooks = WizardHooks()
    if with_hooks:
        hooks = WizardHooks(
            on_add_preset=MagicMock(),
            on_show_hint=MagicMock(),
            on_step_pass=MagicMock(),
            on_close_hint=MagicMock(),
        )
    return WizardConfig(presets=presets, hooks=hooks)


@dataclass
class WizardOptions:
    """Everything a Controller needs, with mock collaborators."""

    config: WizardConfig
    on_save: SaveChannels
    show_hint: MagicMock
    base_state: BaseState
    progress_state: ProgressState = field(default_factory=ProgressState)

    @property
    def hooks(self) -> WizardHooks:
        return self.config.hooks

    def controller(self) -> Controller:
        return Controller(
            self.config,
            self.on_save,
            self.show_hint,
            base_state=self.base_state,
            progress_state=self.progress_state,
        )

    def saved_base(self, index: int = 0) -> BaseState:
        return self.on_save.state.call_args_list[index][0][0]

    def saved_progress(self, index: int = 0) -> ProgressState:
        return self.on_save.progress.call_args_list[index][0][0]


def build_options(
    base: Optional[Dict[str, Any]] = None,
    progress: Optional[Dict[str, Any]] = None,
    with_hooks: bool = False,
) -> WizardOptions:
    base_kwargs = {
        "available_presets": ["createProject"],
        "active_presets": ["createProject"],
        "suggested_presets": ["createProject"],
        "wizard_state": "visible",
    }
    base_kwargs.update(base or {})
    return WizardOptions(
        config=build_config(with_hooks),
        on_save=SaveChannels(state=MagicMock(), progress=MagicMock()),
        show_hint=MagicMock(),
        base_state=BaseState(**base_kwargs),
        progress_state=ProgressState(**(progress or {})),
    )


async def wait_for_next_tick() -> None:
    await asyncio.sleep(0)
    await asyncio.sleep(0)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def make_options():
    """Factory for options with base/progress overrides."""
    return build_options


@pytest.fixture
def options():
    """Default options without wizard hooks."""
    return build_options()


@pytest.fixture
def options_with_hooks():
    """Default options with MagicMock wizard hooks."""
    return build_options(with_hooks=True)


@pytest.fixture
def next_tick():
    """Coroutine function that lets pending hint evaluations run."""
    return wait_for_next_tick


@pytest.fixture
def anchor():
    """An opaque UI element."""
    return object()
