# -*- coding: utf-8 -*-
"""
onboarding.state.store

Owner of the base and progress slices. Every save hands the matching
persistence channel a full deep copy of the slice, so callers can keep the
snapshot without seeing later mutations.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Callable, Optional

from onboarding.logger import logger
from onboarding.state.types import (
    BaseState,
    ControllerState,
    ProgressState,
    coerce_base_state,
    coerce_progress_state,
)


@dataclass
class SaveChannels:
    """Caller-supplied persistence callbacks, one per slice."""
    state: Callable[[BaseState], Any]
    progress: Callable[[ProgressState], Any]


class StateStore:
    """Holds both slices and pushes them to their persistence channels."""

    def __init__(
        self,
        channels: SaveChannels,
        base_state: Optional[Any] = None,
        progress_state: Optional[Any] = None,
    ) -> None:
        self._channels = channels
        self.base: BaseState = coerce_base_state(base_state)
        self.progress: ProgressState = coerce_progress_state(progress_state)

    def save_base(self) -> None:
        snapshot = copy.deepcopy(self.base)
        logger.debug(f"[WIZARD] Saving base state: {snapshot.to_dict()}")
        self._channels.state(snapshot)

    def save_progress(self) -> None:
        snapshot = copy.deepcopy(self.progress)
        logger.debug(f"[WIZARD] Saving progress state: {snapshot.to_dict()}")
        self._channels.progress(snapshot)

    def snapshot(self) -> ControllerState:
        """Deep-copied view of both slices."""
        return ControllerState(
            base=copy.deepcopy(self.base),
            progress=copy.deepcopy(self.progress),
        )

    def reset(self) -> None:
        """Replace both slices with fresh defaults (not persisted here)."""
        self.base = BaseState()
        self.progress = ProgressState()
