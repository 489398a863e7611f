# -*- coding: utf-8 -*-
"""
onboarding.hooks

Synchronous dispatch of preset and wizard lifecycle hooks. Hook errors are
not caught here; they propagate to the operation that fired the hook.
"""

from typing import Any, Dict, Optional

from onboarding.logger import logger
from onboarding.presets.config import Hook, WizardConfig


class HookDispatcher:
    """Looks up optional hooks in the catalog and calls the ones that exist."""

    def __init__(self, config: WizardConfig) -> None:
        self._config = config

    def _call(self, label: str, hook: Optional[Hook], payload: Dict[str, Any]) -> None:
        if hook is None:
            return
        logger.debug(f"[WIZARD] Hook {label}: {payload}")
        hook(payload)

    # ─────────────── preset hooks ───────────────

    def preset_started(self, preset: str) -> None:
        config = self._config.get_preset(preset)
        if config is not None:
            self._call("on_start", config.hooks.on_start, {"preset": preset})

    def preset_ended(self, preset: str) -> None:
        config = self._config.get_preset(preset)
        if config is not None:
            self._call("on_end", config.hooks.on_end, {"preset": preset})

    # ─────────────── wizard hooks ───────────────

    def preset_added(self, preset: str) -> None:
        self._call("on_add_preset", self._config.hooks.on_add_preset, {"preset": preset})

    def step_passed(self, preset: str, step_slug: str) -> None:
        self._call(
            "on_step_pass",
            self._config.hooks.on_step_pass,
            {"preset": preset, "step": step_slug},
        )

    def hint_shown(self, payload: Dict[str, Any]) -> None:
        self._call("on_show_hint", self._config.hooks.on_show_hint, payload)

    def hint_closed(self, payload: Dict[str, Any]) -> None:
        self._call("on_close_hint", self._config.hooks.on_close_hint, payload)
