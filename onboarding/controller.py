# -*- coding: utf-8 -*-
"""
onboarding.controller

Stateful orchestrator of the onboarding wizard.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterable, List, Optional, Set, Union

from onboarding.hints.reachability import ReachabilityTracker
from onboarding.hints.scheduler import HintScheduler
from onboarding.hints.types import HintContext
from onboarding.hooks import HookDispatcher
from onboarding.logger import logger
from onboarding.presets.config import WizardConfig
from onboarding.state.store import SaveChannels, StateStore
from onboarding.state.types import (
    ControllerState,
    WizardState,
    add_unique,
    remove_item,
    unique,
)


class Controller:
    """
    Owner of preset lifecycle, wizard state and hint decisions.

    Handles:
    - Admitting, running, finishing and resetting presets
    - Persisting base and progress state after every mutation
    - Firing preset and wizard hooks
    - Deciding, on the next loop tick, which step hint to show

    Operations on preset names missing from the config are silent no-ops.

    Usage:
        controller = Controller(
            config,
            SaveChannels(state=save_base, progress=save_progress),
            show_hint=render_hint,
        )
        await controller.run_preset("createProject")
        await controller.step_element_reached("createSprint", button)
    """

    def __init__(
        self,
        config: WizardConfig,
        save_channels: SaveChannels,
        show_hint: Callable[[HintContext], Any],
        base_state: Optional[Any] = None,
        progress_state: Optional[Any] = None,
    ) -> None:
        self.config = config
        self._store = StateStore(save_channels, base_state, progress_state)
        self._show_hint = show_hint
        self._hooks = HookDispatcher(config)
        self._reachability = ReachabilityTracker()
        self._scheduler = HintScheduler(self._evaluate_hints)
        self._suggested_once: Set[str] = set()
        # Hints on screen, one per preset, in the order they were shown
        self._hints: Dict[str, HintContext] = {}
        logger.info(f"[WIZARD] Controller initialized with {len(config.presets)} preset(s)")

    @property
    def state(self) -> ControllerState:
        """Snapshot of base and progress state."""
        return self._store.snapshot()

    @property
    def hint(self) -> Optional[HintContext]:
        """The most recently shown hint that is still open, if any."""
        return next(reversed(list(self._hints.values())), None)

    @property
    def hints(self) -> List[HintContext]:
        """All open hints, oldest first."""
        return list(self._hints.values())

    def _is_known(self, preset: str, operation: str) -> bool:
        if self.config.has_preset(preset):
            return True
        logger.debug(f"[WIZARD] {operation}: unknown preset '{preset}', ignoring")
        return False

    def _activate(self, preset: str) -> None:
        base = self._store.base
        add_unique(base.available_presets, preset)
        add_unique(base.active_presets, preset)
        add_unique(base.suggested_presets, preset)

    # =================================================================
    # Presets
    # =================================================================

    async def add_preset(self, preset: str) -> None:
        """Make a preset available and fire ``on_add_preset``."""
        if not self._is_known(preset, "add_preset"):
            return
        add_unique(self._store.base.available_presets, preset)
        self._store.save_base()
        self._hooks.preset_added(preset)
        logger.info(f"[WIZARD] Preset added: {preset}")

    async def run_preset(self, preset: str) -> None:
        """
        Start a preset.

        An unavailable preset becomes available. Starting a preset also
        counts as suggesting it.
        """
        if not self._is_known(preset, "run_preset"):
            return
        self._activate(preset)
        self._store.save_base()
        self._hooks.preset_started(preset)
        logger.info(f"[WIZARD] Preset started: {preset}")
        self._scheduler.schedule()

    async def finish_preset(self, preset: str) -> None:
        """Complete a preset. It stays in the suggested presets."""
        if not self._is_known(preset, "finish_preset"):
            return
        self._finish(preset)

    def _finish(self, preset: str) -> None:
        remove_item(self._store.base.active_presets, preset)
        self._store.save_base()

        add_unique(self._store.progress.finished_presets, preset)
        self._store.save_progress()

        self._hooks.preset_ended(preset)
        self._reachability.forget_preset(preset)
        self._close_hints(lambda hint: hint.preset == preset)
        logger.info(f"[WIZARD] Preset finished: {preset}")

    async def reset_preset_progress(self, presets: Iterable[str]) -> None:
        """
        Forget completion and passed steps of the given presets.

        Each preset is also dropped from the suggested presets. Active and
        available presets are left alone, and no hooks fire.
        """
        names = unique(presets)
        known = [name for name in names if self.config.has_preset(name)]
        base = self._store.base
        progress = self._store.progress

        changed = False
        for name in names:
            changed |= remove_item(progress.finished_presets, name)
            if name in known:
                changed |= progress.preset_passed_steps.get(name) != []
                progress.preset_passed_steps[name] = []
            elif progress.preset_passed_steps.pop(name, None) is not None:
                changed = True
            changed |= remove_item(base.suggested_presets, name)
            self._reachability.forget_preset(name)

        if not known and not changed:
            logger.debug(f"[WIZARD] reset_preset_progress: nothing to reset for {names}")
            return

        self._store.save_progress()
        self._store.save_base()
        logger.info(f"[WIZARD] Progress reset for: {', '.join(names)}")

        self._close_hints(lambda hint: hint.preset in names)
        if any(name in base.active_presets for name in known):
            self._scheduler.schedule()

    async def suggest_preset_once(self, preset: str) -> None:
        """
        Show the wizard and start a preset, at most once per preset.

        The once-guard survives later wizard visibility changes.
        """
        if preset in self._suggested_once:
            logger.debug(f"[WIZARD] suggest_preset_once: '{preset}' already suggested")
            return
        if not self._is_known(preset, "suggest_preset_once"):
            return

        base = self._store.base
        if base.wizard_state == WizardState.HIDDEN:
            base.wizard_state = WizardState.VISIBLE
        self._activate(preset)
        self._store.save_base()
        self._suggested_once.add(preset)

        self._hooks.preset_started(preset)
        logger.info(f"[WIZARD] Preset suggested: {preset}")
        self._scheduler.schedule()

    async def set_wizard_state(self, state: Union[WizardState, str]) -> None:
        """
        Show or hide the wizard surface.

        Raises:
            ValueError: If ``state`` is not a WizardState value
        """
        self._store.base.wizard_state = WizardState(state)
        self._store.save_base()
        logger.info(f"[WIZARD] Wizard state set to {self._store.base.wizard_state.value}")

    async def reset_to_default_state(self) -> None:
        """Drop all state, persisted and in-memory, back to defaults."""
        self._scheduler.cancel()
        self._store.reset()
        self._reachability.clear()
        self._suggested_once.clear()
        self._hints.clear()
        self._store.save_base()
        self._store.save_progress()
        logger.info("[WIZARD] All wizard state reset")

    # =================================================================
    # Steps and hints
    # =================================================================

    async def step_element_reached(self, step_slug: str, element: Any) -> None:
        """Record that the UI rendered the anchor of ``step_slug``."""
        self._reachability.mark_reached(step_slug, element)
        logger.debug(f"[HINTS] Step element reached: {step_slug}")
        self._scheduler.schedule()

    async def step_element_disappeared(self, step_slug: str) -> None:
        """Forget the anchor of ``step_slug`` so a later render hints again."""
        self._reachability.mark_disappeared(step_slug)
        logger.debug(f"[HINTS] Step element disappeared: {step_slug}")
        self._close_hints(lambda hint: hint.step_slug == step_slug)

    async def pass_step(self, step_slug: str) -> None:
        """
        Mark ``step_slug`` as passed in every active preset that has it.

        A preset whose steps are all passed is finished.
        """
        progress = self._store.progress
        changed: List[str] = []
        for name in list(self._store.base.active_presets):
            preset = self.config.get_preset(name)
            if preset is None or not preset.has_step(step_slug):
                continue
            passed = progress.preset_passed_steps.setdefault(name, [])
            if add_unique(passed, step_slug):
                changed.append(name)

        if not changed:
            logger.debug(f"[WIZARD] pass_step: no active preset waits for '{step_slug}'")
            return

        self._store.save_progress()
        for name in changed:
            self._hooks.step_passed(name, step_slug)
            logger.info(f"[WIZARD] Step passed: {name}/{step_slug}")

        self._close_hints(lambda hint: hint.step_slug == step_slug and hint.preset in changed)

        for name in changed:
            preset = self.config.get_preset(name)
            if preset.first_pending_step(progress.passed_steps(name)) is None:
                self._finish(name)

        self._scheduler.schedule()

    async def close_hint(self, preset: Optional[str] = None) -> None:
        """
        Dismiss open hints. The dismissed steps are not hinted again.

        Args:
            preset: Only close the hint of this preset (all hints when None)
        """
        self._close_hints(lambda hint: preset is None or hint.preset == preset)

    def _close_hints(self, predicate: Callable[[HintContext], bool]) -> None:
        for name, hint in list(self._hints.items()):
            if not predicate(hint):
                continue
            del self._hints[name]
            logger.debug(f"[HINTS] Hint closed: {hint.preset}/{hint.step_slug}")
            self._hooks.hint_closed(hint.hook_payload())

    def _evaluate_hints(self) -> None:
        """Show a hint for every active preset whose expected step is reachable."""
        progress = self._store.progress
        for name in list(self._store.base.active_presets):
            preset = self.config.get_preset(name)
            if preset is None:
                continue
            step = preset.first_pending_step(progress.passed_steps(name))
            if step is None or not self._reachability.is_reachable(step.slug):
                continue
            if self._reachability.was_hinted(name, step.slug):
                continue

            context = HintContext(
                preset=name,
                step=step,
                element=self._reachability.element_for(step.slug),
            )
            # A preset shows one hint at a time
            self._close_hints(lambda hint: hint.preset == name)
            self._show_hint(context)
            self._reachability.mark_hinted(name, step.slug)
            self._hints[name] = context
            logger.info(f"[HINTS] Hint shown: {name}/{step.slug}")
            self._hooks.hint_shown(context.hook_payload())

    def close(self) -> None:
        """Drop any pending hint evaluation."""
        self._scheduler.cancel()
