# -*- coding: utf-8 -*-
"""
onboarding.hints.reachability

Records which step anchors the UI has rendered, and which (preset, step)
pairs already produced a hint.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Set, Tuple


class ReachabilityTracker:
    """Step slug -> opaque UI element, plus the set of hinted pairs."""

    def __init__(self) -> None:
        self._elements: Dict[str, Any] = {}
        self._hinted: Set[Tuple[str, str]] = set()

    def mark_reached(self, step_slug: str, element: Any) -> None:
        self._elements[step_slug] = element

    def mark_disappeared(self, step_slug: str) -> bool:
        """Forget the anchor and its hinted pairs. Returns True if it was known."""
        self._hinted = {pair for pair in self._hinted if pair[1] != step_slug}
        return self._elements.pop(step_slug, None) is not None

    def element_for(self, step_slug: str) -> Optional[Any]:
        return self._elements.get(step_slug)

    def is_reachable(self, step_slug: str) -> bool:
        return step_slug in self._elements

    def was_hinted(self, preset: str, step_slug: str) -> bool:
        return (preset, step_slug) in self._hinted

    def mark_hinted(self, preset: str, step_slug: str) -> None:
        self._hinted.add((preset, step_slug))

    def forget_preset(self, preset: str) -> None:
        """Re-arm hints for every step of ``preset``."""
        self._hinted = {pair for pair in self._hinted if pair[0] != preset}

    def clear(self) -> None:
        self._elements.clear()
        self._hinted.clear()
