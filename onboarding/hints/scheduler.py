# -*- coding: utf-8 -*-
"""
onboarding.hints.scheduler

Deferred, coalesced hint evaluation.

Evaluation runs on the next iteration of the running asyncio loop, after the
current batch of synchronous work has finished. At most one evaluation is
pending at a time; scheduling again while one is pending is a no-op.
"""

from __future__ import annotations

import asyncio
from typing import Callable, Optional

from onboarding.logger import logger


class HintScheduler:
    """
    Single-slot ``call_soon`` queue for the hint evaluator.

    Usage:
        scheduler = HintScheduler(controller._evaluate_hints)
        scheduler.schedule()   # inside a coroutine
        scheduler.schedule()   # coalesced with the first call
    """

    def __init__(self, evaluate: Callable[[], None]) -> None:
        self._evaluate = evaluate
        self._handle: Optional[asyncio.Handle] = None

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def schedule(self) -> None:
        """
        Request an evaluation on the next tick.

        Must be called while an event loop is running.

        Raises:
            RuntimeError: If no event loop is running
        """
        if self._handle is not None:
            logger.debug("[HINTS] Evaluation already pending, coalescing")
            return
        loop = asyncio.get_running_loop()
        self._handle = loop.call_soon(self._run)

    def cancel(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def _run(self) -> None:
        self._handle = None
        self._evaluate()
