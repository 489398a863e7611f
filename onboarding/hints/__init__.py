# -*- coding: utf-8 -*-
"""
Hint scheduling: anchor reachability and deferred evaluation.
"""

from onboarding.hints.types import HintContext
from onboarding.hints.reachability import ReachabilityTracker
from onboarding.hints.scheduler import HintScheduler

__all__ = [
    "HintContext",
    "ReachabilityTracker",
    "HintScheduler",
]
