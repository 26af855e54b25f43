"""
Step phrase registry.

Every BDD phrase in the suite is registered here exactly once before it
is handed to pytest-bdd. Registering the same phrase twice, under any
keyword, fails at import time with DuplicateStepError.
"""

from __future__ import annotations

from typing import Callable, Dict, List, Tuple

import pytest_bdd
from pytest_bdd import parsers

from framework.errors import DuplicateStepError
from framework.utils.logger import get_logger

log = get_logger()


class StepRegistry:
    def __init__(self):
        self._steps: Dict[str, Tuple[str, Callable]] = {}

    def register(self, keyword: str, phrase: str, handler: Callable) -> None:
        if phrase in self._steps:
            prev_keyword, prev_handler = self._steps[phrase]
            raise DuplicateStepError(
                f"Step phrase already registered: {keyword} '{phrase}' "
                f"(first bound by {prev_keyword} {prev_handler.__module__}.{prev_handler.__qualname__})"
            )
        self._steps[phrase] = (keyword, handler)
        log.debug(f"[STEP] {keyword} '{phrase}' -> {handler.__qualname__}")

    def phrases(self) -> List[str]:
        return list(self._steps)

    def handler(self, phrase: str) -> Callable:
        return self._steps[phrase][1]

    def __contains__(self, phrase: str) -> bool:
        return phrase in self._steps

    def __len__(self) -> int:
        return len(self._steps)


STEP_REGISTRY = StepRegistry()


def _phrase_text(name) -> str:
    if isinstance(name, parsers.StepParser):
        return str(name.name)
    return str(name)


def _binder(keyword: str, bdd_decorator):
    def bind(name, target_fixture=None, registry: StepRegistry = STEP_REGISTRY):
        def decorator(func):
            registry.register(keyword, _phrase_text(name), func)
            # stacklevel=2: pytest-bdd injects the step fixture into the caller's module
            return bdd_decorator(name, target_fixture=target_fixture, stacklevel=2)(func)

        return decorator

    bind.__name__ = keyword
    return bind


given = _binder("given", pytest_bdd.given)
when = _binder("when", pytest_bdd.when)
then = _binder("then", pytest_bdd.then)
