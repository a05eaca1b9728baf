"""Centralized input routing.

Transforms raw pygame events into high-level *actions* depending on the
active state, so states never parse device events themselves.

Design:
- A dict from state name -> list of predicate rules processed in
  declaration order. Each rule is a function(event) -> action|None.
- Every rule sees every event, so one key release can produce several
  actions (SPACE release is both ``stop_jump`` and ``restart``).
- Duplicate actions in one frame are collapsed preserving order of first
  occurrence.
"""

from __future__ import annotations

from typing import Callable, Dict, Iterable, List

import pygame

Action = str
Rule = Callable[[pygame.event.Event], Action | None]


def _key_rule(key: int, action: Action, event_type=pygame.KEYDOWN) -> Rule:
    def _r(e: pygame.event.Event):
        if e.type == event_type and getattr(e, "key", None) == key:
            return action
        return None

    return _r


class InputRouter:
    """Maps pygame events to semantic actions for the active state."""

    def __init__(self) -> None:
        self._rules: Dict[str, List[Rule]] = {}
        self._register_default_rules()

    def _register_default_rules(self) -> None:
        from dinorun.settings import settings

        def bind(keys, action, event_type=pygame.KEYDOWN):
            return [_key_rule(k, action, event_type) for k in keys]

        runner_binds = settings.key_bindings.get("RunnerState", {})
        runner_rules: List[Rule] = []
        # Jump is held: press sets intent, release clears it
        if "jump" in runner_binds:
            runner_rules.extend(bind(runner_binds["jump"], "jump", pygame.KEYDOWN))
            runner_rules.extend(bind(runner_binds["jump"], "stop_jump", pygame.KEYUP))
        # Restart fires on release so the press that ended a run is not reused
        if "restart" in runner_binds:
            runner_rules.extend(bind(runner_binds["restart"], "restart", pygame.KEYUP))
        if "pause_toggle" in runner_binds:
            runner_rules.extend(bind(runner_binds["pause_toggle"], "pause_toggle"))

        pause_binds = settings.key_bindings.get("PauseState", {})
        pause_rules: List[Rule] = []
        for act, keys in pause_binds.items():
            pause_rules.extend(bind(keys, act))

        self._rules.update({"RunnerState": runner_rules, "PauseState": pause_rules})

    def process(self, events: Iterable[pygame.event.Event], state_name: str) -> List[Action]:
        rules = self._rules.get(state_name, [])
        actions: List[Action] = []
        for e in events:
            for rule in rules:
                a = rule(e)
                if a and a not in actions:
                    actions.append(a)
        return actions


__all__ = ["InputRouter", "Action"]
