"""Translation of raw input events into game events."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto
from typing import Any

import pygame


class GameEvent(Enum):
    QUIT = auto()
    INCREASE_BALLS = auto()
    DECREASE_BALLS = auto()


def _key_event(event: Any) -> GameEvent | None:
    key = getattr(event, "key", None)
    if key == pygame.K_ESCAPE:
        return GameEvent.QUIT
    if key == pygame.K_EQUALS:
        # "+" is typed as shift and equals
        if getattr(event, "mod", 0) & pygame.KMOD_SHIFT:
            return GameEvent.INCREASE_BALLS
        return None
    if key == pygame.K_MINUS:
        return GameEvent.DECREASE_BALLS
    return None


def process_events(raw_events: Iterable[Any] | None = None) -> list[GameEvent]:
    """Turn pending input events into game events.

    ``raw_events`` defaults to the events waiting in the pygame queue. A quit
    request discards everything else and stops processing.
    """
    if raw_events is None:
        raw_events = pygame.event.get()

    events: list[GameEvent] = []
    for event in raw_events:
        if event.type == pygame.QUIT:
            game_event: GameEvent | None = GameEvent.QUIT
        elif event.type == pygame.KEYDOWN:
            game_event = _key_event(event)
        else:
            game_event = None

        if game_event is GameEvent.QUIT:
            return [GameEvent.QUIT]
        if game_event is not None:
            events.append(game_event)
    return events