"""Key-repeat scheduling for polled key state.

A host that can only sample "is this key down" each tick still needs
typematic behaviour: one action on the press, nothing during the initial
delay, then one action per repeat interval while the key stays down.
``KeyRepeater`` turns a stream of held/not-held samples into those
action ticks, independently per key identifier.

Repeat state belongs to the widget that owns the repeater. Nothing is
module-global, so two widgets never disturb each other's timing.
"""

from __future__ import annotations

from collections.abc import Collection, Iterable
from dataclasses import dataclass
from typing import Literal

RepeatPhase = Literal["idle", "pressed", "repeating"]


@dataclass(frozen=True)
class RepeatProfile:
    """Timing for one class of key, in seconds."""

    initial_delay: float
    interval: float


CHARACTER_REPEAT = RepeatProfile(initial_delay=0.5, interval=0.05)
ARROW_REPEAT = RepeatProfile(initial_delay=0.5, interval=0.03)
BACKSPACE_REPEAT = RepeatProfile(initial_delay=0.5, interval=0.03)

# Minimum spacing between ctrl+arrow word jumps. Word jumps never auto-repeat.
WORD_JUMP_DEBOUNCE = 0.1


@dataclass
class KeyRepeatState:
    press_start_time: float
    last_repeat_time: float
    phase: RepeatPhase = "pressed"


class KeyRepeater:
    """Per-key press/repeat state machine.

    ``idle -> pressed`` on the down edge (fires), ``pressed -> repeating``
    once the key has been held for the profile's initial delay, and while
    repeating fires every ``interval`` seconds. Releasing returns the key
    to ``idle``.
    """

    def __init__(self) -> None:
        self._states: dict[str, KeyRepeatState] = {}
        self.active_key: str | None = None

    def phase(self, key: str) -> RepeatPhase:
        state = self._states.get(key)
        return state.phase if state is not None else "idle"

    def poll(self, key: str, held: bool, now: float, profile: RepeatProfile) -> bool:
        """Advance *key*'s state for this tick. Returns True if an action fires."""
        if not held:
            self._states.pop(key, None)
            return False

        state = self._states.get(key)
        if state is None:
            self._states[key] = KeyRepeatState(press_start_time=now, last_repeat_time=now)
            return True

        if state.phase == "pressed":
            if now - state.press_start_time < profile.initial_delay:
                return False
            state.phase = "repeating"

        if now - state.last_repeat_time >= profile.interval:
            state.last_repeat_time = now
            return True
        return False

    def release_missing(self, held: Collection[str]) -> None:
        """Return every tracked key that is not in *held* to idle."""
        for key in [k for k in self._states if k not in held]:
            del self._states[key]
        if self.active_key is not None and self.active_key not in held:
            self.active_key = None

    def choose_active(self, candidates: Iterable[str], pressed: Collection[str]) -> str | None:
        """Pick the one key allowed to produce output this tick.

        Tie-break, independent of iteration order: a key pressed this tick
        beats everything (lowest identifier first); otherwise the current
        active key keeps going while held; otherwise the lowest held
        identifier. Changing the active key resets all repeat timers.
        """
        held = sorted(candidates)
        if not held:
            return None

        fresh = [key for key in held if key in pressed]
        if fresh:
            chosen = fresh[0]
        elif self.active_key in held:
            chosen = self.active_key
        else:
            chosen = held[0]

        if chosen != self.active_key:
            self.reset()
            self.active_key = chosen
        return chosen

    def reset(self) -> None:
        self._states.clear()
        self.active_key = None


class Debounce:
    """Allows an action only if ``spacing`` seconds passed since the last one."""

    def __init__(self, spacing: float) -> None:
        self.spacing = spacing
        self._last: float | None = None

    def ready(self, now: float) -> bool:
        return self._last is None or now - self._last >= self.spacing

    def fire(self, now: float) -> bool:
        if not self.ready(now):
            return False
        self._last = now
        return True

    def reset(self) -> None:
        self._last = None
