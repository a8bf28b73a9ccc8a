"""Named key bindings with per-frame pressed/released tracking."""

from __future__ import annotations

from typing import Collection

KEY_PAUSE = 284


class Input:
    """Maps action names to key codes and tracks key state across frames."""

    def __init__(self) -> None:
        self._bindings: dict[str, int] = {}
        self._current: dict[int, bool] = {}
        self._previous: dict[int, bool] = {}

    def bind(self, action: str, key: int) -> None:
        """Bind an action to a key code, replacing any earlier binding."""
        self._bindings[action] = key

    def unbind(self, action: str) -> None:
        """Remove the binding of an action, if any."""
        self._bindings.pop(action, None)

    def get_key(self, action: str) -> int | None:
        """Key code bound to an action, or None when unbound."""
        return self._bindings.get(action)

    def update(self, key_state: Collection[int]) -> None:
        """Advance one frame; key_state holds the key codes currently held."""
        self._previous = dict(self._current)
        for key in self._bindings.values():
            self._current[key] = key in key_state

    def _state(self, action: str) -> tuple[bool, bool] | None:
        key = self.get_key(action)
        if key is None:
            return None
        return self._current.get(key, False), self._previous.get(key, False)

    def is_down(self, action: str) -> bool:
        """True while the action's key is held."""
        state = self._state(action)
        return state is not None and state[0]

    def is_pressed(self, action: str) -> bool:
        """True on the frame the action's key went down."""
        state = self._state(action)
        return state is not None and state[0] and not state[1]

    def is_released(self, action: str) -> bool:
        """True on the frame the action's key came up."""
        state = self._state(action)
        return state is not None and not state[0] and state[1]