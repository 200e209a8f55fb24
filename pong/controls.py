from typing import Mapping, NamedTuple

import pygame

UP_KEYS = ("w", "W")
DOWN_KEYS = ("s", "S")


class InputState(NamedTuple):
    """Held state of the two logical player keys, sampled once per frame."""
    up: bool = False
    down: bool = False

    @classmethod
    def from_mapping(cls, keys: Mapping[str, bool]) -> "InputState":
        # Key names as a browser or terminal reports them ("w", "W", ...)
        return cls(
            up=any(keys.get(k, False) for k in UP_KEYS),
            down=any(keys.get(k, False) for k in DOWN_KEYS),
        )

    @classmethod
    def from_pygame(cls, pressed) -> "InputState":
        # pressed: the sequence returned by pygame.key.get_pressed()
        return cls(up=bool(pressed[pygame.K_w]), down=bool(pressed[pygame.K_s]))

    @property
    def direction(self) -> int:
        # -1 up, +1 down, 0 when neither or both are held
        return int(self.down) - int(self.up)
