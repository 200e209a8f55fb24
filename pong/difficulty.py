from enum import Enum


class InvalidDifficulty(ValueError):
    """Raised when a difficulty selection is not one of the four presets."""


class Difficulty(Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"   # matches the player's paddle speed
    EXPERT = "expert"       # faster than the player

    @property
    def speed(self) -> int:
        return AI_SPEEDS[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value) -> "Difficulty":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        choices = ", ".join(d.value for d in cls)
        raise InvalidDifficulty(f"Unknown difficulty {value!r} (expected one of: {choices})")


# AI paddle speed (pixels per frame) for each preset
AI_SPEEDS = {
    Difficulty.BEGINNER: 2,
    Difficulty.INTERMEDIATE: 4,
    Difficulty.ADVANCED: 6,
    Difficulty.EXPERT: 8,
}

DEFAULT_DIFFICULTY = Difficulty.BEGINNER
