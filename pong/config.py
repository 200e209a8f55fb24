"""
Game constants.

All sizes are in pixels and all speeds in pixels per frame; the simulation
counts frames, it never looks at wall-clock time.
"""


class GameConfig:
    def __init__(self, width: int = 800, height: int = 400):
        self.width = width
        self.height = height

        # Paddles
        self.paddle_width = 10
        self.paddle_height = 80
        self.paddle_speed = 6

        # Ball
        self.ball_radius = 10
        self.ball_base_speed = 5

        # Bounce rules
        self.bounce_speedup = 1.05
        self.angle_factor = 0.35
        self.max_ball_speed_x = 15

        if self.height <= self.paddle_height or self.width <= 2 * self.paddle_width:
            raise ValueError(
                f"Field {self.width}x{self.height} is too small for "
                f"{self.paddle_width}x{self.paddle_height} paddles"
            )

    def __repr__(self):
        return f"GameConfig(width={self.width}, height={self.height})"
