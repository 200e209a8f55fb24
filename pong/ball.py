import math


class Ball:
    def __init__(self, x, y, radius, base_speed, field_height):
        self.spawn_x = x
        self.spawn_y = y
        self.x = float(x)
        self.y = float(y)
        self.radius = radius
        self.field_height = field_height

        # Velocities in pixels/frame
        self.base_speed = base_speed
        self.vx = float(base_speed)
        self.vy = 0.0

    @property
    def left(self):
        return self.x - self.radius

    @property
    def right(self):
        return self.x + self.radius

    def advance(self):
        self.x += self.vx
        self.y += self.vy

    def wall_bounce(self) -> bool:
        # Elastic, no position correction: the ball may sit past the wall for a frame
        if self.y - self.radius < 0 or self.y + self.radius > self.field_height:
            self.vy = -self.vy
            return True
        return False

    def paddle_bounce(self, paddle, speedup: float, angle_factor: float, max_speed_x: float):
        self.vx = -self.vx * speedup

        # Deflection grows linearly with distance from the paddle centre
        self.vy = (self.y - paddle.center_y()) * angle_factor

        if abs(self.vx) > max_speed_x:
            self.vx = math.copysign(max_speed_x, self.vx)

    def reset(self):
        self.x = float(self.spawn_x)
        self.y = float(self.spawn_y)
        # Serve alternates direction after every point
        self.vx = -float(self.base_speed) if self.vx > 0 else float(self.base_speed)
        self.vy = 0.0
