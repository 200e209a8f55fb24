import pygame


class Paddle:
    def __init__(self, x, y, width, height, speed=0):
        self.x = x
        self.y = float(y)
        self.width = width
        self.height = height
        # Pixels per frame
        self.speed = speed

    def clamp(self, field_height: int):
        self.y = max(0, min(self.y, field_height - self.height))

    def steer(self, up: bool, down: bool, field_height: int):
        # Both held cancels out
        if up:
            self.y -= self.speed
        if down:
            self.y += self.speed
        self.clamp(field_height)

    def center_y(self):
        return self.y + self.height / 2.0

    def contains_y(self, y: float) -> bool:
        # Strictly between the top and bottom edges
        return self.y < y < self.y + self.height

    def auto_track(self, target_y: float, field_height: int):
        # Constant-speed pursuit of target_y, closing the last gap exactly
        delta = target_y - self.center_y()
        if abs(delta) > self.speed:
            self.y += self.speed if delta > 0 else -self.speed
        else:
            self.y += delta
        self.clamp(field_height)

    def rect(self):
        return pygame.Rect(int(self.x), int(round(self.y)), int(self.width), int(self.height))
