import pygame

from .difficulty import Difficulty
from .effects import AI, PLAYER, ScoreChanged

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
GREY = (90, 90, 90)
PANEL = (30, 30, 36)
ACTIVE = (76, 175, 80)

SCORE_BAR_HEIGHT = 40
DIFFICULTY_BAR_HEIGHT = 40


def window_size(config):
    return config.width, config.height + SCORE_BAR_HEIGHT + DIFFICULTY_BAR_HEIGHT


def draw_center_dashed_line(surface, dash=5, gap=5, width=2):
    w, h = surface.get_size()
    x = w // 2
    for y in range(0, h, dash + gap):
        pygame.draw.line(surface, WHITE, (x, y), (x, min(y + dash, h)), width)


class ScoreBoard:
    """The two numbers shown above the field. Only changed by score effects."""

    def __init__(self):
        self.player = 0
        self.ai = 0

    def handle(self, effects):
        for effect in effects:
            if isinstance(effect, ScoreChanged):
                if effect.side == PLAYER:
                    self.player = effect.score
                elif effect.side == AI:
                    self.ai = effect.score

    def draw(self, surface, font):
        surface.fill(PANEL)
        w, h = surface.get_size()
        player_text = font.render(f"Player: {self.player}", True, WHITE)
        ai_text = font.render(f"AI: {self.ai}", True, WHITE)
        surface.blit(player_text, player_text.get_rect(center=(w // 4, h // 2)))
        surface.blit(ai_text, ai_text.get_rect(center=(w * 3 // 4, h // 2)))


class DifficultyBar:
    """Four buttons, one per preset; the active one is highlighted."""

    def __init__(self, top, width, height=DIFFICULTY_BAR_HEIGHT, padding=6):
        self.top = top
        self.buttons = {}
        modes = list(Difficulty)
        slot = width / len(modes)
        for i, mode in enumerate(modes):
            self.buttons[mode] = pygame.Rect(
                int(i * slot) + padding, top + padding,
                int(slot) - 2 * padding, height - 2 * padding,
            )

    def button_at(self, pos):
        for mode, rect in self.buttons.items():
            if rect.collidepoint(pos):
                return mode
        return None

    def draw(self, screen, font, active):
        for mode, rect in self.buttons.items():
            pygame.draw.rect(screen, ACTIVE if mode == active else GREY, rect, border_radius=4)
            hotkey = list(Difficulty).index(mode) + 1
            label = font.render(f"{hotkey} {mode.label}", True, WHITE)
            screen.blit(label, label.get_rect(center=rect.center))


class Renderer:
    def __init__(self, screen, config, font=None, small_font=None):
        self.screen = screen
        self.config = config
        self.font = font or pygame.font.SysFont("Arial", 26)
        self.small_font = small_font or pygame.font.SysFont("Arial", 18)

        self.score_area = screen.subsurface((0, 0, config.width, SCORE_BAR_HEIGHT))
        self.field = screen.subsurface((0, SCORE_BAR_HEIGHT, config.width, config.height))
        self.score_board = ScoreBoard()
        self.difficulty_bar = DifficultyBar(SCORE_BAR_HEIGHT + config.height, config.width)

    def draw_field(self, engine):
        field = self.field
        field.fill(BLACK)
        draw_center_dashed_line(field)
        pygame.draw.rect(field, WHITE, engine.player.rect())
        pygame.draw.rect(field, WHITE, engine.ai.rect())
        pygame.draw.circle(field, WHITE, (int(engine.ball.x), int(engine.ball.y)), engine.ball.radius)

    def draw(self, engine):
        self.draw_field(engine)
        self.score_board.draw(self.score_area, self.font)
        bar = pygame.Rect(0, self.difficulty_bar.top, self.config.width, DIFFICULTY_BAR_HEIGHT)
        self.screen.fill(PANEL, bar)
        self.difficulty_bar.draw(self.screen, self.small_font, engine.difficulty)
