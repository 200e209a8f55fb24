import logging

from .ball import Ball
from .config import GameConfig
from .controls import InputState
from .difficulty import DEFAULT_DIFFICULTY, Difficulty
from .effects import AI, PLAYER, PaddleHit, ScoreChanged, WallBounce
from .paddle import Paddle

logger = logging.getLogger(__name__)


class GameEngine:
    """
    Owns the whole simulation: both paddles, the ball, the scores and the
    AI difficulty. The host calls advance() once per frame and reads the
    entities back to draw them.
    """

    def __init__(self, config: GameConfig = None, difficulty=DEFAULT_DIFFICULTY):
        self.config = config or GameConfig()
        cfg = self.config
        self.width = cfg.width
        self.height = cfg.height

        # Entities
        start_y = (cfg.height - cfg.paddle_height) / 2
        self.player = Paddle(0, start_y, cfg.paddle_width, cfg.paddle_height, speed=cfg.paddle_speed)
        self.ai = Paddle(cfg.width - cfg.paddle_width, start_y, cfg.paddle_width, cfg.paddle_height)
        self.ball = Ball(cfg.width / 2, cfg.height / 2, cfg.ball_radius, cfg.ball_base_speed, cfg.height)

        # Scoreboard
        self.player_score = 0
        self.ai_score = 0

        self.difficulty = None
        self.set_difficulty(difficulty)

    @property
    def current_ai_speed(self):
        return self.ai.speed

    @property
    def field(self):
        return self.width, self.height

    @property
    def scores(self):
        return self.player_score, self.ai_score

    # ---------- Difficulty ----------
    def set_difficulty(self, mode):
        mode = Difficulty.parse(mode)
        self.difficulty = mode
        self.ai.speed = mode.speed
        logger.info("AI difficulty set to: %s", mode.value)

    # ---------- Update ----------
    def advance(self, keys: InputState = InputState()):
        cfg = self.config
        ball = self.ball
        effects = []

        # Player
        self.player.steer(keys.up, keys.down, self.height)

        # AI chases the ball's height
        self.ai.auto_track(ball.y, self.height)

        ball.advance()

        # Walls
        if ball.wall_bounce():
            effects.append(WallBounce(ball.y))

        # Paddles
        if ball.left < self.player.x + self.player.width and self.player.contains_y(ball.y):
            ball.paddle_bounce(self.player, cfg.bounce_speedup, cfg.angle_factor, cfg.max_ball_speed_x)
            effects.append(PaddleHit(PLAYER, ball.vx))

        if ball.right > self.ai.x and self.ai.contains_y(ball.y):
            ball.paddle_bounce(self.ai, cfg.bounce_speedup, cfg.angle_factor, cfg.max_ball_speed_x)
            effects.append(PaddleHit(AI, ball.vx))

        # Scoring
        if ball.left < 0:
            self.ai_score += 1
            effects.append(self._scored(AI, self.ai_score))
        if ball.right > self.width:
            self.player_score += 1
            effects.append(self._scored(PLAYER, self.player_score))

        return effects

    def _scored(self, side, score):
        logger.debug("%s scored (player %d - %d ai)", side, self.player_score, self.ai_score)
        self.ball.reset()
        return ScoreChanged(side, score)
