import math
import random

import pytest

from pong.config import GameConfig
from pong.controls import InputState
from pong.difficulty import Difficulty, InvalidDifficulty
from pong.effects import AI, PLAYER, PaddleHit, ScoreChanged, WallBounce
from pong.game_engine import GameEngine

UP = InputState(up=True)
DOWN = InputState(down=True)
IDLE = InputState()


def test_initial_state(engine):
    assert engine.player.y == 160
    assert engine.ai.y == 160
    assert engine.ai.x == 790
    assert (engine.ball.x, engine.ball.y) == (400, 200)
    assert (engine.ball.vx, engine.ball.vy) == (5, 0)
    assert engine.scores == (0, 0)
    assert engine.difficulty is Difficulty.BEGINNER
    assert engine.current_ai_speed == 2


def test_player_moves_six_per_frame(engine):
    engine.advance(UP)
    assert engine.player.y == 154
    engine.advance(DOWN)
    engine.advance(DOWN)
    assert engine.player.y == 166


def test_both_keys_cancel_out(engine):
    engine.advance(InputState(up=True, down=True))
    assert engine.player.y == 160


def test_paddles_stay_in_bounds_for_random_input(engine):
    rng = random.Random(1234)
    modes = list(Difficulty)
    limit = engine.height - engine.player.height
    for frame in range(3000):
        if frame % 250 == 0:
            engine.set_difficulty(rng.choice(modes))
        keys = InputState(up=rng.random() < 0.5, down=rng.random() < 0.3)
        engine.advance(keys)
        assert 0 <= engine.player.y <= limit
        assert 0 <= engine.ai.y <= limit


def test_player_clamped_at_top_and_bottom(engine):
    for _ in range(100):
        engine.advance(UP)
    assert engine.player.y == 0
    for _ in range(100):
        engine.advance(DOWN)
    assert engine.player.y == 320


@pytest.mark.parametrize("mode", list(Difficulty))
def test_ai_converges_on_stationary_ball(engine, place_ball, mode):
    engine.set_difficulty(mode)
    place_ball(400, 100)
    target = 100 - engine.ai.height / 2
    frames = math.ceil(abs(engine.ai.y - target) / mode.speed)

    for _ in range(frames - 1):
        engine.advance(IDLE)
    assert engine.ai.y != target
    assert abs(engine.ai.y - target) <= mode.speed

    engine.advance(IDLE)
    assert engine.ai.y == target

    # Already aligned: stays put
    engine.advance(IDLE)
    assert engine.ai.y == target


def test_ai_is_clamped_when_ball_is_near_wall(engine, place_ball):
    engine.set_difficulty(Difficulty.EXPERT)
    place_ball(400, 395)
    for _ in range(100):
        engine.advance(IDLE)
    assert engine.ai.y == 320


def test_wall_bounce_is_elastic_without_clamping(engine, place_ball):
    ball = place_ball(400, 0, vy=-3)
    effects = engine.advance(IDLE)
    assert ball.vy == 3
    assert ball.y == -3
    assert effects == [WallBounce(-3)]


def test_bottom_wall_bounce(engine, place_ball):
    ball = place_ball(400, 388, vy=4)
    engine.advance(IDLE)
    assert ball.y == 392
    assert ball.vy == -4


def test_left_exit_scores_for_ai_and_serves(engine, place_ball):
    place_ball(-1, 20, vx=-5)
    effects = engine.advance(IDLE)

    assert engine.scores == (0, 1)
    assert effects == [ScoreChanged(AI, 1)]
    ball = engine.ball
    assert (ball.x, ball.y) == (400, 200)
    assert (ball.vx, ball.vy) == (5, 0)


def test_right_exit_scores_for_player_and_serves(engine, place_ball):
    place_ball(801, 20, vx=5, vy=0)
    effects = engine.advance(IDLE)

    assert engine.scores == (1, 0)
    assert effects == [ScoreChanged(PLAYER, 1)]
    assert (engine.ball.vx, engine.ball.vy) == (-5, 0)


def test_serve_ignores_pre_point_speed(engine, place_ball):
    place_ball(-1, 20, vx=-12.5, vy=7)
    engine.advance(IDLE)
    assert (engine.ball.vx, engine.ball.vy) == (5, 0)


def test_player_paddle_hit_speeds_up_and_reverses(engine, place_ball):
    ball = place_ball(18, 200, vx=-5)
    effects = engine.advance(IDLE)
    assert ball.vx == pytest.approx(5.25)
    assert ball.vy == 0
    assert effects == [PaddleHit(PLAYER, ball.vx)]


def test_player_paddle_hit_angle_depends_on_offset(engine, place_ball):
    ball = place_ball(18, 220, vx=-5)
    engine.advance(IDLE)
    assert ball.vy == pytest.approx(20 * 0.35)


def test_horizontal_speed_is_capped(engine, place_ball):
    ball = place_ball(30, 200, vx=-14.5)
    engine.advance(IDLE)
    assert ball.vx == 15
    assert engine.scores == (0, 0)


def test_ai_paddle_hit_mirrors_player(engine, place_ball):
    ball = place_ball(778, 200, vx=5)
    effects = engine.advance(IDLE)
    assert ball.vx == pytest.approx(-5.25)
    assert effects == [PaddleHit(AI, ball.vx)]


def test_ai_cap_preserves_sign(engine, place_ball):
    ball = place_ball(770, 200, vx=15)
    engine.advance(IDLE)
    assert ball.vx == -15


def test_no_hit_outside_paddle_span(engine, place_ball):
    # Exactly on the top edge is not "strictly between"
    ball = place_ball(18, 160, vx=-5)
    engine.advance(IDLE)
    assert ball.vx == -5


def test_vertical_speed_is_not_capped(engine, place_ball):
    ball = place_ball(18, 239, vx=-5)
    engine.advance(IDLE)
    assert ball.vy == pytest.approx(39 * 0.35)
    assert abs(ball.vy) > abs(ball.vx)


def test_set_difficulty_changes_only_ai_speed(engine, place_ball):
    place_ball(123, 45, vx=3, vy=-2)
    engine.player_score, engine.ai_score = 3, 4
    before = (engine.player.y, engine.ai.y, engine.ball.x, engine.ball.y,
              engine.ball.vx, engine.ball.vy, engine.scores)

    engine.set_difficulty("expert")
    assert engine.current_ai_speed == 8
    assert engine.difficulty is Difficulty.EXPERT

    engine.set_difficulty(Difficulty.BEGINNER)
    assert engine.current_ai_speed == 2

    after = (engine.player.y, engine.ai.y, engine.ball.x, engine.ball.y,
             engine.ball.vx, engine.ball.vy, engine.scores)
    assert after == before


def test_set_difficulty_is_idempotent(engine):
    engine.set_difficulty(Difficulty.ADVANCED)
    engine.set_difficulty(Difficulty.ADVANCED)
    assert engine.current_ai_speed == 6
    assert engine.difficulty is Difficulty.ADVANCED


def test_invalid_difficulty_rejected(engine):
    engine.set_difficulty(Difficulty.INTERMEDIATE)
    with pytest.raises(InvalidDifficulty):
        engine.set_difficulty("impossible")
    assert engine.current_ai_speed == 4
    assert engine.difficulty is Difficulty.INTERMEDIATE


def test_scores_are_monotonic_one_point_per_frame(engine):
    rng = random.Random(99)
    previous = engine.scores
    for frame in range(6000):
        if frame < 3000:
            keys = InputState(up=rng.random() < 0.5, down=rng.random() < 0.5)
        else:
            # Park the player at the top so the AI keeps scoring
            keys = UP
        effects = engine.advance(keys)
        player, ai = engine.scores
        gained = (player - previous[0], ai - previous[1])
        assert gained in ((0, 0), (1, 0), (0, 1))

        scored = [e for e in effects if isinstance(e, ScoreChanged)]
        assert len(scored) == sum(gained)
        previous = (player, ai)

    assert engine.ai_score > 0


def test_difficulty_change_logged(engine, caplog):
    with caplog.at_level("INFO", logger="pong"):
        engine.set_difficulty("advanced")
    assert "AI difficulty set to: advanced" in caplog.text


def test_field_dimensions(engine):
    assert engine.field == (800, 400)


def test_ball_bounces_off_configured_floor():
    engine = GameEngine(GameConfig(800, 300))
    ball = engine.ball
    ball.x, ball.y, ball.vx, ball.vy = 400.0, 288.0, 0.0, 3.0
    engine.advance(IDLE)
    assert ball.y == 291
    assert ball.vy == -3
