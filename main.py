import argparse
import logging

import pygame

from pong.config import GameConfig
from pong.controls import InputState
from pong.difficulty import DEFAULT_DIFFICULTY, Difficulty, InvalidDifficulty
from pong.game_engine import GameEngine
from pong.logging_config import setup_logging
from pong.renderer import Renderer, window_size
from pong.sound import SoundManager

logger = logging.getLogger("pong.main")

DIFFICULTY_KEYS = {
    pygame.K_1: Difficulty.BEGINNER,
    pygame.K_2: Difficulty.INTERMEDIATE,
    pygame.K_3: Difficulty.ADVANCED,
    pygame.K_4: Difficulty.EXPERT,
}


def difficulty_arg(value):
    try:
        return Difficulty.parse(value)
    except InvalidDifficulty as exc:
        raise argparse.ArgumentTypeError(str(exc))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Ping Pong against the computer (W/S to move, 1-4 for difficulty)")
    parser.add_argument("--width", type=int, default=800)
    parser.add_argument("--height", type=int, default=400)
    parser.add_argument("--fps", type=int, default=60, help="frames per second; one frame is one simulation step")
    parser.add_argument("--difficulty", type=difficulty_arg, default=DEFAULT_DIFFICULTY,
                        help="beginner, intermediate, advanced or expert")
    parser.add_argument("--mute", action="store_true")
    parser.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    parser.add_argument("--log-file", default=None)
    args = parser.parse_args(argv)
    try:
        args.config = GameConfig(args.width, args.height)
    except ValueError as exc:
        parser.error(str(exc))
    return args


def handle_events(events, engine, renderer):
    """Apply window/difficulty events. Returns False once the window should close."""
    running = True
    for event in events:
        if event.type == pygame.QUIT:
            running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                running = False
            elif event.key in DIFFICULTY_KEYS:
                engine.set_difficulty(DIFFICULTY_KEYS[event.key])
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            mode = renderer.difficulty_bar.button_at(event.pos)
            if mode is not None:
                engine.set_difficulty(mode)
    return running


def run(engine, renderer, sfx, clock, fps):
    running = True
    while running:
        clock.tick(fps)
        running = handle_events(pygame.event.get(), engine, renderer)

        # One input snapshot per frame
        keys = InputState.from_pygame(pygame.key.get_pressed())
        effects = engine.advance(keys)

        renderer.score_board.handle(effects)
        sfx.handle(effects)

        renderer.draw(engine)
        pygame.display.flip()


def main(argv=None):
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    pygame.init()
    screen = pygame.display.set_mode(window_size(args.config))
    pygame.display.set_caption("Ping Pong - Pygame Version")
    logger.info("Starting %r at %d fps", args.config, args.fps)

    engine = GameEngine(args.config, args.difficulty)
    renderer = Renderer(screen, args.config)
    sfx = SoundManager(enabled=not args.mute)

    try:
        run(engine, renderer, sfx, pygame.time.Clock(), args.fps)
    finally:
        player, ai = engine.scores
        logger.info("Final score: player %d - %d ai", player, ai)
        pygame.quit()


if __name__ == "__main__":
    main()
