# ringrunner/game/game.py
import argparse
import logging
from typing import Optional

import pygame
from pygame import K_SPACE, K_ESCAPE

from .config import WIDTH, HEIGHT, FPS, SEED_DEFAULT, FOLLOW_TERRAIN
from .render import PygameRenderer
from .sound import NullSound, SynthSound
from .world import World

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Game:
    """
    Frame driver: one tick per display frame.
    clear -> world.step() -> world.draw() -> present -> wait for next frame.
    """
    def __init__(self, world: World, renderer, fps: int = FPS):
        self.world = world
        self.renderer = renderer
        self.fps = fps
        self.running = False
        self.clock: Optional[pygame.time.Clock] = None

    def tick(self):
        self.renderer.clear()
        self.world.step()
        self.world.draw(self.renderer)
        self.renderer.present()

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.stop()
        elif event.type == pygame.KEYDOWN:
            if event.key == K_ESCAPE:
                self.stop()
            elif event.key == K_SPACE:
                self.world.request_jump()
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.world.request_jump()
        elif event.type == pygame.FINGERDOWN:
            self.world.request_jump()

    def stop(self):
        self.running = False

    def run(self):
        self.clock = pygame.time.Clock()
        self.running = True
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            if not self.running:
                break
            self.tick()
            self.clock.tick(self.fps)
        logger.info("Stopped after %d ticks, score=%d", self.world.ticks, self.world.score)


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Ring Runner: jump the hills, grab the rings.")
    p.add_argument("--seed", type=int, default=None,
                   help="Ring layout seed. Omit for SEED_DEFAULT, use -1 for random each launch.")
    p.add_argument("--follow-terrain", action="store_true", default=FOLLOW_TERRAIN,
                   help="Rest the actor on the rolling terrain instead of the flat baseline.")
    p.add_argument("--mute", action="store_true", help="Disable sound.")
    p.add_argument("--fps", type=int, default=FPS, help="Frames (ticks) per second.")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def setup_logging(level: str):
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    root = logging.getLogger()
    root.setLevel(getattr(logging, level))
    root.addHandler(handler)


def run(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)

    # None -> SEED_DEFAULT; -1 -> random
    if args.seed is None:
        seed = SEED_DEFAULT
    elif args.seed == -1:
        seed = None
    else:
        seed = args.seed

    # mixer first so pre_init settings apply before pygame.init() opens the device
    sound = NullSound()
    if not args.mute:
        synth = SynthSound()
        if synth.init():
            sound = synth

    pygame.init()
    pygame.display.set_caption("Ring Runner")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))

    world = World(seed=seed, sound=sound, follow_terrain=args.follow_terrain)
    game = Game(world, PygameRenderer(screen), fps=args.fps)
    logger.info("SPACE / click / tap to jump, ESC to quit")
    try:
        game.run()
    finally:
        pygame.quit()


if __name__ == "__main__":
    run()
