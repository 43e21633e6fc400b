import logging
import random
import pygame
from config import WINDOW_W, WINDOW_H, FPS, KEY_TOGGLE
from core import GameState, fit_dimensions, step, toggle_phase
from controls import InputTracker, key_id
from sfx import Sounds
from ui import make_fonts, draw_state, draw_window

logger = logging.getLogger(__name__)


class FrameDriver:
    """Runs one input -> step -> render cycle per display frame."""

    def __init__(self, screen, state=None, sounds=None, rng=None):
        self.screen = screen
        self.rng = rng or random.Random()
        self.state = state or GameState.new(fit_dimensions(*screen.get_size()), self.rng)
        self.keys = InputTracker()
        self.sounds = sounds or Sounds()
        self.fonts = make_fonts()
        self.court = pygame.Surface((int(self.state.dims.width), int(self.state.dims.height)))
        self.clock = pygame.time.Clock()
        self.running = True
        self.frames = 0

    def dispatch(self, events):
        for name in events:
            self.sounds.play(name)

    def resize(self, avail_w, avail_h):
        dims = fit_dimensions(avail_w, avail_h)
        self.state.resize(dims, self.rng)
        self.court = pygame.Surface((int(dims.width), int(dims.height)))
        logger.info("court resized to %dx%d", dims.width, dims.height)

    def handle_event(self, e):
        if e.type == pygame.QUIT:
            self.stop()

        elif e.type == pygame.KEYDOWN:
            self.sounds.init()
            k = key_id(e)
            self.keys.key_down(k)
            if k == KEY_TOGGLE:
                self.dispatch(toggle_phase(self.state, self.rng))

        elif e.type == pygame.KEYUP:
            self.keys.key_up(key_id(e))

        elif e.type == pygame.MOUSEBUTTONDOWN:
            self.sounds.init()

        elif e.type == pygame.VIDEORESIZE:
            surf = pygame.display.get_surface()
            if surf is not None:
                self.screen = surf
            self.resize(e.w, e.h)

    def tick(self):
        if not self.running:
            return False
        self.dispatch(step(self.state, self.keys.snapshot(), self.rng))
        draw_state(self.court, self.state, self.fonts)
        draw_window(self.screen, self.court, self.state.dims, self.fonts)
        self.frames += 1
        return True

    def stop(self):
        if self.running:
            self.running = False
            logger.info("frame driver stopped after %d frames", self.frames)

    def run(self):
        logger.info("frame driver started at %d fps", FPS)
        while self.running:
            for e in pygame.event.get():
                self.handle_event(e)
            if not self.tick():
                break
            pygame.display.flip()
            self.clock.tick(FPS)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((WINDOW_W, WINDOW_H), pygame.RESIZABLE)
    pygame.display.set_caption("Pong")
    driver = FrameDriver(screen)
    try:
        driver.run()
    finally:
        driver.stop()
        pygame.quit()


if __name__ == "__main__":
    main()
