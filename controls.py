import pygame
from config import KEY_UP_1, KEY_DOWN_1, KEY_UP_2, KEY_DOWN_2, KEY_TOGGLE

KEY_IDS = {
    pygame.K_w: KEY_UP_1,
    pygame.K_s: KEY_DOWN_1,
    pygame.K_UP: KEY_UP_2,
    pygame.K_DOWN: KEY_DOWN_2,
    pygame.K_SPACE: KEY_TOGGLE,
}


def key_id(e) -> str:
    if e.key in KEY_IDS:
        return KEY_IDS[e.key]
    return pygame.key.name(e.key).lower()


class InputTracker:
    """Keys currently held down, by semantic id. Level-sensed only."""

    def __init__(self):
        self.held = set()

    def key_down(self, k: str):
        self.held.add(k)

    def key_up(self, k: str):
        self.held.discard(k)

    def is_held(self, k: str) -> bool:
        return k in self.held

    def snapshot(self):
        return frozenset(self.held)

    def clear(self):
        self.held.clear()
