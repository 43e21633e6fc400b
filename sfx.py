import logging
import math
from array import array
import pygame
from config import SAMPLE_RATE, SOUNDS

logger = logging.getLogger(__name__)


def make_tone(freq_hz, seconds, volume, slide=0.0, sample_rate=SAMPLE_RATE, channels=1):
    total = max(1, int(sample_rate * seconds))
    buf = array("h")
    phase = 0.0
    for i in range(total):
        t = i / sample_rate
        f = max(20.0, freq_hz + slide * t)
        phase += 2.0 * math.pi * f / sample_rate
        env = 1.0 - (i / max(1, total - 1))
        sample = int(32767 * volume * env * math.sin(phase))
        for _ in range(channels):
            buf.append(sample)
    return buf


class Sounds:
    """Short synthesized cues. Silent until init() succeeds."""

    def __init__(self):
        self.ok = False
        self.tried = False
        self.tones = {}

    def init(self):
        if self.tried:
            return self.ok
        self.tried = True
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1, buffer=512)
            freq, _, channels = pygame.mixer.get_init()
            for name, (hz, sec, vol, slide) in SOUNDS.items():
                buf = make_tone(hz, sec, vol, slide, sample_rate=freq, channels=channels)
                self.tones[name] = pygame.mixer.Sound(buffer=buf.tobytes())
            self.ok = True
            logger.info("audio ready (%d Hz, %d ch)", freq, channels)
        except Exception as exc:
            self.tones = {}
            self.ok = False
            logger.warning("Audio initialization failed: %s", exc)
        return self.ok

    def play(self, name):
        snd = self.tones.get(name)
        if not self.ok or snd is None:
            return
        try:
            snd.play()
        except Exception as exc:
            logger.warning("could not play %s: %s", name, exc)

    def paddle_hit(self): self.play("paddle_hit")
    def score(self): self.play("score")
    def start(self): self.play("start")
    def game_over(self): self.play("game_over")
