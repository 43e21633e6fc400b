import enum
import logging
import math
import random
from dataclasses import dataclass, field
from config import (
    COURT_MAX_W, COURT_MAX_H, COURT_MIN_W, COURT_MIN_H, MARGIN_X, MARGIN_Y,
    PADDLE_W_RATIO, PADDLE_W_MIN, PADDLE_H_RATIO, PADDLE_H_MIN,
    BALL_R_RATIO, BALL_R_MIN, LEFT_PADDLE_X_RATIO, RIGHT_PADDLE_X_RATIO,
    MOVE_SPEED_RATIO, MAX_BALL_SPEED_RATIO, SERVE_DX_RATIO, SERVE_DY_RATIO,
    HIT_SPEEDUP, SPIN, KEY_UP_1, KEY_DOWN_1, KEY_UP_2, KEY_DOWN_2,
)

logger = logging.getLogger(__name__)

PADDLE_HIT = "paddle_hit"
SCORE = "score"
START = "start"
GAME_OVER = "game_over"


def clamp(v, a, b):
    return max(a, min(b, v))


def circle_intersects_rect(cx, cy, r, rx, ry, rw, rh) -> bool:
    # bounding square of the circle against the rect, edges inclusive
    return (cx - r <= rx + rw and cx + r >= rx
            and cy + r >= ry and cy - r <= ry + rh)


def clamp_speed(dx: float, dy: float, max_speed: float):
    s = math.hypot(dx, dy)
    if s > max_speed:
        k = max_speed / s
        return dx * k, dy * k
    return dx, dy


@dataclass(frozen=True)
class Dimensions:
    width: float
    height: float

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"court size must be positive, got {self.width}x{self.height}")

    @property
    def paddle_width(self): return max(self.width * PADDLE_W_RATIO, PADDLE_W_MIN)
    @property
    def paddle_height(self): return max(self.height * PADDLE_H_RATIO, PADDLE_H_MIN)
    @property
    def ball_radius(self): return max(self.width * BALL_R_RATIO, BALL_R_MIN)
    @property
    def left_paddle_x(self): return self.width * LEFT_PADDLE_X_RATIO
    @property
    def right_paddle_x(self): return self.width * RIGHT_PADDLE_X_RATIO
    @property
    def move_speed(self): return self.height * MOVE_SPEED_RATIO
    @property
    def max_ball_speed(self): return max(self.width, self.height) * MAX_BALL_SPEED_RATIO
    @property
    def max_paddle_y(self): return self.height - self.paddle_height


def fit_dimensions(avail_w, avail_h) -> Dimensions:
    """Court size for the given window area, capped at 700x400."""
    w = clamp(avail_w - MARGIN_X, COURT_MIN_W, COURT_MAX_W)
    h = clamp(avail_h - MARGIN_Y, COURT_MIN_H, COURT_MAX_H)
    return Dimensions(w, h)


class GamePhase(enum.Enum):
    IDLE = "idle"
    PLAYING = "playing"
    GAME_OVER = "gameover"


@dataclass
class Paddle:
    y: float = 0.0


@dataclass
class Ball:
    x: float = 0.0
    y: float = 0.0
    dx: float = 0.0
    dy: float = 0.0


@dataclass
class Score:
    player1: int = 0
    player2: int = 0


@dataclass
class GameState:
    dims: Dimensions
    left: Paddle = field(default_factory=Paddle)
    right: Paddle = field(default_factory=Paddle)
    ball: Ball = field(default_factory=Ball)
    score: Score = field(default_factory=Score)
    phase: GamePhase = GamePhase.IDLE

    @classmethod
    def new(cls, dims: Dimensions, rng=None):
        state = cls(dims)
        state.reset(rng)
        return state

    def reset(self, rng=None):
        """Center both paddles and put a fresh ball in the middle of the court."""
        rng = rng or random
        d = self.dims
        top = d.height / 2 - d.paddle_height / 2
        self.left = Paddle(top)
        self.right = Paddle(top)
        self.ball = Ball(
            d.width / 2,
            d.height / 2,
            d.width * SERVE_DX_RATIO * (1 if rng.random() > 0.5 else -1),
            d.height * SERVE_DY_RATIO * (1 if rng.random() > 0.5 else -1),
        )

    def resize(self, dims: Dimensions, rng=None):
        # a resize always restarts the rally, phase and score survive it
        self.dims = dims
        self.reset(rng)

    def serve(self, toward_right: bool, rng=None):
        rng = rng or random
        d = self.dims
        self.ball = Ball(
            d.width / 2,
            d.height / 2,
            d.width * SERVE_DX_RATIO * (1 if toward_right else -1),
            d.height * SERVE_DY_RATIO * rng.uniform(-1.0, 1.0),
        )


def set_phase(state: GameState, phase: GamePhase):
    if state.phase != phase:
        logger.info("phase %s -> %s", state.phase.value, phase.value)
    state.phase = phase


def toggle_phase(state: GameState, rng=None):
    """React to one press of the start/pause key. Returns the emitted events."""
    if state.phase == GamePhase.IDLE:
        set_phase(state, GamePhase.PLAYING)
        state.reset(rng)
        return [START]
    if state.phase == GamePhase.PLAYING:
        set_phase(state, GamePhase.IDLE)
        return []
    # restart: game over -> idle -> playing in one press
    set_phase(state, GamePhase.IDLE)
    state.score = Score()
    set_phase(state, GamePhase.PLAYING)
    state.reset(rng)
    return [START]


def end_game(state: GameState):
    if state.phase != GamePhase.PLAYING:
        return []
    set_phase(state, GamePhase.GAME_OVER)
    return [GAME_OVER]


def move_paddle(p: Paddle, up: bool, down: bool, speed: float, max_y: float):
    # both branches run, so holding up and down at once is settled by the clamps
    if up and p.y > 0:
        p.y = max(0.0, p.y - speed)
    if down and p.y < max_y:
        p.y = min(max_y, p.y + speed)


def step(state: GameState, held, rng=None):
    """Advance the game by one frame and return the events it produced."""
    if state.phase != GamePhase.PLAYING:
        return []

    d = state.dims
    ball = state.ball
    r = d.ball_radius
    pw, ph = d.paddle_width, d.paddle_height
    events = []

    move_paddle(state.left, KEY_UP_1 in held, KEY_DOWN_1 in held, d.move_speed, d.max_paddle_y)
    move_paddle(state.right, KEY_UP_2 in held, KEY_DOWN_2 in held, d.move_speed, d.max_paddle_y)

    ball.x += ball.dx
    ball.y += ball.dy

    if ball.y - r <= 0 or ball.y + r >= d.height:
        ball.y = r if ball.y - r <= 0 else d.height - r
        ball.dy *= -1

    hit_left = circle_intersects_rect(ball.x, ball.y, r, d.left_paddle_x, state.left.y, pw, ph)
    hit_right = circle_intersects_rect(ball.x, ball.y, r, d.right_paddle_x, state.right.y, pw, ph)

    if hit_left or hit_right:
        paddle = state.left if hit_left else state.right
        ball.dx *= -HIT_SPEEDUP
        center = paddle.y + ph / 2
        hit_pos = (ball.y - center) / (ph / 2)
        ball.dy += hit_pos * SPIN
        if hit_left:
            ball.x = d.left_paddle_x + pw + r
        else:
            ball.x = d.right_paddle_x - r
        ball.dx, ball.dy = clamp_speed(ball.dx, ball.dy, d.max_ball_speed)
        logger.debug("paddle hit %s at %.2f", "left" if hit_left else "right", hit_pos)
        events.append(PADDLE_HIT)

    if ball.x < 0:
        state.score.player2 += 1
        logger.info("player 2 scores, %d:%d", state.score.player1, state.score.player2)
        state.serve(toward_right=True, rng=rng)
        events.append(SCORE)
    elif ball.x > d.width:
        state.score.player1 += 1
        logger.info("player 1 scores, %d:%d", state.score.player1, state.score.player2)
        state.serve(toward_right=False, rng=rng)
        events.append(SCORE)

    return events
