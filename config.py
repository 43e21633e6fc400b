WINDOW_W, WINDOW_H = 800, 600

COURT_MAX_W = 700
COURT_MAX_H = 400
COURT_MIN_W = 160
COURT_MIN_H = 120
MARGIN_X = 100
MARGIN_Y = 200

# per-frame constants below assume this cadence
FPS = 60

BG = (18, 20, 24)
COURT_BG = (255, 255, 255)
INK = (204, 204, 204)
TITLE = (229, 231, 235)
HINT = (156, 163, 175)

PADDLE_W_RATIO = 0.015
PADDLE_W_MIN = 8
PADDLE_H_RATIO = 0.18
PADDLE_H_MIN = 40
BALL_R_RATIO = 0.012
BALL_R_MIN = 6
LEFT_PADDLE_X_RATIO = 0.05
RIGHT_PADDLE_X_RATIO = 0.935

MOVE_SPEED_RATIO = 0.018
MAX_BALL_SPEED_RATIO = 0.012
SERVE_DX_RATIO = 0.004
SERVE_DY_RATIO = 0.003

HIT_SPEEDUP = 1.05
SPIN = 2.0

KEY_UP_1 = "w"
KEY_DOWN_1 = "s"
KEY_UP_2 = "arrowup"
KEY_DOWN_2 = "arrowdown"
KEY_TOGGLE = " "

TITLE_TEXT = "PONG"
HINT_TEXT = "SPACE: START/PAUSE | W/S: PLAYER 1 | UP/DOWN: PLAYER 2"

SAMPLE_RATE = 44100

# freq_hz, seconds, volume, slide (hz per second)
SOUNDS = {
    "paddle_hit": (800.0, 0.08, 0.30, -500.0),
    "score":      (523.0, 0.30, 0.30, 0.0),
    "start":      (100.0, 0.20, 0.25, 150.0),
    "game_over":  (300.0, 0.45, 0.28, -300.0),
}
