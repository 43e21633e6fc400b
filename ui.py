import pygame
from config import BG, COURT_BG, INK, TITLE, HINT, TITLE_TEXT, HINT_TEXT
from core import GamePhase


def make_fonts():
    return {
        "score": pygame.font.SysFont("consolas", 24, bold=True),
        "msg": pygame.font.SysFont("consolas", 20),
        "title": pygame.font.SysFont("consolas", 30, bold=True),
        "hint": pygame.font.SysFont("consolas", 14),
    }


def draw_dashed_vline(surf, color, x, y1, y2, dash=10, gap=10, width=2):
    y = y1
    while y < y2:
        pygame.draw.line(surf, color, (x, y), (x, min(y + dash, y2)), width)
        y += dash + gap


def draw_court(surf, dims):
    w, h = int(dims.width), int(dims.height)
    surf.fill(COURT_BG)
    draw_dashed_vline(surf, INK, w // 2, 0, h)
    pygame.draw.rect(surf, INK, (2, 2, w - 4, h - 4), 2)


def draw_text(surf, font, text, color, center):
    t = font.render(text, True, color)
    surf.blit(t, t.get_rect(center=center))


def draw_state(surf, state, fonts):
    """Paint one frame of the court. Reads state, never changes it."""
    d = state.dims
    draw_court(surf, d)

    pw, ph = d.paddle_width, d.paddle_height
    pygame.draw.rect(surf, INK, pygame.Rect(int(d.left_paddle_x), int(state.left.y), int(pw), int(ph)))
    pygame.draw.rect(surf, INK, pygame.Rect(int(d.right_paddle_x), int(state.right.y), int(pw), int(ph)))

    if state.phase == GamePhase.PLAYING:
        b = state.ball
        pygame.draw.circle(surf, INK, (int(b.x), int(b.y)), int(d.ball_radius))

    draw_text(surf, fonts["score"], str(state.score.player1), INK, (d.width * 0.25, 30))
    draw_text(surf, fonts["score"], str(state.score.player2), INK, (d.width * 0.75, 30))

    if state.phase == GamePhase.IDLE:
        draw_text(surf, fonts["msg"], "PRESS SPACE TO START", INK, (d.width / 2, d.height / 2))
    elif state.phase == GamePhase.GAME_OVER:
        draw_text(surf, fonts["msg"], "GAME OVER - PRESS SPACE", INK, (d.width / 2, d.height / 2))


def court_rect(screen, dims):
    r = pygame.Rect(0, 0, int(dims.width), int(dims.height))
    r.center = (screen.get_width() // 2, screen.get_height() // 2)
    return r


def draw_window(screen, court, dims, fonts):
    screen.fill(BG)
    r = court_rect(screen, dims)
    screen.blit(court, r.topleft)
    pygame.draw.rect(screen, (255, 255, 255), r.inflate(8, 8), 4)
    draw_text(screen, fonts["title"], TITLE_TEXT, TITLE, (r.centerx, max(24, r.top - 40)))
    draw_text(screen, fonts["hint"], HINT_TEXT, HINT, (r.centerx, min(screen.get_height() - 16, r.bottom + 40)))
