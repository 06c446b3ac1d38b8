"""
renderer.py: Draws a GameSession onto a pygame surface.

The renderer only reads the session. Its single piece of state is a frame
counter used to pulse the menu prompt.
"""

import math
from typing import Tuple

import pygame

from .data_models import SessionState

COLORS = {
    "bg": (0, 17, 34),
    "bg_secondary": (0, 34, 68),
    "chip": (0, 255, 0),
    "chip_secondary": (0, 204, 0),
    "circuit": (0, 136, 255),
    "circuit_dark": (0, 102, 204),
    "particles": (255, 255, 0),
    "text": (0, 255, 255),
    "danger": (255, 0, 102),
}

STAGES = ("IF", "ID", "EX", "MEM", "WB")
STAGE_WIDTH = 40
BUS_SPACING = 25


def hex_score(value: int) -> str:
    return f"0x{value:X}"


class Renderer:
    def __init__(self, surface: pygame.Surface):
        if not pygame.font.get_init():
            pygame.font.init()
        self.surface = surface
        self.frame = 0
        self.fonts = {}

    def font(self, size: int, bold: bool = False) -> pygame.font.Font:
        key = (size, bold)
        if key not in self.fonts:
            font = pygame.font.Font(None, size)
            font.set_bold(bold)
            self.fonts[key] = font
        return self.fonts[key]

    def render(self, session):
        """Draws the current frame for any session state."""
        self.frame += 1
        self.surface.fill(COLORS["bg"])
        self._draw_background(session.bg_offset)

        if session.state is SessionState.PLAYING:
            self._draw_game(session)
        elif session.state is SessionState.MENU:
            self._draw_menu(session)
        elif session.state is SessionState.GAME_OVER:
            self._draw_game(session)
            self._draw_game_over(session)

    # ---------- Layers ----------

    def _text(self, text: str, size: int, color, center: Tuple[float, float],
              bold: bool = False, alpha: int = 255):
        surf = self.font(size, bold).render(text, True, color)
        if alpha < 255:
            surf.set_alpha(alpha)
        self.surface.blit(surf, surf.get_rect(center=(int(center[0]), int(center[1]))))

    def _draw_background(self, bg_offset: float):
        """Pipeline-stage columns, bus lines and control nodes."""
        screen = self.surface
        width, height = screen.get_size()
        offset = bg_offset % STAGE_WIDTH

        x = -offset
        while x < width + STAGE_WIDTH:
            pygame.draw.line(screen, COLORS["bg_secondary"], (x, 0), (x, height))
            x += STAGE_WIDTH

        for y in range(BUS_SPACING, height, BUS_SPACING):
            pygame.draw.line(screen, COLORS["bg_secondary"], (0, y), (width, y))

        label_font = self.font(14)
        x = STAGE_WIDTH / 2 - offset
        index = 0
        while x < width + STAGE_WIDTH:
            label = label_font.render(STAGES[index % len(STAGES)], True, COLORS["circuit"])
            screen.blit(label, label.get_rect(center=(int(x), 12)))
            for y in range(30, height - 20, 50):
                pygame.draw.circle(screen, COLORS["circuit"], (int(x), y), 2)
            x += STAGE_WIDTH
            index += 1

    def _draw_game(self, session):
        for obstacle in session.obstacles:
            self._draw_obstacle(session, obstacle)
        self._draw_particles(session)
        self._draw_trail(session)
        self._draw_player(session)
        self._draw_sparkles(session)
        self._draw_hud(session)

    def _draw_obstacle(self, session, obstacle):
        width = session.config.pipe_width
        bottom_height = session.config.screen_height - obstacle.bottom_y
        self._draw_execution_unit(obstacle.x, 0, width, obstacle.top_height)
        self._draw_execution_unit(obstacle.x, obstacle.bottom_y, width, bottom_height)

    def _draw_execution_unit(self, x: float, y: float, width: float, height: float):
        screen = self.surface
        rect = pygame.Rect(int(x), int(y), int(width), int(height))
        pygame.draw.rect(screen, COLORS["circuit"], rect)
        pygame.draw.rect(screen, COLORS["circuit_dark"], rect, 2)

        # Data buses
        for i in range(int(height // 20)):
            path_y = y + 10 + i * 20
            pygame.draw.line(screen, COLORS["text"], (x + 3, path_y), (x + width - 3, path_y), 2)

        # Logic gates
        for i in range(int(height // 30)):
            gate_y = y + 15 + i * 30
            pygame.draw.rect(screen, COLORS["particles"], (int(x + 8), int(gate_y), 6, 6))
            pygame.draw.rect(screen, COLORS["particles"], (int(x + width - 14), int(gate_y), 6, 6))
            pygame.draw.line(screen, COLORS["particles"],
                             (x + 14, gate_y + 3), (x + width - 8, gate_y + 3))

        if height > 12:
            self._text("EX", 12, COLORS["chip_secondary"], (x + width / 2, y + height - 8))

    def _draw_particles(self, session):
        for p in session.particles:
            size = max(1, int(p.size))
            dot = pygame.Surface((size, size))
            dot.fill(COLORS["particles"])
            dot.set_alpha(int(255 * p.alpha))
            self.surface.blit(dot, (int(p.x - size / 2), int(p.y - size / 2)))

    def _draw_trail(self, session):
        trail_life = session.config.trail_life
        for point in session.player.trail:
            alpha = point.life / trail_life
            size = max(1, int(alpha * 6))
            square = pygame.Surface((size, size), pygame.SRCALPHA)
            square.fill((0, 255, 0, int(255 * alpha * 0.2)))
            pygame.draw.rect(square, (0, 255, 0, int(255 * alpha * 0.6)), square.get_rect(), 1)
            self.surface.blit(square, (int(point.x - size / 2), int(point.y - size / 2)))

    def _draw_player(self, session):
        """The hex container, rotated about its centre, showing the score in hex."""
        player = session.player
        w, h = int(player.width), int(player.height)
        chip = pygame.Surface((w, h), pygame.SRCALPHA)

        pygame.draw.rect(chip, COLORS["bg"], (2, 2, w - 4, h - 4))
        pygame.draw.rect(chip, COLORS["chip"], (0, 0, w, h), 3)

        label = hex_score(session.score)
        font_size = min(w / (len(label) * 0.55), h * 0.45)
        text = self.font(max(int(font_size * 1.4), 12)).render(label, True, COLORS["chip"])
        chip.blit(text, text.get_rect(center=(w // 2, h // 2)))

        # Corner brackets
        corner = int(min(w, h) * 0.15)
        cyan = COLORS["text"]
        for cx, cy, dx, dy in ((0, 0, 1, 1), (w - 1, 0, -1, 1), (0, h - 1, 1, -1), (w - 1, h - 1, -1, -1)):
            pygame.draw.line(chip, cyan, (cx, cy), (cx + dx * corner, cy))
            pygame.draw.line(chip, cyan, (cx, cy), (cx, cy + dy * corner))

        rotated = pygame.transform.rotate(chip, -math.degrees(player.rotation))
        self.surface.blit(rotated, rotated.get_rect(center=(int(player.center[0]), int(player.center[1]))))

    def _draw_sparkles(self, session):
        for s in session.sparkles:
            half = s.size * s.scale / 2
            if half < 0.5:
                continue
            cos_r, sin_r = math.cos(s.rotation), math.sin(s.rotation)
            for ux, uy in ((cos_r, sin_r), (-sin_r, cos_r)):
                start = (s.x - ux * half, s.y - uy * half)
                end = (s.x + ux * half, s.y + uy * half)
                pygame.draw.line(self.surface, COLORS["particles"], start, end, 2)

    def _draw_hud(self, session):
        center_x = self.surface.get_width() / 2
        self._text(str(session.score), 42, COLORS["text"], (center_x, 45))
        self._text(f"HI: {session.high_score}", 22, COLORS["text"], (center_x, 75))

    # ---------- Screens ----------

    def _draw_menu(self, session):
        cx = self.surface.get_width() / 2
        cy = self.surface.get_height() / 2

        self._text("HEX FLAP", 64, COLORS["text"], (cx, cy - 80), bold=True)
        self._text("Navigate data through CPU pipeline stages!", 26, COLORS["chip"], (cx, cy - 40))
        self._text("Click, tap, or press SPACE to control data flow", 22, COLORS["text"], (cx, cy + 20))
        self._text("Watch your data packet grow through execution!", 22, COLORS["text"], (cx, cy + 40))

        pulse = math.sin(self.frame * 0.1) * 0.3 + 0.7
        self._text("CLICK TO START", 32, COLORS["particles"], (cx, cy + 100),
                   bold=True, alpha=int(255 * pulse))

        if session.high_score > 0:
            self._text(f"Best Score: {session.high_score}", 24, COLORS["circuit"], (cx, cy + 140))

    def _draw_game_over(self, session):
        width, height = self.surface.get_size()
        overlay = pygame.Surface((width, height))
        overlay.fill((0, 0, 0))
        overlay.set_alpha(178)
        self.surface.blit(overlay, (0, 0))

        cx, cy = width / 2, height / 2
        self._text("PIPELINE HAZARD", 64, COLORS["danger"], (cx, cy - 60), bold=True)
        self._text(f"Instructions: {hex_score(session.score)}", 32, COLORS["text"], (cx, cy - 20))

        if session.is_new_record:
            self._text("NEW THROUGHPUT RECORD!", 26, COLORS["particles"], (cx, cy + 10))
        else:
            self._text(f"Best: {hex_score(session.high_score)}", 24, COLORS["circuit"], (cx, cy + 10))

        self._text("Click to reset pipeline", 26, COLORS["chip"], (cx, cy + 60))
