#!/usr/bin/env python3
"""
flappy_client.py

pygame front end: draws each frame's snapshot, feeds Space/click into the
game, and keeps the HUD overlays in sync through the observer callbacks.
"""

from typing import Tuple

import pygame

from .config import GameConfig
from .data_models import BirdView, GameSnapshot, GameState, PipeView
from .game import FlappyGame, GameObserver
from .logger import get_logger

logger = get_logger("client")

# -------- Colors --------
SKY_TOP = (0x87, 0xCE, 0xEB)
SKY_BOTTOM = (0x98, 0xE4, 0xFF)
GROUND = (0x8F, 0xBC, 0x8F)
GROUND_BORDER = (0x22, 0x8B, 0x22)
PIPE_BODY = (0x22, 0x8B, 0x22)
PIPE_EDGE = (0x00, 0x64, 0x00)
PIPE_CAP = (0x32, 0xCD, 0x32)
BIRD_BODY = (0xFF, 0xD7, 0x00)
BIRD_OUTLINE = (0xFF, 0xA5, 0x00)
BIRD_BEAK = (0xFF, 0x8C, 0x00)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
OVERLAY = (0, 0, 0, 150)

CAP_HEIGHT = 30
CAP_OVERHANG = 5


class HudObserver(GameObserver):
    """
    Overlay visibility and score text, updated only through game callbacks.
    """

    def __init__(self):
        self.show_instructions = True
        self.show_game_over = False
        self.current_score = 0
        self.final_score = 0

    def on_state_changed(self, previous: GameState, current: GameState, snapshot: GameSnapshot):
        self.show_instructions = current is GameState.MENU
        self.show_game_over = current is GameState.GAME_OVER
        if current is GameState.GAME_OVER:
            self.final_score = snapshot.score

    def on_score_changed(self, score: int):
        self.current_score = score
        self.final_score = score


def lerp_color(a: Tuple[int, int, int], b: Tuple[int, int, int], t: float) -> Tuple[int, int, int]:
    return tuple(round(ca + (cb - ca) * t) for ca, cb in zip(a, b))


class FlappyClient:
    def __init__(self, config: GameConfig):
        pygame.init()
        self.config = config
        self.width = int(config.playfield_width)
        self.height = int(config.playfield_height)
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption("Flappy Bird")

        self.hud = HudObserver()
        self.game = FlappyGame(config, observers=[self.hud])

        self.clock = pygame.time.Clock()
        self.large_font = pygame.font.Font(None, 44)
        self.font = pygame.font.Font(None, 26)
        self.background = self._build_background()
        self.running = False

    def run(self):
        """The main frame loop: input, one tick, draw."""
        self.running = True
        self.game.start()
        while self.running:
            self._handle_events()
            self.game.scheduler.tick()
            self._draw_game(self.game.snapshot())
            self.clock.tick(self.config.fps)

        self.game.stop()
        pygame.quit()
        logger.info("Client closed after %d frames", self.game.scheduler.frames_fired)

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_SPACE:
                self.game.on_flap_input()
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.game.on_flap_input()

    # -------- Drawing --------
    def _build_background(self) -> pygame.Surface:
        """Sky gradient down to the ground line, then the ground band."""
        surface = pygame.Surface((self.width, self.height))
        ground_y = int(self.config.ground_y)
        for row in range(ground_y):
            color = lerp_color(SKY_TOP, SKY_BOTTOM, row / max(ground_y - 1, 1))
            pygame.draw.line(surface, color, (0, row), (self.width, row))
        pygame.draw.rect(surface, GROUND, (0, ground_y, self.width, self.height - ground_y))
        pygame.draw.rect(surface, GROUND_BORDER, (0, ground_y, self.width, 3))
        return surface

    def _draw_pipe(self, pipe: PipeView):
        cfg = self.config
        width = cfg.pipe_width
        lower_y = pipe.gap_top + cfg.gap_height
        lower_height = cfg.ground_y - lower_y
        upper = pygame.Rect(pipe.x, 0, width, pipe.gap_top)
        lower = pygame.Rect(pipe.x, lower_y, width, lower_height)

        for rect in (upper, lower):
            pygame.draw.rect(self.screen, PIPE_BODY, rect)
            pygame.draw.rect(self.screen, PIPE_EDGE, rect, 3)

        cap_width = width + CAP_OVERHANG * 2
        for cap_y in (pipe.gap_top - CAP_HEIGHT, lower_y):
            cap = pygame.Rect(pipe.x - CAP_OVERHANG, cap_y, cap_width, CAP_HEIGHT)
            pygame.draw.rect(self.screen, PIPE_CAP, cap)
            pygame.draw.rect(self.screen, PIPE_EDGE, cap, 3)

    def _draw_bird(self, bird: BirdView):
        x, y, r = int(bird.x), int(bird.y), int(bird.radius)
        pygame.draw.circle(self.screen, BIRD_BODY, (x, y), r)
        pygame.draw.circle(self.screen, BIRD_OUTLINE, (x, y), r, 2)
        pygame.draw.circle(self.screen, WHITE, (x + 8, y - 5), 6)
        pygame.draw.circle(self.screen, BLACK, (x + 8, y - 5), 3)
        pygame.draw.polygon(self.screen, BIRD_BEAK,
                            [(x + r, y), (x + r + 15, y - 5), (x + r + 15, y + 5)])

    def _blit_centered(self, font: pygame.font.Font, text: str, y: int, color=WHITE, outline=True):
        if outline:
            shadow = font.render(text, True, BLACK)
            for dx, dy in ((-2, 0), (2, 0), (0, -2), (0, 2)):
                self.screen.blit(shadow, (self.width // 2 - shadow.get_width() // 2 + dx, y + dy))
        surf = font.render(text, True, color)
        self.screen.blit(surf, (self.width // 2 - surf.get_width() // 2, y))

    def _draw_overlay(self, lines):
        panel = pygame.Surface((self.width, self.height), pygame.SRCALPHA)
        panel.fill(OVERLAY)
        self.screen.blit(panel, (0, 0))
        top = self.height // 2 - len(lines) * 24
        for i, (font, text) in enumerate(lines):
            self._blit_centered(font, text, top + i * 48, outline=False)

    def _draw_game(self, snapshot: GameSnapshot):
        self.screen.blit(self.background, (0, 0))

        for pipe in snapshot.pipes:
            self._draw_pipe(pipe)
        self._draw_bird(snapshot.bird)

        if snapshot.state is not GameState.MENU:
            self._blit_centered(self.large_font, str(self.hud.current_score), 30)

        if self.hud.show_instructions:
            self._draw_overlay([
                (self.large_font, "Flappy Bird"),
                (self.font, "Press SPACE or click to flap"),
                (self.font, "Avoid the pipes, the ground and the sky"),
            ])
        elif self.hud.show_game_over:
            self._draw_overlay([
                (self.large_font, "Game Over"),
                (self.font, f"Score: {self.hud.final_score}"),
                (self.font, "Press SPACE or click to restart"),
            ])

        pygame.display.flip()
