"""Pygame canvas with the conceptual solenoid field."""
from __future__ import annotations

import pygame

from physviz.core.config import SOLENOID_CFG, SolenoidCfg
from physviz.render import draw_solenoid


def run(cfg: SolenoidCfg = SOLENOID_CFG) -> None:
    pygame.init()
    screen = pygame.display.set_mode((cfg.width, cfg.height))
    pygame.display.set_caption("Solenoid field")
    clock = pygame.time.Clock()

    # static field: repaint on expose only
    draw_solenoid(screen, cfg)
    pygame.display.flip()

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                running = False
            elif event.type in (pygame.VIDEOEXPOSE, pygame.WINDOWEXPOSED):
                draw_solenoid(screen, cfg)
                pygame.display.flip()
        clock.tick(30)

    pygame.quit()
