# retro_games.py
# Menu launcher for the three games. Each game gets its own window size;
# Esc in a game comes back here, Esc here quits.

import logging

import pygame

from arcade_common import (COLS, FPS, SETTINGS, draw_text, init_display, load_settings,
                           quit_game, setup_logging)
from dino_game import DinoGame
from mars_attacks import MarsAttacks
from snake_game import SnakeGame

log = logging.getLogger(__name__)

WIDTH, HEIGHT = 640, 420
GAMES = [("Dino Runner", DinoGame), ("Mars Attacks", MarsAttacks), ("Snake", SnakeGame)]
ROW_Y, ROW_H, ROW_STEP, ROW_W = 130, 60, 78, 520


def menu_rects():
    x = (WIDTH - ROW_W)//2
    return [pygame.Rect(x, ROW_Y + i*ROW_STEP, ROW_W, ROW_H) for i in range(len(GAMES))]


def draw_menu(surf, selected):
    surf.fill(COLS["bg"])
    draw_text(surf, "Retro Arcade", WIDTH//2, 44, 44, COLS["accent"], center=True)
    draw_text(surf, "Up/Down and Enter (or click) to play. Esc quits.", WIDTH//2, 88, 18, COLS["muted"], center=True)
    for i,((label,cls),rect) in enumerate(zip(GAMES, menu_rects())):
        color = (36,46,66) if i==selected else COLS["panel"]
        pygame.draw.rect(surf, color, rect, border_radius=8)
        draw_text(surf, label, rect.x+20, rect.y+14, 34, COLS["accent"] if i==selected else COLS["white"])


def play(idx):
    label, cls = GAMES[idx]
    log.info("launching %s", label)
    game = cls(settings=SETTINGS)
    game.run()
    # back to the menu window
    return init_display(WIDTH, HEIGHT, "Retro Arcade")


def main_loop(surf):
    selected = 0
    clock = pygame.time.Clock()
    k = SETTINGS["keys"]
    while True:
        draw_menu(surf, selected)
        pygame.display.flip()
        for ev in pygame.event.get():
            if ev.type==pygame.QUIT:
                quit_game()
            if ev.type==pygame.KEYDOWN:
                if ev.key==k["down"]:
                    selected = (selected + 1) % len(GAMES)
                elif ev.key==k["up"]:
                    selected = (selected - 1) % len(GAMES)
                elif ev.key==k["enter"]:
                    surf = play(selected)
                elif ev.key==k["escape"]:
                    quit_game()
            if ev.type==pygame.MOUSEBUTTONDOWN:
                for i,rect in enumerate(menu_rects()):
                    if rect.collidepoint(ev.pos):
                        selected = i
                        surf = play(selected)
                        break
        clock.tick(FPS)


def main():
    setup_logging()
    SETTINGS.update(load_settings())
    main_loop(init_display(WIDTH, HEIGHT, "Retro Arcade"))


if __name__ == "__main__":
    main()
