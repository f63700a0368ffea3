import pygame
import pytest

import retro_games
from arcade_common import init_display
from dino_game import DinoGame
from mars_attacks import MarsAttacks
from snake_game import SnakeGame


class Quit(Exception):
    pass


@pytest.fixture
def launcher(monkeypatch):
    played = []
    surf = init_display(retro_games.WIDTH, retro_games.HEIGHT, "test")

    def fake_play(idx):
        played.append(idx)
        return surf

    def fake_quit():
        raise Quit()

    monkeypatch.setattr(retro_games, "play", fake_play)
    monkeypatch.setattr(retro_games, "quit_game", fake_quit)
    pygame.event.clear()
    return surf, played


def post_keys(*keys):
    for key in keys:
        pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key))


def test_one_row_per_game():
    rects = retro_games.menu_rects()
    assert len(rects) == len(retro_games.GAMES)
    assert [cls for _, cls in retro_games.GAMES] == [DinoGame, MarsAttacks, SnakeGame]


def test_keyboard_selection_wraps(launcher):
    surf, played = launcher
    post_keys(pygame.K_DOWN, pygame.K_RETURN,
              pygame.K_UP, pygame.K_UP, pygame.K_RETURN,
              pygame.K_DOWN, pygame.K_RETURN,
              pygame.K_ESCAPE)
    with pytest.raises(Quit):
        retro_games.main_loop(surf)
    assert played == [1, 2, 0]
    assert retro_games.GAMES[played[0]][1] is MarsAttacks
    assert retro_games.GAMES[played[1]][1] is SnakeGame


def test_click_launches_game(launcher):
    surf, played = launcher
    rect = retro_games.menu_rects()[2]
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=rect.center, button=1))
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, pos=(1, 1), button=1))
    post_keys(pygame.K_ESCAPE)
    with pytest.raises(Quit):
        retro_games.main_loop(surf)
    assert played == [2]


def test_escape_quits(launcher):
    surf, played = launcher
    post_keys(pygame.K_ESCAPE)
    with pytest.raises(Quit):
        retro_games.main_loop(surf)
    assert played == []


def test_play_runs_the_selected_game(monkeypatch):
    ran = []

    class FakeGame:
        def __init__(self, settings=None):
            self.settings = settings

        def run(self):
            ran.append(self.settings)
            return 0

    monkeypatch.setattr(retro_games, "GAMES", [("Fake", FakeGame)])
    surf = retro_games.play(0)
    assert ran == [retro_games.SETTINGS]
    assert surf.get_size() == (retro_games.WIDTH, retro_games.HEIGHT)
