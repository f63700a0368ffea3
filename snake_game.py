# snake_game.py
# Grid snake: eat apples, grow, don't hit the walls or yourself.

import logging

import pygame

from arcade_common import BaseGame, COLS, draw_text, run_standalone

log = logging.getLogger(__name__)

UNIT = 25
START_LENGTH = 6
DIRS = {"up":(0,-1), "down":(0,1), "left":(-1,0), "right":(1,0)}


class SnakeGame(BaseGame):
    """
    Snake - Arrow keys to steer, eat apples to grow, R to restart
    """
    name = "Snake"
    caption = "Snake Game"
    width, height = 600, 600
    tick_ms = 75
    background = COLS["black"]

    @property
    def cols(self):
        return self.width // UNIT

    @property
    def rows(self):
        return self.height // UNIT

    def reset(self):
        # body starts stacked in the corner and unfurls as it moves
        self.snake = [(0,0)] * START_LENGTH
        self.dir = DIRS["right"]
        self.last_dir = self.dir
        self.spawn_apple()

    def spawn_apple(self):
        taken = set(self.snake)
        free = [(c,r) for r in range(self.rows) for c in range(self.cols) if (c,r) not in taken]
        if not free:
            self.apple = None
            self.end("board full")
            return
        self.apple = self.rng.choice(free)
        log.debug("apple at %s", self.apple)

    def handle_event(self, ev):
        if ev.type!=pygame.KEYDOWN: return
        for action, d in DIRS.items():
            # compare with the direction actually moved, not the last key pressed
            if ev.key==self.keys[action] and d!=(-self.last_dir[0], -self.last_dir[1]):
                self.dir = d

    def in_bounds(self, cell):
        return 0 <= cell[0] < self.cols and 0 <= cell[1] < self.rows

    def update(self, dt):
        head = self.snake[0]
        nxt = (head[0]+self.dir[0], head[1]+self.dir[1])
        self.last_dir = self.dir
        self.snake.insert(0, nxt)
        if nxt == self.apple:
            self.score += 1
            self.spawn_apple()
        else:
            self.snake.pop()
        if not self.in_bounds(nxt):
            self.end("hit the wall")
        elif nxt in self.snake[1:]:
            self.end("bit itself")

    def draw(self, surf):
        if not self.game_over:
            for i in range(self.rows):
                pygame.draw.line(surf, COLS["grid"], (i*UNIT, 0), (i*UNIT, self.height))
                pygame.draw.line(surf, COLS["grid"], (0, i*UNIT), (self.width, i*UNIT))
            if self.apple:
                pygame.draw.ellipse(surf, COLS["red"], (self.apple[0]*UNIT, self.apple[1]*UNIT, UNIT, UNIT))
            # tail first so the head is drawn on top of a stacked body
            for i in reversed(range(len(self.snake))):
                x, y = self.snake[i]
                color = COLS["head"] if i==0 else COLS["body"]
                pygame.draw.rect(surf, color, (x*UNIT, y*UNIT, UNIT, UNIT))
        draw_text(surf, f"Score: {self.score}", self.width//2, 24, 40, COLS["red"], center=True, bold=True)
        if self.game_over:
            draw_text(surf, "Game Over", self.width//2, self.height//2, 75, COLS["red"], center=True, bold=True)
            draw_text(surf, "Press R to Restart", self.width//2, self.height//2 + 60, 18, COLS["muted"], center=True)


def main():
    run_standalone(SnakeGame)


if __name__ == "__main__":
    main()
