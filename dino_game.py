# dino_game.py
# Dino runner: jump over the cacti scrolling in from the right.

import logging

import pygame

from arcade_common import BaseGame, COLS, draw_text, run_standalone

log = logging.getLogger(__name__)

GROUND_Y = 300
CACTUS_SPEED = 5


class Dinosaur:
    gravity = 0.6
    jump_strength = -12

    def __init__(self, x, y, width, height, ground_y):
        self.x, self.y = x, int(y)
        self.width, self.height = width, height
        self.ground_y = ground_y
        self.vy = 0.0

    @property
    def on_ground(self):
        return self.y >= self.ground_y - self.height

    def update(self):
        # y is whole pixels, truncated every tick
        self.y = int(self.y + self.vy)
        self.vy += self.gravity
        if self.on_ground:
            self.y = self.ground_y - self.height
            self.vy = 0.0

    def jump(self):
        # no double jumps
        if self.on_ground:
            self.vy = self.jump_strength

    @property
    def rect(self):
        return pygame.Rect(self.x, self.y, self.width, self.height)

    def draw(self, surf):
        pygame.draw.rect(surf, COLS["blue"], self.rect)


class Cactus:
    def __init__(self, x, y, width, height, speed=CACTUS_SPEED):
        self.rect = pygame.Rect(x, y, width, height)
        self.speed = speed

    def update(self):
        self.rect.x -= self.speed

    @property
    def offscreen(self):
        return self.rect.right < 0

    def draw(self, surf):
        pygame.draw.rect(surf, COLS["cactus"], self.rect)


class DinoGame(BaseGame):
    """
    Dino Game - Space to jump over the cacti, R to restart
    """
    name = "Dino"
    caption = "Dino Game - Jump Over the Cacti!"
    width, height = 800, 400
    tick_ms = 20
    background = (255,255,255)

    def reset(self):
        self.dino = Dinosaur(50, GROUND_Y - 50, 50, 50, GROUND_Y)
        self.cacti = []
        self.spawn_timer = 0

    def spawn_cactus(self):
        w = 20 + self.rng.randrange(10)
        h = 40 + self.rng.randrange(20)
        self.cacti.append(Cactus(self.width, GROUND_Y - h, w, h))
        log.debug("cactus %dx%d spawned", w, h)

    def handle_event(self, ev):
        if ev.type==pygame.KEYDOWN and ev.key==self.keys["jump"] and not self.game_over:
            self.dino.jump()

    def update(self, dt):
        self.dino.update()
        for c in self.cacti:
            c.update()
        passed = [c for c in self.cacti if c.offscreen]
        self.score += len(passed)
        self.cacti = [c for c in self.cacti if not c.offscreen]
        dino = self.dino.rect
        for c in self.cacti:
            if c.rect.colliderect(dino):
                self.particles.emit(dino.centerx, dino.centery, n=20, color=COLS["danger"])
                self.end("hit a cactus")
                return
        # threshold re-rolled every tick: 1.5 to 2.5 seconds between cacti
        self.spawn_timer += dt
        if self.spawn_timer >= 1500 + self.rng.randrange(1000):
            self.spawn_cactus()
            self.spawn_timer = 0

    def draw(self, surf):
        pygame.draw.rect(surf, COLS["ground"], (0, GROUND_Y, self.width, self.height - GROUND_Y))
        self.dino.draw(surf)
        for c in self.cacti:
            c.draw(surf)
        draw_text(surf, f"Score: {self.score}", 10, 10, 18, COLS["black"])
        if self.game_over:
            draw_text(surf, "Game Over! Press R to Restart.", self.width//2, self.height//2,
                      36, COLS["red"], center=True, bold=True)


def main():
    run_standalone(DinoGame)


if __name__ == "__main__":
    main()
