# mars_attacks.py
# Mars Attacks: shoot the aliens before they reach the bottom or your ship.

import logging

import pygame

from arcade_common import BaseGame, COLS, draw_text, run_standalone

log = logging.getLogger(__name__)

ALIEN_SPAWN_TICKS = 50  # about one alien a second


class Player:
    def __init__(self, x, y, width, height, speed=5):
        self.rect = pygame.Rect(x, y, width, height)
        self.speed = speed

    def move(self, dx, panel_width):
        self.rect.x = max(0, min(panel_width - self.rect.width, self.rect.x + dx))

    def draw(self, surf):
        pygame.draw.rect(surf, COLS["blue"], self.rect)


class Bullet:
    def __init__(self, x, y, width=5, height=10, speed=7):
        self.rect = pygame.Rect(x, y, width, height)
        self.speed = speed

    def update(self):
        self.rect.y -= self.speed

    def draw(self, surf):
        pygame.draw.rect(surf, COLS["yellow"], self.rect)


class Alien:
    def __init__(self, x, y, width=40, height=40, speed=2):
        self.rect = pygame.Rect(x, y, width, height)
        self.speed = speed

    def update(self):
        self.rect.y += self.speed

    def draw(self, surf):
        # drawn round, collides square
        pygame.draw.ellipse(surf, COLS["red"], self.rect)


class MarsAttacks(BaseGame):
    """
    Mars Attacks - Left/Right to move, Space to shoot, R to restart
    """
    name = "Mars Attacks"
    caption = "Mars Attacks Arcade Game"
    width, height = 800, 600
    tick_ms = 20
    background = COLS["black"]

    def reset(self):
        self.player = Player(self.width//2 - 20, self.height - 60, 40, 40)
        self.bullets = []
        self.aliens = []
        self.spawn_counter = 0
        self.left_pressed = False
        self.right_pressed = False

    def spawn_alien(self):
        x = self.rng.randrange(self.width - 40)
        self.aliens.append(Alien(x, -40))
        log.debug("alien spawned at x=%d", x)

    def shoot(self):
        p = self.player.rect
        b = Bullet(0, p.y)
        b.rect.x = p.x + p.width//2 - b.rect.width//2
        self.bullets.append(b)

    def handle_event(self, ev):
        k = self.keys
        if ev.type==pygame.KEYDOWN:
            if ev.key==k["left"]: self.left_pressed = True
            if ev.key==k["right"]: self.right_pressed = True
            if ev.key==k["shoot"] and not self.game_over: self.shoot()
        if ev.type==pygame.KEYUP:
            if ev.key==k["left"]: self.left_pressed = False
            if ev.key==k["right"]: self.right_pressed = False

    def update(self, dt):
        if self.left_pressed: self.player.move(-self.player.speed, self.width)
        if self.right_pressed: self.player.move(self.player.speed, self.width)

        for b in self.bullets: b.update()
        self.bullets = [b for b in self.bullets if b.rect.y >= 0]

        for a in self.aliens:
            a.update()
            if a.rect.y > self.height:
                self.end("an alien landed")

        self.spawn_counter += 1
        if self.spawn_counter >= ALIEN_SPAWN_TICKS:
            self.spawn_alien()
            self.spawn_counter = 0

        # collisions
        remove_b=[]; remove_e=[]
        for b in self.bullets:
            for a in self.aliens:
                if a not in remove_e and b.rect.colliderect(a.rect):
                    remove_b.append(b); remove_e.append(a)
                    self.score += 10
                    self.particles.emit(a.rect.centerx, a.rect.centery, n=8, color=COLS["danger"])
                    break
        self.bullets = [b for b in self.bullets if b not in remove_b]
        self.aliens = [a for a in self.aliens if a not in remove_e]

        for a in self.aliens:
            if a.rect.colliderect(self.player.rect):
                self.end("ship destroyed")
                break

    def draw(self, surf):
        if self.game_over:
            cx, cy = self.width//2, self.height//2
            draw_text(surf, "Game Over", cx, cy, 36, COLS["red"], center=True, bold=True)
            draw_text(surf, "Press R to Restart", cx, cy + 40, 18, COLS["red"], center=True)
            draw_text(surf, f"Score: {self.score}", cx, cy + 70, 18, COLS["white"], center=True)
            return
        self.player.draw(surf)
        for b in self.bullets: b.draw(surf)
        for a in self.aliens: a.draw(surf)
        draw_text(surf, f"Score: {self.score}", 10, 10, 14, COLS["white"])


def main():
    run_standalone(MarsAttacks)


if __name__ == "__main__":
    main()
