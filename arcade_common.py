# arcade_common.py
# Shared bits for the retro arcade games: palette, text, particles,
# key bindings, logging and the fixed-timestep BaseGame loop.

import json
import logging
import math
import os
import random
import sys
from pathlib import Path

import pygame

log = logging.getLogger(__name__)

FPS = 60
# never simulate more than this many ticks per frame after a stall
MAX_CATCHUP_TICKS = 5

SETTINGS_FILE = Path("arcade_settings.json")

DEFAULT_KEYS = {
    "left": pygame.K_LEFT,
    "right": pygame.K_RIGHT,
    "up": pygame.K_UP,
    "down": pygame.K_DOWN,
    "shoot": pygame.K_SPACE,
    "jump": pygame.K_SPACE,
    "restart": pygame.K_r,
    "pause": pygame.K_p,
    "enter": pygame.K_RETURN,
    "escape": pygame.K_ESCAPE
}

COLS = {
    "bg":(12,14,24),"panel":(24,28,44),"accent":(245,188,66),
    "white":(235,235,235),"muted":(150,150,160),"danger":(220,80,80),
    "good":(80,200,120),"black":(0,0,0),"red":(255,0,0),
    "blue":(0,0,255),"yellow":(255,255,0),"ground":(0,178,0),
    "cactus":(64,64,64),"grid":(64,64,64),"head":(0,255,0),"body":(45,180,0)
}


def setup_logging(level=None):
    level = level or os.environ.get("ARCADE_LOG_LEVEL", "INFO")
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _key_code(value):
    if isinstance(value, int):
        return value
    return pygame.key.key_code(str(value))


def load_settings(path=None):
    """Key bindings: defaults, overridden by an optional read-only JSON file.

    The file looks like {"keys": {"jump": "up", "shoot": 32}}. Anything that
    can't be read or understood is logged and the default is kept.
    """
    path = Path(path or os.environ.get("ARCADE_SETTINGS") or SETTINGS_FILE)
    settings = {"keys": dict(DEFAULT_KEYS)}
    if not path.exists():
        return settings
    try:
        data = json.loads(path.read_text())
    except (OSError, ValueError) as exc:
        log.warning("ignoring settings file %s: %s", path, exc)
        return settings
    keys = data.get("keys", {}) if isinstance(data, dict) else {}
    if not isinstance(keys, dict):
        log.warning("ignoring settings file %s: 'keys' must be an object", path)
        return settings
    for action, value in keys.items():
        if action not in DEFAULT_KEYS:
            log.warning("unknown action %r in %s", action, path)
            continue
        try:
            settings["keys"][action] = _key_code(value)
        except ValueError:
            log.warning("unknown key %r for action %r in %s", value, action, path)
    log.debug("loaded settings from %s", path)
    return settings


SETTINGS = {"keys": dict(DEFAULT_KEYS)}

_fonts = {}


def font(size, bold=False):
    if (size, bold) not in _fonts:
        if not pygame.font.get_init():
            pygame.font.init()
        _fonts[(size, bold)] = pygame.font.SysFont("consolas", size, bold=bold)
    return _fonts[(size, bold)]


def draw_text(surf, txt, x, y, size=18, color=None, center=False, bold=False):
    color = color or COLS["white"]
    r = font(size, bold).render(txt, True, color)
    rect = r.get_rect()
    if center:
        rect.center = (x,y)
    else:
        rect.topleft = (x,y)
    surf.blit(r, rect)
    return rect


def init_display(width, height, caption):
    if not pygame.get_init():
        pygame.init()
    surf = pygame.display.set_mode((width, height))
    pygame.display.set_caption(caption)
    return surf


def quit_game():
    log.info("window closed, exiting")
    pygame.quit()
    sys.exit()


# particle system (tiny)
class Particle:
    def __init__(self,x,y,vx,vy,life,size,color):
        self.x=x; self.y=y; self.vx=vx; self.vy=vy; self.life=life; self.max=life
        self.size=size; self.color=color
    def update(self,dt):
        self.x += self.vx*dt
        self.y += self.vy*dt
        self.life -= dt
    def draw(self,surf):
        if self.life<=0: return
        a = max(0, self.life/self.max)
        col = (int(self.color[0]*a), int(self.color[1]*a), int(self.color[2]*a))
        pygame.draw.circle(surf, col, (int(self.x),int(self.y)), max(1,int(self.size*a)))

class Particles:
    def __init__(self, rng=None):
        self.ps=[]
        self.rng = rng or random.Random()
    def emit(self,x,y,n=12,color=(245,188,66)):
        for _ in range(n):
            ang = self.rng.random()*2*math.pi
            sp = self.rng.uniform(40,300)
            self.ps.append(Particle(x,y,math.cos(ang)*sp,math.sin(ang)*sp,
                                    self.rng.uniform(0.3,0.9),self.rng.uniform(1.8,4.5),color))
    def update(self,dt):
        for p in self.ps: p.update(dt)
        self.ps = [p for p in self.ps if p.life>0]
    def draw(self,surf):
        for p in self.ps: p.draw(surf)


class BaseGame:
    """Fixed-timestep game: reset/handle_event/update/draw, driven by run()."""
    name = "Base"
    caption = "Arcade"
    width, height = 800, 600
    tick_ms = 20
    background = COLS["black"]

    def __init__(self, rng=None, settings=None):
        self.rng = rng or random.Random()
        self.keys = (settings or SETTINGS)["keys"]
        self.particles = Particles(self.rng)
        self.paused = False
        self.game_over = False
        self.score = 0
        self.reset()

    def reset(self): pass
    def handle_event(self, ev): pass
    def update(self, dt): pass
    def draw(self, surf): pass

    def end(self, reason):
        if self.game_over: return
        self.game_over = True
        log.info("%s over (%s), score %d", self.name, reason, self.score)

    def restart(self):
        log.info("restarting %s", self.name)
        self.paused = False
        self.game_over = False
        self.score = 0
        self.particles = Particles(self.rng)
        self.reset()

    def process_event(self, ev):
        if ev.type==pygame.KEYDOWN:
            if ev.key==self.keys["pause"] and not self.game_over:
                self.paused = not self.paused
                return
            if ev.key==self.keys["restart"] and self.game_over:
                self.restart()
                return
        self.handle_event(ev)

    def step(self):
        """One fixed tick, unless paused or over."""
        if not self.paused and not self.game_over:
            self.update(self.tick_ms)

    def animate(self, dt):
        """Advance effects by dt seconds; frozen while paused."""
        if not self.paused:
            self.particles.update(dt)

    def draw_paused(self, surf):
        if self.paused:
            draw_text(surf, "PAUSED - press P", self.width//2, self.height-30, 18, COLS["accent"], center=True)

    def run(self, surf=None):
        # blocking run loop until escape is pressed
        surf = surf or init_display(self.width, self.height, self.caption)
        clock = pygame.time.Clock()
        lag = 0
        log.info("starting %s", self.name)
        while True:
            dt_ms = clock.tick(FPS)
            for ev in pygame.event.get():
                if ev.type==pygame.QUIT:
                    quit_game()
                if ev.type==pygame.KEYDOWN and ev.key==self.keys["escape"]:
                    log.info("leaving %s with score %d", self.name, self.score)
                    return self.score
                self.process_event(ev)
            lag = min(lag + dt_ms, self.tick_ms * MAX_CATCHUP_TICKS)
            while lag >= self.tick_ms:
                self.step()
                lag -= self.tick_ms
            surf.fill(self.background)
            self.draw(surf)
            self.animate(dt_ms / 1000.0)
            self.particles.draw(surf)
            self.draw_paused(surf)
            pygame.display.flip()


def run_standalone(game_cls):
    setup_logging()
    SETTINGS.update(load_settings())
    game = game_cls()
    game.run()
    pygame.quit()
