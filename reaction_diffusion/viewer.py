"""
Interactive pygame viewer

Thin presentation layer around a SimulationEngine: owns the window, input
polling and frame pacing, and blits whatever draw() returns.

Keys:
    ESC / Q   quit
    SPACE     pause / resume
    R         reset to the seeded state
    P         next palette
    + / -     more / fewer updates per frame
Mouse:
    left      paint B
    right     erase B
"""

import time

import numpy as np
import pygame

from .colormaps import PALETTE_ORDER, get_palette
from .pixel import unpack_rgb


class Viewer:
    def __init__(self, engine, scale=4, steps_per_frame=8, fps=60,
                 palette="gray", brush_radius=None):
        self.engine = engine
        self.scale = max(1, int(scale))
        self.steps_per_frame = max(1, int(steps_per_frame))
        self.fps = fps
        self.palette_idx = PALETTE_ORDER.index(palette)
        self.brush_radius = brush_radius or max(2, min(engine.width, engine.height) // 40)

        self.running = True
        self.paused = False
        self.fps_history = []
        self._buffer = np.empty(engine.width * engine.height, dtype=np.uint32)

    @property
    def window_size(self):
        return self.engine.width * self.scale, self.engine.height * self.scale

    @property
    def palette_name(self):
        return PALETTE_ORDER[self.palette_idx]

    def _render_frame(self):
        """Draw engine state into a pygame surface at simulation size."""
        palette = None
        if self.palette_name != "gray":
            palette = get_palette(self.palette_name)
        self.engine.draw(self.engine.width, self.engine.height,
                         out=self._buffer, palette=palette)
        rgb = unpack_rgb(self._buffer, self.engine.width, self.engine.height)
        return pygame.surfarray.make_surface(rgb.swapaxes(0, 1).copy())

    def _handle_mouse(self):
        left, _, right = pygame.mouse.get_pressed()
        if not (left or right):
            return
        mx, my = pygame.mouse.get_pos()
        cx, cy = mx // self.scale, my // self.scale
        if left:
            self.engine.add_blob(cx, cy, self.brush_radius)
        else:
            self.engine.remove_blob(cx, cy, self.brush_radius)

    def _handle_keydown(self, event):
        key = event.key

        if key in (pygame.K_q, pygame.K_ESCAPE):
            self.running = False

        elif key == pygame.K_SPACE:
            self.paused = not self.paused

        elif key == pygame.K_r:
            self.engine.reset()

        elif key == pygame.K_p:
            self.palette_idx = (self.palette_idx + 1) % len(PALETTE_ORDER)
            print(f"[RD] Palette: {self.palette_name}")

        elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            self.steps_per_frame = min(self.steps_per_frame * 2, 256)

        elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            self.steps_per_frame = max(self.steps_per_frame // 2, 1)

    def _update_caption(self):
        avg = np.mean(self.fps_history) if self.fps_history else 0.0
        fps = 1.0 / max(avg, 0.001)
        state = " [paused]" if self.paused else ""
        pygame.display.set_caption(
            f"{self.engine.engine_label} - gen {self.engine.generation} - "
            f"{self.steps_per_frame} steps/frame - {fps:.0f} fps{state}")

    def run(self):
        """Main viewer loop."""
        pygame.init()
        screen = pygame.display.set_mode(self.window_size)
        clock = pygame.time.Clock()

        while self.running:
            frame_start = time.time()

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    self.running = False
                elif event.type == pygame.KEYDOWN:
                    self._handle_keydown(event)

            self._handle_mouse()

            if not self.paused:
                self.engine.step_n(self.steps_per_frame)

            sim_surface = self._render_frame()
            if self.scale != 1:
                sim_surface = pygame.transform.scale(sim_surface, self.window_size)
            screen.blit(sim_surface, (0, 0))
            pygame.display.flip()

            self.fps_history.append(time.time() - frame_start)
            if len(self.fps_history) > 30:
                self.fps_history.pop(0)
            self._update_caption()

            clock.tick(self.fps)

        pygame.quit()
        print(f"[RD] Stopped at generation {self.engine.generation}")
