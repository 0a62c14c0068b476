"""Main application class that ties everything together."""

import pygame
from pygame.locals import *

from config import boids as config
from .camera import Camera
from .input_handler import InputHandler
from rendering import BoidRenderer, Grid, TextRenderer, WindField
from boids import Bounds, Environment, Simulation


class Application:
    """Main application managing the frame loop and rendering."""

    def __init__(self, num_boids: int = config.BOIDS["count"], seed=None,
                 chase: bool = False, automatic_wind: bool = config.WIND["automatic"]):
        pygame.init()
        self.screen_size = (config.WINDOW["width"], config.WINDOW["height"])
        self.screen = pygame.display.set_mode(self.screen_size, RESIZABLE)
        pygame.display.set_caption(config.WINDOW["title"])

        # Core components
        self.camera = Camera()
        self.camera.set_chase_mode(chase)
        environment = Environment(
            bounds=self._bounds_for(self.screen_size),
            automatic_wind=automatic_wind
        )
        self.simulation = Simulation(self.camera, num_boids, environment=environment, seed=seed)
        self.input_handler = InputHandler(self.camera, self.simulation, self.screen_size)

        # Rendering components
        self.grid = Grid()
        self.wind_field = WindField()
        self.boid_renderer = BoidRenderer()
        self.text_renderer = TextRenderer()

        # State
        self.clock = pygame.time.Clock()
        self.running = True
        self.fps = 0

    @staticmethod
    def _bounds_for(size) -> Bounds:
        """The volume spans the window on x/y, with a fixed depth."""
        return Bounds(float(size[0]), float(size[1]), config.BOIDS["depth"])

    def _resize(self, size):
        self.screen_size = size
        self.input_handler.screen_size = size
        self.simulation.set_bounds(self._bounds_for(size))

    def _handle_events(self):
        """Process all pending pygame events."""
        for event in pygame.event.get():
            if event.type == VIDEORESIZE:
                self._resize((event.w, event.h))
            elif not self.input_handler.handle_event(event):
                self.running = False

    def _update(self, dt: float):
        """Update simulation state, exactly one tick per frame."""
        self.input_handler.handle_continuous_input(dt)
        self.simulation.step()

    def _render(self):
        """Render the scene."""
        self.screen.fill(config.COLORS["background"])
        env = self.simulation.environment

        if self.camera.show_grid:
            self.grid.draw(self.screen, self.camera, env.bounds)
        if self.camera.show_wind:
            self.wind_field.draw(self.screen, self.camera, env.bounds, env.wind)

        width, height = self.screen_size
        sprites = self.simulation.flock.render_data(self.camera, width, height)
        self.boid_renderer.draw(self.screen, sprites)

        # Draw HUD
        flock = self.simulation.flock
        self.text_renderer.draw_text(
            self.screen,
            f"Boids: {len(sprites)}/{len(flock)}  |  FPS: {self.fps:.0f}",
            10, 10
        )
        self.text_renderer.draw_text(
            self.screen,
            f"Az: {self.camera.azimuth:.2f}  El: {self.camera.elevation:.2f}  "
            f"Dist: {self.camera.distance:.0f}  Chase: {'on' if self.camera.chase_mode else 'off'}",
            10, 35
        )
        self.text_renderer.draw_text(self.screen, self._factors_line(), 10, 60)
        self.text_renderer.draw_text(self.screen, self._wind_line(), 10, 85)

        pygame.display.flip()

    def _factors_line(self) -> str:
        """Tuning values, with the one the +/- keys adjust in brackets."""
        factors = self.simulation.factors
        labels = (
            ("perception_radius", "Radius", "{:.0f}"),
            ("separation", "Sep", "{:.1f}"),
            ("alignment", "Ali", "{:.1f}"),
            ("cohesion", "Coh", "{:.1f}"),
            ("wind_strength", "Wind", "{:.1f}"),
        )
        parts = []
        for i, (name, label, fmt) in enumerate(labels, start=1):
            text = f"{i} {label}: {fmt.format(getattr(factors, name))}"
            if name == self.input_handler.selected_factor:
                text = f"[{text}]"
            parts.append(text)
        return "  ".join(parts)

    def _wind_line(self) -> str:
        env = self.simulation.environment
        if env.automatic_wind:
            return "Wind: automatic"
        return f"Wind: manual  Az: {env.wind_azimuth:.0f}  El: {env.wind_elevation:.0f}"

    def run(self):
        """Main application loop."""
        print(f"[App] Running with {len(self.simulation.flock):,} boids")
        while self.running:
            dt = self.clock.tick(config.WINDOW["fps"]) / 1000.0
            self.fps = self.clock.get_fps()

            self._handle_events()
            self._update(dt)
            self._render()

        pygame.quit()
