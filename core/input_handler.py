"""Input handling: translates pygame events into camera and simulation calls."""

import pygame
from pygame.locals import *

from config import boids as config
from .camera import Camera


class InputHandler:
    """Handles keyboard and mouse input for camera control, repel clicks and tuning."""

    FACTOR_KEYS = {
        K_1: "perception_radius",
        K_2: "separation",
        K_3: "alignment",
        K_4: "cohesion",
        K_5: "wind_strength",
    }
    INCREASE_KEYS = (K_EQUALS, K_PLUS, K_KP_PLUS)
    DECREASE_KEYS = (K_MINUS, K_KP_MINUS)

    def __init__(self, camera: Camera, simulation, screen_size: tuple):
        self.camera = camera
        self.simulation = simulation
        self.screen_size = screen_size
        self.mouse_dragging = False
        self.did_drag = False
        self.last_mouse_pos = (0, 0)
        self.selected_factor = "separation"

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle a single pygame event.
        Returns False if the application should quit, True otherwise.
        """
        if event.type == QUIT:
            return False
        elif event.type == KEYDOWN:
            if event.key == K_ESCAPE:
                return False
            self._handle_key(event.key)
        elif event.type == MOUSEBUTTONDOWN:
            if event.button == 1:
                self.mouse_dragging = True
                self.did_drag = False
                self.last_mouse_pos = event.pos
        elif event.type == MOUSEMOTION:
            if self.mouse_dragging:
                self._drag(event.pos)
        elif event.type == MOUSEBUTTONUP:
            if event.button == 1:
                if self.mouse_dragging and not self.did_drag:
                    width, height = self.screen_size
                    point = self.simulation.click(event.pos[0], event.pos[1], width, height)
                    print(f"[Input] Repel point at ({point.x:.0f}, {point.y:.0f}, {point.z:.0f})")
                self.mouse_dragging = False
        elif event.type == WINDOWLEAVE:
            self.mouse_dragging = False
        elif event.type == MOUSEWHEEL:
            delta = -event.y * config.CAMERA["wheel_step"]
            self.camera.zoom(delta * config.CAMERA["wheel_sensitivity"])

        return True

    def _drag(self, pos):
        self.did_drag = True
        if self.camera.chase_mode:
            return
        dx = pos[0] - self.last_mouse_pos[0]
        dy = pos[1] - self.last_mouse_pos[1]
        sensitivity = config.CAMERA["mouse_sensitivity"]
        self.camera.orbit(-dx * sensitivity, dy * sensitivity)
        self.last_mouse_pos = pos

    def _handle_key(self, key: int):
        if key == K_c:
            self.camera.set_chase_mode(not self.camera.chase_mode)
            print(f"[Input] Chase mode: {'on' if self.camera.chase_mode else 'off'}")
        elif key == K_g:
            self.camera.show_grid = not self.camera.show_grid
        elif key == K_v:
            self.camera.show_wind = not self.camera.show_wind
        elif key == K_m:
            env = self.simulation.environment
            env.automatic_wind = not env.automatic_wind
            print(f"[Input] Wind: {'automatic' if env.automatic_wind else 'manual'}")
        elif key == K_RIGHTBRACKET:
            self.simulation.resize(len(self.simulation.flock) + config.BOIDS["resize_step"])
        elif key == K_LEFTBRACKET:
            self.simulation.resize(max(0, len(self.simulation.flock) - config.BOIDS["resize_step"]))
        elif key in self.FACTOR_KEYS:
            self.selected_factor = self.FACTOR_KEYS[key]
        elif key in self.INCREASE_KEYS:
            self.simulation.adjust_factor(self.selected_factor, 1)
        elif key in self.DECREASE_KEYS:
            self.simulation.adjust_factor(self.selected_factor, -1)

    def handle_continuous_input(self, dt: float, keys=None):
        """Handle held keys (called each frame)."""
        if keys is None:
            keys = pygame.key.get_pressed()
        rot_speed = config.CAMERA["keyboard_rotate_speed"] * dt
        zoom_speed = config.CAMERA["keyboard_zoom_speed"] * dt

        if not self.camera.chase_mode:
            if keys[K_a]:
                self.camera.orbit(-rot_speed, 0)
            if keys[K_d]:
                self.camera.orbit(rot_speed, 0)
            if keys[K_w]:
                self.camera.orbit(0, rot_speed)
            if keys[K_s]:
                self.camera.orbit(0, -rot_speed)

        if keys[K_q]:
            self.camera.zoom(-zoom_speed)
        if keys[K_e]:
            self.camera.zoom(zoom_speed)

        env = self.simulation.environment
        if not env.automatic_wind:
            turn = config.WIND["turn_speed"] * dt
            d_azimuth = (keys[K_RIGHT] - keys[K_LEFT]) * turn
            d_elevation = (keys[K_UP] - keys[K_DOWN]) * turn
            if d_azimuth or d_elevation:
                env.set_wind_angles(env.wind_azimuth + d_azimuth, env.wind_elevation + d_elevation)
