"""Pygame animator for the playback preview."""

from typing import Any, Callable, Dict, Optional, Tuple

import numpy as np
import pygame


def hex_to_rgb(color: str) -> Tuple[int, int, int]:
    """Convert '#rrggbb' to an RGB tuple."""
    color = color.lstrip('#')
    return tuple(int(color[i:i + 2], 16) for i in (0, 2, 4))


class PygameAnimator:
    """Pygame window showing the grid, obstacles and the robot pose."""

    def __init__(self, window_size: tuple = (800, 600), robot_color: str = "#10b981",
                 robot_name: str = ""):
        """
        Initialize animator.

        Args:
            window_size: Initial window size (width, height)
            robot_color: Body color of the robot as '#rrggbb'
            robot_name: Shown in the window caption
        """
        self.window_size = window_size
        self.robot_name = robot_name

        # Colors
        self.colors = {
            'background': (2, 6, 23),
            'grid': (30, 41, 59),
            'obstacle': (51, 65, 85),
            'robot': hex_to_rgb(robot_color),
            'indicator': (255, 255, 255),
            'wheel': (15, 23, 42),
            'text': (148, 163, 184),
            'panel': (15, 23, 42),
            'ready': (16, 185, 129),
        }

        self.screen: Optional[pygame.Surface] = None
        self.frame_count = 0

        # Host callbacks wired by the demo
        self.on_toggle: Optional[Callable[[], None]] = None
        self.on_reset: Optional[Callable[[], None]] = None
        self.on_resize: Optional[Callable[[int, int], Any]] = None

    def start(self):
        # Initialize Pygame
        pygame.init()
        self.screen = pygame.display.set_mode(self.window_size, pygame.RESIZABLE)
        caption = "RoboLab - Simulation"
        if self.robot_name:
            caption += f" ({self.robot_name})"
        pygame.display.set_caption(caption)
        # Font
        self.font = pygame.font.Font(None, 22)
        self.large_font = pygame.font.Font(None, 30)

    def _draw_grid(self, width: int, height: int, grid_size: int):
        """Draw grid background."""
        for x in range(0, width + 1, grid_size):
            pygame.draw.line(self.screen, self.colors['grid'], (x, 0), (x, height), 1)
        for y in range(0, height + 1, grid_size):
            pygame.draw.line(self.screen, self.colors['grid'], (0, y), (width, y), 1)

    def _draw_obstacles(self, obstacles):
        for x, y, w, h in obstacles:
            pygame.draw.rect(self.screen, self.colors['obstacle'], pygame.Rect(int(x), int(y), int(w), int(h)))

    def _robot_points(self, pose, local_points) -> list:
        """Rotate and translate robot-local points to screen coordinates."""
        rad = np.deg2rad(pose.heading)
        c, s = np.cos(rad), np.sin(rad)
        return [(pose.x + px * c - py * s, pose.y + px * s + py * c) for px, py in local_points]

    def _draw_robot(self, pose):
        """Draw body, heading indicator and wheels."""
        body = [(-15, -15), (15, -15), (15, 15), (-15, 15)]
        indicator = [(10, 0), (-5, -5), (-5, 5)]
        top_wheel = [(-18, -18), (18, -18), (18, -12), (-18, -12)]
        bottom_wheel = [(-18, 12), (18, 12), (18, 18), (-18, 18)]

        pygame.draw.polygon(self.screen, self.colors['robot'], self._robot_points(pose, body))
        pygame.draw.polygon(self.screen, self.colors['indicator'], self._robot_points(pose, indicator))
        pygame.draw.polygon(self.screen, self.colors['wheel'], self._robot_points(pose, top_wheel))
        pygame.draw.polygon(self.screen, self.colors['wheel'], self._robot_points(pose, bottom_wheel))

    def _draw_text(self, text: str, pos: tuple, font=None, color=None):
        """Draw text on screen."""
        if font is None:
            font = self.font
        if color is None:
            color = self.colors['text']
        text_surface = font.render(text, True, color)
        self.screen.blit(text_surface, pos)

    def _draw_readout(self, render_data: Dict[str, Any]):
        x, y = render_data['readout']
        self._draw_text(f"X: {x} Y: {y}", (16, 16))
        queue_length = render_data['queue_length']
        if queue_length:
            index = min(render_data['command_index'] + 1, queue_length)
            self._draw_text(f"Command {index}/{queue_length}", (16, 38))

    def _draw_ready_overlay(self, width: int, height: int):
        text_surface = self.large_font.render("Robot ready to run", True, self.colors['ready'])
        rect = text_surface.get_rect(center=(width // 2, height // 2))
        pygame.draw.rect(self.screen, self.colors['panel'], rect.inflate(40, 20), border_radius=10)
        self.screen.blit(text_surface, rect)

    def render_callback(self, render_data: Dict[str, Any]) -> bool:
        """
        Callback function for the playback engine.

        Args:
            render_data: Render data from the engine

        Returns:
            True to continue
        """
        self.frame_count += 1
        width, height = render_data['width'], render_data['height']

        # Nothing to draw on a zero-sized surface
        if self.screen is None or width <= 0 or height <= 0:
            return True

        # Clear screen
        self.screen.fill(self.colors['background'])

        self._draw_grid(width, height, render_data['grid_size'])
        self._draw_obstacles(render_data['obstacles'])
        self._draw_robot(render_data['pose'])
        self._draw_readout(render_data)
        if render_data['idle']:
            self._draw_ready_overlay(width, height)

        # Update display
        pygame.display.flip()
        return True

    def handle_events(self) -> bool:
        """Handle pygame events. Returns True if should continue."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            elif event.type == pygame.VIDEORESIZE:
                self.window_size = (event.w, event.h)
                if self.on_resize:
                    self.on_resize(event.w, event.h)
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE or event.key == pygame.K_q:
                    return False
                elif event.key == pygame.K_SPACE and self.on_toggle:
                    self.on_toggle()
                elif event.key == pygame.K_r and self.on_reset:
                    self.on_reset()
        return True

    def close(self):
        """Close the animator."""
        pygame.quit()
