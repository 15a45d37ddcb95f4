"""
Main application module for the Mandelbrot explorer.

Contains the ExplorerApp class which handles:
- Window setup and main loop
- User input (keys, click, drag-to-zoom)
- Display of the current frame and the drag rectangle
"""

import logging

import pygame

from . import settings
from .compute import configure_threads, warmup_jit
from .controller import ExplorerController
from .renderer import selection_overlay
from .viewport import Viewport

logger = logging.getLogger(__name__)


class ExplorerApp:
    """
    Main application class for the Mandelbrot explorer.

    Handles the pygame window and event loop and forwards navigation to
    an ExplorerController.
    """

    KEY_ACTIONS = {
        pygame.K_LEFT: 'step_left',
        pygame.K_RIGHT: 'step_right',
        pygame.K_UP: 'step_up',
        pygame.K_DOWN: 'step_down',
        pygame.K_z: 'zoom_in',
        pygame.K_a: 'zoom_out',
        pygame.K_x: 'sharpen',
        pygame.K_s: 'unsharpen',
        pygame.K_BACKSPACE: 'undo',
    }

    def __init__(self, width=None, height=None, function=None, color_mode=None,
                 initial=None, threads=None):
        """
        Initialize the application.

        Args:
            width, height: Window size in pixels (default from settings)
            function: Evaluator name (default from settings)
            color_mode: Color mode name (default from settings)
            initial: Starting Viewport (default from settings)
            threads: Worker thread count (default from settings)
        """
        self.width = width or settings.WIDTH
        self.height = height or settings.HEIGHT
        self.function = function or settings.FUNCTION
        self.color_mode = color_mode or settings.COLOR_MODE
        self.initial = initial or Viewport.default()
        self.threads = threads if threads is not None else settings.THREADS

        # Pygame state (initialized in run())
        self.screen = None
        self.clock = None
        self.controller = None

        # Display state
        self.canvas = None
        self.dirty = True

        # Input state
        self.mouse_position = (0, 0)
        self.press_position = None

        self.running = False

    def run(self):
        """Run the application main loop."""
        self._init_pygame()
        self._init_components()

        self.running = True
        while self.running:
            for event in pygame.event.get():
                self._handle_event(event)
            if self.dirty:
                self._draw()
            self.clock.tick(60)

        pygame.quit()

    def _init_pygame(self):
        """Initialize pygame and create window."""
        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height), pygame.DOUBLEBUF)
        pygame.display.set_caption(settings.TITLE)
        self.clock = pygame.time.Clock()

    def _init_components(self):
        """Compile the kernels and draw the first frame."""
        pygame.display.set_caption("Compiling (first run only)...")
        configure_threads(self.threads)
        warmup_jit()
        self.controller = ExplorerController.from_settings(
            self.width, self.height, self.function, self.color_mode, self.initial
        )
        self.canvas = self.controller.pixels
        pygame.display.set_caption(settings.TITLE)

    def _show(self, pixels):
        self.canvas = pixels
        self.dirty = True

    def _handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYUP:
            self._handle_key(event)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.press_position = self._clamp(event.pos)
        elif event.type == pygame.MOUSEBUTTONUP:
            self._handle_mouse_up(event)
        elif event.type == pygame.MOUSEMOTION:
            self._handle_mouse_motion(event)

    def _handle_key(self, event):
        """Handle a key release. Keys are ignored while dragging."""
        if self.press_position is not None:
            return
        if event.key in (pygame.K_q, pygame.K_ESCAPE):
            self.running = False
        elif event.key == pygame.K_F1:
            print(self.controller.info())
        elif event.key == pygame.K_F2:
            print(self.controller.audit().report)
        elif event.key in self.KEY_ACTIONS:
            getattr(self.controller, self.KEY_ACTIONS[event.key])()
            self._show(self.controller.pixels)

    def _handle_mouse_up(self, event):
        position = self._clamp(event.pos)
        if event.button == 1 and self.press_position is not None:
            if position == self.press_position:
                self.controller.click(position)
            else:
                self.controller.drag(self.press_position, position)
            self.press_position = None
            self._show(self.controller.pixels)
        elif event.button == 3 and self.press_position is None:
            self.controller.right_click(position)
            self._show(self.controller.pixels)

    def _handle_mouse_motion(self, event):
        """Track the cursor and preview the drag rectangle."""
        self.mouse_position = self._clamp(event.pos)
        if self.press_position is not None and self.press_position != self.mouse_position:
            self._show(selection_overlay(
                self.controller.pixels, self.press_position, self.mouse_position
            ))

    def _clamp(self, pos):
        x, y = pos
        return (min(max(int(x), 0), self.width - 1), min(max(int(y), 0), self.height - 1))

    def _draw(self):
        """Blit the current frame."""
        surface = pygame.surfarray.make_surface(self.canvas[:, :, :3].swapaxes(0, 1))
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()
        self.dirty = False


def run(width=None, height=None, function=None, color_mode=None, initial=None, threads=None):
    """
    Run the Mandelbrot explorer.

    Args:
        width, height: Window size (default from settings.json)
        function: "mandelbrot" or "circle"
        color_mode: "red" or "grayscale"
        initial: Starting Viewport
        threads: Worker thread count
    """
    app = ExplorerApp(width, height, function, color_mode, initial, threads)
    try:
        app.run()
    except KeyboardInterrupt:
        pygame.quit()
