"""
Interactive Pygame viewer for the mobile manipulator.

Opens a window sized like the embedded surface, forwards mouse clicks and
window resizes to a ``WmmCanvas``, and redraws on each of them.

Classes:
    WmmVisualizer: Live, click-driven rendering window.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Tuple

from wmm_sim.envs.configs import WmmSimConfig
from wmm_sim.visualization.canvas import WmmCanvas
from wmm_sim.visualization.surfaces import PygameSurface

logger = logging.getLogger(__name__)


@dataclass
class WmmVisualizer:
    """Pygame window hosting one ``WmmCanvas``.

    Clicking anywhere on the window moves the base under the cursor.
    Resizing the window is treated as resizing the containing layout, so
    the surface keeps its configured share of the width.

    Attributes:
        cfg: Sizing, fps and scene configuration.
        window_title: Caption displayed in the title bar.
        canvas: The canvas being displayed.
    """

    cfg: WmmSimConfig = field(default_factory=WmmSimConfig)
    window_title: str = "Wheeled Mobile Manipulator"
    canvas: Optional[WmmCanvas] = None
    _surface: PygameSurface = field(default_factory=PygameSurface)
    _screen: Optional[Any] = None
    _clock: Optional[Any] = None

    # ------------------------------------------------------------------
    # Initialisation / teardown
    # ------------------------------------------------------------------

    def init_display(self) -> None:
        """Create the Pygame window, clock and canvas.

        Raises:
            ImportError: If Pygame is not installed.
        """
        try:
            import pygame
        except ImportError as exc:
            raise ImportError("Pygame required: pip install pygame") from exc
        pygame.init()
        self._open_window(*self._initial_window_size())
        pygame.display.set_caption(self.window_title)
        self._clock = pygame.time.Clock()
        self.canvas.resize(self.cfg.container_width)
        self.canvas.attach(self._surface)
        self._flip()

    def _initial_window_size(self) -> Tuple[int, int]:
        """Create the canvas if needed and return the size its config gives."""
        if self.canvas is None:
            self.canvas = WmmCanvas(config=self.cfg.scene)
        return self.canvas.config.viewport_for(self.cfg.container_width).size

    def _open_window(self, width: int, height: int) -> None:
        """(Re)create the display surface and attach it for drawing."""
        import pygame

        self._screen = pygame.display.set_mode((width, height), pygame.RESIZABLE)
        self._surface.attach(self._screen)

    def close(self) -> None:
        """Destroy the Pygame window and quit Pygame."""
        import pygame

        self._surface.attach(None)
        pygame.quit()

    # ------------------------------------------------------------------
    # Event handling
    # ------------------------------------------------------------------

    def _on_resize(self, window_width: int) -> None:
        """Resize the surface as if the window were its container.

        Args:
            window_width: New window width in pixels.
        """
        config = self.canvas.config
        container_width = window_width / config.width_fraction
        viewport = config.viewport_for(container_width)
        self._open_window(*viewport.size)
        self.canvas.resize(container_width)

    def _pump_events(self) -> bool:
        """Process Pygame events and return False if user quit.

        Returns:
            True if the window should stay open, False on quit.
        """
        import pygame

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                self.canvas.click(*event.pos)
            elif event.type == pygame.VIDEORESIZE:
                self._on_resize(event.w)
        return True

    def _flip(self) -> None:
        """Push the latest frame to the screen."""
        import pygame

        pygame.display.flip()

    # ------------------------------------------------------------------
    # Main loop
    # ------------------------------------------------------------------

    def step(self) -> bool:
        """Handle pending events, show the frame and tick the clock.

        Returns:
            True if still running, False if user closed the window.
        """
        if self._screen is None:
            self.init_display()
        alive = self._pump_events()
        if alive:
            self._flip()
        if self._clock is not None:
            self._clock.tick(self.cfg.fps)
        return alive

    def run(self) -> None:
        """Run the window until the user closes it."""
        self.init_display()
        logger.info("Viewer running; click to move the base")
        try:
            while self.step():
                pass
        finally:
            self.close()
