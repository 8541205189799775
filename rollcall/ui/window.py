"""Pygame session window: activity capture, timer pumping and the warning banner."""

from typing import Any

import pygame

from rollcall.runtime.controller import SessionController
from rollcall.runtime.notices import NoticeLevel
from rollcall.session.clock import SessionState
from rollcall.session.timers import TimerQueue
from rollcall.ui.input import activity_kind_for

# Colors
_BACKGROUND = (239, 246, 255)
_HEADER = (255, 255, 255)
_TITLE = (30, 58, 138)
_SUBTITLE = (37, 99, 235)
_MUTED = (75, 85, 99)
_ACTIVE = (34, 197, 94)
_WARNING_BG = (255, 247, 237)
_WARNING_TEXT = (154, 52, 18)
_NOTICE_COLORS = {
    NoticeLevel.SUCCESS: (22, 163, 74),
    NoticeLevel.ERROR: (220, 38, 38),
    NoticeLevel.INFO: (37, 99, 235),
}


class SessionWindow:
    """Window that keeps an authenticated session alive while the user works."""

    def __init__(
        self,
        controller: SessionController,
        resolution: tuple[int, int] = (800, 600),
        fps: int = 30,
    ) -> None:
        """Initialize the window.

        Args:
            controller: Session controller whose scheduler must be a ``TimerQueue``.
            resolution: Window resolution (width, height).
            fps: Target frames per second.
        """
        self.controller = controller
        self.resolution = resolution
        self.fps = fps

        # Pygame state
        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._title_font: pygame.font.Font | None = None
        self._body_font: pygame.font.Font | None = None
        self._running = False

    def initialize(self) -> None:
        """Initialize Pygame and create window."""
        pygame.init()
        pygame.display.set_caption("Rollcall - Attendance Management System")
        self._screen = pygame.display.set_mode(self.resolution)
        self._clock = pygame.time.Clock()
        self._title_font = pygame.font.Font(None, 36)
        self._body_font = pygame.font.Font(None, 24)
        self._running = True

    def shutdown(self) -> None:
        """Shutdown Pygame."""
        self._running = False
        pygame.quit()

    def process_events(self) -> bool:
        """Process Pygame events.

        Returns:
            True if should continue running, False to quit.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False

            kind = activity_kind_for(event)
            if kind is not None:
                self.controller.activity_source.emit(kind)

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                elif event.key == pygame.K_c:
                    self.controller.continue_session()
                elif event.key == pygame.K_l:
                    self.controller.logout()
        return True

    def update(self) -> None:
        """Run timers that are due this frame."""
        scheduler = self.controller.scheduler
        if isinstance(scheduler, TimerQueue):
            scheduler.run_due()

    def render(self) -> None:
        """Render the current frame."""
        if self._screen is None:
            return

        self._screen.fill(_BACKGROUND)
        self._draw_header()

        message = self.controller.warning_message
        if message is not None:
            self._draw_warning(message)

        self._draw_notices()
        pygame.display.flip()

    def _draw_header(self) -> None:
        if self._screen is None or self._title_font is None or self._body_font is None:
            return

        width = self.resolution[0]
        pygame.draw.rect(self._screen, _HEADER, (0, 0, width, 80))
        self._screen.blit(self._title_font.render("AVS ENGINEERING COLLEGE", True, _TITLE), (20, 14))
        self._screen.blit(self._body_font.render("DEPARTMENT OF CSE", True, _SUBTITLE), (20, 48))

        user = self.controller.current_user
        if user is None:
            return
        welcome = self._body_font.render(f"Welcome, {user}", True, _MUTED)
        self._screen.blit(welcome, (width - welcome.get_width() - 20, 14))

        if self.controller.session_state == SessionState.ACTIVE:
            status = self._body_font.render("Session Active", True, _ACTIVE)
            self._screen.blit(status, (width - status.get_width() - 20, 44))
            pygame.draw.circle(self._screen, _ACTIVE, (width - status.get_width() - 32, 52), 5)

    def _draw_warning(self, message: str) -> None:
        if self._screen is None or self._body_font is None:
            return

        width = self.resolution[0]
        box = pygame.Rect(width // 2 - 220, 100, 440, 70)
        pygame.draw.rect(self._screen, _WARNING_BG, box, border_radius=8)
        pygame.draw.rect(self._screen, _WARNING_TEXT, box, width=1, border_radius=8)
        self._screen.blit(self._body_font.render(message, True, _WARNING_TEXT), (box.x + 16, box.y + 12))
        hint = "Press C to continue session, L to logout now"
        self._screen.blit(self._body_font.render(hint, True, _WARNING_TEXT), (box.x + 16, box.y + 40))

    def _draw_notices(self) -> None:
        if self._screen is None or self._body_font is None:
            return

        y = self.resolution[1] - 40
        for notice in reversed(self.controller.notices.visible()):
            color = _NOTICE_COLORS.get(notice.level, _MUTED)
            self._screen.blit(self._body_font.render(notice.message, True, color), (20, y))
            y -= 28

    def tick(self) -> None:
        """Wait for next frame (maintain FPS)."""
        if self._clock is not None:
            self._clock.tick(self.fps)

    def run_frame(self) -> bool:
        """Run a single frame of the event loop.

        Returns:
            True if should continue, False once the user quits or the session ends.
        """
        if not self.process_events():
            return False
        self.update()
        self.render()
        self.tick()
        return self.controller.is_authenticated

    def run(self) -> None:
        """Run frames until the window closes or the session ends."""
        if not self._running:
            self.initialize()
        print("[Window] Session window open. Press ESC to quit.")
        try:
            while self._running and self.run_frame():
                pass
        finally:
            self.shutdown()

    @classmethod
    def from_config(cls, config: dict[str, Any], controller: SessionController) -> "SessionWindow":
        """Create a session window from configuration.

        Args:
            config: Window configuration dictionary.
            controller: Session controller to drive.

        Returns:
            Configured SessionWindow instance.
        """
        res = config.get("resolution", [800, 600])
        resolution: tuple[int, int] = (int(res[0]), int(res[1])) if res else (800, 600)
        fps = int(config.get("fps", 30))
        return cls(controller, resolution=resolution, fps=fps)
