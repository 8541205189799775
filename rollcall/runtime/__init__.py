"""Application shell around the idle session guard."""

from rollcall.runtime.controller import SessionController
from rollcall.runtime.notices import Notice, NoticeBoard, NoticeConfig, NoticeLevel

__all__ = ["Notice", "NoticeBoard", "NoticeConfig", "NoticeLevel", "SessionController"]
