"""Staff login and the persisted current-user marker."""

from rollcall.auth.staff import StaffDirectory, StaffMember, StaffRole
from rollcall.auth.storage import CURRENT_USER_KEY, LocalStorage

__all__ = ["CURRENT_USER_KEY", "LocalStorage", "StaffDirectory", "StaffMember", "StaffRole"]
