"""Staff credential directory."""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class StaffRole(Enum):
    """Staff roles allowed to use the attendance system."""

    ADMIN = "Admin"
    FACULTY = "Faculty"
    HOD = "HoD"

    @classmethod
    def parse(cls, value: str) -> "StaffRole":
        """Parse a role name case-insensitively.

        Raises:
            ValueError: If the name is not a known role.
        """
        for role in cls:
            if role.value.lower() == value.strip().lower():
                return role
        raise ValueError(f"Unknown staff role: {value!r}")


@dataclass(frozen=True)
class StaffMember:
    """A staff account."""

    username: str
    password: str
    name: str  # Display name shown once logged in
    role: StaffRole

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StaffMember":
        """Create from dictionary."""
        return cls(
            username=str(data["username"]),
            password=str(data["password"]),
            name=str(data.get("name", data["username"])),
            role=StaffRole.parse(str(data.get("role", "Faculty"))),
        )


# Demo accounts shipped with the department build
DEFAULT_STAFF = (
    StaffMember("vallarasu", "vallu123", "Vallarasu P", StaffRole.ADMIN),
    StaffMember("priyasettu", "avs2025", "Priyadarshini S", StaffRole.FACULTY),
    StaffMember("vijaykumar", "cse123", "Dr.Vijay Kumar", StaffRole.HOD),
)


class StaffDirectory:
    """Looks up staff accounts by credentials."""

    def __init__(self, members: list[StaffMember] | tuple[StaffMember, ...]) -> None:
        self._members = list(members)

    def __len__(self) -> int:
        return len(self._members)

    def authenticate(self, username: str, password: str) -> StaffMember | None:
        """Find the account matching both username and password.

        Args:
            username: Login name, compared exactly.
            password: Password, compared exactly.

        Returns:
            The matching staff member, or None.
        """
        for member in self._members:
            if member.username == username and member.password == password:
                return member
        return None

    @classmethod
    def from_config(cls, entries: list[dict[str, Any]] | None) -> "StaffDirectory":
        """Build a directory from the ``staff`` config list.

        Args:
            entries: Staff entries; empty or missing falls back to the demo accounts.

        Returns:
            StaffDirectory instance.
        """
        if not entries:
            return cls(DEFAULT_STAFF)
        return cls([StaffMember.from_dict(entry) for entry in entries])
