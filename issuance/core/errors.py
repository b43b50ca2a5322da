"""Error types raised by the issuance core."""

from __future__ import annotations


class IssuanceError(Exception):
    """Base class for every error the issuance core reports."""


class InvalidTimeOrdering(IssuanceError, ValueError):
    def __init__(self, earlier_label: str, earlier: int, later_label: str, later: int):
        super().__init__(
            f"{later_label} ({later}) must not precede {earlier_label} ({earlier})"
        )
        self.earlier = earlier
        self.later = later


class Unauthorized(IssuanceError, PermissionError):
    def __init__(self, account: str, role: str):
        super().__init__(f"account {account!r} is missing role {role}")
        self.account = account
        self.role = role


class ArithmeticOverflow(IssuanceError, OverflowError):
    """An intermediate value left the unsigned 256-bit range."""


class EmptySchedule(IssuanceError, ValueError):
    def __init__(self) -> None:
        super().__init__("inflation schedule requires at least one rate")
