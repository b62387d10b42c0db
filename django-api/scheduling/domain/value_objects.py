"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self


class SourceType(Enum):
    """What a session was expanded from."""

    PACKAGE = "package"
    PROCEDURE = "procedure"


@dataclass(frozen=True)
class SessionKey:
    """Deterministic identity of one session within a selection.

    The string form is only produced at serialization boundaries:
    ``package-{source_id}-{item_index}-{n}`` or ``procedure-{source_id}-{n}``,
    where ``n`` is the 0-based session index.
    """

    source_type: SourceType
    source_id: str
    item_index: int
    session_number: int

    def __post_init__(self) -> None:
        if not self.source_id:
            raise ValueError("SessionKey source_id cannot be empty")
        if self.session_number < 1:
            raise ValueError("SessionKey session_number must be 1 or greater")

    @property
    def group(self) -> tuple[SourceType, str]:
        return (self.source_type, self.source_id)

    def __str__(self) -> str:
        index = self.session_number - 1
        if self.source_type is SourceType.PACKAGE:
            return f"package-{self.source_id}-{self.item_index}-{index}"
        return f"procedure-{self.source_id}-{index}"

    @classmethod
    def from_string(cls, value: str) -> Self:
        prefix, sep, rest = value.partition("-")
        if not sep:
            raise ValueError(f"Malformed session id: {value!r}")
        source_type = SourceType(prefix)

        # Source ids may contain hyphens (UUIDs), so split from the right.
        if source_type is SourceType.PACKAGE:
            parts = rest.rsplit("-", 2)
            if len(parts) != 3:
                raise ValueError(f"Malformed session id: {value!r}")
            source_id, item_index, index = parts
        else:
            parts = rest.rsplit("-", 1)
            if len(parts) != 2:
                raise ValueError(f"Malformed session id: {value!r}")
            source_id, index = parts
            item_index = "0"

        if not (item_index.isdigit() and index.isdigit()):
            raise ValueError(f"Malformed session id: {value!r}")
        return cls(
            source_type=source_type,
            source_id=source_id,
            item_index=int(item_index),
            session_number=int(index) + 1,
        )
