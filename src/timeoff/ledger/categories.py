from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


class TimeOffType(str, enum.Enum):
    """Category an entry is booked against."""

    VACATION = "vacation"
    PERSONAL = "personal"
    FLOATER = "floater"
    STAT = "stat"

    @property
    def deducts(self) -> bool:
        return DESCRIPTORS[self].deducts

    @property
    def label(self) -> str:
        return DESCRIPTORS[self].label


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    label: str
    color: str
    icon: str
    deducts: bool


DESCRIPTORS: Mapping[TimeOffType, TypeDescriptor] = MappingProxyType({
    TimeOffType.VACATION: TypeDescriptor("Vacation", "blue", "sun", True),
    TimeOffType.PERSONAL: TypeDescriptor("Personal", "purple", "user", True),
    TimeOffType.FLOATER: TypeDescriptor("Floater", "amber", "star", True),
    TimeOffType.STAT: TypeDescriptor("Stat Holiday", "green", "gift", False),
})

# Categories that carry an allocation and draw it down.
DEDUCTING_TYPES: tuple[TimeOffType, ...] = tuple(t for t in TimeOffType if t.deducts)
