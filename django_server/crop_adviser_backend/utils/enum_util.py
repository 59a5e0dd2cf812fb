from __future__ import annotations

from enum import Enum


class ListableEnum(Enum):
    @classmethod
    def list(cls) -> list:
        return [member.value for member in cls]

    @classmethod
    def choices(cls) -> list[tuple]:
        return [(member.value, member.value) for member in cls]
