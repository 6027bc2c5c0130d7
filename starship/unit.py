"""Grid units and their resource pools. Kind tags resolve to a closed enum."""

from dataclasses import dataclass, field
from enum import Enum


@dataclass
class Resource:
    """Amount/capacity pair. amount <= capacity is the target, not enforced."""

    amount: float = 0.0
    capacity: float = 0.0

    def pressure(self) -> float | None:
        """Fill ratio; None when capacity is zero."""
        if self.capacity == 0:
            return None
        return self.amount / self.capacity

    def free_space(self) -> float:
        return self.capacity - self.amount


class Kind(Enum):
    TANK = "Tank"
    CONDUIT = "Conduit"
    VENT = "Vent"
    FLOOR = "Floor"
    HULL = "Hull"
    MAN = "Man"
    OTHER = "Other"

    @classmethod
    def of(cls, tag: str) -> "Kind":
        """Resolve a persisted kind tag. Unknown tags are OTHER."""
        if tag in _TAG_ALIASES:
            return _TAG_ALIASES[tag]
        try:
            return cls(tag)
        except ValueError:
            return cls.OTHER


# Floors are saved under "Deck" by the editor.
_TAG_ALIASES = {"Deck": Kind.FLOOR}


@dataclass
class Unit:
    x: int
    y: int
    kind: str
    resources: dict[str, Resource] = field(default_factory=dict)

    @property
    def variant(self) -> Kind:
        return Kind.of(self.kind)

    @property
    def cell(self) -> tuple[int, int]:
        return (self.x, self.y)
