"""Point light description."""

from __future__ import annotations

from dataclasses import dataclass


def _vec3(value, name: str) -> tuple[float, float, float]:
    items = tuple(float(v) for v in value)
    if len(items) != 3:
        raise ValueError(f"{name} needs three components, got {len(items)}")
    return items  # type: ignore[return-value]


@dataclass
class Light:
    """A point light with a colour and a world-space position."""

    color: tuple[float, float, float] = (0.0, 0.0, 0.0)
    position: tuple[float, float, float] = (0.0, 0.0, 0.0)

    def __post_init__(self) -> None:
        self.color = _vec3(self.color, "color")
        self.position = _vec3(self.position, "position")