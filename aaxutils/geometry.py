"""Vector helpers."""

from __future__ import annotations

import math
from typing import Sequence

__all__ = ["magnitude"]


def magnitude(v: Sequence[float]) -> float:
    """Return the length of a three-component vector."""
    x, y, z = v
    return math.sqrt(x * x + y * y + z * z)