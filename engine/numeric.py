"""
Numeric guards and rounding: finite-value checks that reject NaN and infinite inputs before they reach any arithmetic, and half-up rounding for reported figures.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from __future__ import annotations

import math
from typing import Any, Iterable

import numpy as np

from engine.exceptions import InvalidInputError


def is_finite(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    try:
        return bool(np.isfinite(float(value)))
    except (TypeError, ValueError):
        return False


def all_finite(values: Iterable[Any]) -> bool:
    return all(is_finite(v) for v in values)


def require_finite(name: str, value: Any) -> float:
    if not is_finite(value):
        raise InvalidInputError(f"{name} must be a finite number, got {value!r}")
    return float(value)


def round_half_up(value: float, ndigits: int = 0) -> float:
    # halves round toward +inf, matching how figures are shown to users
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale
