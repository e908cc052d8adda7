from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

import numpy as np

from .errors import ConstructionError

# "Everything far away": value of a cell no shape has come near yet.
FAR_VALUE = 1e8


@dataclass(frozen=True, slots=True)
class GridConfig:
    far_value: float = FAR_VALUE
    dtype: Any = np.float32

    def validate(self) -> None:
        """Raise :class:`ConstructionError` if the settings are unusable."""
        try:
            dtype = np.dtype(self.dtype)
        except TypeError as exc:
            raise ConstructionError(f"invalid dtype {self.dtype!r}") from exc
        if not np.issubdtype(dtype, np.floating):
            raise ConstructionError(
                f"dtype must be a floating point type, got {dtype}"
            )
        try:
            far = float(self.far_value)
        except (TypeError, ValueError) as exc:
            raise ConstructionError(f"invalid far_value {self.far_value!r}") from exc
        if math.isnan(far) or far <= 0:
            raise ConstructionError(f"far_value must be positive, got {far!r}")
        # the far value must stay unclaimed (> 0) once stored
        if dtype.type(far) <= 0:
            raise ConstructionError(
                f"far_value {far!r} rounds to zero in {dtype}"
            )
