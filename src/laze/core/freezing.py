from __future__ import annotations

from typing import Any

import numpy as np

from .settings import RegistrySettings


def _freeze_array(arr: np.ndarray) -> np.ndarray:
    # In place so repeated reads keep returning the producer's own object.
    arr.setflags(write=False)
    return arr


def freeze_value(value: Any, settings: RegistrySettings) -> Any:
    """Make a candidate value immutable where that can be done without copying.

    Only numpy arrays are touched, either the value itself or arrays held
    directly in a tuple. Everything else is stored as produced.

    Arrays are frozen in place, not copied: a producer returning an array that
    is also held elsewhere (a module-level array, say) makes that array
    read-only for every holder. Return a copy if the original must stay writable.
    """
    if not settings.freeze_arrays:
        return value
    if isinstance(value, np.ndarray):
        return _freeze_array(value)
    if isinstance(value, tuple):
        for item in value:
            if isinstance(item, np.ndarray):
                _freeze_array(item)
    return value
