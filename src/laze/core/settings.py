from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RegistrySettings:
    """Per-registry behaviour switches.

    Notes:
    - `freeze_arrays` marks materialized numpy arrays read-only.
    - `strict_predicates` rejects constraint results that are not booleans.
      Turning it off coerces them with `bool()` instead, except multi-element
      arrays, which are still rejected.
    """

    freeze_arrays: bool = True
    strict_predicates: bool = True
