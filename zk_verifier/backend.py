# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# backend.py

"""
Curve capability interface consumed by the verifier.

The verification logic only ever touches the curve through these methods:

  - g1_add / g1_mul / g1_neg   base-group arithmetic
  - is_on_curve / in_subgroup  membership checks for either group
  - pairing_product_is_one     multi-pairing equality with the identity

`CurveBackend` implements them with py_ecc. `MeteredBackend` wraps any
backend and charges compute units per primitive, so a caller can bound the
cost of a call the way the alt_bn128 syscalls are priced.
"""

from dataclasses import dataclass, field
from typing import Sequence

from zk_verifier import bn254
from zk_verifier.constants import (
    ADDITION_COST,
    MULTIPLICATION_COST,
    PAIRING_FIRST_PAIR_COST,
    PAIRING_OTHER_PAIR_COST,
    SUBGROUP_CHECK_COST,
)
from zk_verifier.errors import ComputeBudgetExceeded


class CurveBackend:
    """Software BN254 backend built on py_ecc.optimized_bn128."""

    name = "py_ecc.optimized_bn128"

    def g1_add(self, left: tuple, right: tuple) -> tuple:
        return bn254.combine(left, right)

    def g1_mul(self, point: tuple, scalar: int) -> tuple:
        return bn254.scale(point, scalar)

    def g1_neg(self, point: tuple) -> tuple:
        return bn254.invert(point)

    def is_on_curve(self, point: tuple) -> bool:
        return bn254.on_curve(point)

    def in_subgroup(self, point: tuple) -> bool:
        return bn254.in_subgroup(point)

    def pairing_product_is_one(self, pairs: Sequence[tuple[tuple, tuple]]) -> bool:
        return bn254.pairing_product_is_one(pairs)


@dataclass
class MeteredBackend(CurveBackend):
    """
    Backend wrapper that counts compute units.

    Every primitive is charged before it runs. When `budget` is set and the
    running total would exceed it, `ComputeBudgetExceeded` is raised and the
    primitive is not executed.

    Attributes:
        inner: The backend doing the arithmetic.
        budget: Optional compute unit ceiling for the call.
        consumed: Compute units charged so far.
    """

    inner: CurveBackend = field(default_factory=CurveBackend)
    budget: int | None = None
    consumed: int = 0

    @property
    def name(self) -> str:  # type: ignore[override]
        return f"metered({self.inner.name})"

    def charge(self, units: int) -> None:
        if self.budget is not None and self.consumed + units > self.budget:
            raise ComputeBudgetExceeded(
                f"compute budget exceeded: {self.consumed + units} > {self.budget}"
            )
        self.consumed += units

    def g1_add(self, left: tuple, right: tuple) -> tuple:
        self.charge(ADDITION_COST)
        return self.inner.g1_add(left, right)

    def g1_mul(self, point: tuple, scalar: int) -> tuple:
        self.charge(MULTIPLICATION_COST)
        return self.inner.g1_mul(point, scalar)

    def g1_neg(self, point: tuple) -> tuple:
        return self.inner.g1_neg(point)

    def is_on_curve(self, point: tuple) -> bool:
        return self.inner.is_on_curve(point)

    def in_subgroup(self, point: tuple) -> bool:
        self.charge(SUBGROUP_CHECK_COST)
        return self.inner.in_subgroup(point)

    def pairing_product_is_one(self, pairs: Sequence[tuple[tuple, tuple]]) -> bool:
        pairs = list(pairs)
        if pairs:
            self.charge(
                PAIRING_FIRST_PAIR_COST + PAIRING_OTHER_PAIR_COST * (len(pairs) - 1)
            )
        return self.inner.pairing_product_is_one(pairs)


default_backend = CurveBackend()
