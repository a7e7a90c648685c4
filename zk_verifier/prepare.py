# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from typing import Sequence

from zk_verifier.backend import CurveBackend, default_backend
from zk_verifier.constants import SCALAR_MODULUS
from zk_verifier.errors import InputCountMismatch, ScalarOutOfRange


def prepare_public_inputs(
    ic: Sequence[tuple],
    public_inputs: Sequence[int],
    backend: CurveBackend | None = None,
) -> tuple:
    """
    Fold the public inputs into a single G1 point.

        vk_x = ic[0] + sum(ic[i + 1] * public_inputs[i])

    The sum is order-sensitive: public_inputs[i] is always weighted by
    ic[i + 1], so swapping two inputs without swapping their basis points
    changes the result.

    Args:
        ic: Verification key basis points, constant term first.
        public_inputs: Scalars in the circuit's declared order.
        backend: Curve backend providing g1_mul and g1_add.

    Returns:
        tuple: The prepared input point.

    Raises:
        InputCountMismatch: If len(ic) != len(public_inputs) + 1.
        ScalarOutOfRange: If any input is outside [0, r).
    """
    backend = backend or default_backend
    if len(ic) != len(public_inputs) + 1:
        raise InputCountMismatch(
            f"IC length mismatch: len(IC)={len(ic)} vs len(inputs)+1={len(public_inputs) + 1}"
        )
    for i, s in enumerate(public_inputs):
        if not 0 <= s < SCALAR_MODULUS:
            raise ScalarOutOfRange(f"public input {i} is not in [0, r)")

    vk_x = ic[0]
    for i, s in enumerate(public_inputs):
        vk_x = backend.g1_add(vk_x, backend.g1_mul(ic[i + 1], s))
    return vk_x
