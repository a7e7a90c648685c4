# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# pairing.py

"""
Groth16 pairing check.

    e(A, B) == e(alpha, beta) * e(vk_x, gamma) * e(C, delta)

is evaluated as a single product compared against the identity in GT:

    e(A, B) * e(-alpha, beta) * e(-vk_x, gamma) * e(-C, delta) == 1

The G1 side of each right-hand term is negated instead of inverting a GT
element. Only the aggregate is compared; the four pairings are never checked
one by one.
"""

from zk_verifier.backend import CurveBackend, default_backend
from zk_verifier.errors import PairingMismatch
from zk_verifier.models import Proof, VerificationKey


def pairing_terms(
    proof: Proof, vk: VerificationKey, prepared: tuple, backend: CurveBackend
) -> list[tuple[tuple, tuple]]:
    """Build the four (G1, G2) terms of the Groth16 product."""
    return [
        (proof.a, proof.b),
        (backend.g1_neg(vk.alpha), vk.beta),
        (backend.g1_neg(prepared), vk.gamma),
        (backend.g1_neg(proof.c), vk.delta),
    ]


def verify_pairing(
    proof: Proof,
    vk: VerificationKey,
    prepared: tuple,
    backend: CurveBackend | None = None,
) -> bool:
    """
    Evaluate the Groth16 equation for an already decoded proof.

    Every point must come from the encoding layer, which enforces curve and
    subgroup membership.

    Args:
        proof: The decoded proof.
        vk: The decoded verification key.
        prepared: The prepared public input point.
        backend: Curve backend providing g1_neg and pairing_product_is_one.

    Returns:
        bool: True if the proof is accepted.
    """
    backend = backend or default_backend
    return backend.pairing_product_is_one(pairing_terms(proof, vk, prepared, backend))


def check_pairing(
    proof: Proof,
    vk: VerificationKey,
    prepared: tuple,
    backend: CurveBackend | None = None,
) -> None:
    """Same as `verify_pairing` but raises `PairingMismatch` on rejection."""
    if not verify_pairing(proof, vk, prepared, backend):
        raise PairingMismatch("Groth16 pairing equation does not hold")
