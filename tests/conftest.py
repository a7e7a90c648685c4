# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# tests/conftest.py

"""
Groth16 fixtures built from a toy trusted setup with a known trapdoor.

The circuit is a single R1CS constraint over public inputs x_1..x_n:

    (c_1 * x_1 + ... + c_n * x_n) * 1 = target

With one constraint every QAP polynomial is a constant, so the prover's
quotient h is zero exactly when the constraint holds. The honest prover below
always uses h = 0, which yields a proof that verifies if and only if the
inputs satisfy the circuit.
"""

import pytest
from py_ecc.fields import optimized_bn128_FQ2 as FQ2
from py_ecc.optimized_bn128 import b2, field_modulus

from zk_verifier.bn254 import curve_order, g1_point, g2_point, in_subgroup, on_curve
from zk_verifier.encoding import (
    encode_proof,
    encode_public_inputs,
    encode_verification_key,
)
from zk_verifier.models import Proof, VerificationKey


def _inv(value: int) -> int:
    return pow(value, -1, curve_order)


class LinearCircuit:
    def __init__(
        self,
        coefficients: list[int],
        target: int,
        alpha: int = 0x1F2E3D,
        beta: int = 0x4C5B6A,
        gamma: int = 0x7988A7,
        delta: int = 0xB6C5D4,
    ):
        self.coefficients = coefficients
        self.target = target
        self.alpha = alpha
        self.beta = beta
        self.gamma = gamma
        self.delta = delta

        # ic_0 = (alpha * v_0 + w_0) / gamma with v_0 = 1, w_0 = target
        # ic_i = (beta * u_i) / gamma      with u_i = c_i
        gamma_inv = _inv(gamma)
        ic_scalars = [(alpha + target) * gamma_inv % curve_order] + [
            beta * c * gamma_inv % curve_order for c in coefficients
        ]
        self.vk = VerificationKey(
            alpha=g1_point(alpha),
            beta=g2_point(beta),
            gamma=g2_point(gamma),
            delta=g2_point(delta),
            ic=tuple(g1_point(s) for s in ic_scalars),
        )

    @property
    def vk_bytes(self) -> bytes:
        return encode_verification_key(self.vk)

    def prove(self, inputs: list[int], r: int = 0x1234, s: int = 0x5678) -> Proof:
        a_sum = sum(c * x for c, x in zip(self.coefficients, inputs)) % curve_order
        a = (self.alpha + a_sum + r * self.delta) % curve_order
        b = (self.beta + 1 + s * self.delta) % curve_order
        c = (s * a + r * b - r * s * self.delta) % curve_order
        return Proof(a=g1_point(a), b=g2_point(b), c=g1_point(c))

    def proof_bytes(self, inputs: list[int], **kwargs) -> bytes:
        return encode_proof(self.prove(inputs, **kwargs))


def _fq2_sqrt(a: FQ2) -> FQ2 | None:
    # p = 3 mod 4 square root in FQ2
    one = FQ2.one()
    a1 = a ** ((field_modulus - 3) // 4)
    alpha = a1 * a1 * a
    x0 = a1 * a
    if alpha == -one:
        x = FQ2([0, 1]) * x0
    else:
        x = ((one + alpha) ** ((field_modulus - 1) // 2)) * x0
    return x if x * x == a else None


def find_twist_point_outside_subgroup() -> tuple:
    """Search E'(FQ2) for a point that is on the curve but not in the r-torsion."""
    for k in range(1, 1000):
        x = FQ2([k, 1])
        y = _fq2_sqrt(x**3 + b2)
        if y is None:
            continue
        point = (x, y, FQ2.one())
        if on_curve(point) and not in_subgroup(point):
            return point
    raise RuntimeError("no twist point outside the subgroup found")


@pytest.fixture(scope="session")
def sum_circuit() -> LinearCircuit:
    """x + y == 42"""
    return LinearCircuit([1, 1], 42)


@pytest.fixture(scope="session")
def weighted_circuit() -> LinearCircuit:
    """x + 2 * y == 61"""
    return LinearCircuit([1, 2], 61)


@pytest.fixture(scope="session")
def sum_proof(sum_circuit) -> bytes:
    return sum_circuit.proof_bytes([23, 19])


@pytest.fixture(scope="session")
def sum_inputs() -> bytes:
    return encode_public_inputs([23, 19])


@pytest.fixture(scope="session")
def twist_point_outside_subgroup() -> tuple:
    return find_twist_point_outside_subgroup()
