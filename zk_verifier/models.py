# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

from dataclasses import dataclass

from zk_verifier.errors import MalformedEncoding


@dataclass(frozen=True)
class Proof:
    """Groth16 proof triple: A and C on G1, B on G2."""

    a: tuple
    b: tuple
    c: tuple


@dataclass(frozen=True)
class VerificationKey:
    """
    Groth16 verification key from the circuit's trusted setup.

    `ic[0]` is the constant term and `ic[i]` for i >= 1 is the basis point of
    the i-th public input, so `len(ic) == n_public + 1`.
    """

    alpha: tuple
    beta: tuple
    gamma: tuple
    delta: tuple
    ic: tuple[tuple, ...]

    def __post_init__(self):
        if len(self.ic) == 0:
            raise MalformedEncoding("verification key needs at least the constant ic[0]")
        object.__setattr__(self, "ic", tuple(self.ic))

    @property
    def n_public(self) -> int:
        return len(self.ic) - 1
