# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# encoding.py

"""
Fixed-width wire encoding for BN254 points, scalars, proofs and keys.

Convention (alt_bn128 precompile layout, EIP-196 / EIP-197):
  - field elements and scalars are 32-byte big-endian integers
  - G1: x || y                                   (64 bytes)
  - G2: x.c1 || x.c0 || y.c1 || y.c0             (128 bytes, imaginary first)
  - the point at infinity is all zero bytes
  - proof: A(G1) || B(G2) || C(G1)               (256 bytes)
  - verification key:
      alpha(G1) || beta(G2) || gamma(G2) || delta(G2) || ic_count(u32) || ic[..](G1)

Decoding validates everything: exact lengths, coordinates below the base
field modulus, the curve equation and subgroup membership.
"""

from enum import Enum
from typing import Sequence

from zk_verifier import bn254
from zk_verifier.backend import CurveBackend, default_backend
from zk_verifier.constants import (
    FIELD_MODULUS,
    FIELD_SIZE,
    G1_SIZE,
    G2_SIZE,
    IC_COUNT_SIZE,
    PROOF_SIZE,
    SCALAR_MODULUS,
    SCALAR_SIZE,
    VK_FIXED_SIZE,
)
from zk_verifier.errors import (
    InputCountMismatch,
    MalformedEncoding,
    NotInSubgroup,
    NotOnCurve,
    ScalarOutOfRange,
)
from zk_verifier.models import Proof, VerificationKey


class Group(str, Enum):
    G1 = "G1"
    G2 = "G2"

    @property
    def size(self) -> int:
        return G1_SIZE if self is Group.G1 else G2_SIZE


def _field_elements(data: bytes) -> list[int]:
    elements = [
        int.from_bytes(data[i : i + FIELD_SIZE], "big")
        for i in range(0, len(data), FIELD_SIZE)
    ]
    for e in elements:
        if e >= FIELD_MODULUS:
            raise MalformedEncoding("coordinate is not below the base field modulus")
    return elements


def _field_bytes(value: int) -> bytes:
    return value.to_bytes(FIELD_SIZE, "big")


def decode_point(
    data: bytes, group: Group, backend: CurveBackend | None = None
) -> tuple:
    """
    Decode a G1 or G2 point from its fixed-width encoding.

    Args:
        data: 64 bytes for G1 or 128 bytes for G2.
        group: Which group the bytes belong to.
        backend: Curve backend used for the membership checks.

    Returns:
        The point in py_ecc projective coordinates.

    Raises:
        MalformedEncoding: Wrong length or a coordinate >= p.
        NotOnCurve: The coordinates do not satisfy the curve equation.
        NotInSubgroup: The point is on the curve but outside the r-torsion.
    """
    backend = backend or default_backend
    group = Group(group)
    if len(data) != group.size:
        raise MalformedEncoding(
            f"{group.value} point must be {group.size} bytes, got {len(data)}"
        )

    coords = _field_elements(bytes(data))
    if not any(coords):
        return bn254.g1_identity if group is Group.G1 else bn254.g2_identity

    if group is Group.G1:
        point = bn254.g1_from_affine(coords[0], coords[1])
    else:
        x_c1, x_c0, y_c1, y_c0 = coords
        point = bn254.g2_from_affine((x_c0, x_c1), (y_c0, y_c1))

    if not backend.is_on_curve(point):
        raise NotOnCurve(f"{group.value} point is not on the curve")
    if not backend.in_subgroup(point):
        raise NotInSubgroup(f"{group.value} point is not in the prime-order subgroup")
    return point


def encode_point(point: tuple, group: Group | None = None) -> bytes:
    """
    Encode a G1 or G2 point into its fixed-width form.

    The group is taken from the point's coordinate type unless given; a
    mismatch between the two raises `MalformedEncoding`.
    """
    actual = Group.G1 if bn254.is_g1(point) else Group.G2
    if group is not None and Group(group) is not actual:
        raise MalformedEncoding(f"expected a {Group(group).value} point")

    affine = bn254.to_affine(point)
    if affine is None:
        return bytes(actual.size)
    if actual is Group.G1:
        x, y = affine
        return _field_bytes(x) + _field_bytes(y)
    (x_c0, x_c1), (y_c0, y_c1) = affine
    return b"".join(_field_bytes(v) for v in (x_c1, x_c0, y_c1, y_c0))


def decode_g1(data: bytes, backend: CurveBackend | None = None) -> tuple:
    return decode_point(data, Group.G1, backend)


def decode_g2(data: bytes, backend: CurveBackend | None = None) -> tuple:
    return decode_point(data, Group.G2, backend)


def encode_g1(point: tuple) -> bytes:
    return encode_point(point, Group.G1)


def encode_g2(point: tuple) -> bytes:
    return encode_point(point, Group.G2)


def decode_scalar(data: bytes) -> int:
    """
    Decode a 32-byte big-endian scalar.

    Raises:
        MalformedEncoding: The input is not exactly 32 bytes.
        ScalarOutOfRange: The value is not below the scalar field modulus.
    """
    if len(data) != SCALAR_SIZE:
        raise MalformedEncoding(f"scalar must be {SCALAR_SIZE} bytes, got {len(data)}")
    value = int.from_bytes(data, "big")
    if value >= SCALAR_MODULUS:
        raise ScalarOutOfRange("scalar is not below the scalar field modulus")
    return value


def encode_scalar(value: int) -> bytes:
    if not 0 <= value < SCALAR_MODULUS:
        raise ScalarOutOfRange("scalar is not in [0, r)")
    return value.to_bytes(SCALAR_SIZE, "big")


def decode_public_inputs(data: bytes) -> list[int]:
    """
    Split concatenated 32-byte scalars into an ordered list of public inputs.

    Raises:
        MalformedEncoding: The length is not a multiple of 32.
        ScalarOutOfRange: Any scalar is >= r.
    """
    if len(data) % SCALAR_SIZE:
        raise MalformedEncoding(
            f"public inputs must be a multiple of {SCALAR_SIZE} bytes, got {len(data)}"
        )
    return [
        decode_scalar(bytes(data[i : i + SCALAR_SIZE]))
        for i in range(0, len(data), SCALAR_SIZE)
    ]


def encode_public_inputs(values: Sequence[int]) -> bytes:
    return b"".join(encode_scalar(v) for v in values)


def decode_proof(data: bytes, backend: CurveBackend | None = None) -> Proof:
    """
    Decode the 256-byte A || B || C proof encoding.

    Raises:
        MalformedEncoding: Wrong total length or a bad coordinate.
        NotOnCurve, NotInSubgroup: A point fails its membership check.
    """
    if len(data) != PROOF_SIZE:
        raise MalformedEncoding(f"proof must be {PROOF_SIZE} bytes, got {len(data)}")
    a = decode_g1(data[:G1_SIZE], backend)
    b = decode_g2(data[G1_SIZE : G1_SIZE + G2_SIZE], backend)
    c = decode_g1(data[G1_SIZE + G2_SIZE :], backend)
    return Proof(a=a, b=b, c=c)


def encode_proof(proof: Proof) -> bytes:
    return encode_g1(proof.a) + encode_g2(proof.b) + encode_g1(proof.c)


def decode_verification_key(
    data: bytes, n_public: int | None = None, backend: CurveBackend | None = None
) -> VerificationKey:
    """
    Decode a verification key from its at-rest encoding.

    The embedded `ic_count` must match the number of trailing ic points
    exactly. When `n_public` is supplied the key must also carry exactly
    `n_public + 1` ic points.

    Args:
        data: The encoded key.
        n_public: Expected number of public inputs, if known.
        backend: Curve backend used for the membership checks.

    Returns:
        VerificationKey: The decoded key.

    Raises:
        MalformedEncoding: Truncated data, trailing bytes or an ic_count that
            disagrees with the payload.
        InputCountMismatch: The key does not match `n_public`.
        NotOnCurve, NotInSubgroup: A point fails its membership check.
    """
    header = VK_FIXED_SIZE + IC_COUNT_SIZE
    if len(data) < header:
        raise MalformedEncoding(
            f"verification key must be at least {header} bytes, got {len(data)}"
        )

    ic_count = int.from_bytes(data[VK_FIXED_SIZE:header], "big")
    body = data[header:]
    if ic_count == 0 or len(body) != ic_count * G1_SIZE:
        raise MalformedEncoding(
            f"ic_count={ic_count} does not match {len(body)} bytes of ic points"
        )
    if n_public is not None and ic_count != n_public + 1:
        raise InputCountMismatch(
            f"verification key has {ic_count} ic points, expected {n_public + 1}"
        )

    offset = 0
    alpha = decode_g1(data[offset : offset + G1_SIZE], backend)
    offset += G1_SIZE
    beta, gamma, delta = (
        decode_g2(data[offset + i * G2_SIZE : offset + (i + 1) * G2_SIZE], backend)
        for i in range(3)
    )
    ic = tuple(
        decode_g1(body[i * G1_SIZE : (i + 1) * G1_SIZE], backend)
        for i in range(ic_count)
    )
    return VerificationKey(alpha=alpha, beta=beta, gamma=gamma, delta=delta, ic=ic)


def encode_verification_key(vk: VerificationKey) -> bytes:
    return (
        encode_g1(vk.alpha)
        + encode_g2(vk.beta)
        + encode_g2(vk.gamma)
        + encode_g2(vk.delta)
        + len(vk.ic).to_bytes(IC_COUNT_SIZE, "big")
        + b"".join(encode_g1(p) for p in vk.ic)
    )
