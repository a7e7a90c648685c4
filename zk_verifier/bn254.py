# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from functools import reduce
from typing import Iterable

from py_ecc.fields import optimized_bn128_FQ as FQ
from py_ecc.fields import optimized_bn128_FQ2 as FQ2
from py_ecc.fields import optimized_bn128_FQ12 as FQ12
from py_ecc.optimized_bn128 import (
    G1,
    G2,
    Z1,
    Z2,
    add,
    b,
    b2,
    curve_order,
    eq,
    final_exponentiate,
    is_inf,
    is_on_curve,
    multiply,
    neg,
    normalize,
    pairing,
)


def is_g1(element: tuple) -> bool:
    """
    Tells a G1 point from a G2 point by the type of its coordinates.

    Args:
        element (tuple): A projective point.

    Returns:
        bool: True for points over FQ, False for points over FQ2.
    """
    return isinstance(element[2], FQ)


def g1_point(scalar: int) -> tuple:
    """
    Generates a BN254 G1 point from the generator using scalar multiplication.

    Args:
        scalar (int): The scalar value for multiplication.

    Returns:
        tuple: The resulting G1 point in projective coordinates.
    """
    return multiply(G1, scalar)


def g2_point(scalar: int) -> tuple:
    """
    Generates a BN254 G2 point from the generator using scalar multiplication.

    Args:
        scalar (int): The scalar value for multiplication.

    Returns:
        tuple: The resulting G2 point in projective coordinates.
    """
    return multiply(G2, scalar)


def scale(element: tuple, scalar: int) -> tuple:
    """
    Scales a BN254 point by a given scalar using scalar multiplication.

    Args:
        element (tuple): The point to be scaled.
        scalar (int): The scalar value for multiplication.

    Returns:
        tuple: The resulting scaled point.
    """
    return multiply(element, scalar)


def invert(element: tuple) -> tuple:
    """
    Calculates the additive inverse of a BN254 point.

    Args:
        element (tuple): A point in either group.

    Returns:
        tuple: The negated point.
    """
    return neg(element)


def combine(left_element: tuple, right_element: tuple) -> tuple:
    """
    Combines two BN254 points of the same group using addition.

    Args:
        left_element (tuple): A point.
        right_element (tuple): A point.

    Returns:
        tuple: The resulting combined point.
    """
    return add(left_element, right_element)


def equal(left_element: tuple, right_element: tuple) -> bool:
    """
    Compares two projective points for equality as group elements.

    Args:
        left_element (tuple): A point.
        right_element (tuple): A point of the same group.

    Returns:
        bool: True when both points describe the same affine point.
    """
    if is_inf(left_element) or is_inf(right_element):
        return is_inf(left_element) and is_inf(right_element)
    return eq(left_element, right_element)


def on_curve(element: tuple) -> bool:
    """
    Checks the curve equation y^2 = x^3 + b for the point's group.

    The point at infinity is on the curve.
    """
    return is_on_curve(element, b if is_g1(element) else b2)


def in_subgroup(element: tuple) -> bool:
    """
    Checks that a point lies in the prime-order subgroup used for pairing.

    The G1 cofactor is 1, so every G1 point on the curve passes. The twist
    group has a large cofactor and points off the r-torsion must be rejected.

    Args:
        element (tuple): A point already known to be on its curve.

    Returns:
        bool: True when [r]P is the point at infinity.
    """
    return is_inf(multiply(element, curve_order))


def to_affine(element: tuple) -> tuple | None:
    """
    Normalizes a projective point to integer affine coordinates.

    G1 points become (x, y); G2 points become ((x_c0, x_c1), (y_c0, y_c1)).

    Returns:
        The affine coordinates, or None for the point at infinity.
    """
    if is_inf(element):
        return None
    x, y = normalize(element)
    if is_g1(element):
        return int(x), int(y)
    return (int(x.coeffs[0]), int(x.coeffs[1])), (int(y.coeffs[0]), int(y.coeffs[1]))


def g1_from_affine(x: int, y: int) -> tuple:
    """Builds a projective G1 point from affine integers, no curve check."""
    return (FQ(x), FQ(y), FQ.one())


def g2_from_affine(x: tuple[int, int], y: tuple[int, int]) -> tuple:
    """Builds a projective G2 point from affine (c0, c1) pairs, no curve check."""
    return (FQ2([x[0], x[1]]), FQ2([y[0], y[1]]), FQ2.one())


def miller_loop(g1_element: tuple, g2_element: tuple) -> FQ12:
    """
    Evaluates the Miller loop of e(P, Q) without the final exponentiation.

    Args:
        g1_element (tuple): A point on G1.
        g2_element (tuple): A point on G2.

    Returns:
        FQ12: The unreduced pairing value.
    """
    return pairing(g2_element, g1_element, final_exponentiate=False)


def pairing_product(pairs: Iterable[tuple[tuple, tuple]]) -> FQ12:
    """
    Multiplies the Miller loops of every (G1, G2) pair and applies a single
    final exponentiation to the aggregate.

    Args:
        pairs: Sequence of (G1 point, G2 point) tuples.

    Returns:
        FQ12: The product of the pairings.
    """
    f = reduce(
        lambda acc, pq: acc * miller_loop(pq[0], pq[1]),
        pairs,
        FQ12.one(),
    )
    return final_exponentiate(f)


def pairing_product_is_one(pairs: Iterable[tuple[tuple, tuple]]) -> bool:
    """
    Checks whether the product of pairings equals the identity in GT.
    """
    return pairing_product(pairs) == gt_identity


# identity elements
g1_identity = Z1
g2_identity = Z2
gt_identity = FQ12.one()

# curve order
curve_order = curve_order
