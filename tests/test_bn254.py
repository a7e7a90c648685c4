# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import pytest
from zk_verifier.bn254 import (
    curve_order,
    equal,
    g1_identity,
    g1_point,
    g2_identity,
    g2_point,
    combine,
    scale,
    pairing_product_is_one,
    invert,
    in_subgroup,
    on_curve,
    to_affine,
    g1_from_affine,
)


def test_g1_identity():
    g0 = g1_point(0)
    assert equal(g0, g1_identity)


def test_g2_identity():
    g0 = g2_point(0)
    assert equal(g0, g2_identity)


def test_g1_generator_affine():
    assert to_affine(g1_point(1)) == (1, 2)


def test_g2_generator_affine():
    assert to_affine(g2_point(1)) == (
        (
            10857046999023057135944570762232829481370756359578518086990519993285655852781,
            11559732032986387107991004021392285783925812861821192530917403151452391805634,
        ),
        (
            8495653923123431417604973247489272438418190587263600148770280649306958101930,
            4082367875863433681332203403145435568316851327593401208105741076214120093531,
        ),
    )


def test_identity_has_no_affine_form():
    assert to_affine(g1_identity) is None
    assert to_affine(g2_identity) is None


def test_g1_one_plus_one_equals_two():
    g1 = g1_point(1)
    assert equal(combine(g1, g1), g1_point(2))


def test_g2_one_plus_one_equals_two():
    g2 = g2_point(1)
    assert equal(combine(g2, g2), g2_point(2))


def test_g1_invert_of_an_invert_is_equal():
    g1 = g1_point(1)
    assert equal(invert(invert(g1)), g1)


def test_g1_plus_its_inverse_is_identity():
    p = g1_point(123456789)
    assert equal(combine(p, invert(p)), g1_identity)


def test_scale_by_curve_order_is_identity():
    assert equal(scale(g1_point(1), curve_order), g1_identity)
    assert equal(scale(g2_point(1), curve_order), g2_identity)


def test_generators_in_subgroup():
    assert in_subgroup(g1_point(7))
    assert in_subgroup(g2_point(7))


def test_off_curve_point():
    assert on_curve(g1_from_affine(1, 2))
    assert not on_curve(g1_from_affine(1, 3))


def test_twist_point_outside_subgroup(twist_point_outside_subgroup):
    assert on_curve(twist_point_outside_subgroup)
    assert not in_subgroup(twist_point_outside_subgroup)


def test_pairing_bilinearity():
    assert pairing_product_is_one(
        [
            (scale(g1_point(1), 31), scale(g2_point(1), 7)),
            (invert(g1_point(217)), g2_point(1)),
        ]
    )


def test_pairing_product_with_negation_is_one():
    g1 = g1_point(1)
    g2 = g2_point(1)
    assert pairing_product_is_one(
        [(g1_point(6), g2), (invert(g1_point(2)), g2_point(3))]
    )
    assert not pairing_product_is_one([(g1, g2), (invert(g1), g2_point(2))])


def test_empty_pairing_product_is_one():
    assert pairing_product_is_one([])


if __name__ == "__main__":
    pytest.main()
