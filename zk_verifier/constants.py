# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import os

from py_ecc.optimized_bn128 import curve_order, field_modulus

# moduli
FIELD_MODULUS = field_modulus
SCALAR_MODULUS = curve_order

# wire sizes in bytes
FIELD_SIZE = 32
SCALAR_SIZE = 32
G1_SIZE = 2 * FIELD_SIZE
G2_SIZE = 4 * FIELD_SIZE
PROOF_SIZE = G1_SIZE + G2_SIZE + G1_SIZE
IC_COUNT_SIZE = 4
VK_FIXED_SIZE = G1_SIZE + 3 * G2_SIZE

# compute unit prices, alt_bn128 syscall schedule
ADDITION_COST = 334
MULTIPLICATION_COST = 3_840
PAIRING_FIRST_PAIR_COST = 36_364
PAIRING_OTHER_PAIR_COST = 12_121
SUBGROUP_CHECK_COST = MULTIPLICATION_COST

# domain tags
VK_DOMAIN_TAG = "GROTH16|BN254|VK|v1|".encode("utf-8").hex()

# logging defaults
LOG_LEVEL = os.environ.get("ZK_VERIFIER_LOG_LEVEL", "INFO")
LOG_JSON = os.environ.get("ZK_VERIFIER_LOG_JSON", "0").lower() in ("1", "true", "yes")
