# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

import hashlib
import binascii

from zk_verifier.constants import VK_DOMAIN_TAG


def generate(input_string: str) -> str:
    """
    Calculates the blake2b_224 hash digest of the input string.

    Args:
        input_string (str): The hex string to be hashed.

    Returns:
        str: The blake2b_224 hash digest of the input string.
    """
    hash_digest = hashlib.blake2b(
        binascii.unhexlify(input_string), digest_size=28
    ).hexdigest()

    return hash_digest


def vk_fingerprint(vk_bytes: bytes) -> str:
    """
    Domain separated digest of an encoded verification key.

    Used to identify which key a verification ran against in log records
    without printing the whole key.

    Args:
        vk_bytes: The at-rest encoding of the key.

    Returns:
        str: blake2b_224(VK_DOMAIN_TAG || vk_bytes) as hex.
    """
    return generate(VK_DOMAIN_TAG + vk_bytes.hex())
