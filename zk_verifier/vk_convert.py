# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# vk_convert.py

"""
Convert a snarkjs verification_key.json to the verifier's at-rest key format.

snarkjs outputs:
  - verification_key.json: {protocol, curve, nPublic, vk_alpha_1, vk_beta_2,
    vk_gamma_2, vk_delta_2, vk_alphabeta_12, IC}

At-rest key:
  alpha(64) || beta(128) || gamma(128) || delta(128) || ic_count(u32) || IC[..](64 each)

vk_alphabeta_12 is a precomputed e(alpha, beta) and is not carried over; the
verifier evaluates that pairing itself.
"""

import sys
from pathlib import Path
from typing import Any

from zk_verifier.constants import IC_COUNT_SIZE
from zk_verifier.encoding import decode_verification_key
from zk_verifier.errors import InputCountMismatch, MalformedEncoding
from zk_verifier.files import load_bytes, load_json, save_bytes
from zk_verifier.groth_convert import g1_from_json, g2_from_json
from zk_verifier.models import VerificationKey


def snarkjs_vk_to_bytes(vk: dict[str, Any]) -> bytes:
    """
    Convert snarkjs verification_key.json to the at-rest encoding.

    Args:
        vk: Dict from snarkjs verification_key.json

    Returns:
        The encoded key.

    Raises:
        MalformedEncoding: Unsupported protocol or curve, or bad coordinates.
        InputCountMismatch: len(IC) != nPublic + 1.
    """
    if vk.get("protocol", "groth16") != "groth16":
        raise MalformedEncoding(f"unsupported protocol: {vk['protocol']}")
    if vk.get("curve", "bn128") not in ("bn128", "bn254", "alt_bn128"):
        raise MalformedEncoding(f"unsupported curve: {vk['curve']}")

    ic = vk["IC"]
    if "nPublic" in vk and len(ic) != int(vk["nPublic"]) + 1:
        raise InputCountMismatch(
            f"IC length mismatch: len(IC)={len(ic)} vs nPublic+1={int(vk['nPublic']) + 1}"
        )

    return (
        g1_from_json(vk["vk_alpha_1"])
        + g2_from_json(vk["vk_beta_2"])
        + g2_from_json(vk["vk_gamma_2"])
        + g2_from_json(vk["vk_delta_2"])
        + len(ic).to_bytes(IC_COUNT_SIZE, "big")
        + b"".join(g1_from_json(p) for p in ic)
    )


def snarkjs_vk_to_key(vk: dict[str, Any]) -> VerificationKey:
    """Convert and fully validate a snarkjs key, returning the decoded form."""
    n_public = int(vk["nPublic"]) if "nPublic" in vk else None
    return decode_verification_key(snarkjs_vk_to_bytes(vk), n_public=n_public)


def convert_vk_file(
    input_path: str | Path,
    output_path: str | Path,
) -> None:
    """
    Read snarkjs verification_key.json and write the at-rest key file.

    Args:
        input_path: Path to snarkjs verification_key.json
        output_path: Path to write the binary key
    """
    save_bytes(output_path, snarkjs_vk_to_bytes(load_json(input_path)))


def load_verification_key(
    path: str | Path, n_public: int | None = None
) -> VerificationKey:
    """
    Read and fully validate an at-rest key file written by `convert_vk_file`.

    Args:
        path: Path to the binary key
        n_public: Expected number of public inputs, if known
    """
    return decode_verification_key(load_bytes(path), n_public=n_public)


def main() -> None:
    """CLI: read verification_key.json from arg, write key bytes to a file or hex to stdout."""
    if len(sys.argv) < 2:
        print(
            "Usage: python -m zk_verifier.vk_convert <verification_key.json> [vk.bin]",
            file=sys.stderr,
        )
        sys.exit(1)

    vk_bytes = snarkjs_vk_to_bytes(load_json(sys.argv[1]))

    if len(sys.argv) >= 3:
        save_bytes(sys.argv[2], vk_bytes)
    else:
        print(vk_bytes.hex())


if __name__ == "__main__":
    main()
