# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# groth_convert.py

"""
Convert snarkjs Groth16 proof output to the verifier's binary wire format.

snarkjs outputs:
  - proof.json: {pi_a: [x, y, z], pi_b: [[x0, x1], [y0, y1], [z0, z1]], pi_c: [x, y, z], ...}
  - public.json: ["val1", "val2", ...]

Coordinates are decimal strings, projective with z = 1 (or z = 0 for the
point at infinity). For G2, [c0, c1] is c0 + c1 * u.

The verifier expects:
  - proof: A || B || C, 256 bytes, G2 written imaginary part first
  - public inputs: concatenated 32-byte big-endian scalars
"""

from pathlib import Path
from typing import Any, Sequence

from zk_verifier.constants import FIELD_MODULUS, FIELD_SIZE, G1_SIZE, G2_SIZE
from zk_verifier.encoding import encode_public_inputs
from zk_verifier.errors import MalformedEncoding
from zk_verifier.files import load_json, save_bytes


def _to_int(value: int | str) -> int:
    if isinstance(value, int):
        return value
    s = str(value).strip().lower()
    if s.startswith("0x"):
        return int(s, 16)
    return int(s)


def _field_bytes(value: int | str) -> bytes:
    n = _to_int(value)
    if not 0 <= n < FIELD_MODULUS:
        raise MalformedEncoding(f"coordinate {n} is not a base field element")
    return n.to_bytes(FIELD_SIZE, "big")


def g1_from_json(coords: Sequence[Any]) -> bytes:
    """
    Encode a snarkjs G1 point [x, y, z] (or [x, y]) as 64 bytes.

    Args:
        coords: Decimal or 0x-hex coordinates.

    Returns:
        bytes: x || y, or 64 zero bytes for the point at infinity.
    """
    if len(coords) == 3 and _to_int(coords[2]) == 0:
        return bytes(G1_SIZE)
    if len(coords) == 3 and _to_int(coords[2]) != 1:
        raise MalformedEncoding("G1 point must be affine (z = 1)")
    return _field_bytes(coords[0]) + _field_bytes(coords[1])


def g2_from_json(coords: Sequence[Sequence[Any]]) -> bytes:
    """
    Encode a snarkjs G2 point [[x0, x1], [y0, y1], [z0, z1]] as 128 bytes.

    snarkjs lists the real part first; the wire format wants the imaginary
    part first, so each pair is swapped.
    """
    if len(coords) == 3:
        z = [_to_int(c) for c in coords[2]]
        if z == [0, 0]:
            return bytes(G2_SIZE)
        if z != [1, 0]:
            raise MalformedEncoding("G2 point must be affine (z = 1)")
    (x0, x1), (y0, y1) = coords[0], coords[1]
    return b"".join(_field_bytes(v) for v in (x1, x0, y1, y0))


def snarkjs_proof_to_bytes(proof: dict[str, Any]) -> bytes:
    """
    Convert snarkjs proof.json to the 256-byte A || B || C encoding.

    Args:
        proof: Dict with keys: pi_a, pi_b, pi_c

    Returns:
        The proof bytes.
    """
    return (
        g1_from_json(proof["pi_a"])
        + g2_from_json(proof["pi_b"])
        + g1_from_json(proof["pi_c"])
    )


def snarkjs_public_to_bytes(public: Sequence[Any]) -> bytes:
    """
    Convert snarkjs public.json (a list of decimal strings) to the public
    input encoding.

    Raises:
        ScalarOutOfRange: If a value is not below the scalar field modulus.
    """
    return encode_public_inputs([_to_int(v) for v in public])


def convert_proof_file(
    proof_path: str | Path,
    output_path: str | Path,
) -> None:
    """
    Read snarkjs proof.json and write the binary proof.

    Args:
        proof_path: Path to snarkjs proof.json
        output_path: Path to write the 256-byte proof
    """
    save_bytes(output_path, snarkjs_proof_to_bytes(load_json(proof_path)))


def convert_public_file(
    public_path: str | Path,
    output_path: str | Path,
) -> None:
    """
    Read snarkjs public.json and write the binary public inputs.

    Args:
        public_path: Path to snarkjs public.json
        output_path: Path to write the concatenated scalars
    """
    save_bytes(output_path, snarkjs_public_to_bytes(load_json(public_path)))


def instruction_from_files(
    proof_path: str | Path,
    public_path: str | Path,
) -> bytes:
    """
    Build proof || public inputs, the layout read by `process_instruction`.
    """
    return snarkjs_proof_to_bytes(load_json(proof_path)) + snarkjs_public_to_bytes(
        load_json(public_path)
    )


def convert_all(
    proof_path: str | Path,
    public_path: str | Path,
    output_dir: str | Path,
    proof_filename: str = "proof.bin",
    public_filename: str = "public.bin",
    instruction_filename: str = "instruction.bin",
) -> None:
    """
    Convert all snarkjs output files to the binary formats.

    Args:
        proof_path: Path to snarkjs proof.json
        public_path: Path to snarkjs public.json
        output_dir: Directory to write output files
        proof_filename: Name for proof output file
        public_filename: Name for public inputs output file
        instruction_filename: Name for the combined instruction file
    """
    output_dir = Path(output_dir)

    convert_proof_file(proof_path, output_dir / proof_filename)
    convert_public_file(public_path, output_dir / public_filename)
    save_bytes(
        output_dir / instruction_filename,
        instruction_from_files(proof_path, public_path),
    )
