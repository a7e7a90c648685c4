# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# test_groth_convert.py

import json
from pathlib import Path

import pytest

from zk_verifier import process_instruction, verify
from zk_verifier.bn254 import to_affine
from zk_verifier.constants import FIELD_MODULUS
from zk_verifier.errors import MalformedEncoding, ScalarOutOfRange
from zk_verifier.groth_convert import (
    convert_all,
    convert_proof_file,
    convert_public_file,
    g1_from_json,
    g2_from_json,
    instruction_from_files,
    snarkjs_proof_to_bytes,
    snarkjs_public_to_bytes,
)


@pytest.fixture
def snarkjs_proof(sum_circuit) -> dict:
    """proof.json as written by `snarkjs groth16 prove`"""
    proof = sum_circuit.prove([23, 19])
    ax, ay = to_affine(proof.a)
    (bx0, bx1), (by0, by1) = to_affine(proof.b)
    cx, cy = to_affine(proof.c)
    return {
        "pi_a": [str(ax), str(ay), "1"],
        "pi_b": [[str(bx0), str(bx1)], [str(by0), str(by1)], ["1", "0"]],
        "pi_c": [str(cx), str(cy), "1"],
        "protocol": "groth16",
        "curve": "bn128",
    }


SNARKJS_PUBLIC = ["23", "19"]


class TestSnarkjsProofToBytes:
    def test_matches_native_encoding(self, snarkjs_proof, sum_proof):
        assert snarkjs_proof_to_bytes(snarkjs_proof) == sum_proof

    def test_converted_proof_verifies(self, snarkjs_proof, sum_circuit):
        result = verify(
            snarkjs_proof_to_bytes(snarkjs_proof),
            snarkjs_public_to_bytes(SNARKJS_PUBLIC),
            sum_circuit.vk,
        )
        assert result.accepted

    def test_g2_swaps_to_imaginary_first(self):
        data = g2_from_json([["1", "2"], ["3", "4"], ["1", "0"]])
        assert [int.from_bytes(data[i : i + 32], "big") for i in range(0, 128, 32)] == [
            2,
            1,
            4,
            3,
        ]

    def test_g1_without_z(self):
        assert g1_from_json(["1", "2"]) == (1).to_bytes(32, "big") + (2).to_bytes(32, "big")

    def test_infinity(self):
        assert g1_from_json(["0", "1", "0"]) == bytes(64)
        assert g2_from_json([["0", "0"], ["1", "0"], ["0", "0"]]) == bytes(128)

    def test_projective_rejected(self):
        with pytest.raises(MalformedEncoding):
            g1_from_json(["1", "2", "5"])

    def test_coordinate_out_of_range(self):
        with pytest.raises(MalformedEncoding):
            g1_from_json([str(FIELD_MODULUS), "2", "1"])


class TestSnarkjsPublicToBytes:
    def test_basic_conversion(self):
        data = snarkjs_public_to_bytes(SNARKJS_PUBLIC)
        assert data == (23).to_bytes(32, "big") + (19).to_bytes(32, "big")

    def test_empty(self):
        assert snarkjs_public_to_bytes([]) == b""

    def test_out_of_range(self):
        with pytest.raises(ScalarOutOfRange):
            snarkjs_public_to_bytes([str(2**254)])


class TestFileConversion:
    def _write(self, tmp_path: Path, snarkjs_proof: dict) -> tuple[Path, Path]:
        proof_path = tmp_path / "proof.json"
        public_path = tmp_path / "public.json"
        with open(proof_path, "w") as f:
            json.dump(snarkjs_proof, f)
        with open(public_path, "w") as f:
            json.dump(SNARKJS_PUBLIC, f)
        return proof_path, public_path

    def test_convert_proof_file(self, tmp_path, snarkjs_proof, sum_proof):
        proof_path, _ = self._write(tmp_path, snarkjs_proof)
        output_path = tmp_path / "proof.bin"
        convert_proof_file(proof_path, output_path)
        assert output_path.read_bytes() == sum_proof

    def test_convert_public_file(self, tmp_path, snarkjs_proof, sum_inputs):
        _, public_path = self._write(tmp_path, snarkjs_proof)
        output_path = tmp_path / "public.bin"
        convert_public_file(public_path, output_path)
        assert output_path.read_bytes() == sum_inputs

    def test_convert_all(self, tmp_path, snarkjs_proof, sum_proof, sum_inputs):
        proof_path, public_path = self._write(tmp_path, snarkjs_proof)
        output_dir = tmp_path / "output"

        convert_all(proof_path, public_path, output_dir)

        assert (output_dir / "proof.bin").read_bytes() == sum_proof
        assert (output_dir / "public.bin").read_bytes() == sum_inputs
        assert (output_dir / "instruction.bin").read_bytes() == sum_proof + sum_inputs

    def test_instruction_verifies(self, tmp_path, snarkjs_proof, sum_circuit):
        proof_path, public_path = self._write(tmp_path, snarkjs_proof)
        instruction = instruction_from_files(proof_path, public_path)
        assert process_instruction(instruction, sum_circuit.vk_bytes).accepted


if __name__ == "__main__":
    pytest.main()
