# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only

# dispatch.py

"""
Single entry point for Groth16 verification.

`verify` runs the pipeline strictly in order and stops at the first failure:

  0. decode the key             (MalformedEncoding, NotOnCurve, NotInSubgroup,
                                 InputCountMismatch when n_public is given)
  1. decode the proof           (MalformedEncoding, NotOnCurve, NotInSubgroup)
  2. decode the public inputs   (MalformedEncoding, ScalarOutOfRange)
  3. prepare the public input   (InputCountMismatch)
  4. pairing check              (PairingMismatch)

Every call returns a `VerificationResult` and emits one log record with the
outcome and the compute units charged by the metering backend.
"""

from dataclasses import dataclass

from zk_verifier.backend import CurveBackend, MeteredBackend, default_backend
from zk_verifier.constants import PROOF_SIZE, SCALAR_SIZE
from zk_verifier.encoding import (
    decode_proof,
    decode_public_inputs,
    decode_verification_key,
    encode_g1,
    encode_verification_key,
)
from zk_verifier.errors import (
    ComputeBudgetExceeded,
    ErrorKind,
    InputCountMismatch,
    MalformedEncoding,
    NotInSubgroup,
    NotOnCurve,
    PairingMismatch,
    ScalarOutOfRange,
    VerificationError,
)
from zk_verifier.hashing import vk_fingerprint
from zk_verifier.logger import get_logger
from zk_verifier.models import VerificationKey
from zk_verifier.pairing import check_pairing
from zk_verifier.prepare import prepare_public_inputs

logger = get_logger(__name__)

_ERRORS: dict[ErrorKind, type[VerificationError]] = {
    ErrorKind.MALFORMED_ENCODING: MalformedEncoding,
    ErrorKind.SCALAR_OUT_OF_RANGE: ScalarOutOfRange,
    ErrorKind.NOT_ON_CURVE: NotOnCurve,
    ErrorKind.NOT_IN_SUBGROUP: NotInSubgroup,
    ErrorKind.INPUT_COUNT_MISMATCH: InputCountMismatch,
    ErrorKind.PAIRING_MISMATCH: PairingMismatch,
    ErrorKind.COMPUTE_BUDGET_EXCEEDED: ComputeBudgetExceeded,
}


@dataclass(frozen=True)
class VerificationResult:
    """
    Outcome of one verification call.

    Attributes:
        accepted: True only if every stage succeeded and the pairing held.
        error: The first failure encountered, None when accepted.
        detail: Human readable description of the failure.
        compute_units: Units charged by the metering backend.
        prepared_input: Encoded prepared input point, when stage 3 completed.
    """

    accepted: bool
    error: ErrorKind | None = None
    detail: str | None = None
    compute_units: int = 0
    prepared_input: bytes | None = None

    @property
    def is_malformed(self) -> bool:
        """True when the call itself was bad, as opposed to an invalid proof."""
        return self.error is not None and self.error is not ErrorKind.PAIRING_MISMATCH

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise _ERRORS[self.error](self.detail or self.error.value)


def verify(
    proof_bytes: bytes,
    public_input_bytes: bytes,
    vk: VerificationKey | bytes,
    backend: CurveBackend | None = None,
    compute_budget: int | None = None,
    n_public: int | None = None,
) -> VerificationResult:
    """
    Verify one Groth16 proof against one verification key.

    The key always goes through `decode_verification_key`, so a key built in
    memory gets the same curve and subgroup checks as one read from bytes.

    Args:
        proof_bytes: A || B || C, 256 bytes.
        public_input_bytes: Concatenated 32-byte big-endian scalars.
        vk: A decoded key, or its at-rest encoding.
        backend: Curve backend doing the arithmetic.
        compute_budget: Optional ceiling on compute units for the call.
        n_public: Number of public inputs the key is expected to carry.

    Returns:
        VerificationResult: Accepted, or the first error kind encountered.
    """
    meter = MeteredBackend(inner=backend or default_backend, budget=compute_budget)
    vk_bytes = bytes(vk) if isinstance(vk, (bytes, bytearray)) else None
    prepared = None

    try:
        if vk_bytes is None:
            vk_bytes = encode_verification_key(vk)
        vk = decode_verification_key(vk_bytes, n_public=n_public, backend=meter)
        proof = decode_proof(bytes(proof_bytes), meter)
        inputs = decode_public_inputs(bytes(public_input_bytes))
        prepared = prepare_public_inputs(vk.ic, inputs, meter)
        check_pairing(proof, vk, prepared, meter)
    except VerificationError as e:
        result = VerificationResult(
            accepted=False,
            error=e.kind,
            detail=str(e),
            compute_units=meter.consumed,
            prepared_input=encode_g1(prepared) if prepared is not None else None,
        )
    else:
        result = VerificationResult(
            accepted=True,
            compute_units=meter.consumed,
            prepared_input=encode_g1(prepared),
        )

    log = logger.warning if result.is_malformed else logger.info
    log(
        "groth16_verify",
        accepted=result.accepted,
        error=result.error.value if result.error else None,
        detail=result.detail,
        compute_units=result.compute_units,
        n_public=len(public_input_bytes) // SCALAR_SIZE,
        public_inputs=bytes(public_input_bytes).hex(),
        vk_id=vk_fingerprint(vk_bytes) if vk_bytes is not None else None,
        backend=meter.name,
    )
    return result


def process_instruction(
    instruction_data: bytes,
    vk: VerificationKey | bytes,
    backend: CurveBackend | None = None,
    compute_budget: int | None = None,
    n_public: int | None = None,
) -> VerificationResult:
    """
    Verify an instruction laid out as proof(256) || public inputs(32 * n).

    Instructions shorter than a proof fail with MalformedEncoding at the
    proof decoding stage.
    """
    return verify(
        instruction_data[:PROOF_SIZE],
        instruction_data[PROOF_SIZE:],
        vk,
        backend=backend,
        compute_budget=compute_budget,
        n_public=n_public,
    )
