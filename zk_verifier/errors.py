# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from enum import Enum


class ErrorKind(str, Enum):
    MALFORMED_ENCODING = "MalformedEncoding"
    SCALAR_OUT_OF_RANGE = "ScalarOutOfRange"
    NOT_ON_CURVE = "NotOnCurve"
    NOT_IN_SUBGROUP = "NotInSubgroup"
    INPUT_COUNT_MISMATCH = "InputCountMismatch"
    PAIRING_MISMATCH = "PairingMismatch"
    COMPUTE_BUDGET_EXCEEDED = "ComputeBudgetExceeded"


class VerificationError(ValueError):
    """
    Base class for every failure raised by the verification pipeline.

    Subclasses pin `kind` so callers can branch on the error kind without
    matching on class names.
    """

    kind: ErrorKind

    @property
    def is_malformed(self) -> bool:
        """True unless the proof was well-formed and the pairing check failed."""
        return self.kind is not ErrorKind.PAIRING_MISMATCH


class MalformedEncoding(VerificationError):
    kind = ErrorKind.MALFORMED_ENCODING


class ScalarOutOfRange(VerificationError):
    kind = ErrorKind.SCALAR_OUT_OF_RANGE


class NotOnCurve(VerificationError):
    kind = ErrorKind.NOT_ON_CURVE


class NotInSubgroup(VerificationError):
    kind = ErrorKind.NOT_IN_SUBGROUP


class InputCountMismatch(VerificationError):
    kind = ErrorKind.INPUT_COUNT_MISMATCH


class PairingMismatch(VerificationError):
    kind = ErrorKind.PAIRING_MISMATCH


class ComputeBudgetExceeded(VerificationError):
    kind = ErrorKind.COMPUTE_BUDGET_EXCEEDED
