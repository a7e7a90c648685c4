# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
from zk_verifier.dispatch import VerificationResult, process_instruction, verify
from zk_verifier.errors import ErrorKind, VerificationError

__all__ = [
    "ErrorKind",
    "VerificationError",
    "VerificationResult",
    "process_instruction",
    "verify",
]
