# Copyright (C) 2025 Logical Mechanism LLC
# SPDX-License-Identifier: GPL-3.0-only
import json

from pathlib import Path
from typing import Any


def save_bytes(path: str | Path, data: bytes) -> None:
    """
    Write raw bytes to a file, creating parent directories if needed.

    Args:
        path: Destination file path (string or `Path`).
        data: Bytes to write.

    Returns:
        None.

    Side effects:
        - Creates `path.parent` directories if they do not exist.
        - Overwrites the file if it already exists.

    Raises:
        OSError: If the file cannot be created or written due to permissions,
            invalid paths, etc.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        f.write(data)


def load_bytes(path: str | Path) -> bytes:
    """
    Read a binary artifact such as an encoded verification key or proof.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    path = Path(path)
    with path.open("rb") as f:
        return f.read()


def load_json(path: str | Path) -> Any:
    """
    Load and parse a JSON file.

    Args:
        path: Path to the JSON file (string or `Path`).

    Returns:
        The parsed JSON value (commonly a dict or list), typed as `Any`.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        OSError: If the file cannot be opened/read.
    """
    path = Path(path)
    with path.open("r", encoding="utf-8") as f:
        return json.load(f)
