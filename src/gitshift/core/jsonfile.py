# SPDX-License-Identifier: MIT
# Copyright (c) 2026 GitShift Contributors

"""JSON file helpers shared by the account store and the activation state."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from .exceptions import CorruptStoreError, StorageIOError


def read_json(path: Path, missing: Any = None) -> Any:
    """Read a JSON document.

    Args:
        path: File to read.
        missing: Value returned when the file does not exist.

    Raises:
        CorruptStoreError: If the file exists but is not valid UTF-8 JSON.
        StorageIOError: If the file exists but cannot be read.
    """
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError:
        return missing
    except json.JSONDecodeError as e:
        raise CorruptStoreError(path, f"invalid JSON ({e})") from e
    except UnicodeDecodeError as e:
        raise CorruptStoreError(path, f"invalid encoding ({e})") from e
    except OSError as e:
        raise StorageIOError("read", path, e) from e


def atomic_write_json(data: Any, file_path: Path) -> None:
    """Write JSON data atomically using temp file + rename.

    Readers see either the previous document or the new one, never a
    partial write.

    Raises:
        StorageIOError: If the directory, temp file or rename fails.
    """
    dir_path = file_path.parent
    try:
        dir_path.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(prefix=f".{file_path.name}.", suffix=".tmp", dir=dir_path)
    except OSError as e:
        raise StorageIOError("write", file_path, e) from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_path, file_path)
    except OSError as e:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise StorageIOError("write", file_path, e) from e
