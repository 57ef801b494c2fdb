# SPDX-License-Identifier: MIT
# Copyright (c) 2026 GitShift Contributors

"""On-disk key files.

Each account owns ``<key_dir>/<name>_id`` (private, mode 0600) and
``<key_dir>/<name>_id.pub`` (public, default mode).
"""

from __future__ import annotations

import logging
import os
import stat
from pathlib import Path

from ..core.exceptions import StorageIOError

logger = logging.getLogger(__name__)

PRIVATE_KEY_MODE = stat.S_IRUSR | stat.S_IWUSR  # 0600
KEY_DIR_MODE = stat.S_IRWXU  # 0700


def private_key_path(key_dir: Path, account_name: str) -> Path:
    return key_dir / f"{account_name}_id"


def public_key_path(private_path: Path) -> Path:
    return private_path.with_name(private_path.name + ".pub")


def ensure_key_dir(key_dir: Path) -> Path:
    """Create the key directory with 0700 permissions."""
    try:
        key_dir.mkdir(parents=True, exist_ok=True)
        os.chmod(key_dir, KEY_DIR_MODE)
    except OSError as e:
        raise StorageIOError("create key directory", key_dir, e) from e
    return key_dir


def _write_private(path: Path, text: str) -> None:
    # Create with restricted permissions from the start
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, PRIVATE_KEY_MODE)
    try:
        os.write(fd, text.encode("utf-8"))
    finally:
        os.close(fd)
    # O_CREAT's mode is ignored for a file that already existed
    os.chmod(path, PRIVATE_KEY_MODE)


def save_keypair(
    account_name: str,
    key_dir: Path,
    private_key: str,
    public_key: str,
) -> tuple[Path, Path]:
    """Write an account's keypair to disk.

    Args:
        account_name: Account the keys belong to; determines the file names.
        key_dir: Directory holding all key files.
        private_key: OpenSSH private key text.
        public_key: Single-line public key text.

    Returns:
        Tuple of (private_path, public_path).

    Raises:
        StorageIOError: If either file cannot be written. A private key
            written before the failure is removed again.
    """
    private_path = private_key_path(key_dir, account_name)
    public_path = public_key_path(private_path)

    if private_path.exists():
        logger.warning(f"Overwriting stale key file {private_path}")

    try:
        _write_private(private_path, private_key)
    except OSError as e:
        raise StorageIOError("write private key", private_path, e) from e

    try:
        public_path.write_text(public_key + "\n", encoding="utf-8")
    except OSError as e:
        _discard(private_path)
        raise StorageIOError("write public key", public_path, e) from e

    logger.info(f"Saved keypair for '{account_name}' to {private_path}")
    return private_path, public_path


def is_managed_key_path(private_path: Path, key_dir: Path) -> bool:
    """True if ``private_path`` is an absolute path directly inside ``key_dir``."""
    return private_path.is_absolute() and private_path.parent == key_dir.absolute()


def remove_keypair(private_path: Path, key_dir: Path) -> None:
    """Delete an account's key files.

    The private key must be gone afterwards, otherwise StorageIOError is
    raised. An already missing private key only counts as removed when its
    path lies inside ``key_dir``; a missing file anywhere else means the
    recorded path is stale and the real key may still exist. The public key
    is removed best-effort.
    """
    try:
        private_path.unlink()
    except FileNotFoundError as e:
        if not is_managed_key_path(private_path, key_dir):
            raise StorageIOError("remove SSH key file", private_path, e) from e
        logger.warning(f"Private key {private_path} was already missing")
    except OSError as e:
        raise StorageIOError("remove SSH key file", private_path, e) from e

    public_path = public_key_path(private_path)
    try:
        public_path.unlink(missing_ok=True)
    except OSError as e:
        logger.warning(f"Could not remove public key {public_path}: {e}")

    logger.info(f"Removed key files for {private_path}")


def discard_keypair(private_path: Path) -> None:
    """Remove both key files, logging instead of raising on failure."""
    _discard(private_path)
    _discard(public_key_path(private_path))


def _discard(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as e:
        logger.error(f"Failed to clean up {path}: {e}")
