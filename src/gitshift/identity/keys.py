# SPDX-License-Identifier: MIT
# Copyright (c) 2026 GitShift Contributors

"""SSH keypair generation.

Keys come from ``cryptography`` (backed by the OS CSPRNG) and are encoded
the way ``ssh-keygen`` writes them: an unencrypted OpenSSH private key and a
single-line ``<type> <base64> <comment>`` public key.
"""

from __future__ import annotations

from dataclasses import dataclass
import enum

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed25519, rsa

from ..core.exceptions import KeyGenerationError

RSA_KEY_SIZE = 3072
RSA_PUBLIC_EXPONENT = 65537


class KeyAlgorithm(enum.StrEnum):
    """Supported SSH key algorithms."""

    ED25519 = "ed25519"
    RSA = "rsa"
    ECDSA_P256 = "ecdsa-p256"
    ECDSA_P384 = "ecdsa-p384"
    ECDSA_P521 = "ecdsa-p521"

    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @classmethod
    def parse(cls, value: str | KeyAlgorithm) -> KeyAlgorithm:
        """Parse an algorithm name (case-insensitive)."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            supported = ", ".join(a.value for a in cls)
            raise KeyGenerationError(
                f"Unsupported key algorithm '{value}' (supported: {supported})",
                algorithm=str(value),
            ) from None


_DISPLAY_NAMES = {
    KeyAlgorithm.ED25519: "Ed25519",
    KeyAlgorithm.RSA: "RSA",
    KeyAlgorithm.ECDSA_P256: "ECDSA P-256",
    KeyAlgorithm.ECDSA_P384: "ECDSA P-384",
    KeyAlgorithm.ECDSA_P521: "ECDSA P-521",
}

_CURVES = {
    KeyAlgorithm.ECDSA_P256: ec.SECP256R1,
    KeyAlgorithm.ECDSA_P384: ec.SECP384R1,
    KeyAlgorithm.ECDSA_P521: ec.SECP521R1,
}


@dataclass(frozen=True)
class KeyPair:
    """A freshly generated keypair in OpenSSH text form."""

    private_key: str
    public_key: str
    algorithm: KeyAlgorithm

    def __repr__(self) -> str:
        # Keep private key material out of tracebacks and logs
        return f"KeyPair(algorithm={self.algorithm.value!r}, public_key={self.public_key!r})"


def _new_private_key(algorithm: KeyAlgorithm):
    if algorithm is KeyAlgorithm.ED25519:
        return ed25519.Ed25519PrivateKey.generate()
    if algorithm is KeyAlgorithm.RSA:
        return rsa.generate_private_key(public_exponent=RSA_PUBLIC_EXPONENT, key_size=RSA_KEY_SIZE)
    if algorithm in _CURVES:
        return ec.generate_private_key(_CURVES[algorithm]())
    raise KeyGenerationError(f"Unsupported key algorithm '{algorithm.value}'", algorithm=algorithm.value)


def generate_keypair(algorithm: KeyAlgorithm | str, comment: str) -> KeyPair:
    """Generate a new SSH keypair.

    Args:
        algorithm: Key algorithm (enum member or its string value).
        comment: Text appended verbatim to the public key, usually an email.

    Returns:
        KeyPair with OpenSSH-encoded private and public key text.

    Raises:
        KeyGenerationError: If the algorithm is unsupported or generation fails.
    """
    algorithm = KeyAlgorithm.parse(algorithm)

    try:
        private_key = _new_private_key(algorithm)
        private_text = private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.OpenSSH,
            encryption_algorithm=serialization.NoEncryption(),
        ).decode()
        public_text = (
            private_key.public_key()
            .public_bytes(
                encoding=serialization.Encoding.OpenSSH,
                format=serialization.PublicFormat.OpenSSH,
            )
            .decode()
            .strip()
        )
    except (UnsupportedAlgorithm, ValueError) as e:
        raise KeyGenerationError(
            f"Failed to generate {algorithm.display_name()} key: {e}",
            algorithm=algorithm.value,
        ) from e

    if comment:
        public_text = f"{public_text} {comment}"

    return KeyPair(private_key=private_text, public_key=public_text, algorithm=algorithm)
