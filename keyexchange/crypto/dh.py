"""Classic DH key derivation (private/public/secret) + Trunc16(SHA256(Ks))."""
import hashlib
import secrets

from keyexchange.crypto.modpow import modular_pow


def private_key(prime: int, rng=None) -> int:
    """Draw a private key uniformly from [1, prime].

    The upper bound is inclusive: prime itself is a valid (degenerate)
    private key.

    Args:
        prime: DH modulus, >= 2
        rng: Randomness source with randint(low, high); defaults to
            secrets.SystemRandom()

    Returns:
        Private key in [1, prime]
    """
    if prime < 2:
        raise ValueError(f"prime must be >= 2, got {prime}")
    rng = rng or secrets.SystemRandom()
    return rng.randint(1, prime)


def public_key(p: int, g: int, private_key: int) -> int:
    """Public key = g^private_key mod p."""
    return modular_pow(g, private_key, p)


def secret(p: int, other_public_key: int, own_private_key: int) -> int:
    """Shared secret Ks = other_public_key^own_private_key mod p."""
    return modular_pow(other_public_key, own_private_key, p)


def derive_aes_key(shared_secret: int) -> bytes:
    """Derive AES-128 key from DH shared secret.

    K = Trunc16(SHA256(big-endian(Ks)))

    Args:
        shared_secret: DH shared secret (integer)

    Returns:
        16-byte AES key
    """
    # A secret of 0 still needs one byte
    byte_length = (shared_secret.bit_length() + 7) // 8 or 1
    ks_bytes = shared_secret.to_bytes(byte_length, byteorder='big')
    return hashlib.sha256(ks_bytes).digest()[:16]
