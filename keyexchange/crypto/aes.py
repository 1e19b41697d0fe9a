"""AES-128(ECB)+PKCS#7 key confirmation for the derived DH key."""
from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

BLOCK_BITS = 128

def _check_key(key: bytes):
    if len(key) != 16:
        raise ValueError("AES-128 requires a 16-byte key")

def pkcs7_pad(data: bytes) -> bytes:
    """Apply PKCS#7 padding to a 16-byte block boundary."""
    padder = padding.PKCS7(BLOCK_BITS).padder()
    return padder.update(data) + padder.finalize()

def pkcs7_unpad(data: bytes) -> bytes:
    """Remove PKCS#7 padding; raises ValueError on malformed padding."""
    unpadder = padding.PKCS7(BLOCK_BITS).unpadder()
    return unpadder.update(data) + unpadder.finalize()

def aes_encrypt(key: bytes, plaintext: bytes) -> bytes:
    """Encrypt plaintext using AES-128 ECB with PKCS#7 padding.

    Args:
        key: 16-byte AES key (see derive_aes_key)
        plaintext: Data to encrypt

    Returns:
        Ciphertext
    """
    _check_key(key)
    encryptor = Cipher(algorithms.AES(key), modes.ECB()).encryptor()
    return encryptor.update(pkcs7_pad(plaintext)) + encryptor.finalize()

def aes_decrypt(key: bytes, ciphertext: bytes) -> bytes:
    """Decrypt AES-128 ECB ciphertext and strip the padding.

    A key that differs from the encrypting one almost always surfaces as a
    padding ValueError here.
    """
    _check_key(key)
    if len(ciphertext) % 16 != 0:
        raise ValueError("Ciphertext length must be a multiple of 16")
    decryptor = Cipher(algorithms.AES(key), modes.ECB()).decryptor()
    return pkcs7_unpad(decryptor.update(ciphertext) + decryptor.finalize())
