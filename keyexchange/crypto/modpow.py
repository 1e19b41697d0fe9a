"""Square-and-multiply modular exponentiation over unsigned 64-bit operands."""

U64_MAX = (1 << 64) - 1


def _check_u64(name: str, value: int):
    if value < 0 or value > U64_MAX:
        raise ValueError(f"{name} must be an unsigned 64-bit integer, got {value}")


def modular_pow(base: int, exponent: int, modulus: int) -> int:
    """Compute base^exponent mod modulus (right-to-left binary method).

    Intermediate products are at most (2^64 - 1)^2, which Python integers
    hold exactly, so nothing is truncated before the reduction.

    Args:
        base: Base, 0 <= base < 2^64
        exponent: Exponent, 0 <= exponent < 2^64
        modulus: Modulus, 0 < modulus < 2^64

    Returns:
        base^exponent mod modulus

    Raises:
        ValueError: If an operand is outside the u64 range or modulus is 0
    """
    _check_u64("base", base)
    _check_u64("exponent", exponent)
    _check_u64("modulus", modulus)
    if modulus == 0:
        raise ValueError("modulus must be non-zero")

    # Everything is congruent to 0 mod 1
    if modulus == 1:
        return 0

    result = 1
    base = base % modulus

    while exponent > 0:
        if exponent & 1:
            result = (result * base) % modulus
        exponent >>= 1
        base = (base * base) % modulus

    return result
