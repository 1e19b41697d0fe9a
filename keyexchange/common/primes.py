"""Prime supplier: sieve up to a bound + deterministic Miller-Rabin check."""
from typing import List

from keyexchange.crypto.modpow import modular_pow

# Bound the demo has always used
DEFAULT_BOUND = 50000

# Sufficient witnesses for a deterministic test of every n < 2^64
_MR_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def generate_primes(bound: int) -> List[int]:
    """Return all primes <= bound in ascending order.

    Args:
        bound: Inclusive upper bound

    Returns:
        List of primes (empty if bound < 2)
    """
    if bound < 2:
        return []

    sieve = bytearray([1]) * (bound + 1)
    sieve[0] = sieve[1] = 0
    i = 2
    while i * i <= bound:
        if sieve[i]:
            sieve[i * i::i] = bytearray(len(range(i * i, bound + 1, i)))
        i += 1

    return [n for n, flag in enumerate(sieve) if flag]


def is_prime(n: int) -> bool:
    """Deterministic Miller-Rabin primality test for 0 <= n < 2^64."""
    if n < 2:
        return False
    for q in _MR_BASES:
        if n % q == 0:
            return n == q

    d = n - 1
    s = 0
    while d % 2 == 0:
        d //= 2
        s += 1

    for a in _MR_BASES:
        x = modular_pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(s - 1):
            x = (x * x) % n
            if x == n - 1:
                break
        else:
            return False
    return True
