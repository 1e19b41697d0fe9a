"""Modulus/generator selection from a supplied prime list (+ optional checks)."""
import secrets
from typing import Sequence

from keyexchange.common.primes import is_prime
from keyexchange.common.protocol import DHParameters

class EmptyPrimeListError(ValueError):
    """Raised when selecting from an empty prime sequence."""
    pass

class InvalidParametersError(ValueError):
    """Raised when p is not prime or g is not usable as a generator."""
    pass

def select_prime(primes: Sequence[int], rng=None) -> int:
    """Pick one prime uniformly by index.

    Args:
        primes: Non-empty ordered sequence of primes (trusted, not re-checked)
        rng: Randomness source with randint(low, high)

    Returns:
        The chosen element

    Raises:
        EmptyPrimeListError: If primes is empty
    """
    if not primes:
        raise EmptyPrimeListError("cannot select a prime from an empty list")
    rng = rng or secrets.SystemRandom()
    index = rng.randint(1, len(primes))
    return primes[index - 1]

def select_parameters(primes: Sequence[int], rng=None) -> DHParameters:
    """Select p then g, each independently from the same prime pool."""
    rng = rng or secrets.SystemRandom()
    p = select_prime(primes, rng)
    g = select_prime(primes, rng)
    return DHParameters(p=p, g=g)

def validate_parameters(p: int, g: int) -> DHParameters:
    """Check that p is prime and g reduces into [2, p-1].

    Raises:
        InvalidParametersError: If either check fails
    """
    if not is_prime(p):
        raise InvalidParametersError(f"modulus {p} is not prime")
    if not 2 <= g % p <= p - 1:
        raise InvalidParametersError(f"generator {g} is degenerate modulo {p}")
    return DHParameters(p=p, g=g)
