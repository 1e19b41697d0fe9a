import pytest

from keyexchange.common.primes import DEFAULT_BOUND, generate_primes, is_prime


def test_generate_primes_small():
    assert generate_primes(30) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_generate_primes_inclusive_bound():
    assert generate_primes(29)[-1] == 29
    assert generate_primes(2) == [2]


@pytest.mark.parametrize("bound", [-5, 0, 1])
def test_generate_primes_below_two(bound):
    assert generate_primes(bound) == []


def test_generate_primes_default_bound():
    primes = generate_primes(DEFAULT_BOUND)
    assert len(primes) == 5133
    assert primes[-1] == 49999
    assert primes == sorted(set(primes))


def test_sieve_agrees_with_miller_rabin():
    sieved = set(generate_primes(5000))
    for n in range(5001):
        assert is_prime(n) == (n in sieved)


@pytest.mark.parametrize("n", [4_294_967_291, 4_294_967_311, 0xFFFF_FFFF_FFFF_FFC5, 2**61 - 1])
def test_is_prime_large_primes(n):
    assert is_prime(n)


@pytest.mark.parametrize("n", [561, 1105, 2**32 + 1, 2**64 - 1, 3_215_031_751, 4_294_967_291 * 3])
def test_is_prime_composites(n):
    assert not is_prime(n)
