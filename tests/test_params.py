import random

import pytest
from pydantic import ValidationError

from keyexchange.common.protocol import DHParameters
from keyexchange.crypto.params import (
    EmptyPrimeListError,
    InvalidParametersError,
    select_parameters,
    select_prime,
    validate_parameters,
)

PRIMES = [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]


def test_select_prime_from_list():
    rng = random.Random(4)
    for _ in range(100):
        assert select_prime(PRIMES, rng) in PRIMES


def test_select_prime_reaches_both_ends():
    rng = random.Random(5)
    picked = {select_prime(PRIMES, rng) for _ in range(500)}
    assert picked == set(PRIMES)


def test_select_prime_single_element():
    assert select_prime([7919]) == 7919


def test_select_prime_empty():
    with pytest.raises(EmptyPrimeListError):
        select_prime([])


def test_empty_prime_list_is_value_error():
    with pytest.raises(ValueError):
        select_parameters([], random.Random(0))


def test_select_parameters():
    params = select_parameters(PRIMES, random.Random(6))
    assert isinstance(params, DHParameters)
    assert params.p in PRIMES
    assert params.g in PRIMES


def test_select_parameters_reproducible():
    assert select_parameters(PRIMES, random.Random(9)) == select_parameters(PRIMES, random.Random(9))


def test_validate_parameters_ok():
    params = validate_parameters(23, 5)
    assert (params.p, params.g) == (23, 5)


@pytest.mark.parametrize("p, g", [(21, 5), (1_000_000, 3), (23, 23), (23, 46), (23, 1), (23, 24)])
def test_validate_parameters_rejects(p, g):
    with pytest.raises(InvalidParametersError):
        validate_parameters(p, g)


def test_parameters_model_bounds():
    with pytest.raises(ValidationError):
        DHParameters(p=1, g=2)
    with pytest.raises(ValidationError):
        DHParameters(p=2**64, g=2)
