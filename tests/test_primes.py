import random

import pytest

from toyrsa.primes import (
    generate_odd_number,
    get_prime,
    is_probable_prime,
    mr_witness,
)

M61 = 2**61 - 1
M89 = 2**89 - 1
M127 = 2**127 - 1


@pytest.mark.parametrize("seed", [0, 1, 2, 42])
@pytest.mark.parametrize("bits", [8, 64, 1024])
def test_generate_odd_number_shape(seed, bits):
    value = generate_odd_number(random.Random(seed), bits)
    assert value % 2 == 1
    assert value.bit_length() == bits


def test_generate_odd_number_deterministic_for_seed():
    a = generate_odd_number(random.Random(7), 128)
    b = generate_odd_number(random.Random(7), 128)
    assert a == b


def test_mr_witness_strong_liar_and_witness():
    # 221 - 1 = 2**2 * 55
    assert mr_witness(221, 174, 2, 55) is False
    assert mr_witness(221, 137, 2, 55) is True


@pytest.mark.parametrize("base", [2, 3, 5, 12345, M61 - 2])
def test_mr_witness_never_for_prime(base):
    # M61 - 1 = 2 * (2**60 - 1)
    assert mr_witness(M61, base, 1, (M61 - 1) // 2) is False


@pytest.mark.parametrize("prime", [M61, M89, M127])
def test_is_probable_prime_accepts_primes(prime):
    assert is_probable_prime(prime, random.Random(3)) is True


@pytest.mark.parametrize("composite", [M61 * M89, 561, 10**20, 1105 * 1729, 221])
def test_is_probable_prime_rejects_composites(composite):
    assert is_probable_prime(composite, random.Random(3)) is False


@pytest.mark.parametrize("n", [-5, 0, 1, 2])
def test_is_probable_prime_rejects_tiny(n):
    with pytest.raises(ValueError):
        is_probable_prime(n, random.Random(0))


def test_get_prime_properties():
    prime = get_prime(64, random.Random(5))
    assert prime.bit_length() == 64
    assert prime % 2 == 1
    assert is_probable_prime(prime, random.Random(11))


def test_get_prime_deterministic_for_seed():
    first = get_prime(64, random.Random(9))
    second = get_prime(64, random.Random(9))
    assert first == second
    assert first.bit_length() == 64
    assert first % 2 == 1
    assert is_probable_prime(first, random.Random(13)) is True