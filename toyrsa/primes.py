"""Random odd candidates and Miller-Rabin probable-prime testing."""

from __future__ import annotations

import math
import random
import time

DEFAULT_BITS = 1024
DEFAULT_ROUNDS = 200


def _time_seeded_rng() -> random.Random:
    return random.Random(int(time.time()))


def generate_odd_number(rng: random.Random, bits: int = DEFAULT_BITS) -> int:
    """Return a random odd integer whose top bit (bit ``bits - 1``) is set."""
    return rng.getrandbits(bits) | 1 | (1 << (bits - 1))


def _decompose(n: int) -> tuple[int, int]:
    """Split ``n - 1`` into ``2**r * f`` with ``f`` odd."""
    f = n - 1
    r = 0
    while f % 2 == 0:
        r += 1
        f //= 2
    return r, f


def mr_witness(candidate: int, base: int, r: int, f: int) -> bool:
    """Return True if ``base`` proves ``candidate`` composite.

    ``candidate - 1`` must equal ``2**r * f`` with ``f`` odd.
    """
    minus_one = candidate - 1
    x = pow(base, f, candidate)
    if x == minus_one or x == 1:
        return False
    for _ in range(1, r):
        x = x * x % candidate
        if x == minus_one:
            return False
    return True


def is_probable_prime(
    n: int, rng: random.Random | None = None, rounds: int = DEFAULT_ROUNDS
) -> bool:
    """Run ``rounds`` Miller-Rabin rounds with random bases drawn from ``[0, n)``.

    A base sharing a factor with ``n`` (including zero) counts as proof of
    compositeness.
    """
    if n < 3:
        raise ValueError(f"primality test needs n >= 3, got {n}")
    if rng is None:
        rng = _time_seeded_rng()
    r, f = _decompose(n)
    for _ in range(rounds):
        base = rng.randrange(n)
        if math.gcd(base, n) > 1:
            return False
        if mr_witness(n, base, r, f):
            return False
    return True


def get_prime(bits: int = DEFAULT_BITS, rng: random.Random | None = None) -> int:
    """Draw odd ``bits``-bit candidates until one passes the primality test.

    Without ``rng`` a generator seeded from the current second is used.
    """
    if rng is None:
        rng = _time_seeded_rng()
    candidate = generate_odd_number(rng, bits)
    while not is_probable_prime(candidate, rng):
        candidate = generate_odd_number(rng, bits)
    return candidate