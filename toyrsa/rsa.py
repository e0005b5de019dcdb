"""Textbook RSA key generation, encryption and key storage."""

from __future__ import annotations

import math
import os
import random
import time
from dataclasses import dataclass

from toyrsa.primes import DEFAULT_BITS, get_prime

PUBLIC_EXPONENT = 65537
DEFAULT_KEY_FILE = "rsa_key.txt"


@dataclass(frozen=True)
class KeyPair:
    """An RSA key pair together with the primes it was built from."""

    n: int
    e: int
    d: int
    p: int
    q: int


def find_e(a: int, rng: random.Random | None = None) -> int:
    """Pick a random exponent in ``[1, a]`` that is coprime to ``a``."""
    if a < 1:
        raise ValueError(f"modulus must be positive, got {a}")
    if rng is None:
        rng = random.Random(int(time.time()))
    while True:
        candidate = rng.randrange(a) + 1
        if math.gcd(a, candidate) == 1:
            return candidate


def find_d(e: int, a: int) -> int:
    """Return the inverse of ``e`` modulo ``a``."""
    try:
        return pow(e, -1, a)
    except ValueError as exc:
        raise ValueError(f"{e} has no inverse modulo {a}") from exc


def encrypt(n: int, e: int, value: int) -> int:
    """Return ``value**e mod n``."""
    return pow(value, e, n)


def decrypt(n: int, d: int, ciphertext: int) -> int:
    """Return ``ciphertext**d mod n``."""
    return pow(ciphertext, d, n)


def store_key(
    n: int, e: int, d: int, path: str | os.PathLike = DEFAULT_KEY_FILE
) -> None:
    """Append the public and private key to a text file."""
    with open(path, "a", encoding="ascii") as fh:
        fh.write(f"Public Key (n, e): ({n}, {e})\n")
        fh.write(f"Private Key: {d}\n")


def generate_keypair(
    bits: int = DEFAULT_BITS, rng: random.Random | None = None
) -> KeyPair:
    """Generate two distinct primes of ``bits`` bits and derive a key pair."""
    if rng is None:
        rng = random.Random(int(time.time()))
    p = get_prime(bits, rng)
    q = get_prime(bits, rng)
    while p == q:
        q = get_prime(bits, rng)
    n = p * q
    phi = (p - 1) * (q - 1)
    d = find_d(PUBLIC_EXPONENT, phi)
    return KeyPair(n=n, e=PUBLIC_EXPONENT, d=d, p=p, q=q)