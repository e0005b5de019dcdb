# toyrsa

toyrsa is a small RSA toolkit for learning. It is not meant to protect real data: it uses textbook RSA with no padding and Python's `random` module, which is not a cryptographic source of randomness.

It has three parts:

- Random probable primes. It draws random odd numbers of a fixed bit length, with the top bit set. It keeps drawing until one passes a Miller-Rabin test with random bases.
- RSA key pairs. The public exponent is 65537 and the private exponent is its inverse modulo `(p - 1)(q - 1)`. The toolkit can encrypt and decrypt integers and can append a key to a text file.
- An interactive session. It Caesar-shifts your text by a random key from 0 to 4. It then encrypts and decrypts each character code with a freshly generated RSA key pair, and finally shows the message with the shift undone.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
toyrsa [--bits BITS] [--key-file PATH] [--fast]
```

- `--bits`: the size of each prime in bits. The default is 1024, so the modulus is about 2048 bits. Generating the key can take a while at this size.
- `--key-file`: the file the generated key pair is appended to. The default is `rsa_key.txt` in the current directory.
- `--fast`: print the "Encrypting......." and "Decrypting......." progress text without pauses. Without this option the program pauses 0.1 s and 0.3 s per character.

The session runs in this order:

1. The program asks for a line of text. Leading blanks are skipped, and the text is cut to 254 characters. If input ends before any text is entered, the program exits with status 1.
2. It generates a key pair and appends it to the key file:
   ```
   Public Key (n, e): (<n>, <e>)
   Private Key: <d>
   ```
3. It shows a menu:
   - `1` encrypts the shifted message. It prints each character's ciphertext in hexadecimal. A second `1` only reports that the message is already encrypted.
   - `2` prints the decrypted message with the Caesar shift removed. Before anything has been encrypted, it only prints a notice.
   - `3` quits. It is not printed in the menu, but it is accepted.
   - Any other input prints `Invalid option!`.

   The session also ends when input runs out.

## Library use

```python
import random

from toyrsa.primes import get_prime, is_probable_prime
from toyrsa.rsa import generate_keypair, encrypt, decrypt, store_key
from toyrsa.cli import caesar_shift

rng = random.Random(1234)

p = get_prime(256, rng)
assert is_probable_prime(p, rng, 20)

keys = generate_keypair(512, rng)
c = encrypt(keys.n, keys.e, ord("A"))
assert decrypt(keys.n, keys.d, c) == ord("A")

store_key(keys.n, keys.e, keys.d, "keys.txt")

print(caesar_shift("Hello, World", 3))  # Khoor, Zruog
```

Some functions take an optional `rng`. If you leave it out, they use a `random.Random` seeded with the current time in whole seconds.

### `toyrsa.primes`

- `generate_odd_number(rng, bits=1024)`: a random odd number with bit `bits - 1` set.
- `mr_witness(candidate, base, r, f)`: returns `True` if `base` proves that `candidate` is composite. The arguments must satisfy `candidate - 1 == 2**r * f`, with `f` odd.
- `is_probable_prime(n, rng=None, rounds=200)`: a Miller-Rabin test with `rounds` random bases drawn from `[0, n)`. A base that shares a factor with `n` counts as proof that `n` is composite. Raises `ValueError` for `n < 3`.
- `get_prime(bits=1024, rng=None)`: a random probable prime of `bits` bits.

### `toyrsa.rsa`

- `KeyPair`: a frozen dataclass holding the modulus `n`, the public exponent `e`, the private exponent `d` and the primes `p` and `q`.
- `find_e(a, rng=None)`: a random exponent from 1 to `a` that is coprime to `a`. Raises `ValueError` if `a < 1`.
- `find_d(e, a)`: the inverse of `e` modulo `a`. Raises `ValueError` if there is none.
- `encrypt(n, e, value)` and `decrypt(n, d, ciphertext)`: raw modular exponentiation.
- `store_key(n, e, d, path="rsa_key.txt")`: appends the key to a text file.
- `generate_keypair(bits=1024, rng=None)`: builds a key pair from two distinct primes of `bits` bits each, with `e = 65537`.

### `toyrsa.cli`

- `caesar_shift(text, key)`: shifts the ASCII letters by `key` places and keeps their case. Other characters are left alone.
- `slow_print(text, delay, color, stream=None)`: writes the text one coloured character at a time, pausing `delay` seconds after each. It writes to standard output when no stream is given.
- `decode_message(original, decrypted, key)`: subtracts `key` from each recovered character code, modulo 256. Characters that are spaces in `original` are kept as spaces.
- `main(argv=None)`: runs the interactive session and returns the exit status.

## What it does not do

toyrsa encrypts integers only, one character code at a time. It has no padding scheme, no message or file format, and no way to read a stored key back from the key file.