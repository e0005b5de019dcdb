"""Interactive encrypt/decrypt menu combining a Caesar shift with RSA."""

from __future__ import annotations

import argparse
import random
import re
import sys
import time
from typing import Sequence, TextIO

from toyrsa.primes import DEFAULT_BITS
from toyrsa.rsa import DEFAULT_KEY_FILE, decrypt, encrypt, generate_keypair, store_key

RED = "\x1b[31m"
BLUE = "\x1b[34m"
GREEN = "\x1b[32m"
RESET = "\x1b[0m"

MAX_LENGTH = 255
ENCRYPT_DELAY = 0.1
DECRYPT_DELAY = 0.3

_OPTION_RE = re.compile(r"\s*([+-]?\d+)")


def caesar_shift(text: str, key: int) -> str:
    """Shift ASCII letters by ``key`` places, keeping case; leave others alone."""

    def shift(ch: str) -> str:
        if "A" <= ch <= "Z":
            return chr((ord(ch) - ord("A") + key) % 26 + ord("A"))
        if "a" <= ch <= "z":
            return chr((ord(ch) - ord("a") + key) % 26 + ord("a"))
        return ch

    return "".join(shift(ch) for ch in text)


def slow_print(
    text: str, delay: float, color: str, stream: TextIO | None = None
) -> None:
    """Write ``text`` one coloured character at a time, pausing ``delay`` seconds."""
    out = stream if stream is not None else sys.stdout
    for ch in text:
        out.write(f"  {color}{ch}")
        out.flush()
        if delay > 0:
            time.sleep(delay)
    out.write(RESET)


def decode_message(original: str, decrypted: Sequence[int], key: int) -> str:
    """Undo the shift by subtracting ``key`` from every non-space character code."""
    return "".join(
        " " if orig == " " else chr((value - key) % 256)
        for orig, value in zip(original, decrypted)
    )


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="toyrsa", description="Encrypt and decrypt a message with RSA."
    )
    parser.add_argument("--bits", type=int, default=DEFAULT_BITS,
                        help="size of each prime in bits")
    parser.add_argument("--key-file", default=DEFAULT_KEY_FILE,
                        help="file the generated keys are appended to")
    parser.add_argument("--fast", action="store_true",
                        help="print progress text without delays")
    return parser.parse_args(argv)


def _read_message(stream: TextIO) -> str | None:
    while True:
        line = stream.readline()
        if not line:
            return None
        text = line.lstrip().rstrip("\r\n")
        if text:
            return text[: MAX_LENGTH - 1]


def _read_option(stream: TextIO) -> int | None | bool:
    line = stream.readline()
    if not line:
        return False
    match = _OPTION_RE.match(line)
    return int(match.group(1)) if match else None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive menu; return the exit status."""
    args = _parse_args(argv)
    out, inp = sys.stdout, sys.stdin
    encrypt_delay = 0.0 if args.fast else ENCRYPT_DELAY
    decrypt_delay = 0.0 if args.fast else DECRYPT_DELAY

    out.write(
        GREEN + " " * 38
        + "********Welcome to our encryption decryption system *************"
        + " " * 17 + "\n\n\n\n" + RESET
    )
    out.write("Enter text  :")
    out.flush()
    message = _read_message(inp)
    if message is None:
        out.write("\n")
        return 1

    key = random.Random(int(time.time())).randrange(5)
    shifted = caesar_shift(message, key)

    keys = generate_keypair(args.bits, random.Random(int(time.time())))
    store_key(keys.n, keys.e, keys.d, args.key_file)

    encrypted = False
    decrypted: list[int] = []
    option: int | None = None
    while option != 3:
        out.write(RED + "Choose an option:\n" + RESET)
        out.write(RED + "1. Encrypt Message\n" + RESET)
        out.write(RED + "2.  Decrypt Message\n" + RESET)
        out.write("Enter option :")
        out.flush()
        read = _read_option(inp)
        if read is False:
            break
        option = read
        if option == 1:
            if not encrypted:
                slow_print("Encrypting.......", encrypt_delay, BLUE, out)
                out.write("\n")
                for ch in shifted:
                    ciphertext = encrypt(keys.n, keys.e, ord(ch))
                    out.write(f"Hexadecimal representation: {ciphertext:x}\n")
                    decrypted.append(decrypt(keys.n, keys.d, ciphertext))
            else:
                out.write("You have Already encrypted the message\n")
            encrypted = True
        elif option == 2:
            if encrypted:
                slow_print("Decrypting.......", decrypt_delay, GREEN, out)
                out.write("\n")
                out.write("Decrypted Message:\n")
                out.write(decode_message(shifted, decrypted, key))
                out.write("\n")
            else:
                out.write("You have not encrypted  the message yet\n")
        else:
            out.write("Invalid option!\n")

    out.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())