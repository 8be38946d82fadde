"""
Seeded Random Generator

Bit-exact port of the default ARC4 generator of the JavaScript `seedrandom`
library (versions 2.x and 3.x), which picked the original daily words.
Daily word selection depends on every detail below; do not modify it.

    rng = seed_random('hello.')
    rng()  # 0.9282578795792454
    rng()  # 0.3752569768646784
"""

from typing import Callable, List

WIDTH = 256                 # each RC4 output is one byte
CHUNKS = 6                  # bytes in the initial numerator (48 bits)
DIGITS = 52                 # significant bits of a double
MASK = WIDTH - 1

START_DENOM = WIDTH ** CHUNKS
SIGNIFICANCE = 2 ** DIGITS
OVERFLOW = SIGNIFICANCE * 2


def mix_key(seed: str) -> List[int]:
    """Derive the RC4 key bytes from a seed string."""
    key: List[int] = []
    smear = 0
    for j, char in enumerate(seed):
        slot = j & MASK
        existing = key[slot] if slot < len(key) else 0
        smear ^= existing * 19
        value = (smear + ord(char)) & MASK
        if slot < len(key):
            key[slot] = value
        else:
            key.append(value)
    return key


class ARC4:
    """RC4 keystream with the first 256 bytes dropped (RC4-drop[256])."""

    def __init__(self, key: List[int]):
        if not key:
            key = [0]
        keylen = len(key)

        s = list(range(WIDTH))
        j = 0
        for i in range(WIDTH):
            t = s[i]
            j = (j + key[i % keylen] + t) & MASK
            s[i] = s[j]
            s[j] = t

        self.S = s
        self.i = 0
        self.j = 0
        self.next_bytes(WIDTH)

    def next_bytes(self, count: int) -> int:
        """Return the next `count` output bytes as one big-endian integer."""
        s = self.S
        i, j = self.i, self.j
        r = 0
        for _ in range(count):
            i = (i + 1) & MASK
            t = s[i]
            j = (j + t) & MASK
            s[i] = s[j]
            s[j] = t
            r = r * WIDTH + s[(s[i] + s[j]) & MASK]
        self.i, self.j = i, j
        return r


def seed_random(seed: str) -> Callable[[], float]:
    """
    Create a generator of uniform floats in [0, 1) seeded by a string.

    Args:
        seed: Seed string; equal seeds always give equal sequences.

    Returns:
        A zero-argument callable returning the next float.
    """
    arc4 = ARC4(mix_key(seed))

    def prng() -> float:
        n = arc4.next_bytes(CHUNKS)
        d = START_DENOM
        x = 0
        while n < SIGNIFICANCE:
            n = (n + x) * WIDTH
            d *= WIDTH
            x = arc4.next_bytes(1)
        while n >= OVERFLOW:
            # n and d are multiples of 2 here, so halving stays exact
            n //= 2
            d //= 2
            x >>= 1
        return (n + x) / d

    return prng
