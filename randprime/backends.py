# randprime/backends.py
# Big-integer backends behind one narrow interface:
#   random_bits(n)          -> uniform int in [0, 2**n)
#   next_probable_prime(x)  -> smallest probable prime >= x
#   to_decimal(x)           -> base-10 digits

from __future__ import annotations
import logging, random

import gmpy2
import sympy

from .errors import InvalidBits, UnknownBackend

log = logging.getLogger(__name__)


def _check_bits(n: int) -> int:
    n = int(n)
    if n < 0:
        raise InvalidBits(f"bit count must be >= 0, got {n}")
    return n


class Backend:
    name = "abstract"

    def random_bits(self, n: int) -> int:
        raise NotImplementedError

    def next_probable_prime(self, x: int) -> int:
        raise NotImplementedError

    def to_decimal(self, x: int) -> str:
        raise NotImplementedError


# ---- GMP via gmpy2 (default) ----

class GmpBackend(Backend):
    name = "gmp"
    MR_REPS = 25  # gmpy2.is_prime default

    def __init__(self, seed: int):
        self.seed = seed
        self._state = gmpy2.random_state(seed)

    def random_bits(self, n: int) -> int:
        n = _check_bits(n)
        if n == 0:
            return 0
        return int(gmpy2.mpz_urandomb(self._state, n))

    def next_probable_prime(self, x: int) -> int:
        if x <= 2:
            return 2
        z = gmpy2.mpz(x)
        # gmpy2.next_prime is strictly greater-than
        if gmpy2.is_prime(z, self.MR_REPS):
            return int(z)
        return int(gmpy2.next_prime(z))

    def to_decimal(self, x: int) -> str:
        return gmpy2.digits(gmpy2.mpz(x), 10)


# ---- sympy (pure Python ints, slower) ----

class SympyBackend(Backend):
    name = "sympy"

    def __init__(self, seed: int):
        self.seed = seed
        self._rng = random.Random(seed)

    def random_bits(self, n: int) -> int:
        n = _check_bits(n)
        return self._rng.getrandbits(n) if n else 0

    def next_probable_prime(self, x: int) -> int:
        if x <= 2:
            return 2
        if sympy.isprime(x):
            return int(x)
        return int(sympy.nextprime(x))

    def to_decimal(self, x: int) -> str:
        # str(int) trips CPython's 4300-digit limit on 16384-bit primes
        return gmpy2.digits(gmpy2.mpz(x), 10)


BACKENDS = {
    GmpBackend.name: GmpBackend,
    SympyBackend.name: SympyBackend,
}


def make_backend(name: str, seed: int) -> Backend:
    try:
        cls = BACKENDS[name]
    except KeyError:
        raise UnknownBackend(f"unknown backend {name!r}; choose from {', '.join(sorted(BACKENDS))}") from None
    log.debug("backend=%s seed=%s", name, seed)
    return cls(seed)
