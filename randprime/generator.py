from __future__ import annotations
import logging, time
from dataclasses import dataclass

from .backends import Backend

log = logging.getLogger(__name__)


@dataclass
class PrimeDraw:
    bits: int
    candidate: int
    prime: int
    backend: str
    elapsed_ms: int


def draw(bits: int, backend: Backend) -> PrimeDraw:
    """
    Draw a uniform `bits`-bit candidate from `backend` and advance it to the
    smallest probable prime >= candidate. A prime candidate is kept as is.
    """
    t0 = time.perf_counter()
    candidate = backend.random_bits(bits)
    prime = backend.next_probable_prime(candidate)
    ms = int((time.perf_counter() - t0) * 1000)
    log.info("bits=%d candidate_bits=%d gap=%d ms=%d",
             bits, candidate.bit_length(), prime - candidate, ms)
    return PrimeDraw(bits, candidate, prime, backend.name, ms)


def random_probable_prime(bits: int, backend: Backend) -> int:
    return draw(bits, backend).prime
