from .backends import Backend, GmpBackend, SympyBackend, make_backend
from .errors import InvalidBits, UnknownBackend
from .generator import PrimeDraw, draw, random_probable_prime
__all__ = ["Backend", "GmpBackend", "SympyBackend", "make_backend",
           "InvalidBits", "UnknownBackend", "PrimeDraw", "draw", "random_probable_prime"]
