import secrets
import time


def time_seed() -> int:
    """Wall clock in whole seconds; runs within the same second collide."""
    return int(time.time())


def secure_seed() -> int:
    return secrets.randbits(128)
