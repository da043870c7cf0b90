from __future__ import annotations
import argparse, logging, re, sys

from . import config
from .backends import BACKENDS, make_backend
from .errors import InvalidBits
from .generator import draw
from .seeding import secure_seed, time_seed

log = logging.getLogger(__name__)

_ATOI_RE = re.compile(r"\s*([+-]?[0-9]+)")


def atoi(text: str) -> int:
    """C atoi: leading whitespace, optional sign, longest digit prefix, else 0."""
    m = _ATOI_RE.match(text or "")
    return int(m.group(1)) if m else 0


def parse_bits(text: str | None, strict: bool = False) -> int:
    if text is None:
        return config.DEFAULT_BITS
    if strict:
        try:
            bits = int(text.strip(), 10)
        except ValueError:
            raise InvalidBits(f"bits must be an integer, got {text!r}") from None
        if bits <= 0:
            raise InvalidBits(f"bits must be positive, got {bits}")
        return bits
    return max(0, atoi(text))


def parse_seed(text: str | None, strict: bool = False) -> int | None:
    """None when no usable seed was given; lenient mode reads it like atoi."""
    if text is None:
        return None
    if strict:
        try:
            return int(text.strip(), 10)
        except ValueError:
            raise ValueError(f"seed must be an integer, got {text!r}") from None
    return atoi(text)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="randprime",
        description="Print a random probable prime of the given bit length.",
    )
    ap.add_argument("bits", nargs="?", default=None,
                    help=f"bit length of the random candidate (default {config.DEFAULT_BITS})")
    ap.add_argument("--seed", nargs="?", default=None, metavar="N",
                    help="fixed seed; output becomes deterministic")
    ap.add_argument("--secure", action="store_true", help="seed from the OS CSPRNG instead of the clock")
    ap.add_argument("--backend", choices=sorted(BACKENDS), default=config.BACKEND)
    ap.add_argument("--strict", action="store_true", help="reject non-integer or non-positive bits")
    ap.add_argument("-v", "--verbose", action="store_true", help="log seed and timing to stderr")
    return ap


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(stream=sys.stderr, level=level,
                        format="%(levelname)s %(name)s: %(message)s", force=True)


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    args, extra = ap.parse_known_args(argv)
    if extra and args.strict:
        ap.error(f"unrecognized arguments: {' '.join(extra)}")
    _setup_logging(args.verbose)

    # argparse diverts dash-led text such as "-12abc" away from the positional
    text = args.bits
    if text is None and extra:
        text = extra[0]
    try:
        bits = parse_bits(text, strict=args.strict)
        seed = parse_seed(args.seed, strict=args.strict)
    except ValueError as e:
        ap.error(str(e))

    if seed is not None:
        source = "fixed"
    elif args.secure:
        seed, source = secure_seed(), "secure"
    else:
        seed, source = time_seed(), "clock"
    log.debug("seed_source=%s seed=%s bits=%d", source, seed, bits)

    backend = make_backend(args.backend, seed)
    res = draw(bits, backend)
    print(backend.to_decimal(res.prime), flush=True)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
