from __future__ import annotations
import time
from flask import Flask, request, jsonify
from werkzeug.exceptions import BadRequest

from randprime import config
from randprime.backends import BACKENDS, make_backend
from randprime.errors import UnknownBackend
from randprime.generator import draw
from randprime.seeding import time_seed

app = Flask(__name__)


def _int_arg(name: str, default: int | None) -> int | None:
    s = request.args.get(name, "").strip()
    if not s:
        return default
    try:
        return int(s)
    except ValueError:
        raise BadRequest(f"{name} must be integer")


# /api/prime?bits=512&seed=7&backend=gmp
@app.get("/api/prime")
def api_prime():
    t0 = time.perf_counter()
    bits = _int_arg("bits", min(config.DEFAULT_BITS, config.MAX_HTTP_BITS))
    seed = _int_arg("seed", None)
    if bits < 0:
        raise BadRequest("bits must be >= 0")
    if bits > config.MAX_HTTP_BITS:
        raise BadRequest(f"bits capped at {config.MAX_HTTP_BITS}")
    name = request.args.get("backend", config.BACKEND).strip()
    try:
        backend = make_backend(name, time_seed() if seed is None else seed)
    except UnknownBackend as e:
        raise BadRequest(str(e))

    res = draw(bits, backend)
    d = jsonify({
        "ok": True,
        "bits": bits,
        "prime": backend.to_decimal(res.prime),
        "prime_bits": res.prime.bit_length(),
        "candidate_bits": res.candidate.bit_length(),
        "backend": res.backend,
        "duration_ms": res.elapsed_ms,
    })
    d.headers["X-Compute-ms"] = str(int((time.perf_counter() - t0) * 1000))
    return d


@app.get("/api/health")
def api_health():
    return jsonify(ok=True, backends=sorted(BACKENDS))


if __name__ == "__main__":
    app.run(host="127.0.0.1", port=8082)
