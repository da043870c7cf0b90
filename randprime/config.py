import os

DEFAULT_BITS   = int(os.getenv("RANDPRIME_DEFAULT_BITS", "16384"))
BACKEND        = os.getenv("RANDPRIME_BACKEND", "gmp") or "gmp"
LOG_LEVEL      = (os.getenv("RANDPRIME_LOG_LEVEL", "WARNING") or "WARNING").upper()
MAX_HTTP_BITS  = int(os.getenv("RANDPRIME_MAX_HTTP_BITS", "8192"))
