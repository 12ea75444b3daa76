"""
ObjectId-format identifiers.

Every document id exposed by the API is 24 hexadecimal characters: a 4-byte
timestamp, 5 random bytes fixed per process and a 3-byte counter, the
layout of a MongoDB ObjectId.
"""

import itertools
import os
import re
import threading
import time
from typing import Any

_OBJECT_ID_RE = re.compile(r"^[0-9a-fA-F]{24}$")

_process_random = os.urandom(5)
_counter = itertools.count(int.from_bytes(os.urandom(3), "big"))
_counter_lock = threading.Lock()


def new_object_id() -> str:
    """Return a fresh 24-character lowercase hex id."""
    with _counter_lock:
        count = next(_counter) % 0x1000000
    raw = (
        int(time.time()).to_bytes(4, "big")
        + _process_random
        + count.to_bytes(3, "big")
    )
    return raw.hex()


def is_valid_object_id(value: Any) -> bool:
    """True only for strings of exactly 24 hex characters."""
    return isinstance(value, str) and bool(_OBJECT_ID_RE.match(value))
