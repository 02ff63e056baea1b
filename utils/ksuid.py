"""
KSUID - K-Sortable Unique Identifier.

Used to tag room snapshots and errors so a console message can be matched
to its log line. Layout: 4 byte big-endian seconds since the KSUID epoch,
then a 16 byte random payload, rendered as 27 base62 characters.
"""

import secrets
import time

KSUID_EPOCH = 1400000000
KSUID_LENGTH = 27
PAYLOAD_BYTES = 16
ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def _base62(value):
    digits = []
    while value:
        value, rem = divmod(value, 62)
        digits.append(ALPHABET[rem])
    return "".join(reversed(digits))


def generate_ksuid(now=None):
    """Return a new 27 character id; ids from later seconds sort after earlier ones."""
    seconds = int(time.time() if now is None else now) - KSUID_EPOCH
    raw = seconds.to_bytes(4, "big") + secrets.token_bytes(PAYLOAD_BYTES)
    return _base62(int.from_bytes(raw, "big")).rjust(KSUID_LENGTH, "0")
