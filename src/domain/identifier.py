import secrets
from typing import Callable
from domain.constants import ServiceConfig
from domain.errors import EntropyError

RandomSource = Callable[[int], bytes]

def generate_id(length: int, random_bytes: RandomSource = secrets.token_bytes) -> str:
    """
    Build a random identifier of `length` characters over a 62 symbol alphabet.

    Each random byte picks ``ALPHABET[byte % 62]``. 256 is not a multiple of 62,
    so the first 8 symbols come up slightly more often. That is fine for opaque
    identifiers but this must not be used for secrets.
    """
    alphabet = ServiceConfig.ID_ALPHABET
    try:
        data = random_bytes(length)
    except OSError as e:
        raise EntropyError(f"Secure random source failed: {e}") from e

    if len(data) < length:
        raise EntropyError(f"Secure random source returned {len(data)} of {length} bytes")

    return ''.join(alphabet[b % len(alphabet)] for b in data[:length])
