HASH_MULTIPLIER = 65599

_WORD_MASK = (1 << 64) - 1


def hash_key(key: str, bucket_count: int) -> int:
    """Return a bucket index in [0, bucket_count) for key.

    Every UTF-8 byte of the key takes part, embedded NULs included.
    The accumulator wraps at 64 bits.
    """
    if not isinstance(key, str):
        raise TypeError("key must be str", key)
    if bucket_count <= 0:
        raise ValueError("bucket count must be positive", bucket_count)

    hash = 0
    for byte in key.encode("utf-8", "surrogatepass"):
        hash = (hash * HASH_MULTIPLIER + byte) & _WORD_MASK
    return hash % bucket_count
