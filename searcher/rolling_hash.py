import logging


def _codes(seq):
    # bytes index to ints already; str needs ord()
    if isinstance(seq, (bytes, bytearray, memoryview)):
        return bytes(seq)
    if isinstance(seq, str):
        return [ord(ch) for ch in seq]
    return list(seq)


def rabin_karp_search(text, pattern, base, modulus):
    """
    Returns every offset where pattern occurs in text, in ascending order.
    Overlapping occurrences are all reported.

    Hash equality only nominates a candidate window; each one is compared
    against the pattern before it is accepted.
    """
    m = len(pattern)
    n = len(text)
    matches = []

    if m == 0 or m > n:
        return matches

    text_codes = _codes(text)
    pattern_codes = _codes(pattern)

    # base^(m-1) mod modulus
    window_scaler = 1
    for _ in range(m - 1):
        window_scaler = (window_scaler * base) % modulus

    pattern_hash = 0
    window_hash = 0
    for i in range(m):
        pattern_hash = (base * pattern_hash + pattern_codes[i]) % modulus
        window_hash = (base * window_hash + text_codes[i]) % modulus

    last = n - m
    for i in range(last + 1):
        if pattern_hash == window_hash and text[i:i + m] == pattern:
            matches.append(i)

        if i < last:
            window_hash = (base * (window_hash - text_codes[i] * window_scaler) + text_codes[i + m]) % modulus
            if window_hash < 0:
                window_hash += modulus

    return matches


def search(text, pattern, base, modulus):
    return rabin_karp_search(text, pattern, base, modulus)


class RollingHashMatcher:
    def __init__(self, base=256, modulus=101):
        self.base = base
        self.modulus = modulus
        self.logger = logging.getLogger(__name__)

    def search(self, text, pattern, base=None, modulus=None):
        base = self.base if base is None else base
        modulus = self.modulus if modulus is None else modulus
        matches = rabin_karp_search(text, pattern, base, modulus)
        self.logger.debug(f"Rolling hash (base={base}, modulus={modulus}) found {len(matches)} matches")
        return matches
