import numpy as np

def entropy_bits(counts: np.ndarray) -> float:
    """Shannon entropy in bits/symbol of a count table."""
    c = np.asarray(counts, dtype=np.float64)
    c = c[c > 0]
    if c.size == 0:
        return 0.0
    p = c / c.sum()
    return float(-(p * np.log2(p)).sum())

def mean_code_length(counts: np.ndarray, codes) -> float:
    """Count-weighted average code length in bits/symbol."""
    c = np.asarray(counts, dtype=np.float64)
    total = c.sum()
    if total == 0:
        return 0.0
    lengths = np.zeros_like(c)
    for sym, (_, L) in codes.items():
        lengths[sym] = L
    return float((c * lengths).sum() / total)

def compression_ratio(n_in: int, n_out: int) -> float:
    if n_out == 0:
        return float("inf")
    return float(n_in) / float(n_out)
