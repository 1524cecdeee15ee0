from __future__ import annotations
import heapq
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np

from bitpack import EOF
from errors import TreeConstructionError

BITS_PER_WORD = 8
BITS_PER_INT = 32
ALPH_SIZE = 1 << BITS_PER_WORD
PSEUDO_EOF = ALPH_SIZE   # end-of-stream symbol, never a byte value

Code = Tuple[int, int]  # (code_int, code_len)

@dataclass
class Node:
    freq: int
    sym: Optional[int] = None
    left: Optional["Node"] = None
    right: Optional["Node"] = None
    seq: int = 0  # tie-break between equal weights

    def __lt__(self, other):  # for heapq
        return (self.freq, self.seq) < (other.freq, other.seq)

    @property
    def is_leaf(self) -> bool:
        return self.left is None and self.right is None

def count_frequencies(reader) -> np.ndarray:
    """
    Read every byte from reader (a BitReader) and count it.
    Returns a read-only int64 array of length ALPH_SIZE + 1; the
    PSEUDO_EOF slot is 1 when at least one byte was read, else 0.
    The reader is left at end of input; memory stays bounded by
    reader.chunk_size.
    """
    counts = np.zeros(ALPH_SIZE + 1, dtype=np.int64)
    block = bytearray()
    seen = False
    while True:
        b = reader.read_bits(BITS_PER_WORD)
        if b != EOF:
            block.append(b)
        if block and (b == EOF or len(block) >= reader.chunk_size):
            counts += np.bincount(np.frombuffer(bytes(block), dtype=np.uint8),
                                  minlength=ALPH_SIZE + 1)
            block.clear()
            seen = True
        if b == EOF:
            break
    if seen:
        counts[PSEUDO_EOF] = 1
    counts.setflags(write=False)
    return counts

def _leaves(freqs):
    if isinstance(freqs, Mapping):
        items = sorted((int(s), int(f)) for s, f in freqs.items())
    else:
        items = list(enumerate(int(f) for f in np.asarray(freqs).ravel()))
    out = []
    for s, f in items:
        if not (0 <= s <= PSEUDO_EOF):
            raise TreeConstructionError(f"symbol out of range: {s}")
        if f < 0:
            raise TreeConstructionError(f"negative count for symbol {s}: {f}")
        if f > 0:
            out.append((s, f))
    return out

def build_tree(freqs) -> Node:
    """
    Greedy Huffman merge over every symbol with a positive count.

    freqs is a count array indexed by symbol or a {symbol: count} mapping.
    Equal weights are broken by seq: leaves are numbered from the highest
    symbol down (PSEUDO_EOF first), merged nodes continue the numbering.
    The lighter of each popped pair becomes the right child. A table with
    a single positive entry yields a lone leaf.
    """
    leaves = _leaves(freqs)
    if not leaves:
        raise TreeConstructionError("cannot build a tree from an empty frequency table")
    pq = [Node(freq=f, sym=s, seq=i) for i, (s, f) in enumerate(reversed(leaves))]
    heapq.heapify(pq)
    seq = len(pq)
    while len(pq) > 1:
        lo = heapq.heappop(pq)
        hi = heapq.heappop(pq)
        heapq.heappush(pq, Node(freq=lo.freq + hi.freq, left=hi, right=lo, seq=seq))
        seq += 1
    return pq[0]

def build_codebook(node: Node, code: int = 0, length: int = 0,
                   out: Optional[Dict[int, Code]] = None) -> Dict[int, Code]:
    """sym -> (code_int, code_len); left edge is 0, right edge is 1."""
    if out is None:
        if node is None:
            raise ValueError("cannot derive codes from an empty tree")
        out = {}
    if node.is_leaf:
        out[node.sym] = (code, length)
        return out
    if node.left is None or node.right is None:
        raise ValueError("malformed tree: internal node with one child")
    build_codebook(node.left, code << 1, length + 1, out)
    build_codebook(node.right, (code << 1) | 1, length + 1, out)
    return out

def code_str(code: Code) -> str:
    c, L = code
    return format(c, f"0{L}b") if L else ""
