import io
from typing import Dict

import numpy as np

from bitpack import EOF, BitReader, BitWriter
from bitstream import read_header, write_header
from errors import HuffError, MalformedHeaderError, TruncatedStreamError
from huffman import (BITS_PER_INT, BITS_PER_WORD, PSEUDO_EOF, Code, Node,
                     build_codebook, build_tree, count_frequencies)

def write_code(w, code: int, length: int):
    # BitWriter takes at most 32 bits per call
    while length > BITS_PER_INT:
        length -= BITS_PER_INT
        w.write_bits(BITS_PER_INT, (code >> length) & 0xFFFFFFFF)
    if length > 0:
        w.write_bits(length, code & ((1 << length) - 1))

def write_compressed_bits(codes: Dict[int, Code], r, w) -> int:
    """Encode every byte left in r, then the PSEUDO_EOF code. Returns #bytes."""
    n = 0
    while True:
        b = r.read_bits(BITS_PER_WORD)
        if b == EOF:
            break
        if b not in codes:
            raise HuffError(f"byte 0x{b:02x} has no code (input changed between passes?)")
        write_code(w, *codes[b])
        n += 1
    write_code(w, *codes[PSEUDO_EOF])
    return n

def read_compressed_bits(root: Node, r, w) -> int:
    """Walk the tree bit by bit until PSEUDO_EOF. Returns #bytes written."""
    if root.is_leaf:
        # empty input: the tree is the PSEUDO_EOF leaf alone, no payload bits
        if root.sym != PSEUDO_EOF:
            raise MalformedHeaderError(f"Malformed header: root is literal leaf {root.sym}")
        return 0
    n = 0
    cur = root
    while True:
        bit = r.read_bits(1)
        if bit == EOF:
            raise TruncatedStreamError("Malformed stream: no PSEUDO_EOF before end of input")
        cur = cur.right if bit else cur.left
        if cur.is_leaf:
            if cur.sym == PSEUDO_EOF:
                return n
            w.write_bits(BITS_PER_WORD, cur.sym)
            n += 1
            cur = root

def compress(r: BitReader, w: BitWriter):
    """
    Two passes over r: count, then header + payload into w.
    w is closed on return and on failure.
    Returns meta: counts, codes, symbols, header_bits, body_bits, bits_written
    """
    try:
        counts = count_frequencies(r)
        if counts[PSEUDO_EOF] == 0:
            # empty input -> tree is the PSEUDO_EOF leaf alone
            counts = np.zeros_like(counts)
            counts[PSEUDO_EOF] = 1
        root = build_tree(counts)
        codes = build_codebook(root)

        write_header(w, root)
        header_bits = w.bits_written

        r.reset()
        nsym = write_compressed_bits(codes, r, w)
    finally:
        w.close()

    return dict(
        counts=counts, codes=codes, symbols=nsym,
        header_bits=header_bits,
        body_bits=w.bits_written - header_bits,
        bits_written=w.bits_written,
    )

def decompress(r: BitReader, w: BitWriter):
    """
    Read header + payload from r, write the original bytes into w.
    w is closed on return and on failure.
    Returns meta: codes, symbols, header_bits, body_bits
    """
    try:
        root = read_header(r)
        header_bits = r.bits_read
        nsym = read_compressed_bits(root, r, w)
    finally:
        w.close()

    return dict(
        codes=build_codebook(root), symbols=nsym,
        header_bits=header_bits,
        body_bits=r.bits_read - header_bits,
    )

def compress_bytes(data: bytes) -> bytes:
    out = io.BytesIO()
    compress(BitReader(io.BytesIO(data)), BitWriter(out))
    return out.getvalue()

def decompress_bytes(blob: bytes) -> bytes:
    out = io.BytesIO()
    decompress(BitReader(io.BytesIO(blob)), BitWriter(out))
    return out.getvalue()
