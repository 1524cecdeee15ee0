from bitpack import EOF
from errors import MalformedHeaderError
from huffman import BITS_PER_INT, BITS_PER_WORD, PSEUDO_EOF, Node

MAGIC = 0xFACE8200   # low byte carries the version
VERSION = 1          # 1 = pre-order tree header
HUFF_TREE = MAGIC | VERSION

# Stream layout (bit-packed, MSB-first, no alignment between parts):
# magic(32) tree(pre-order) payload(codes..., PSEUDO_EOF code) zero-pad to byte
#
# Tree, pre-order:
#   internal -> 0, left, right
#   leaf     -> 1, sym(BITS_PER_WORD + 1)
SYM_BITS = BITS_PER_WORD + 1

def write_tree(w, node: Node):
    if node.is_leaf:
        w.write_bits(1, 1)
        w.write_bits(SYM_BITS, node.sym)
    else:
        w.write_bits(1, 0)
        write_tree(w, node.left)
        write_tree(w, node.right)

def read_tree(r, depth: int = 0) -> Node:
    bit = r.read_bits(1)
    if bit == EOF:
        raise MalformedHeaderError("Malformed header: tree truncated")
    if bit == 0:
        # a tree over PSEUDO_EOF + 1 leaves is never deeper than PSEUDO_EOF
        if depth >= PSEUDO_EOF:
            raise MalformedHeaderError("Malformed header: tree too deep")
        left = read_tree(r, depth + 1)
        right = read_tree(r, depth + 1)
        return Node(freq=0, left=left, right=right)
    sym = r.read_bits(SYM_BITS)
    if sym == EOF:
        raise MalformedHeaderError("Malformed header: leaf symbol truncated")
    if sym > PSEUDO_EOF:
        raise MalformedHeaderError(f"Malformed header: bad leaf symbol {sym}")
    return Node(freq=0, sym=sym)

def write_header(w, root: Node):
    w.write_bits(BITS_PER_INT, HUFF_TREE)
    write_tree(w, root)

def read_header(r) -> Node:
    magic = r.read_bits(BITS_PER_INT)
    if magic == EOF:
        raise MalformedHeaderError("Malformed header: too short for magic number")
    if magic & ~0xFF != MAGIC:
        raise MalformedHeaderError(f"Bad magic number: 0x{magic:08x}")
    if magic != HUFF_TREE:
        raise MalformedHeaderError(f"Unsupported version: {magic & 0xFF}")
    root = read_tree(r)
    if root.is_leaf and root.sym != PSEUDO_EOF:
        raise MalformedHeaderError(f"Malformed header: root is literal leaf {root.sym}")
    return root
