import argparse, os
import numpy as np
import matplotlib.pyplot as plt
from bitpack import BitReader
from huffman import ALPH_SIZE, PSEUDO_EOF, build_codebook, build_tree, count_frequencies

def plot_code_lengths(counts, codes, path):
    """Bar chart of byte counts, code length on a twin axis."""
    syms = np.arange(ALPH_SIZE + 1)
    lengths = np.zeros(ALPH_SIZE + 1, dtype=np.int64)
    for sym, (_, L) in codes.items():
        lengths[sym] = L
    used = lengths > 0

    fig, ax = plt.subplots(figsize=(10, 3))
    ax.bar(syms, counts, width=1.0, color="tab:gray")
    ax.set_xlabel("symbol (256 = PSEUDO_EOF)")
    ax.set_ylabel("count")
    ax.set_xlim(-1, PSEUDO_EOF + 1)
    ax2 = ax.twinx()
    ax2.plot(syms[used], lengths[used], "r.", markersize=4)
    ax2.set_ylabel("code length (bits)", color="r")

    fig.tight_layout()
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    fig.savefig(path, dpi=300)
    plt.close(fig)

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--input", required=True, help="file to analyse")
    ap.add_argument("--output", required=True, help="path to .png")
    args = ap.parse_args(argv)

    with open(args.input, "rb") as f:
        counts = count_frequencies(BitReader(f))
    if not counts.any():
        raise ValueError("Input file is empty")
    codes = build_codebook(build_tree(counts))
    plot_code_lengths(counts, codes, args.output)
    print(f"[plot] wrote {args.output}")

if __name__ == "__main__":
    main()
