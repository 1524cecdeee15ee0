import argparse, os
from bitpack import BitReader, BitWriter
from codec import compress
from huffman import PSEUDO_EOF, code_str
from metrics import compression_ratio, entropy_bits, mean_code_length

def main(argv=None):
    ap = argparse.ArgumentParser(description="Huffman-compress a file")
    ap.add_argument("--input", required=True, help="path to any file")
    ap.add_argument("--output", required=True, help="path to .hf")
    ap.add_argument("--debug", action="store_true", help="print code table statistics")
    args = ap.parse_args(argv)

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.input, "rb") as fin, open(args.output, "wb") as fout:
        meta = compress(BitReader(fin), BitWriter(fout))

    n_in = meta["symbols"]
    n_out = os.path.getsize(args.output)
    print(f"[encode] wrote {args.output}")
    print(f"[encode] in={n_in}B out={n_out}B ratio={compression_ratio(n_in, n_out):.3f}")
    if args.debug:
        counts, codes = meta["counts"], meta["codes"]
        # PSEUDO_EOF is not part of the data
        data_counts = counts.copy()
        data_counts[PSEUDO_EOF] = 0
        longest = max(L for _, L in codes.values())
        print(f"[encode] symbols={len(codes)} (incl. PSEUDO_EOF) longest_code={longest}")
        print(f"[encode] PSEUDO_EOF code={code_str(codes[PSEUDO_EOF]) or '(empty)'}")
        print(f"[encode] header_bits={meta['header_bits']} body_bits={meta['body_bits']}")
        print(f"[encode] entropy={entropy_bits(data_counts):.4f} "
              f"mean_code_len={mean_code_length(data_counts, codes):.4f} bits/byte")
    return meta

if __name__ == "__main__":
    main()
