import argparse, os
from bitpack import BitReader, BitWriter
from codec import decompress

def main(argv=None):
    ap = argparse.ArgumentParser(description="Restore a Huffman-compressed file")
    ap.add_argument("--input", required=True, help="path to .hf")
    ap.add_argument("--output", required=True, help="path to restored file")
    ap.add_argument("--debug", action="store_true", help="print header/payload sizes")
    args = ap.parse_args(argv)

    os.makedirs(os.path.dirname(args.output) or ".", exist_ok=True)
    with open(args.input, "rb") as fin, open(args.output, "wb") as fout:
        meta = decompress(BitReader(fin), BitWriter(fout))

    print(f"[decode] wrote {args.output} bytes={meta['symbols']}")
    if args.debug:
        print(f"[decode] leaves={len(meta['codes'])} "
              f"header_bits={meta['header_bits']} body_bits={meta['body_bits']}")
    return meta

if __name__ == "__main__":
    main()
