"""
Command line front end: compress or decompress a file with Huffman codes
calculated from the frequency of bytes in the file itself.

How to run:
  huffpack -e FILE            writes FILE.huf
  huffpack -d FILE.huf        writes FILE (or FILE.huf.out if FILE exists)
  huffpack -t FILE            encode, decode and compare using scratch files
"""
import argparse
import logging
import os
import sys
import tempfile

from huffpack.errors import HuffmanError
from huffpack.huffman_coding import build_tree, char_frequency, code_table_report, codes_generation
from huffpack.huffman_compressor import HuffmanCompressor

SUFFIX = ".huf"

logger = logging.getLogger("huffpack")


def default_output(filename: str, decode: bool) -> str:
    if not decode:
        return filename + SUFFIX
    if filename.endswith(SUFFIX) and not os.path.exists(filename[:-len(SUFFIX)]):
        return filename[:-len(SUFFIX)]
    return filename + ".out"


def print_codes(filename: str) -> None:
    with open(filename, "rb") as f:
        data = f.read()
    codes = codes_generation(build_tree(char_frequency(data)))
    print("Huffman codes are:")
    for char, code in code_table_report(codes):
        print(f"'{char}' -> {code}")


def run_test(filename: str) -> bool:
    """Round-trip FILE through scratch files in a temporary directory and compare."""
    with tempfile.TemporaryDirectory(prefix="huffpack-") as scratch:
        base = os.path.join(scratch, os.path.basename(filename))
        huff = base + SUFFIX
        out = base + ".out"
        print(HuffmanCompressor.compress_file(filename, huff))
        print(HuffmanCompressor.decompress_file(huff, out))
        with open(filename, "rb") as a, open(out, "rb") as b:
            return a.read() == b.read()


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="huffpack", description=__doc__.strip().splitlines()[0])
    mode = p.add_mutually_exclusive_group(required=True)
    mode.add_argument(
        "-e", "--encode", action="store_true",
        help="compress FILE; the output holds both the code tree and the encoded bits",
    )
    mode.add_argument(
        "-d", "--decode", action="store_true",
        help="decompress FILE produced by --encode",
    )
    mode.add_argument(
        "-t", "--test", action="store_true",
        help="encode FILE, decode the result in a temporary directory and compare with FILE",
    )
    p.add_argument("file", metavar="FILE")
    p.add_argument("-o", "--output", help="output path (default: FILE.huf / FILE without .huf)")
    p.add_argument("--codes", action="store_true", help="print the code table of FILE (only with --encode)")
    p.add_argument("-v", "--verbose", action="store_true", help="log debug information")
    return p


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.codes and not args.encode:
        parser.error("--codes can only be used with -e/--encode")
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        if args.test:
            ok = run_test(args.file)
            print("Files match" if ok else "Files differ")
            return 0 if ok else 1

        if args.codes:
            print_codes(args.file)

        output = args.output or default_output(args.file, args.decode)
        if args.encode:
            print(HuffmanCompressor.compress_file(args.file, output))
        else:
            print(HuffmanCompressor.decompress_file(args.file, output))
        logger.info("Written %s", output)
    except (HuffmanError, OSError) as e:
        print(f"huffpack: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
