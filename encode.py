#!/usr/bin/env python3
"""
DCT Image Encoder CLI

Usage:
    python encode.py --input <path> --output <path>

Example:
    python encode.py --input data/flower.png --output flower.dcc
"""

import argparse
import sys
import os
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dctcodec.config import CodecConfig
from dctcodec.constants import MAX_SKIP, ROUNDING_MODES, ROUND_TRUNCATE, ROUND_NEAREST
from dctcodec.io import read_rgb_image, image_to_channels, serialize_encoded_image
from dctcodec.codec import ImageEncoder


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='DCT Image Encoder - 8x8 DCT, table quantization, run-length coding',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Encode a PNG
  python encode.py --input data/flower.png --output flower.dcc

  # Round instead of truncating during quantization
  python encode.py --input data/flower.png --output flower.dcc --rounding round --verbose
        """
    )

    # Required arguments
    parser.add_argument('--input', '-i', required=True,
                        help='Input image path (any format Pillow reads)')
    parser.add_argument('--output', '-o', required=True,
                        help='Output compressed file path (.dcc)')

    # Optional arguments
    parser.add_argument('--rounding', '-r', choices=ROUNDING_MODES, default=ROUND_TRUNCATE,
                        help='Quantization rounding mode (default: truncate)')
    parser.add_argument('--max-skip', type=int, default=MAX_SKIP,
                        help=f'Zero run length that forces a flush pair (default: {MAX_SKIP})')
    parser.add_argument('--workers', '-j', type=int, default=None,
                        help='Encode channels on this many threads')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')

    args = parser.parse_args(argv)

    # Check input file exists
    if not os.path.exists(args.input):
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    try:
        config = CodecConfig(rounding=args.rounding, max_skip=args.max_skip,
                             max_workers=args.workers)

        if args.verbose:
            print(f"Reading input: {args.input}")

        start_time = time.time()

        pixels = read_rgb_image(args.input)
        height, width = pixels.shape[:2]

        if args.verbose:
            print(f"  Size: {width}x{height}")
            print(f"  Rounding: {config.rounding}, max skip: {config.max_skip}")

        # Encode
        encoder = ImageEncoder(config)
        encoded = encoder.compress_image(*image_to_channels(pixels), width=width, height=height)

        compressed = serialize_encoded_image(
            encoded, width, height,
            max_skip=config.max_skip,
            round_nearest=config.rounding == ROUND_NEAREST,
        )

        # Write output
        with open(args.output, 'wb') as f:
            f.write(compressed)

        elapsed = time.time() - start_time
        stats = encoder.last_stats

        if args.verbose:
            print(f"\nResults:")
            print(f"  Raw image data:    {stats['raw_bytes']:,} bytes")
            print(f"  Encoded channels:  {stats['encoded_bytes']:,} bytes "
                  f"({stats['pair_count']:,} pairs)")
            print(f"  Container size:    {len(compressed):,} bytes")
            print(f"  Compression ratio: {stats['compression_ratio']:.2f}x")
            print(f"  Space savings:     {stats['space_savings_percent']:.1f}%")
            print(f"  Encoding time: {elapsed:.2f}s")
            print(f"\nOutput written to: {args.output}")
        else:
            print(f"Encoded: {args.input} -> {args.output} "
                  f"({stats['compression_ratio']:.1f}x, "
                  f"{stats['space_savings_percent']:.1f}% saved)")

    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
