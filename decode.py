#!/usr/bin/env python3
"""
DCT Image Decoder CLI

Usage:
    python decode.py --input <path> --output <path>

Example:
    python decode.py --input flower.dcc --output recovered.png
"""

import argparse
import sys
import os
import time

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from dctcodec.config import CodecConfig
from dctcodec.constants import OVERFLOW_POLICIES, OVERFLOW_CLAMP, ROUND_NEAREST, ROUND_TRUNCATE
from dctcodec.io import deserialize_encoded_image, channels_to_image, write_rgb_image
from dctcodec.codec import ImageDecoder


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='DCT Image Decoder - Recover images from .dcc files',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Decode to PNG
  python decode.py --input flower.dcc --output recovered.png

  # Fail on malformed run lengths instead of clamping
  python decode.py --input flower.dcc --output recovered.png --overflow raise --verbose
        """
    )

    # Required arguments
    parser.add_argument('--input', '-i', required=True,
                        help='Input compressed file path (.dcc)')
    parser.add_argument('--output', '-o', required=True,
                        help='Output image path (format from extension)')

    # Optional arguments
    parser.add_argument('--overflow', choices=OVERFLOW_POLICIES, default=OVERFLOW_CLAMP,
                        help='What to do when a run overflows its block (default: clamp)')
    parser.add_argument('--workers', '-j', type=int, default=None,
                        help='Decode channels on this many threads')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Verbose output')

    args = parser.parse_args(argv)

    # Check input file exists
    if not os.path.exists(args.input):
        print(f"Error: Input file not found: {args.input}", file=sys.stderr)
        return 1

    try:
        if args.verbose:
            print(f"Reading compressed file: {args.input}")

        start_time = time.time()

        with open(args.input, 'rb') as f:
            compressed = f.read()

        encoded, header = deserialize_encoded_image(compressed)
        width, height = header['width'], header['height']

        if args.verbose:
            print(f"  Compressed size: {len(compressed):,} bytes")
            print(f"  Size: {width}x{height}, {encoded.tile_count} tiles per channel")
            rounding = ROUND_NEAREST if header['round_nearest'] else ROUND_TRUNCATE
            print(f"  Encoder rounding: {rounding} (informational)")
            print("Decoding...")

        config = CodecConfig(
            overflow=args.overflow,
            max_skip=header['max_skip'],
            max_workers=args.workers,
        )
        decoder = ImageDecoder(config)
        pixels = channels_to_image(*decoder.recover_image(encoded, width, height))

        write_rgb_image(pixels, args.output)

        elapsed = time.time() - start_time

        if args.verbose:
            stats = decoder.last_stats
            print(f"\nReconstructed image:")
            print(f"  Shape: {pixels.shape}")
            print(f"  Encoded channels: {stats['encoded_bytes']:,} bytes, "
                  f"raw: {stats['raw_bytes']:,} bytes")
            print(f"  Decoding time: {elapsed:.2f}s")
            print(f"\nOutput written to: {args.output}")
        else:
            print(f"Decoded: {args.input} -> {args.output} ({width}x{height})")

    except ValueError as e:
        print(f"Error: Invalid compressed file - {e}", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
