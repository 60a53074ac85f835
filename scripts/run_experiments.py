#!/usr/bin/env python3
"""
Run experiments for DCT codec evaluation.

Compares truncating and rounding quantization on synthetic images (or on
images passed on the command line) and writes metrics.json plus the
reconstructed PNGs.
"""

import sys
import os
import json
from datetime import datetime

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import numpy as np

from dctcodec.config import CodecConfig
from dctcodec.constants import ROUNDING_MODES
from dctcodec.codec import ImageEncoder, ImageDecoder
from dctcodec.io import (
    read_rgb_image, write_rgb_image, image_to_channels, channels_to_image,
    serialize_encoded_image,
)
from dctcodec.metrics import calculate_rmse, calculate_psnr


def synthetic_images(size: int = 128) -> dict:
    """Gradient, checkerboard and noise test images."""
    y, x = np.mgrid[0:size, 0:size]
    gradient = np.stack([x, y, (x + y) // 2], axis=-1) * (255 / (size - 1))
    checker = (((x // 8) + (y // 8)) % 2 * 255)
    checker = np.stack([checker, 255 - checker, checker], axis=-1)
    noise = np.random.default_rng(42).integers(0, 256, (size, size, 3))
    return {
        'gradient': gradient.astype(np.uint8),
        'checkerboard': checker.astype(np.uint8),
        'noise': noise.astype(np.uint8),
    }


def run_experiment(pixels: np.ndarray, rounding: str):
    """Encode/decode one image with one rounding mode."""
    height, width = pixels.shape[:2]
    config = CodecConfig(rounding=rounding)

    encoder = ImageEncoder(config)
    decoder = ImageDecoder(config)

    encoded = encoder.compress_image(*image_to_channels(pixels), width=width, height=height)
    container = serialize_encoded_image(encoded, width, height,
                                        round_nearest=rounding == 'round')
    recovered = channels_to_image(*decoder.recover_image(encoded, width, height))

    stats = encoder.last_stats
    return {
        'rounding': rounding,
        'rmse': round(calculate_rmse(pixels, recovered), 4),
        'psnr': round(calculate_psnr(pixels, recovered), 2),
        'raw_bytes': stats['raw_bytes'],
        'encoded_bytes': stats['encoded_bytes'],
        'container_bytes': len(container),
        'compression_ratio': round(stats['compression_ratio'], 2),
        'space_savings_percent': round(stats['space_savings_percent'], 2),
    }, recovered


def main():
    """Run all experiments."""
    print("=" * 60)
    print("DCT CODEC - EXPERIMENT RUNNER")
    print("=" * 60)

    results_dir = "results"
    images_dir = os.path.join(results_dir, "images")
    os.makedirs(images_dir, exist_ok=True)

    if len(sys.argv) > 1:
        images = {os.path.splitext(os.path.basename(p))[0]: read_rgb_image(p)
                  for p in sys.argv[1:]}
    else:
        images = synthetic_images()

    all_results = {
        'timestamp': datetime.now().isoformat(),
        'images': {},
    }

    for name, pixels in images.items():
        print(f"\n{name}: {pixels.shape[1]}x{pixels.shape[0]}")
        write_rgb_image(pixels, os.path.join(images_dir, f"{name}_original.png"))

        image_results = []
        for rounding in ROUNDING_MODES:
            metrics, recovered = run_experiment(pixels, rounding)
            image_results.append(metrics)
            write_rgb_image(recovered, os.path.join(images_dir, f"{name}_{rounding}.png"))
            print(f"  {rounding:8s}: PSNR={metrics['psnr']:.2f}dB, "
                  f"RMSE={metrics['rmse']:.2f}, CR={metrics['compression_ratio']:.2f}x, "
                  f"saved={metrics['space_savings_percent']:.1f}%")

        all_results['images'][name] = image_results

    metrics_path = os.path.join(results_dir, "metrics.json")
    with open(metrics_path, 'w') as f:
        json.dump(all_results, f, indent=2)

    print(f"\nMetrics written to: {metrics_path}")


if __name__ == '__main__':
    main()
