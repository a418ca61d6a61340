"""
Performance benchmarks for the barcode engine.
"""

import time
import statistics
from typing import Tuple

from barcode_engine import (
    CharacterSet,
    RenderOptions,
    encoder_for,
    generate_svg,
    image_bytes,
)


def benchmark(func, iterations: int = 1000) -> Tuple[float, float, float]:
    """
    Run a benchmark and return timing statistics.

    Returns:
        (mean_ms, min_ms, max_ms)
    """
    times = []

    for _ in range(iterations):
        start = time.perf_counter()
        func()
        elapsed = time.perf_counter() - start
        times.append(elapsed * 1000)  # Convert to ms

    return (
        statistics.mean(times),
        min(times),
        max(times)
    )


def run_benchmarks():
    """Run all benchmarks and print results."""
    print("=" * 60)
    print("Barcode Engine Benchmarks")
    print("=" * 60)
    print()

    test_cases = [
        ("EAN-13", "ean13", "750103131130", {}),
        ("EAN-8", "ean8", "5512345", {}),
        ("Code39 + checksum", "code39", "TEST8052", {"checksum": True}),
        ("Code93", "code93", "TEST93", {}),
        ("Code128 (B)", "code128", "Hello, World!", {"character_set": CharacterSet.B}),
        ("Code128 (C, 40 digits)", "code128", "12" * 20, {"character_set": CharacterSet.C}),
        ("ITF (255 digits)", "itf", "7" * 255, {}),
    ]

    print("Construct + encode:")
    print("-" * 60)

    for name, symbology, data, options in test_cases:
        mean, min_t, max_t = benchmark(
            lambda s=symbology, d=data, o=options: encoder_for(s, d, **o).encode(),
            iterations=1000
        )
        print(f"  {name:30} {mean:8.3f}ms avg ({min_t:.3f}-{max_t:.3f})")

    print()
    print("Rendering (EAN-13):")
    print("-" * 60)

    bits = encoder_for("ean13", "750103131130").encode()
    options = RenderOptions(height=80, xdim=3)

    for name, render in [
        ("SVG", lambda: generate_svg(bits, options)),
        ("PNG", lambda: image_bytes(bits, options, "PNG")),
    ]:
        mean, min_t, max_t = benchmark(render, iterations=100)
        print(f"  {name:30} {mean:8.3f}ms avg ({min_t:.3f}-{max_t:.3f})")

    print()
    print("Throughput test (1000 iterations):")
    print("-" * 60)

    start = time.perf_counter()
    for _ in range(1000):
        encoder_for("code128", "HELLOĆ1234", character_set=CharacterSet.A).encode()
    total = time.perf_counter() - start

    throughput = 1000 / total
    print(f"  Throughput: {throughput:.0f} encodes/second")
    print(f"  Total time: {total:.3f}s for 1000 encodes")

    print()
    print("=" * 60)


if __name__ == "__main__":
    run_benchmarks()
