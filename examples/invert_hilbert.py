#!/usr/bin/env python3
"""
Exact inverses of Hilbert matrices.

H_n[i][j] = 1 / (i + j + 1) is notoriously ill-conditioned in floating
point, but over the rationals the inverse is exact and integral.  Each
inverse is checked by multiplying back to the identity.

Usage: python3 invert_hilbert.py [--max-n 6] [--orientation column] [--show]
"""

import argparse
import logging
import time

from fracmatrix import Matrix, Rational, determinant, inverse_with_transcript
from fracmatrix.reduce.steps import count_steps


def hilbert(n, orientation=None):
    return Matrix.from_rows(
        [[Rational(1, r + c + 1) for c in range(n)] for r in range(n)],
        orientation,
    )


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--max-n", type=int, default=6)
    parser.add_argument("--orientation", choices=["row", "column"], default=None)
    parser.add_argument("--show", action="store_true", help="print each inverse")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    print(f"{'n':>3} {'steps':>6} {'det(H)':>28} {'check':>6} {'time':>8}")
    print("-" * 56)
    for n in range(1, args.max_n + 1):
        h = hilbert(n, args.orientation)
        t0 = time.time()
        inv, transcript = inverse_with_transcript(h)
        dt = time.time() - t0
        ok = (h @ inv).is_identity()
        det = determinant(h)
        print(f"{n:>3} {count_steps(transcript):>6} {str(det):>28} {'ok' if ok else 'FAIL':>6} {dt:>7.3f}s")
        if args.show:
            print(inv)
            print()


if __name__ == "__main__":
    main()
