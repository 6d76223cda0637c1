#!/usr/bin/env python3
"""
Step-by-step Gauss-Jordan reduction.

Reduces a matrix to RREF and prints every elementary row operation, then
optionally draws input / REF / RREF side by side.

Usage: python3 reduce_with_transcript.py "1 2 3; 4 5 6; 7 8 9" [--debug] [--draw out.png]
"""

import argparse

from fracmatrix import Matrix, count_steps, is_rref, simplify_matrix, to_rref_with_transcript
from fracmatrix.reduce.steps import TranscriptSink
from fracmatrix.viz.draw import draw_reduction


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("matrix", help="rows separated by ';', e.g. '1 2; 3 4'")
    parser.add_argument("--debug", action="store_true", help="print factors in debug form")
    parser.add_argument("--simplify", action="store_true", help="divide each row by its gcd first")
    parser.add_argument("--draw", metavar="PNG", default=None)
    args = parser.parse_args()

    style = "debug" if args.debug else "display"
    m = Matrix.parse(args.matrix)
    print(m)
    print()

    if args.simplify:
        sink = TranscriptSink(style)
        simplify_matrix(m, sink)
        for line in sink.lines:
            print(line)

    rref, transcript = to_rref_with_transcript(m.copy(), style)
    for line in transcript:
        print(line)
    print()
    print(rref)
    print(f"\n{count_steps(transcript)} operations, RREF: {is_rref(rref)}")

    if args.draw:
        draw_reduction(m, save_path=args.draw, style=style)
        print(f"Wrote {args.draw}")


if __name__ == "__main__":
    main()
