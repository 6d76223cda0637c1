#!/usr/bin/env python3
"""
Solve a square linear system exactly.

The system is given as an augmented matrix, rows separated by ';' and the
right-hand side after '|':

    python3 solve_system.py "2 1 -1 | 8; -3 -1 2 | -11; -2 1 2 | -3"

Prints the RREF of the augmented matrix and the solution vector, or reports
that the system has no unique solution.
"""

import argparse
import sys

from fracmatrix import AugmentedMatrix, Singular, determinant, solve, to_rref


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("system", help="augmented matrix, e.g. '1 2 | 3; 4 5 | 6'")
    parser.add_argument("--orientation", choices=["row", "column"], default=None)
    args = parser.parse_args()

    m = AugmentedMatrix.parse(args.system, args.orientation)
    print("System:")
    print(m)
    print()
    print(f"det = {determinant(m)}")

    try:
        x = solve(m)
    except Singular as exc:
        print(f"No unique solution: {exc}")
        print("RREF reached:")
        print(to_rref(m.copy()))
        sys.exit(1)

    print("RREF:")
    print(to_rref(m.copy()))
    print()
    for i, v in enumerate(x, start=1):
        print(f"  x{i} = {v}")


if __name__ == "__main__":
    main()
