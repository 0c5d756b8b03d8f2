# -*- coding: utf-8 -*-
"""
demo.py
  - Console driver for the GF(2) sparse matrix engine.
  - Parity pair: a random sparse P gives
        GT = (I | P)^T,   H = (P^T | I),
    and H * GT = P^T + P^T = 0 over GF(2).
  - Inverse pair: random invertible A and its inverse B from mirrored
    column operations, checked with A * B = I.
  - Writes H.png, GT.png, A.png and B.png unless --no-images is given.
"""

import argparse
from pathlib import Path
from typing import Optional, Sequence

import numpy as np

from .invertible import InvertibleBuilder
from .render import write_image
from .sparse import (SparseMatrix, concatenate, identity_matrix, min_max,
                     multiply, random_sparse_matrix, transpose)


def parity_pair(P: SparseMatrix) -> tuple[SparseMatrix, SparseMatrix]:
    """
    Builds (H, GT) from a square sparse matrix P.

    Args:
        P: (N, N) matrix.

    Returns:
        H of shape (N, 2N) and GT of shape (2N, N).
    """
    I = identity_matrix(P.rows)
    GT = transpose(concatenate(I, P))
    H = concatenate(transpose(P), identity_matrix(P.cols))
    return H, GT


def report_weights(name: str, M: SparseMatrix) -> None:
    """Prints the Hamming weight and the row/column degree range of M."""
    print(f"[weights] HammingWeight of {name} = {M.hamming_weight()}")
    lo, hi = min_max(M.hamming_weights_of_rows())
    print(f"[weights] (Min, Max) of HammingWeightsOfRows of {name} = {lo} {hi}")
    lo, hi = min_max(M.hamming_weights_of_cols())
    print(f"[weights] (Min, Max) of HammingWeightsOfCols of {name} = {lo} {hi}")


def check_parity_product(H: SparseMatrix, GT: SparseMatrix) -> bool:
    """
    Prints the weight of H * GT and returns True iff it is zero.
    """
    weight = multiply(H, GT).hamming_weight()
    print(f"[product] HammingWeight of H*GT = {weight}")
    return weight == 0


def check_inverse(A: SparseMatrix, B: SparseMatrix) -> bool:
    AB = multiply(A, B)
    ok = AB.is_identity()
    print(f"[inverse] A*B is identity = {ok} (weight {AB.hamming_weight()})")
    return ok


def run_parity(N: int, n_ones: int, rng: np.random.Generator,
               out_dir: Optional[Path] = None) -> bool:
    P = random_sparse_matrix(N, N, n_ones, rng=rng)
    report_weights("P", P)
    H, GT = parity_pair(P)
    if out_dir is not None:
        write_image(GT, out_dir / "GT.png")
        write_image(H, out_dir / "H.png")
    return check_parity_product(H, GT)


def run_inverse(N: int, rng: np.random.Generator,
                out_dir: Optional[Path] = None) -> bool:
    builder = InvertibleBuilder(N, rng=rng).scramble()
    print(f"[inverse] applied {len(builder.log)} column operations to {N}x{N} identity")
    A, B = builder.matrix(), builder.inverse()
    report_weights("A", A)
    report_weights("B", B)
    if out_dir is not None:
        write_image(A, out_dir / "A.png")
        write_image(B, out_dir / "B.png")
    return check_inverse(A, B)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="gf2-sparse",
                                     description="GF(2) sparse matrix demonstration.")
    parser.add_argument("--size", "-N", type=int, default=500,
                        help="dimension N of the square matrices (default: 500)")
    parser.add_argument("--ones", type=int, default=None,
                        help="random insertions into P (default: N)")
    parser.add_argument("--seed", type=int, default=None,
                        help="random seed (default: fresh entropy)")
    parser.add_argument("--output-dir", type=Path, default=Path("."),
                        help="directory for the PNG dumps (default: .)")
    parser.add_argument("--no-images", action="store_true", help="do not write PNG files")
    parser.add_argument("--skip-parity", action="store_true", help="skip the (H, GT) pair")
    parser.add_argument("--skip-inverse", action="store_true", help="skip the (A, B) pair")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Runs the demonstration.

    Returns:
        0 when every check passed, 1 otherwise.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    N = args.size
    if N < 1:
        parser.error(f"--size must be positive, got {N}")
    if args.ones is not None and args.ones < 0:
        parser.error(f"--ones must be non-negative, got {args.ones}")
    rng = np.random.default_rng(args.seed)
    out_dir = None
    if not args.no_images:
        out_dir = args.output_dir
        out_dir.mkdir(parents=True, exist_ok=True)

    ok = True
    if not args.skip_parity:
        n_ones = N if args.ones is None else args.ones
        ok = run_parity(N, n_ones, rng, out_dir) and ok
    if not args.skip_inverse:
        ok = run_inverse(N, rng, out_dir) and ok
    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
