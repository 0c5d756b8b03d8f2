# -*- coding: utf-8 -*-
"""
render.py
  - PNG dumps of the one-pattern of a GF(2) sparse matrix.
  - write_image(): one pixel per entry, ones white on black.
  - save_sparse_matrix_png(): matplotlib spy plot with labelled axes.
"""

from pathlib import Path
from typing import Union

import numpy as np
import matplotlib.pyplot as plt

from .sparse import SparseMatrix
from .vectors import ColumnVectorMatrix

Renderable = Union[SparseMatrix, ColumnVectorMatrix]


def _as_sparse(M: Renderable) -> SparseMatrix:
    if isinstance(M, ColumnVectorMatrix):
        return M.convert_matrix()
    return M


def pixel_array(M: Renderable) -> np.ndarray:
    """
    Rasterizes the canonical ones of M.

    Returns:
        (rows, cols) uint8 array, 255 at the ones and 0 elsewhere.
    """
    M = _as_sparse(M)
    img = np.zeros((M.rows, M.cols), dtype=np.uint8)
    for row, col in M:
        img[row, col] = 255
    return img


def write_image(M: Renderable, filename: Union[str, Path], verbose: bool = True) -> Path:
    """
    Writes a grayscale PNG with one pixel per matrix entry.

    Args:
        M: Matrix to dump.
        filename: Output PNG path.
        verbose: Print the written path.

    Returns:
        The output path.
    """
    img = pixel_array(M)
    if img.size == 0:
        raise ValueError(f"cannot render an empty {img.shape[0]}x{img.shape[1]} matrix")
    path = Path(filename)
    plt.imsave(path, img, cmap="gray", vmin=0, vmax=255)
    if verbose:
        print(f"Wrote {path}")
    return path


def save_sparse_matrix_png(M: Renderable, filename: Union[str, Path] = "matrix.png", title: str = "",
                           dpi: int = 300) -> Path:
    """
    Saves the nonzero pattern of a sparse matrix as a spy plot.

    Args:
        M: Matrix to visualize.
        filename: Output PNG path.
        title: Figure title.
        dpi: Output resolution.

    Returns:
        The output path.
    """
    path = Path(filename)
    plt.figure(figsize=(8, 8))
    plt.spy(_as_sparse(M).to_scipy(), markersize=0.5, color="black")
    plt.title(title)
    plt.xlabel("columns")
    plt.ylabel("rows")
    plt.tight_layout()
    plt.savefig(path, dpi=dpi)
    plt.close()
    return path
