"""DCT (Discrete Cosine Transform) implementation using matrix multiplication."""

import numpy as np

from ..constants import BLOCK_SIZE


def create_dct_matrix(N: int = 8) -> np.ndarray:
    """
    Generate the 1D DCT-II transform matrix of size N x N.

    The DCT matrix T has elements:
        T[k, n] = c[k] * cos((2n + 1) * k * pi / (2N))

    where:
        c[0] = 1/sqrt(N)
        c[k] = sqrt(2/N) for k > 0

    This matrix is orthogonal: T @ T.T = I, so T.T is the matching DCT-III.

    Args:
        N: Size of the transform (default: 8)

    Returns:
        N x N DCT transform matrix
    """
    k = np.arange(N).reshape(-1, 1)
    n = np.arange(N).reshape(1, -1)
    T = np.cos(np.pi / (2 * N) * (2 * n + 1) * k)
    T[0, :] *= np.sqrt(1 / N)
    T[1:, :] *= np.sqrt(2 / N)
    return T


# Pre-compute DCT matrices for 8x8 blocks (the only size the codec uses)
DCT_MATRIX_8 = create_dct_matrix(BLOCK_SIZE)
DCT_MATRIX_8.flags.writeable = False


def _dct_matrix(N: int) -> np.ndarray:
    if N == BLOCK_SIZE:
        return DCT_MATRIX_8
    return create_dct_matrix(N)


def forward_dct_1d(vector: np.ndarray) -> np.ndarray:
    """
    Orthonormal 1D DCT-II.

        out[k] = c[k] * sum_n x[n] * cos(pi / (2N) * (2n + 1) * k)

    Args:
        vector: Input samples of length N

    Returns:
        N DCT coefficients
    """
    x = np.asarray(vector, dtype=np.float64)
    return _dct_matrix(x.shape[0]) @ x


def inverse_dct_1d(coeffs: np.ndarray) -> np.ndarray:
    """
    Orthonormal 1D DCT-III, the exact inverse of forward_dct_1d.

        out[n] = X[0] / sqrt(N) + sum_{k>=1} sqrt(2/N) * X[k] * cos(pi / (2N) * (2n + 1) * k)

    Args:
        coeffs: DCT coefficients of length N

    Returns:
        N reconstructed samples
    """
    X = np.asarray(coeffs, dtype=np.float64)
    return _dct_matrix(X.shape[0]).T @ X


def forward_dct_block(block: np.ndarray) -> np.ndarray:
    """
    Perform separable 2D DCT on a square block.

    Rows are transformed first, then every column of the intermediate
    result. On exact arithmetic the order does not matter; it only affects
    floating-point rounding.

    Args:
        block: N x N input block

    Returns:
        N x N DCT coefficient block, DC term at [0, 0]
    """
    block = np.asarray(block, dtype=np.float64)
    T = _dct_matrix(block.shape[0])
    intermediate = block @ T.T        # 1D DCT of every row
    return T @ intermediate           # 1D DCT of every column


def inverse_dct_block(dct_block: np.ndarray) -> np.ndarray:
    """
    Perform separable 2D inverse DCT, columns first then rows.

    Mirrors forward_dct_block so the composition cancels exactly.

    Args:
        dct_block: N x N DCT coefficient block

    Returns:
        N x N reconstructed block
    """
    dct_block = np.asarray(dct_block, dtype=np.float64)
    T = _dct_matrix(dct_block.shape[0])
    intermediate = T.T @ dct_block    # 1D IDCT of every column
    return intermediate @ T           # 1D IDCT of every row
