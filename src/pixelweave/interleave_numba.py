import numpy as np
from numba import njit, prange

@njit(parallel=True)
def interleave_kernel(pixels_a, pixels_b, out):
	"""
	Copy even pixels from pixels_a and odd pixels from pixels_b into out.

	All three arrays are (N, 4) uint8. Each prange iteration owns one output
	row, so workers never write to the same 4-byte block.
	"""
	n_pixels = pixels_a.shape[0]
	for i in prange(n_pixels):
		if i % 2 == 0:
			for c in range(4):
				out[i, c] = pixels_a[i, c]
		else:
			for c in range(4):
				out[i, c] = pixels_b[i, c]

def interleave_numba(pixels_a: np.ndarray, pixels_b: np.ndarray) -> np.ndarray:
	out = np.empty_like(pixels_a)
	interleave_kernel(pixels_a, pixels_b, out)
	return out
