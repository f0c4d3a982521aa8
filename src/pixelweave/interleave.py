from typing import Union

import numpy
from PIL import Image

from pixelweave.errors import PixelContractError

"""
Pixel interleaving - alternate whole RGBA pixels between two buffers
"""

CHANNELS = 4

# Below this many pixels the numba kernel's dispatch overhead outweighs the gain
NUMBA_PIXEL_THRESHOLD = 4_000_000

BACKENDS = ('auto', 'numpy', 'numba')

Buffer = Union[bytes, bytearray, memoryview, numpy.ndarray]

def _as_pixels(buffer: Buffer, name: str) -> numpy.ndarray:
	"""View a flat byte buffer as an (N, 4) uint8 array without copying"""
	if isinstance(buffer, numpy.ndarray):
		if buffer.dtype != numpy.uint8:
			raise PixelContractError(f"{name} must be uint8, got {buffer.dtype}")
		flat = buffer.reshape(-1)
	else:
		flat = numpy.frombuffer(buffer, dtype=numpy.uint8)
	
	if flat.size % CHANNELS != 0:
		raise PixelContractError(f"{name} length {flat.size} is not a whole number of {CHANNELS}-byte pixels")
	
	return flat.reshape(-1, CHANNELS)

def _interleave_numpy(pixels_a: numpy.ndarray, pixels_b: numpy.ndarray) -> numpy.ndarray:
	out = pixels_a.copy()
	out[1::2] = pixels_b[1::2]
	return out

def interleave_pixels(buffer_a: Buffer, buffer_b: Buffer, backend: str = 'auto') -> bytes:
	"""
	Combine two RGBA buffers by alternating whole pixels.

	Output pixel k is taken from buffer_a when k is even and from buffer_b
	when k is odd. Neither input is modified.

	Args:
		buffer_a: First source, row-major RGBA bytes
		buffer_b: Second source, same length as buffer_a
		backend: 'numpy', 'numba', or 'auto' (numba for large buffers)

	Returns:
		New bytes object of the same length as the inputs

	Raises:
		PixelContractError: if the lengths differ or are not multiples of 4
		ValueError: if backend is unknown
	"""
	if backend not in BACKENDS:
		raise ValueError(f"Invalid backend: {backend}. Must be one of {', '.join(BACKENDS)}")
	
	pixels_a = _as_pixels(buffer_a, 'buffer_a')
	pixels_b = _as_pixels(buffer_b, 'buffer_b')
	if pixels_a.shape != pixels_b.shape:
		raise PixelContractError(f"Buffer lengths differ: {pixels_a.size} vs {pixels_b.size} bytes")
	
	if backend == 'auto':
		backend = 'numba' if pixels_a.shape[0] >= NUMBA_PIXEL_THRESHOLD else 'numpy'
	
	if backend == 'numba':
		from pixelweave.interleave_numba import interleave_numba
		combined = interleave_numba(numpy.ascontiguousarray(pixels_a), numpy.ascontiguousarray(pixels_b))
	else:
		combined = _interleave_numpy(pixels_a, pixels_b)
	
	return combined.tobytes()

def image_to_buffer(image: Image.Image) -> bytes:
	"""Flatten a Pillow image to row-major RGBA bytes"""
	if image.mode != 'RGBA':
		image = image.convert('RGBA')
	return image.tobytes()
