from typing import Tuple

from PIL import Image

from pixelweave.dimensions import select_smaller

"""
Size standardization - bring two images to common dimensions
"""

DEFAULT_RESAMPLE = Image.Resampling.BILINEAR

def standardize_size(image_a: Image.Image, image_b: Image.Image, resample: Image.Resampling = DEFAULT_RESAMPLE) -> Tuple[Image.Image, Image.Image]:
	"""
	Resize whichever image does not match the smaller-area dimensions.

	Args:
		image_a: First source image
		image_b: Second source image
		resample: Pillow resampling filter (default: bilinear, i.e. triangle)

	Returns:
		(out_a, out_b) sharing the selected dimensions. An image already at
		the target size is returned unchanged.

	Raises:
		ValueError: if the target width or height is not positive
	"""
	width, height = select_smaller(image_a.size, image_b.size)
	if width <= 0 or height <= 0:
		raise ValueError(f"Cannot resample to {width}x{height}")
	
	target = (width, height)
	if image_a.size != target:
		image_a = image_a.resize(target, resample)
	if image_b.size != target:
		image_b = image_b.resize(target, resample)
	
	return image_a, image_b
