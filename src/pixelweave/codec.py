from pathlib import Path
from typing import Tuple, Union

from PIL import Image

from pixelweave.errors import UnsupportedOutputFormat
from pixelweave.output_image import OutputImage
from pixelweave.tools.image_tools import get_pil_save_kwargs, supports_alpha

"""
Pillow-backed decode/encode for the merge pipeline
"""

def decode_image(path: Union[Path, str]) -> Tuple[Image.Image, str]:
	"""
	Decode an image file into an RGBA raster.

	Returns:
		(image, format) where image is fully loaded in RGBA mode and format
		is Pillow's identifier for the source container (e.g. 'PNG')

	Raises:
		FileNotFoundError: if path does not exist
		PIL.UnidentifiedImageError: if the file is not a recognised image
	"""
	with Image.open(path) as image:
		image_format = image.format
		rgba = image.convert('RGBA')
	return rgba, image_format

def is_writable_format(image_format: str) -> bool:
	Image.init()
	return image_format.upper() in Image.SAVE

def encode_image(output: OutputImage, image_format: str, path: Union[Path, str, None] = None) -> Path:
	"""
	Write an assembled output image to disk.

	Formats that cannot carry alpha (JPEG) are flattened to RGB first.

	Args:
		output: Populated OutputImage
		image_format: Pillow format identifier to encode with
		path: Destination, defaults to output.name

	Returns:
		Path that was written

	Raises:
		UnsupportedOutputFormat: if Pillow has no encoder for image_format
	"""
	if not is_writable_format(image_format):
		raise UnsupportedOutputFormat(image_format)
	
	destination = Path(path if path is not None else output.name)
	image = output.to_image()
	if not supports_alpha(image_format):
		image = image.convert('RGB')
	
	image.save(destination, format=image_format, **get_pil_save_kwargs(image_format))
	return destination
