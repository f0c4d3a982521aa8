"""
Shared image encoding utilities
"""

DEFAULT_JPEG_QUALITY = 98
DEFAULT_PNG_COMPRESS_LEVEL = 3

# Pillow formats that cannot store an alpha channel
FORMATS_WITHOUT_ALPHA = {'JPEG', 'PPM'}

def get_pil_save_kwargs(image_format: str) -> dict:
	"""
	Get appropriate save kwargs based on the output format.

	Ensures high quality output by using proper settings for each format:
	- JPEG: quality=98 (instead of PIL's default 75)
	- PNG: compress_level=3 for balanced speed/compression

	Args:
		image_format: Pillow format identifier (e.g. 'PNG', 'JPEG')

	Returns:
		Dictionary of kwargs to pass to PIL Image.save()
	"""
	image_format = image_format.upper()
	
	if image_format == 'JPEG':
		return {'quality': DEFAULT_JPEG_QUALITY}
	elif image_format == 'PNG':
		return {'compress_level': DEFAULT_PNG_COMPRESS_LEVEL}
	elif image_format == 'WEBP':
		return {'lossless': True}
	else:
		return {}

def supports_alpha(image_format: str) -> bool:
	return image_format.upper() not in FORMATS_WITHOUT_ALPHA

