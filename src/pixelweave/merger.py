from enum import Enum
from pathlib import Path
from typing import Optional, Union

from PIL import Image

from pixelweave.codec import decode_image, encode_image
from pixelweave.errors import DifferentImageFormats
from pixelweave.interleave import BACKENDS, image_to_buffer, interleave_pixels
from pixelweave.output_image import OutputImage
from pixelweave.standardize import DEFAULT_RESAMPLE, standardize_size

"""
Image Merger - Public API

Runs the full pipeline: decode, format check, standardize, interleave,
assemble, encode.
"""

class PipelineStage(Enum):
	PENDING = 'pending'
	DECODED = 'decoded'
	FORMAT_CHECKED = 'format_checked'
	STANDARDIZED = 'standardized'
	INTERLEAVED = 'interleaved'
	ASSEMBLED = 'assembled'
	ENCODED = 'encoded'

class ImageMerger:
	"""
	Merge two images by alternating their pixels.

	Both images are brought to the smaller of the two pixel areas, then the
	output takes even pixels from the first image and odd pixels from the
	second. The output is encoded in the shared source format.

	Parameters
	----------
	backend : str, default='auto'
		Interleaving backend: 'numpy', 'numba', or 'auto'.
		'auto' uses the parallel numba kernel for large images.

	resample : PIL.Image.Resampling, default=BILINEAR
		Filter used when resizing the larger image.

	Examples
	--------
	>>> merger = ImageMerger()
	>>> output = merger.merge_files("cat.png", "dog.png", "catdog.png")
	>>> output.width, output.height
	(640, 480)
	"""
	
	def __init__(self, backend: str = 'auto', resample: Image.Resampling = DEFAULT_RESAMPLE):
		if backend not in BACKENDS:
			raise ValueError(f"Invalid backend: {backend}. Must be one of {', '.join(BACKENDS)}")
		
		self.backend = backend
		self.resample = resample
		self._stage = PipelineStage.PENDING
	
	@property
	def stage(self) -> PipelineStage:
		"""Last pipeline stage reached by the most recent merge"""
		return self._stage
	
	def check_formats(self, format_a: str, format_b: str) -> str:
		if format_a != format_b:
			raise DifferentImageFormats(format_a, format_b)
		self._stage = PipelineStage.FORMAT_CHECKED
		return format_a
	
	def merge(self, image_a: Image.Image, image_b: Image.Image, name: str = '') -> OutputImage:
		"""
		Merge two decoded images into an OutputImage.

		Parameters
		----------
		image_a : PIL.Image
			Source of even pixels
		image_b : PIL.Image
			Source of odd pixels
		name : str
			Destination name recorded on the output

		Returns
		-------
		OutputImage
			Populated output at the standardized dimensions
		"""
		image_a, image_b = standardize_size(image_a, image_b, self.resample)
		self._stage = PipelineStage.STANDARDIZED
		
		combined = interleave_pixels(image_to_buffer(image_a), image_to_buffer(image_b), backend=self.backend)
		self._stage = PipelineStage.INTERLEAVED
		
		width, height = image_a.size
		output = OutputImage(width, height, name)
		output.attach_data(combined)
		self._stage = PipelineStage.ASSEMBLED
		
		return output
	
	def merge_files(self, path_a: Union[Path, str], path_b: Union[Path, str], output_path: Union[Path, str], output_format: Optional[str] = None) -> OutputImage:
		"""
		Merge two image files and write the result.

		A format mismatch aborts before any resizing and nothing is written.

		Parameters
		----------
		path_a, path_b : Path or str
			Source image files; must share a container format
		output_path : Path or str
			Destination file
		output_format : str, optional
			Override the encode format (defaults to the shared source format)
		"""
		self._stage = PipelineStage.PENDING
		image_a, format_a = decode_image(path_a)
		image_b, format_b = decode_image(path_b)
		self._stage = PipelineStage.DECODED
		
		image_format = self.check_formats(format_a, format_b)
		
		output = self.merge(image_a, image_b, name=str(output_path))
		encode_image(output, output_format or image_format)
		self._stage = PipelineStage.ENCODED
		
		return output

def merge_images(
	path_a: Union[Path, str],
	path_b: Union[Path, str],
	output_path: Union[Path, str],
	output_format: Optional[str] = None,
	**kwargs
) -> OutputImage:
	"""
	Quick function to merge two image files with default settings.

	kwargs are passed to ImageMerger; output_format overrides the shared
	source format when encoding.

	Examples
	--------
	>>> merge_images("cat.png", "dog.png", "catdog.png")
	"""
	return ImageMerger(**kwargs).merge_files(path_a, path_b, output_path, output_format=output_format)
