from .dimensions import select_smaller
from .errors import BufferTooSmall, DifferentImageFormats, ImageDataError, IncompleteBuffer, PixelContractError, UnsupportedOutputFormat
from .interleave import image_to_buffer, interleave_pixels
from .merger import ImageMerger, PipelineStage, merge_images
from .output_image import OutputImage
from .standardize import standardize_size

"""
PixelWeave - Pixel-interleaving image merger

Merges two same-format images into one by scaling both to the smaller pixel
area and alternating whole RGBA pixels between them.
"""

__version__ = "0.1.0"

__all__ = [
	"ImageMerger",
	"merge_images",
	"PipelineStage",
	"OutputImage",
	"select_smaller",
	"standardize_size",
	"interleave_pixels",
	"image_to_buffer",
	"ImageDataError",
	"DifferentImageFormats",
	"BufferTooSmall",
	"IncompleteBuffer",
	"PixelContractError",
	"UnsupportedOutputFormat",
]
