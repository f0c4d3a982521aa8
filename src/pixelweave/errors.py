"""
Exception types raised while merging images
"""

class ImageDataError(Exception):
	"""Base class for errors caused by the images being merged."""

class DifferentImageFormats(ImageDataError):
	def __init__(self, format_a: str, format_b: str):
		self.format_a = format_a
		self.format_b = format_b
		super().__init__(f"Images have different formats: {format_a} vs {format_b}")

class BufferTooSmall(ImageDataError):
	def __init__(self, length: int, capacity: int):
		self.length = length
		self.capacity = capacity
		super().__init__(f"Pixel buffer of {length} bytes exceeds output capacity of {capacity} bytes")

class IncompleteBuffer(ImageDataError):
	"""Raised when an output is encoded with fewer bytes than its dimensions require."""
	
	def __init__(self, length: int, capacity: int):
		self.length = length
		self.capacity = capacity
		super().__init__(f"Pixel buffer holds {length} of {capacity} bytes")

class PixelContractError(RuntimeError):
	"""
	Internal invariant violation (malformed buffer reaching the interleaver,
	output populated twice). Never caused by valid input files.
	"""

class UnsupportedOutputFormat(ImageDataError):
	"""Raised when Pillow can read a format but has no encoder for it (e.g. PSD)."""
	
	def __init__(self, image_format: str):
		self.image_format = image_format
		super().__init__(f"Cannot write images in {image_format} format")
