from PIL import Image

from pixelweave.errors import BufferTooSmall, IncompleteBuffer, PixelContractError
from pixelweave.interleave import CHANNELS

class OutputImage:
	"""
	Destination raster with a fixed capacity of width * height * 4 bytes.

	The buffer starts empty and is populated once through attach_data.
	"""
	
	def __init__(self, width: int, height: int, name: str):
		self.width = width
		self.height = height
		self.name = name
		self._capacity = width * height * CHANNELS
		self._data = b''
		self._attached = False
	
	@property
	def capacity(self) -> int:
		return self._capacity
	
	@property
	def data(self) -> bytes:
		return self._data
	
	@property
	def is_complete(self) -> bool:
		return len(self._data) == self._capacity
	
	def attach_data(self, data: bytes):
		"""
		Take ownership of the pixel buffer.

		Raises:
			BufferTooSmall: if data is longer than the reserved capacity
			PixelContractError: if data has already been attached
		"""
		if self._attached:
			raise PixelContractError(f"Output '{self.name}' already holds pixel data")
		if len(data) > self._capacity:
			raise BufferTooSmall(len(data), self._capacity)
		
		self._data = bytes(data)
		self._attached = True
	
	def to_image(self) -> Image.Image:
		"""Build an RGBA Pillow image; the buffer must fill the whole capacity"""
		if not self.is_complete:
			raise IncompleteBuffer(len(self._data), self._capacity)
		return Image.frombytes('RGBA', (self.width, self.height), self._data)
	
	def __repr__(self) -> str:
		return f"OutputImage({self.width}x{self.height}, name={self.name!r}, {len(self._data)}/{self._capacity} bytes)"
