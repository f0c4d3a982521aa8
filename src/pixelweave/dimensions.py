from typing import Tuple

Dimensions = Tuple[int, int]

def area(dim: Dimensions) -> int:
	return int(dim[0]) * int(dim[1])

def select_smaller(dim_a: Dimensions, dim_b: Dimensions) -> Dimensions:
	"""
	Pick the (width, height) pair with the smaller pixel area.

	Ties go to dim_b: dim_a is returned only when its area is strictly smaller.
	"""
	return dim_a if area(dim_a) < area(dim_b) else dim_b
