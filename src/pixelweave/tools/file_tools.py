from pathlib import Path
from typing import Dict, List, Tuple

import natsort

IMAGE_EXTENSIONS = {'.jpg', '.jpeg', '.png', '.bmp', '.tiff', '.tif', '.webp'}

def list_images(input_dir: Path, recursive: bool = True) -> List[Path]:
	search_glob = '**/*' if recursive else '*'
	image_paths = []
	
	for file_path in input_dir.glob(search_glob):
		if file_path.is_file() and file_path.suffix.lower() in IMAGE_EXTENSIONS:
			image_paths.append(file_path)
	
	image_paths = list(set(image_paths))
	
	return natsort.os_sorted(image_paths)

def _group_by_stem(root: Path, paths: List[Path]) -> Dict[Path, List[Path]]:
	# a.png and a.jpg share the key 'a'; list_images order is kept within a group
	groups: Dict[Path, List[Path]] = {}
	for path in paths:
		groups.setdefault(path.relative_to(root).with_suffix(''), []).append(path)
	return groups

def _pick_pair(root_a: Path, root_b: Path, group_a: List[Path], group_b: List[Path]) -> Tuple[Path, Path]:
	"""Prefer two files with the same relative path, else the first of each group"""
	relative_b = {path.relative_to(root_b): path for path in group_b}
	for path_a in group_a:
		path_b = relative_b.get(path_a.relative_to(root_a))
		if path_b is not None:
			return path_a, path_b
	return group_a[0], group_b[0]

def pair_images(dir_a: Path, dir_b: Path, recursive: bool = False) -> Tuple[List[Tuple[Path, Path]], List[Path]]:
	"""
	Match images in two directories by relative path and stem.

	Each stem is paired at most once. When a directory holds several files
	with the same stem (a.png, a.jpg), the one whose extension matches the
	other directory is paired and the rest are reported as unmatched.

	Returns:
		(pairs, unmatched) where pairs is naturally sorted by the first
		directory's paths and unmatched lists every file left without a partner
	"""
	groups_a = _group_by_stem(dir_a, list_images(dir_a, recursive=recursive))
	groups_b = _group_by_stem(dir_b, list_images(dir_b, recursive=recursive))
	
	pairs = []
	unmatched = []
	for key, group_a in groups_a.items():
		if key not in groups_b:
			unmatched += group_a
			continue
		group_b = groups_b[key]
		path_a, path_b = _pick_pair(dir_a, dir_b, group_a, group_b)
		pairs.append((path_a, path_b))
		unmatched += [path for path in group_a if path != path_a]
		unmatched += [path for path in group_b if path != path_b]
	for key, group_b in groups_b.items():
		if key not in groups_a:
			unmatched += group_b
	
	pairs = natsort.os_sorted(pairs, key=lambda pair: str(pair[0]))
	
	return pairs, natsort.os_sorted(unmatched)

if __name__ == '__main__':
	print('__main__ not supported in modules.')
