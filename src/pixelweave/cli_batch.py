import argparse
import sys
import time
from pathlib import Path
from typing import Tuple

from PIL import UnidentifiedImageError
from rich.markup import escape
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn, TimeRemainingColumn
from rich.table import Table

from pixelweave.errors import ImageDataError
from pixelweave.merger import ImageMerger
from pixelweave.tools import file_tools
from pixelweave.tools.print_tools import console, error_console, help_console

"""
PixelWeave Batch CLI - Merge matching images from two directories
"""

def render_help():
	"""Render custom help output using Rich"""
	help_console.print()
	help_console.print(Panel.fit(
		"[bold cyan]PixelWeave Batch[/bold cyan]\n"
		"Merge every matching pair of images from two directories",
		border_style="cyan"
	))
	help_console.print()
	
	quick_start = Table.grid(padding=(0, 2))
	quick_start.add_column(style="dim")
	quick_start.add_row("pixelweave-batch left/ right/ merged/")
	quick_start.add_row("pixelweave-batch left/ right/ merged/ --recursive")
	
	help_console.print(Panel(quick_start, title="[bold]Quick Start[/bold]", border_style="green"))
	help_console.print()
	
	options = Table.grid(padding=(0, 1))
	options.add_column(style="cyan", width=20)
	options.add_column(style="white")
	
	options.add_row("  --recursive", "Search subdirectories")
	options.add_row("  --backend", "auto | numpy | numba  [dim](default: auto)[/dim]")
	options.add_row("  --verbose, -v", "Print each pair as it is merged")
	options.add_row("", "")
	options.add_row("", "[dim]Images are paired by relative path and file stem.[/dim]")
	options.add_row("", "[dim]Files present in only one directory are skipped.[/dim]")
	
	help_console.print(Panel(options, title="[bold]Options[/bold]", border_style="blue"))
	help_console.print()
	
	help_console.print("[dim]For a single pair, see: [cyan]pixelweave --help[/cyan][/dim]")
	help_console.print()

def parse_arguments(argv=None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(
		description='Merge matching images from two directories',
		add_help=False  # Disable default help to use our custom one
	)
	
	parser.add_argument('dir_a', type=str, help='Directory of first source images')
	parser.add_argument('dir_b', type=str, help='Directory of second source images')
	parser.add_argument('output_dir', type=str, help='Output directory for merged images')
	
	parser.add_argument('--recursive', action='store_true', help='Search subdirectories recursively')
	parser.add_argument('--backend', type=str, choices=['auto', 'numpy', 'numba'], default='auto', help='Interleaving backend (default: auto)')
	parser.add_argument('--verbose', '-v', action='store_true', help='Verbose output')
	
	return parser.parse_args(argv)

def merge_pair(merger: ImageMerger, path_a: Path, path_b: Path, output_path: Path) -> Tuple[bool, str]:
	"""Merge a single pair, return (success, error_message)"""
	try:
		output_path.parent.mkdir(parents=True, exist_ok=True)
		merger.merge_files(path_a, path_b, output_path)
		return True, ""
	except (ImageDataError, UnidentifiedImageError, OSError, ValueError) as e:
		return False, str(e)

def main(argv=None) -> int:
	"""Main CLI entry point for batch merging"""
	argv = sys.argv[1:] if argv is None else argv
	if '--help' in argv or '-h' in argv:
		render_help()
		return 0
	
	args = parse_arguments(argv)
	
	dir_a = Path(args.dir_a)
	dir_b = Path(args.dir_b)
	for directory in (dir_a, dir_b):
		if not directory.is_dir():
			error_console.print(f"[red]Error:[/red] [bright_yellow]{escape(str(directory))}[/bright_yellow] is not a directory")
			return 1
	
	output_dir = Path(args.output_dir)
	output_dir.mkdir(parents=True, exist_ok=True)
	
	search_mode = "recursively" if args.recursive else "in top level only"
	console.print(f"[cyan]Scanning[/cyan] [bright_yellow]{escape(str(dir_a))}[/bright_yellow] and [bright_yellow]{escape(str(dir_b))}[/bright_yellow] {search_mode}...")
	pairs, unmatched = file_tools.pair_images(dir_a, dir_b, recursive=args.recursive)
	
	for path in unmatched:
		console.print(f"[yellow]Skipping[/yellow] [bright_yellow]{escape(str(path))}[/bright_yellow] (no matching image)")
	
	if not pairs:
		error_console.print("[red]Error:[/red] No matching image pairs found")
		error_console.print(f"Supported formats: {', '.join(sorted(file_tools.IMAGE_EXTENSIONS))}")
		return 1
	
	config_table = Table.grid(padding=(0, 2))
	config_table.add_column(style="cyan", justify="right")
	config_table.add_column(style="white")
	config_table.add_row("Pairs:", f"{len(pairs)}")
	config_table.add_row("Output:", f"[bright_yellow]{escape(str(output_dir))}[/bright_yellow]")
	config_table.add_row("Backend:", args.backend)
	if args.recursive:
		config_table.add_row("Recursive:", "[green]Yes[/green]")
	if unmatched:
		config_table.add_row("Unmatched:", f"[yellow]{len(unmatched)}[/yellow]")
	
	console.print()
	console.print(Panel(config_table, title="[bold]Batch Pixel Merge[/bold]", border_style="blue"))
	console.print()
	
	merger = ImageMerger(backend=args.backend)
	start_time = time.time()
	success_count = 0
	failures = []
	
	with Progress(
		SpinnerColumn(),
		TextColumn("[progress.description]{task.description}"),
		BarColumn(),
		TextColumn("{task.completed}/{task.total}"),
		TimeElapsedColumn(),
		TimeRemainingColumn(),
		console=console
	) as progress:
		task = progress.add_task("[cyan]Merging...", total=len(pairs))
		
		for path_a, path_b in pairs:
			output_path = output_dir / path_a.relative_to(dir_a)
			if args.verbose:
				progress.console.print(f"  {escape(str(path_a))} + {escape(str(path_b))} -> {escape(str(output_path))}")
			
			ok, message = merge_pair(merger, path_a, path_b, output_path)
			if ok:
				success_count += 1
			else:
				failures.append((path_a, message))
			
			progress.advance(task)
	
	elapsed = time.time() - start_time
	
	console.print()
	for path_a, message in failures:
		error_console.print(f"[red]Failed:[/red] [bright_yellow]{escape(path_a.name)}[/bright_yellow]: {escape(message)}")
	
	summary = Table.grid(padding=(0, 2))
	summary.add_column(style="cyan", justify="right")
	summary.add_column(style="white")
	summary.add_row("Merged:", f"[green]{success_count}[/green]/{len(pairs)}")
	if failures:
		summary.add_row("Failed:", f"[red]{len(failures)}[/red]")
	summary.add_row("Time:", f"{elapsed:.1f}s ({elapsed / len(pairs):.2f}s per pair)")
	
	console.print(Panel(summary, title="[bold]Summary[/bold]", border_style="green" if not failures else "red"))
	
	return 0 if not failures else 1

if __name__ == '__main__':
	sys.exit(main())
