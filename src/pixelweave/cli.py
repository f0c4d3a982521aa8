import argparse
import sys
import time
import traceback
from pathlib import Path

from PIL import UnidentifiedImageError
from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from pixelweave.codec import decode_image, encode_image
from pixelweave.errors import ImageDataError, PixelContractError
from pixelweave.merger import ImageMerger
from pixelweave.tools.print_tools import console, error_console, help_console

"""
PixelWeave CLI - Merge two images by alternating pixels
"""

def render_help():
	"""Render custom help output using Rich"""
	help_console.print()
	help_console.print(Panel.fit(
		"[bold cyan]PixelWeave[/bold cyan]\n"
		"Merge two images by alternating their pixels",
		border_style="cyan"
	))
	help_console.print()
	
	usage = Table.grid(padding=(0, 2))
	usage.add_column(style="dim")
	usage.add_row("pixelweave IMAGE_A IMAGE_B OUTPUT")
	
	help_console.print(Panel(usage, title="[bold]Usage[/bold]", border_style="green"))
	help_console.print()
	
	notes = Table.grid(padding=(0, 1))
	notes.add_column(style="cyan", justify="left")
	notes.add_column(style="white")
	notes.add_row("IMAGE_A", "Source of even pixels")
	notes.add_row("IMAGE_B", "Source of odd pixels [dim](same format as IMAGE_A)[/dim]")
	notes.add_row("OUTPUT", "Destination file, written in the shared source format")
	notes.add_row("", "")
	notes.add_row("", "[dim]The larger image is scaled down to the smaller pixel area.[/dim]")
	notes.add_row("", "[dim]Equal areas use IMAGE_B's dimensions.[/dim]")
	
	help_console.print(Panel(notes, title="[bold]Arguments[/bold]", border_style="blue"))
	help_console.print()
	
	help_console.print("[dim]For whole directories, see: [cyan]pixelweave-batch --help[/cyan][/dim]")
	help_console.print()

def parse_arguments(argv=None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(
		description='Merge two images by alternating pixels',
		add_help=False  # Disable default help to use our custom one
	)
	
	parser.add_argument('image_a', type=str, help='First source image')
	parser.add_argument('image_b', type=str, help='Second source image')
	parser.add_argument('output', type=str, help='Output image file')
	
	return parser.parse_args(argv)

def main(argv=None) -> int:
	"""Main CLI entry point for merging two images"""
	argv = sys.argv[1:] if argv is None else argv
	if '--help' in argv or '-h' in argv:
		render_help()
		return 0
	
	args = parse_arguments(argv)
	
	path_a = Path(args.image_a)
	path_b = Path(args.image_b)
	output_path = Path(args.output)
	
	for path in (path_a, path_b):
		if not path.exists():
			error_console.print(f"[red]Error:[/red] Input file [bright_yellow]{escape(str(path))}[/bright_yellow] not found")
			return 1
	
	# Load images
	try:
		console.print(f"[cyan]Loading[/cyan] [bright_yellow]{escape(path_a.name)}[/bright_yellow]...")
		image_a, format_a = decode_image(path_a)
		console.print(f"[cyan]Loading[/cyan] [bright_yellow]{escape(path_b.name)}[/bright_yellow]...")
		image_b, format_b = decode_image(path_b)
	except (UnidentifiedImageError, OSError) as e:
		error_console.print(f"[red]Error loading image:[/red] {escape(str(e))}")
		return 1
	
	merger = ImageMerger()
	try:
		image_format = merger.check_formats(format_a, format_b)
	except ImageDataError as e:
		error_console.print(f"[red]Error:[/red] {escape(str(e))}")
		return 1
	
	# Display configuration panel
	config_table = Table.grid(padding=(0, 2))
	config_table.add_column(style="cyan", justify="right")
	config_table.add_column(style="white")
	
	config_table.add_row("Image A:", f"[bright_yellow]{escape(path_a.name)}[/bright_yellow] ({image_a.width}x{image_a.height})")
	config_table.add_row("Image B:", f"[bright_yellow]{escape(path_b.name)}[/bright_yellow] ({image_b.width}x{image_b.height})")
	config_table.add_row("Format:", image_format)
	
	console.print()
	console.print(Panel(config_table, title="[bold]Pixel Merge[/bold]", border_style="blue"))
	console.print()
	
	start_time = time.time()
	
	try:
		with Progress(SpinnerColumn(), TextColumn("[cyan]Interleaving pixels...[/cyan]"), console=console) as progress:
			progress.add_task("merge", total=None)
			output = merger.merge(image_a, image_b, name=str(output_path))
		
		merge_time = time.time() - start_time
	except ImageDataError as e:
		error_console.print(f"[red]Error:[/red] {escape(str(e))}")
		return 1
	except PixelContractError as e:
		error_console.print(f"[red]Internal error during merge:[/red] {escape(str(e))}")
		traceback.print_exc()
		return 1
	
	console.print(f"[cyan]Saving to[/cyan] [bright_yellow]{escape(output_path.name)}[/bright_yellow]...")
	
	try:
		encode_image(output, image_format, output_path)
	except (ImageDataError, OSError, ValueError) as e:
		error_console.print(f"[red]Error saving image:[/red] {escape(str(e))}")
		return 1
	
	console.print()
	console.print(f"[green]✓ Done![/green] Merged {output.width}x{output.height} in [bold]{merge_time:.2f}s[/bold]")
	console.print(f"  Output: [bright_yellow]{escape(str(output_path))}[/bright_yellow]")
	console.print()
	
	return 0

if __name__ == '__main__':
	sys.exit(main())
