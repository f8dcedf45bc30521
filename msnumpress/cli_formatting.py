"""Rich CLI formatting helpers for msnumpress commands."""

from rich.console import Console
from rich.table import Table

console = Console()
err_console = Console(stderr=True)


def print_encode_results(stats: dict):
    """Print encode results as a rich table."""
    table = Table(title="Encode Results", border_style="cyan", show_header=False, padding=(0, 2))
    table.add_column("Metric", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("Input", stats["input_path"])
    table.add_row("Output", stats["output_path"])
    table.add_row("Codec", stats["codec"])
    table.add_row("Values", f"{stats['n_values']:,}")
    table.add_row("Raw size", f"{stats['raw_bytes']:,} bytes")
    table.add_row("Encoded size", f"{stats['encoded_bytes']:,} bytes")
    table.add_row("Compression", f"[green]{stats['ratio']:.2f}x[/green]")
    table.add_row("Time", f"{stats['elapsed_sec'] * 1000:.1f}ms")
    console.print(table)


def print_decode_results(stats: dict):
    """Print decode results."""
    table = Table(title="Decode Results", border_style="cyan", show_header=False, padding=(0, 2))
    table.add_column("Metric", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("Input", stats["input_path"])
    table.add_row("Output", stats["output_path"])
    table.add_row("Codec", stats["codec"])
    table.add_row("Values", f"{stats['n_values']:,}")
    table.add_row("Time", f"{stats['elapsed_sec'] * 1000:.1f}ms")
    console.print(table)


def print_info(info: dict):
    """Print a summary of an encoded file."""
    table = Table(title="Encoded File", border_style="cyan", show_header=False, padding=(0, 2))
    table.add_column("Metric", style="dim")
    table.add_column("Value", style="bold")
    table.add_row("File", info["path"])
    table.add_row("Codec", info["codec"])
    table.add_row("Encoded size", f"{info['encoded_bytes']:,} bytes")
    table.add_row("Values", f"{info['n_values']:,}")
    if info["n_values"]:
        table.add_row("Min", f"{info['min']:.6g}")
        table.add_row("Max", f"{info['max']:.6g}")
        table.add_row("Bytes/value", f"{info['bytes_per_value']:.3f}")
    console.print(table)


def print_error(message: str):
    err_console.print(f"[bold red]Error:[/bold red] {message}")
