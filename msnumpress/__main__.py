"""CLI entry point: python -m msnumpress <command>"""

import argparse
import sys
from pathlib import Path


def main(argv=None):
    from . import CODECS
    from .config import DEFAULT_CONFIG

    parser = argparse.ArgumentParser(
        prog="msnumpress",
        description="MS-Numpress codecs for mass-spectrometry arrays",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=str, default=None, help="Also log to this file")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- encode ---
    encode_parser = subparsers.add_parser("encode", help="Encode a .npy/.txt/.csv file of numbers")
    encode_parser.add_argument("input", type=str, help="Input file (.npy, .txt, .csv)")
    encode_parser.add_argument("-o", "--output", type=str, required=True, help="Output file path")
    encode_parser.add_argument("-c", "--codec", type=str, default=DEFAULT_CONFIG.default_codec,
                               choices=list(CODECS),
                               help=f"Codec (default: {DEFAULT_CONFIG.default_codec})")

    # --- decode ---
    decode_parser = subparsers.add_parser("decode", help="Decode raw codec bytes")
    decode_parser.add_argument("input", type=str, help="Encoded file")
    decode_parser.add_argument("-o", "--output", type=str, required=True,
                               help="Output file (.npy, .txt, .csv)")
    decode_parser.add_argument("-c", "--codec", type=str, default=DEFAULT_CONFIG.default_codec,
                               choices=list(CODECS))

    # --- info ---
    info_parser = subparsers.add_parser("info", help="Decode a file and summarize its contents")
    info_parser.add_argument("input", type=str, help="Encoded file")
    info_parser.add_argument("-c", "--codec", type=str, default=DEFAULT_CONFIG.default_codec,
                             choices=list(CODECS))

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    from .utils.logger import setup_logger
    setup_logger(args.log_file, verbose=args.verbose)

    from .cli_formatting import print_error

    try:
        if args.command == "encode":
            _cmd_encode(args)
        elif args.command == "decode":
            _cmd_decode(args)
        elif args.command == "info":
            _cmd_info(args)
    except (ValueError, OSError) as exc:
        print_error(str(exc))
        return 1
    return 0


def _cmd_encode(args):
    from . import encode_file
    from .cli_formatting import console, print_encode_results

    console.print(f"[bold]Encoding[/bold] {args.input} (codec={args.codec})...")
    stats = encode_file(args.input, args.output, codec=args.codec)
    print_encode_results(stats)


def _cmd_decode(args):
    from . import decode_file
    from .cli_formatting import console, print_decode_results

    console.print(f"[bold]Decoding[/bold] {args.input} (codec={args.codec})...")
    stats = decode_file(args.input, args.output, codec=args.codec)
    print_decode_results(stats)


def _cmd_info(args):
    from . import decode
    from .cli_formatting import print_info

    path = Path(args.input)
    data = path.read_bytes()
    values = decode(data, codec=args.codec)
    n = len(values)
    print_info({
        "path": str(path),
        "codec": args.codec,
        "encoded_bytes": len(data),
        "n_values": n,
        "min": float(values.min()) if n else None,
        "max": float(values.max()) if n else None,
        "bytes_per_value": len(data) / n if n else None,
    })


if __name__ == "__main__":
    sys.exit(main())
