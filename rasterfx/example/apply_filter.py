# -*- coding: utf-8 -*-
"""
Apply Filter Example - Load an image, run one filter, and save a PNG.

Reads an image file, shrinks it to fit an 800x600 display box, applies a
single filter through ``TransformPipeline``, and writes the result as an
RGBA PNG. The output name defaults to the filter's export name (for
example ``sharpened-image.png``) in the current directory.

Demonstrates rasterfx integration:
  - ``rasterfx.IO.read_image`` and ``scale_to_fit`` for loading
  - ``rasterfx.image_processing.parse_request`` for the filter choice
  - ``rasterfx.image_processing.TransformPipeline`` for dispatch
  - ``rasterfx.IO.write_png`` for export

Usage:
  python apply_filter.py <image> sharpen --value 70
  python apply_filter.py <image> grayscale --value lightness
  python apply_filter.py <image> contrast --value -40 --output flat.png
  python apply_filter.py --help

Dependencies
------------
Pillow

License
-------
MIT License
Copyright (c) 2026 rasterfx contributors
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Union

# rasterfx
sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from rasterfx.exceptions import RasterFxError  # noqa: E402
from rasterfx.IO import export_filename, read_image, scale_to_fit, write_png  # noqa: E402
from rasterfx.image_processing import TransformPipeline, parse_request  # noqa: E402
from rasterfx.image_processing.requests import resolve_kind  # noqa: E402
from rasterfx.vocabulary import FilterKind  # noqa: E402


# ── CLI ──────────────────────────────────────────────────────────────


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns
    -------
    argparse.Namespace
        Parsed arguments.
    """
    parser = argparse.ArgumentParser(
        description="Apply a pixel filter to an image and save it as PNG.",
    )
    parser.add_argument(
        "filepath",
        type=Path,
        help="Path to the input image.",
    )
    parser.add_argument(
        "filter",
        choices=[k.value for k in FilterKind],
        help="Filter to apply.",
    )
    parser.add_argument(
        "--value",
        type=str,
        default=None,
        help="Grayscale method, contrast/brightness level in [-100, 100], "
             "or intensity in [1, 100]. Default: the filter's default.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Output PNG path (default: the filter's export name).",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Threads used by convolution filters (default: 1).",
    )
    parser.add_argument(
        "--no-fit",
        action="store_true",
        help="Keep the full image size instead of fitting 800x600.",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    return parser.parse_args(argv)


def _coerce_value(kind: FilterKind, value: Optional[str]) -> Optional[Union[str, int, float]]:
    if value is None or kind is FilterKind.GRAYSCALE:
        return value
    if kind in (FilterKind.CONTRAST, FilterKind.BRIGHTNESS):
        return float(value)
    return int(value)


# ── Main ─────────────────────────────────────────────────────────────


def apply_filter_example(
    filepath: Path,
    filter_name: str,
    value: Optional[str] = None,
    output: Optional[Path] = None,
    workers: int = 1,
    fit: bool = True,
) -> Path:
    """Load *filepath*, apply *filter_name*, and write a PNG.

    Returns
    -------
    Path
        Path of the written PNG.
    """
    kind = resolve_kind(filter_name)
    request = parse_request(kind, _coerce_value(kind, value))

    buffer = read_image(filepath)
    print(f"Loaded {filepath.name}: {buffer.width}x{buffer.height}")
    if fit:
        buffer = scale_to_fit(buffer)
        print(f"Display size: {buffer.width}x{buffer.height}")

    pipeline = TransformPipeline(workers=workers)
    result = pipeline.run(buffer, request)
    if not result.ok:
        raise result.error
    print(f"Applied {request!r}")

    output = output or Path(export_filename(kind))
    write_png(result.buffer, output)
    print(f"Wrote {output}")
    return output


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        apply_filter_example(
            args.filepath,
            args.filter,
            value=args.value,
            output=args.output,
            workers=args.workers,
            fit=not args.no_fit,
        )
    except (RasterFxError, FileNotFoundError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
