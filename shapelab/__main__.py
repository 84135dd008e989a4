# __main__.py
# python -m shapelab IMAGE [IMAGE ...] [--json OUT] [--svg DIR] [-v]

from __future__ import annotations
import argparse
import logging
import os
import sys
from typing import List, Optional

from PIL import UnidentifiedImageError

from .io_save_load import load_rgba, save_json
from .pipeline import ShapeDetector
from .svg import write_svg

logger = logging.getLogger("shapelab")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="shapelab", description="Detect basic geometric shapes in raster images.")
    ap.add_argument("images", nargs="+", help="input image files")
    ap.add_argument("--json", dest="json_out", default=None, help="write all results to this JSON file")
    ap.add_argument("--svg", dest="svg_dir", default=None, help="write a debug overlay per image into this directory")
    ap.add_argument("-v", "--verbose", action="count", default=0, help="-v for info, -vv for debug logging")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    level = logging.WARNING if args.verbose == 0 else logging.INFO if args.verbose == 1 else logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    detector = ShapeDetector()
    rows = []
    status = 0
    for path in args.images:
        try:
            image = load_rgba(path)
        except (OSError, UnidentifiedImageError) as e:
            logger.error("cannot read %s: %s", path, e)
            status = 2
            continue
        result = detector.detect(image)
        print(f"{path}: {len(result.shapes)} shapes in {result.processing_time_ms:.2f}ms")
        for s in result.shapes:
            print(f"  {s.type.value:<9} {s.confidence * 100:5.1f}%  centre=({s.center.x}, {s.center.y})  area={s.area:.0f}px2")
        rows.append({"file": os.path.basename(path), **result.to_dict()})
        if args.svg_dir:
            os.makedirs(args.svg_dir, exist_ok=True)
            stem = os.path.splitext(os.path.basename(path))[0]
            write_svg(result, os.path.join(args.svg_dir, stem + "_shapes.svg"))
    if args.json_out:
        save_json(args.json_out, {"results": rows})
    return status


if __name__ == "__main__":
    sys.exit(main())
