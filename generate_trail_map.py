import argparse
import dataclasses
import sys
import time
from concurrent.futures import Future

from config import CONFIG
from trailmap.errors import TrailMapError
from trailmap.image_writer import save_canvas
from trailmap.logger import logger
from trailmap.pipeline import render_trail_map
from trailmap.project_types import MapConfig


def parse_args(argv=None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(
        description="Render a road shapefile and a location history to a PNG map."
    )
    ap.add_argument("--roads", help="Road polyline shapefile")
    ap.add_argument("--locations", help="Location history JSON document")
    ap.add_argument("--output", help="Output PNG path")
    ap.add_argument("--width", type=int, help="Output width in pixels")
    return ap.parse_args(argv)


def config_from_args(args: argparse.Namespace, base: MapConfig = CONFIG) -> MapConfig:
    overrides = {
        "roads_path": args.roads,
        "locations_path": args.locations,
        "output_path": args.output,
        "width_px": args.width,
    }
    return dataclasses.replace(
        base, **{k: v for k, v in overrides.items() if v is not None}
    )


def log_saved(future: Future) -> None:
    if future.exception() is None:
        logger.info(f"Saved map at: {future.result()}")


def main(argv=None) -> int:
    # Start timing
    start_time = time.time()

    try:
        config = config_from_args(parse_args(argv))
        canvas = render_trail_map(config)
    except (TrailMapError, ValueError) as e:
        logger.error(f"Map generation failed: {e}")
        return 1

    future = save_canvas(canvas, config.output_path, on_complete=log_saved)
    try:
        future.result()
    except OSError as e:
        logger.error(f"Failed to save map: {e}")
        return 1

    end_time = time.time()
    execution_time = end_time - start_time
    minutes = int(execution_time // 60)
    seconds = execution_time % 60
    logger.info(f"Total execution time: {minutes} minutes and {seconds:.2f} seconds")
    return 0


if __name__ == "__main__":
    sys.exit(main())
