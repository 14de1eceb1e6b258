"""
Purpose: Plain-data renderer.
What it does:
Writes everything a map would draw into one CSV so it can be loaded into any
GIS tool or spreadsheet:
- start / end pins
- route polyline points
- arrows with their rotation
"""

import csv
import logging
from typing import List

from arrows.models import ArrowMarker, Coordinate, Route

logger = logging.getLogger(__name__)

HEADER = ["kind", "sequence", "lat", "lon", "heading_degrees"]


class CsvRenderer:
    def __init__(self, path: str):
        self.path = path

    def render(self, start: Coordinate, end: Coordinate, route: Route, arrows: List[ArrowMarker]) -> None:
        with open(self.path, "w", newline="") as file:
            writer = csv.writer(file)
            writer.writerow(HEADER)

            writer.writerow(["start", 0, start.latitude, start.longitude, ""])
            writer.writerow(["end", 0, end.latitude, end.longitude, ""])

            for i, point in enumerate(route):
                writer.writerow(["route", i, point.latitude, point.longitude, ""])

            for i, arrow in enumerate(arrows):
                writer.writerow([
                    "arrow",
                    i,
                    arrow.position.latitude,
                    arrow.position.longitude,
                    round(arrow.heading_degrees, 4),
                ])

        logger.info(f"Wrote {len(route)} route points and {len(arrows)} arrows to {self.path}")
