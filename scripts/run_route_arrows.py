import argparse
import logging
import os
import time

from arrows.policy import ArrowPolicy, default_arrow_policy, legacy_arrow_policy
from display.csv_renderer import CsvRenderer
from display.region import region_for
from refresh.controller import RouteRefresher
from refresh.policy import default_refresh_policy
from routing.osrm_client import OSRMClient
from routing.route_service import RouteService

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def parse_args():
    parser = argparse.ArgumentParser(description="Fetch a driving route and place direction arrows along it.")
    parser.add_argument("--spacing", type=float, default=None, help="meters between arrows (default 2500)")
    parser.add_argument("--legacy-heading", action="store_true", help="use the 360/pi heading scale")
    parser.add_argument("--output", default=None, help="CSV file to write (default: route_arrows.csv next to the repo)")
    parser.add_argument("--watch", action="store_true", help="keep refreshing until Ctrl+C")
    return parser.parse_args()


def build_arrow_policy(args) -> ArrowPolicy:
    base = legacy_arrow_policy() if args.legacy_heading else default_arrow_policy()
    if args.spacing is None:
        return base
    policy = ArrowPolicy(
        spacing_meters=args.spacing,
        latitude_offset=base.latitude_offset,
        degrees_per_radian=base.degrees_per_radian,
    )
    policy.validate()
    return policy


def run():
    args = parse_args()
    print("=== ROUTE ARROWS ===")

    # Save next to the repo root
    base_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
    output_path = args.output or os.path.join(base_dir, "route_arrows.csv")

    refresh_policy = default_refresh_policy()
    refresher = RouteRefresher(
        RouteService(OSRMClient(profile="driving", timeout=10)),
        arrow_policy=build_arrow_policy(args),
        refresh_policy=refresh_policy,
        renderer=CsvRenderer(output_path),
    )

    if not args.watch:
        if not refresher.refresh():
            print("No route returned by OSRM.")
            return
        report(refresher, output_path)
        return

    with refresher:
        report(refresher, output_path)
        try:
            while True:
                time.sleep(1)
        except KeyboardInterrupt:
            print("\nStopping...")


def report(refresher: RouteRefresher, output_path: str) -> None:
    snapshot = refresher.state.snapshot()
    region = region_for(snapshot.start, snapshot.end)
    print(f"Start: {snapshot.start.as_tuple()}  End: {snapshot.end.as_tuple()}")
    print(f"Region center {region.center.as_tuple()} "
          f"(dlat {region.latitude_delta:.4f}, dlon {region.longitude_delta:.4f})")
    print(f"Route points: {len(snapshot.route)}  Arrows: {len(snapshot.arrows)}")
    for i, arrow in enumerate(snapshot.arrows, 1):
        print(f"  Arrow {i}: {arrow.position.latitude:.6f}, {arrow.position.longitude:.6f} "
              f"-> {arrow.heading_degrees:.1f} deg")
    print(f"Results written to '{output_path}'.")


if __name__ == "__main__":
    run()
