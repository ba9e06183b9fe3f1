"""
Command Line Interface for room generation and navigation.
"""

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional

import numpy as np

from ..cfg import RoomConfig
from ..core.world import Room
from ..sim import ChaseSimulation, build_room_from_config, survey_rooms
from ..utils import RasterSnapshotter, rasterize_room, save_raster, save_room_json, save_rows_to_csv

logger = logging.getLogger(__name__)


def create_parser():
    """Create argument parser for CLI"""
    parser = argparse.ArgumentParser(
        prog='roomnav',
        description="Procedural room generation and navigation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
        Examples:
        %(prog)s generate --seed 42 --out results/room.json --raster results/room.bmp
        %(prog)s generate --seed 7 --snapshots results/steps --override generation.minimum_area=900
        %(prog)s render --seed 42 --out results/room.png
        %(prog)s survey --seeds 200 --out results/survey.csv
        %(prog)s chase --seed 42 --ticks 1200 --out results/chase.csv
        """
    )
    parser.add_argument('--config', help='YAML file merged over the default configuration')
    parser.add_argument('--log-dir', help='Directory for a log file (optional)')
    parser.add_argument('--verbose', action='store_true', help='Enable debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Command')

    def add_common(sub):
        sub.add_argument('--seed', type=int, help='Generation seed (overrides config)')
        sub.add_argument('--override', action='append',
                         help='Override config parameter using dot notation (e.g., generation.minimum_area=900)')

    gen_parser = subparsers.add_parser('generate', help='Generate a room and export it')
    add_common(gen_parser)
    gen_parser.add_argument('--out', required=True, help='Output JSON file')
    gen_parser.add_argument('--raster', help='Debug raster of the final wall outline (.bmp/.png)')
    gen_parser.add_argument('--snapshots', help='Directory for a debug raster after every generation step')

    render_parser = subparsers.add_parser('render', help='Plot a generated room')
    add_common(render_parser)
    render_parser.add_argument('--out', required=True, help='Output image file')
    render_parser.add_argument('--path-to', type=int, help='Draw the box path from box 0 to this box')
    render_parser.add_argument('--normals', action='store_true', help='Draw wall normals')

    survey_parser = subparsers.add_parser('survey', help='Tabulate metrics over many seeds')
    add_common(survey_parser)
    survey_parser.add_argument('--seeds', type=int, default=100, help='Number of seeds')
    survey_parser.add_argument('--start-seed', type=int, default=0, help='First seed')
    survey_parser.add_argument('--out', required=True, help='Output CSV file')

    chase_parser = subparsers.add_parser('chase', help='Simulate a follower chasing a stationary target')
    add_common(chase_parser)
    chase_parser.add_argument('--ticks', type=int, help='Number of ticks (overrides config)')
    chase_parser.add_argument('--target-box', type=int,
                              help='Box whose center holds the target (default: farthest box from box 0)')
    chase_parser.add_argument('--out', help='Trajectory CSV file (optional)')

    return parser


def parse_overrides(override_args) -> Dict[str, Any]:
    """Parse CLI override arguments into parameter dictionary"""
    overrides = {}

    if not override_args:
        return overrides

    for override in override_args:
        if '=' not in override:
            raise ValueError(f"Malformed override '{override}', expected key=value")

        key, value = override.split('=', 1)

        try:
            if value.lower() in ('true', 'false'):
                value = value.lower() == 'true'
            elif '.' in value:
                value = float(value)
            else:
                value = int(value)
        except ValueError:
            pass  # Keep as string

        overrides[key] = value

    return overrides


def setup_logging(log_dir: Optional[str] = None, verbose: bool = False) -> None:
    """Configure root logging to stdout and, optionally, a log file."""
    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handlers.append(logging.FileHandler(os.path.join(log_dir, 'roomnav.log')))

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def load_config(args) -> RoomConfig:
    overrides = parse_overrides(getattr(args, 'override', None))
    if getattr(args, 'seed', None) is not None:
        overrides['generation.seed'] = args.seed
    if getattr(args, 'ticks', None) is not None:
        overrides['simulation.ticks'] = args.ticks
    return RoomConfig.from_params(args.config, **overrides)


def farthest_box(room: Room, origin: int = 0) -> int:
    """Reachable box with the most openings between it and ``origin``."""
    best, best_length = origin, 0
    for index in room.graph.reachable_from(origin):
        length = room.graph.shortest_path_length(origin, index)
        if length is not None and length > best_length:
            best, best_length = index, length
    return best


def run_generate(args, config: RoomConfig) -> int:
    snapshotter = RasterSnapshotter(args.snapshots, seed=config.render.raster_seed) if args.snapshots else None
    room = build_room_from_config(config.generation, on_step=snapshotter)
    save_room_json(room, args.out, metadata={'seed': config.generation.seed})
    if args.raster:
        image = rasterize_room(room, np.random.default_rng(config.render.raster_seed))
        save_raster(image, args.raster)
    if snapshotter is not None:
        logger.info(f"Saved {len(snapshotter.paths)} step rasters to {args.snapshots}")
    print(f"Generated room: {len(room.boxes)} boxes, {len(room.sides)} walls, area {room.total_area}")
    return 0


def run_render(args, config: RoomConfig) -> int:
    from ..analysis import plot_room

    room = build_room_from_config(config.generation)
    box_path = None
    if args.path_to is not None:
        box_path = room.find_path(0, args.path_to, config.navigation.search)
        if box_path is None:
            logger.warning(f"No path from box 0 to box {args.path_to}")
    plot_room(room, box_path=box_path, out_path=args.out, show_normals=args.normals)
    print(f"Rendered room to {args.out}")
    return 0


def run_survey(args, config: RoomConfig) -> int:
    seeds = range(args.start_seed, args.start_seed + args.seeds)
    df = survey_rooms(seeds, config.generation)
    save_rows_to_csv(df.to_dict('records'), args.out)
    print(f"Survey completed. {len(df)} seeds written to {args.out}")
    return 0


def run_chase(args, config: RoomConfig) -> int:
    room = build_room_from_config(config.generation)
    target_box = args.target_box if args.target_box is not None else farthest_box(room)
    if not 0 <= target_box < len(room.boxes):
        raise ValueError(f"target box {target_box} out of range (room has {len(room.boxes)} boxes)")

    start_point = room.waypoints([0])[0]
    target_point = room.waypoints([target_box])[0]

    simulation = ChaseSimulation(room, config)
    simulation.add_target('target', target_point)
    follower = simulation.add_follower('follower', start_point, 'target')
    rows = simulation.run()

    final_box = rows[-1]['box'] if rows else 0
    if args.out:
        save_rows_to_csv(rows, args.out)
    print(f"Chase finished after {simulation.tick} ticks: follower in box {final_box}, "
          f"target in box {target_box}, {follower.replan_count} replans")
    return 0


COMMANDS = {
    'generate': run_generate,
    'render': run_render,
    'survey': run_survey,
    'chase': run_chase,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    setup_logging(args.log_dir, args.verbose)

    try:
        config = load_config(args)
        return COMMANDS[args.command](args, config)

    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 1
    except Exception as e:
        logger.error(f"Command {args.command} failed: {e}")
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
