"""CLI for running an elevator-bank simulation, optionally from a JSON config."""
from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from pathlib import Path
from typing import Dict, Optional

from liftsim import EventLogger, SimulationConfig, build_simulation, enable_console_logging


def load_config(path: Optional[Path], seed: Optional[int]) -> SimulationConfig:
    data: Dict = json.loads(path.read_text()) if path else {}
    if seed is not None:
        data["random_seed"] = seed
    return SimulationConfig.from_dict(data)


def save_results(output_path: Optional[Path], data: Dict) -> None:
    if not output_path:
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(json.dumps(data, indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("config", type=Path, nargs="?", help="Path to a JSON scenario configuration file")
    parser.add_argument("--seed", type=int, help="Override the random seed from the config")
    parser.add_argument(
        "--output",
        type=Path,
        help="Optional file path to write the result and event log as JSON",
    )
    parser.add_argument("--log-level", default="INFO", help="Console log level (default: INFO)")
    parser.add_argument("--quiet", action="store_true", help="Do not log per-tick events")
    args = parser.parse_args()

    enable_console_logging(level=args.log_level.upper())
    try:
        config = load_config(args.config, args.seed)
    except ValueError as exc:
        parser.error(str(exc))

    simulation = build_simulation(config)
    event_logger = EventLogger(keep_lines=args.output is not None)
    if not args.quiet:
        simulation.on_event("*", event_logger)
    result = simulation.run()

    summary = {
        "scenario": args.config.stem if args.config else "default",
        "total_ticks": result.total_ticks,
        "generated": result.generated,
        "completed": result.completed,
        "incomplete": result.incomplete,
        "final_metrics": asdict(result.metrics),
        "event_log": event_logger.lines or [],
    }
    save_results(args.output, summary)

    print(f"Scenario: {summary['scenario']}")
    print(f"Ticks: {result.total_ticks}")
    print(f"Delivered: {result.completed}/{config.max_passengers}")
    print("Final metrics:")
    for key, value in summary["final_metrics"].items():
        print(f"  {key}: {value}")
    if args.output:
        print(f"Saved results to {args.output}")


if __name__ == "__main__":
    main()
