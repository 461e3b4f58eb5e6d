"""Entry point for flagplay package."""

import argparse
import json
import logging
import sys

from pydantic import ValidationError


def main() -> None:
    """Main entry point for the flagplay command line."""
    from flagplay.simulation import get_config

    config = get_config()

    parser = argparse.ArgumentParser(
        description="flagplay - Flag Football Play Simulator",
        prog="flagplay",
    )
    parser.add_argument(
        "play",
        nargs="?",
        help="Play JSON file (offense, defense, roster, field_settings)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible play",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=config.playback_speed,
        help=f"Playback speed multiplier (default: {config.playback_speed})",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Offense only, as in the designer's play-test mode",
    )
    parser.add_argument(
        "--frames",
        action="store_true",
        help="Include recorded frames in JSON output",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON instead of a play-by-play",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=config.log_level,
        help=f"Logging level (default: {config.log_level})",
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Run the HTTP API instead of simulating a file",
    )
    parser.add_argument("--host", default="127.0.0.1", help="API host (with --serve)")
    parser.add_argument("--port", type=int, default=8000, help="API port (with --serve)")

    args = parser.parse_args()

    errors = config.validate()
    if errors:
        parser.error("; ".join(errors))

    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.serve:
        from flagplay.api.main import run

        run(host=args.host, port=args.port)
        return

    if not args.play:
        parser.error("a play file is required (or use --serve)")

    from flagplay.api.schemas.play_sim import RunPlayRequest
    from flagplay.api.services.play_sim_service import PlaySimService

    try:
        with open(args.play) as f:
            payload = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Cannot read play file {args.play}: {e}", file=sys.stderr)
        sys.exit(2)
    if not isinstance(payload, dict):
        print(f"Invalid play file {args.play}: expected a JSON object", file=sys.stderr)
        sys.exit(2)

    payload["playback_speed"] = args.speed
    payload["record_frames"] = args.frames
    payload["preview"] = args.preview or payload.get("preview", False)
    if args.seed is not None:
        payload["seed"] = args.seed

    try:
        request = RunPlayRequest.model_validate(payload)
    except ValidationError as e:
        print(f"Invalid play file {args.play}:\n{e}", file=sys.stderr)
        sys.exit(2)

    response = PlaySimService(config).run(request)

    if args.json:
        print(json.dumps(response.model_dump(), indent=2))
        return

    print("flagplay - Flag Football Play Simulator")
    print("=" * 50)
    for event in response.events:
        who = f" ({event.player_id})" if event.player_id else ""
        print(f"[{event.time:5.2f}s] {event.type:<12}{who} {event.message}")
    print()
    print(f"Result: {response.summary}")


if __name__ == "__main__":
    main()
