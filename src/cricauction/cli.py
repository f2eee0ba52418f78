"""Command-line interface for evaluating auction snapshots."""

from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional, Sequence

from pydantic import ValidationError

from cricauction.config_loader import SettingsProfile, resolve_settings
from cricauction.evaluator import evaluate_team
from cricauction.formatting import format_currency
from cricauction.models import Bid, Player, Team


def _parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate live cricket auction snapshots")
    parser.add_argument("--settings", type=Path, default=None, help="Auction settings JSON file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    evaluate = subparsers.add_parser("evaluate", help="Evaluate every team in a snapshot file")
    evaluate.add_argument("snapshot", type=Path, help="Snapshot JSON with team(s), highestBid, currentPlayer")
    evaluate.add_argument("--currency", default="$", help="Currency symbol for display amounts")
    evaluate.add_argument("--output", type=Path, default=None, help="Write the evaluation JSON here")

    show = subparsers.add_parser("settings", help="Print the resolved auction settings")
    show.add_argument("--save", type=Path, default=None, help="Also save them as a settings file")

    serve = subparsers.add_parser("serve", help="Run the evaluator API")
    serve.add_argument("--host", default="127.0.0.1")
    serve.add_argument("--port", type=int, default=8000)

    return parser.parse_args(argv)


def _load_snapshot(path: Path) -> tuple[list[Team], Optional[Bid], Optional[Player]]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(f"Snapshot {path} must contain a JSON object")
    raw_teams = data.get("teams")
    if raw_teams is None:
        raw_teams = [data["team"]] if data.get("team") else []
    if not raw_teams:
        raise ValueError(f"Snapshot {path} has no team or teams entry")
    teams = [Team.model_validate(team) for team in raw_teams]
    highest = data.get("highestBid")
    current = data.get("currentPlayer")
    return (
        teams,
        Bid.model_validate(highest) if highest else None,
        Player.model_validate(current) if current else None,
    )


def _evaluate(args: argparse.Namespace) -> dict[str, Any]:
    settings = resolve_settings(args.settings)
    teams, highest_bid, current_player = _load_snapshot(args.snapshot)
    evaluations = []
    for team in teams:
        view = evaluate_team(team, highest_bid, current_player, settings)
        payload = asdict(view)
        payload["state"] = view.state.value
        payload["minimum_bid_display"] = format_currency(view.minimum_bid, args.currency)
        payload["projected_wallet_display"] = format_currency(view.projected_wallet, args.currency)
        evaluations.append(payload)
    return {"min_bid_increment": settings.min_bid_increment, "evaluations": evaluations}


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        import uvicorn

        from cricauction.api import create_app

        uvicorn.run(create_app(resolve_settings(args.settings)), host=args.host, port=args.port)
        return

    try:
        if args.command == "settings":
            settings = resolve_settings(args.settings)
            profile = SettingsProfile.from_settings(settings)
            if args.save:
                profile.save(args.save)
                print(f"Saved settings to {args.save}")
            print(json.dumps(profile.settings, indent=2))
            return

        result = _evaluate(args)
    except (OSError, ValueError, KeyError) as exc:
        # pydantic's ValidationError is a ValueError subclass.
        kind = "Invalid snapshot" if isinstance(exc, ValidationError) else "Error"
        raise SystemExit(f"{kind}: {exc}") from exc

    text = json.dumps(result, indent=2)
    if args.output:
        args.output.write_text(text, encoding="utf-8")
        print(f"Wrote evaluation to {args.output}")
    else:
        print(text)


if __name__ == "__main__":
    main()
