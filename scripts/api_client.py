"""Lightweight REST client for the cricauction evaluator API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_snapshot(path: Path) -> dict:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid snapshot JSON: {exc}") from exc
    if "teams" not in data and "team" in data:
        data["teams"] = [data.pop("team")]
    return data


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the cricauction REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("snapshot", type=Path, nargs="?", help="Snapshot JSON to evaluate")
    parser.add_argument("--currency", default="$", help="Currency symbol for display amounts")
    parser.add_argument("--settings", action="store_true", help="Print the server settings and exit")
    parser.add_argument("--bid", type=float, help="Validate this bid amount instead of evaluating")
    parser.add_argument("--min-bid", type=float, default=0.0, help="Minimum bid for --bid")
    parser.add_argument("--wallet", type=float, default=0.0, help="Wallet balance for --bid")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.settings:
            resp = client.get("/settings")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.bid is not None:
            resp = client.post(
                "/bids/validate",
                json={"amount": args.bid, "minBid": args.min_bid, "walletBalance": args.wallet},
            )
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.snapshot is None:
            raise SystemExit("snapshot file is required unless using --settings or --bid")

        payload = load_snapshot(args.snapshot)
        payload["currency"] = args.currency
        resp = client.post("/evaluate/teams", json=payload)
        if resp.status_code == 422:
            raise SystemExit(f"Snapshot rejected: {json.dumps(resp.json()['detail'], indent=2)}")
        resp.raise_for_status()
        body = resp.json()
        print(f"Min bid increment: {body['minBidIncrement']}")
        for evaluation in body["evaluations"]:
            print(
                f"{evaluation['teamId']}: {evaluation['state']} "
                f"(min bid {evaluation['minimumBidDisplay']}, "
                f"after win {evaluation['projectedWalletDisplay']})"
            )


if __name__ == "__main__":
    main()
