"""Lightweight REST client for the golfcup API."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import httpx


def load_payload(path: Path) -> dict:
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise SystemExit(f"Invalid snapshot JSON: {exc}") from exc


def main() -> None:
    parser = argparse.ArgumentParser(description="Interact with the golfcup REST API")
    parser.add_argument("base_url", help="Base URL of the API, e.g. http://localhost:8000")
    parser.add_argument("snapshot", type=Path, nargs="?", help="Tournament snapshot JSON")
    parser.add_argument("--facts-only", action="store_true", help="Fetch the fun-facts feed and exit")
    parser.add_argument("--course", action="store_true", help="Show the course stroke-index table and exit")
    parser.add_argument("--output", type=Path, help="Destination path for the recomputed snapshot")
    args = parser.parse_args()

    with httpx.Client(base_url=args.base_url) as client:
        if args.course:
            resp = client.get("/course")
            resp.raise_for_status()
            print(json.dumps(resp.json(), indent=2))
            return

        if args.snapshot is None:
            raise SystemExit("snapshot file is required unless using --course")
        payload = load_payload(args.snapshot)

        resp = client.post("/facts", json=payload)
        resp.raise_for_status()
        for fact in resp.json()["facts"]:
            print(f"- {fact}")
        if args.facts_only:
            return

        resp = client.post("/tournaments/recompute", json=payload)
        if resp.status_code == 400:
            raise SystemExit(resp.json().get("detail", "recompute rejected"))
        resp.raise_for_status()
        body = resp.json()
        tournament = body["tournament"]
        print("Total score:", json.dumps(tournament["totalScore"], indent=2))
        print("Projected score:", json.dumps(tournament["projectedScore"], indent=2))
        if args.output:
            args.output.write_text(json.dumps(body, indent=2), encoding="utf-8")
            print(f"Recomputed snapshot saved to {args.output}")


if __name__ == "__main__":
    main()
