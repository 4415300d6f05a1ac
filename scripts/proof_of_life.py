"""Proof of Life — standalone demo of anti-ban scheduling and item checks.

Run with: python -m scripts.proof_of_life
Requires: pip install -e . (no game client needed)
"""

import os
import sys
import time

from botkit import ActionScheduler, ClientActionPerformer, ItemRequirement

from agents.idler.strategy import REQUIRED_ITEMS
from agents.idler.world import demo_client

ACTIONS_TO_RUN = int(os.environ.get("DEMO_ACTIONS", "5"))


def main() -> None:
    client = demo_client()

    print("=" * 60)
    print("  BOTKIT — Proof of Life")
    print("=" * 60)
    print()

    # Item requirements
    print("[1/3] Checking supplies against the trip's requirements...")
    requirement = ItemRequirement(REQUIRED_ITEMS)
    report = requirement.report([*client.inventory_items(), *client.equipment_items()])
    print(report or "       Nothing missing.\n", end="")

    # Anti-ban scheduler with short delays
    print()
    print(f"[2/3] Running {ACTIONS_TO_RUN} anti-ban actions (50-150ms apart)...")
    antiban = ActionScheduler(ClientActionPerformer(client), 50, 150)
    performed = 0
    deadline = time.monotonic() + 5.0
    while performed < ACTIONS_TO_RUN:
        if time.monotonic() > deadline:
            print(f"       Timeout! Only performed {performed} actions")
            sys.exit(1)
        if antiban.should_execute():
            kind = antiban.execute()
            performed += 1
            print(
                f"       {kind}: mouse={client.mouse} pitch={client.pitch} yaw={client.yaw}"
            )
        time.sleep(0.01)

    # Summary
    print()
    print("[3/3] Done.")
    print("=" * 60)
    print(f"  SUCCESS! Performed {performed} anti-ban actions.")
    print("=" * 60)


if __name__ == "__main__":
    main()
