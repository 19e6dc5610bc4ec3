"""
Seed script — submits the sample processes to a running API.

Usage:
    python -m scripts.seed_processes
    python -m scripts.seed_processes data/sample_processes.txt

Run this after `uvicorn api.main:app` to populate the simulator with demo data.
Then drive it with:  curl -X POST "http://localhost:8000/scheduler/tick?count=5"
"""

import sys
from pathlib import Path

import httpx

from config.settings import settings

BASE_URL = "http://localhost:8000"


def seed(path: str = settings.SAMPLE_DATA_PATH):
    client = httpx.Client(base_url=BASE_URL, timeout=10.0)

    lines = Path(path).read_text(encoding="utf-8")
    print(f"Submitting {path} to {BASE_URL}...\n")

    resp = client.post("/processes/bulk", json={"lines": lines})
    resp.raise_for_status()
    data = resp.json()
    for process in data["processes"]:
        print(f"  [{process['state']}] {process['pid']}: {process['name']} "
              f"(priority {process['priority']}, {process['total_time']} ticks)")

    print(f"\nDone! {data['created']} processes created.")
    print("Check status:  curl http://localhost:8000/scheduler/status")
    print("Advance time:  curl -X POST http://localhost:8000/scheduler/tick")


if __name__ == "__main__":
    seed(*sys.argv[1:2])
