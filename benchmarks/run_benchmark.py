"""
CLI entry point for comparing scheduling policies.

Usage:
    python -m benchmarks.run_benchmark                                # all policies, sample data
    python -m benchmarks.run_benchmark --policy sjf                   # single policy
    python -m benchmarks.run_benchmark --file my_processes.txt        # custom workload
    python -m benchmarks.run_benchmark --time-slice 4                 # bigger RR quantum
"""

import argparse
import json
from pathlib import Path

from benchmarks.policy_comparison import PolicyComparison
from config.settings import settings
from loaders.sample_data import parse_lines


def main():
    parser = argparse.ArgumentParser(description="Scheduling Policy Comparison")
    parser.add_argument(
        "--file", type=str, default=settings.SAMPLE_DATA_PATH,
        help=f"Workload file in name,priority,total_time format (default: {settings.SAMPLE_DATA_PATH})",
    )
    parser.add_argument(
        "--policy", type=str, default="all",
        choices=["fcfs", "sjf", "priority", "round_robin", "all"],
        help="Which policy to run (default: all)",
    )
    parser.add_argument(
        "--time-slice", type=int, default=settings.TIME_SLICE,
        help=f"Round Robin quantum in ticks (default: {settings.TIME_SLICE})",
    )
    args = parser.parse_args()

    workload = parse_lines(Path(args.file).read_text(encoding="utf-8").splitlines())
    print("=== Scheduling Policy Comparison ===")
    print(f"Processes: {len(workload)} | Policy: {args.policy} | Time slice: {args.time_slice}\n")

    bench = PolicyComparison(workload, time_slice=args.time_slice)

    if args.policy == "all":
        results = bench.run_all_policies()
    else:
        results = [bench.run(args.policy)]

    print("=== RESULTS ===")
    print(json.dumps(results, indent=2))

    # Summary table
    print("\n{:<13} {:>7} {:>12} {:>10} {:>11}".format(
        "Policy", "Ticks", "Turnaround", "Waiting", "Dispatches"
    ))
    print("-" * 57)
    for r in results:
        print("{:<13} {:>7} {:>12.2f} {:>10.2f} {:>11}".format(
            r["policy"], r["total_ticks"], r["avg_turnaround"], r["avg_waiting"], r["dispatches"]
        ))


if __name__ == "__main__":
    main()
