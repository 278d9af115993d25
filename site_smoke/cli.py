#!/usr/bin/env python3
"""
Run the website smoke tests and the Lighthouse audit back to back.

Both runs always execute, each with its own browser session; the exit
status is 0 only when both succeed.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from site_smoke.config import ThresholdPolicy
from site_smoke.lighthouse_test import add_audit_arguments, provider_from_args, run_lighthouse_test
from site_smoke.report import RunStatus, status_icon
from site_smoke.website_tests import add_arguments, run_website_tests, site_from_args


def combine(statuses: dict[str, RunStatus]) -> RunStatus:
    failed = [name for name, status in statuses.items() if status is RunStatus.FAILURE]
    for name, status in statuses.items():
        print(f"{status_icon(status is RunStatus.SUCCESS)} {name}: {status.value}")
    if failed:
        print(f"Failed runs: {', '.join(failed)}")
        return RunStatus.FAILURE
    return RunStatus.SUCCESS


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run website smoke tests and the Lighthouse audit.")
    add_arguments(parser)
    add_audit_arguments(parser)
    args = parser.parse_args(argv)

    if args.timeout_ms < 1 or args.audit_timeout < 1:
        print("Error: timeouts must be >= 1")
        return 2
    try:
        site = site_from_args(args)
    except ValueError as exc:
        print(f"Error: {exc}")
        return 2

    output_dir = Path(args.output_dir)
    try:
        statuses = {"website": run_website_tests(site, output_dir)}
        print()
        statuses["lighthouse"] = run_lighthouse_test(
            site.url,
            ThresholdPolicy(),
            provider_from_args(args),
            output_dir,
        )
    except OSError as exc:
        print(f"Error: failed to write report: {exc}")
        return 1

    print()
    return combine(statuses).exit_code


if __name__ == "__main__":
    raise SystemExit(main())
