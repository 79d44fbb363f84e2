# cli.py
"""
CLI tool to measure the TTFB (Time To First Byte) of a URL and optionally
block a pipeline when the 95th percentile is above a threshold.

    ttfb-gate -u https://example.com -c 50 -t 800 --gate

Exit codes: 0 ok / gate passed, 1 gate failed, 2 usage error,
3 request or statistics failure.
"""
import argparse
import sys
from typing import List, Optional

from pydantic import ValidationError

from .config import GateMode, Settings, env_defaults
from .errors import TtfbGateError
from .gate import GateEvaluator
from .load import run_load
from .report import build_payload, gate_lines, header_lines, summary_lines, write_json_report
from .sampler import latencies, sample_latency
from .stats import summarize

EXIT_FATAL = 3


def build_parser() -> argparse.ArgumentParser:
    env = env_defaults()
    parser = argparse.ArgumentParser(
        prog="ttfb-gate",
        description="Measure the TTFB of a URL and establish a blocking gate if needed",
    )
    parser.add_argument("-u", "--url", default=env["url"], help="target URL (env: TARGET_URL)")
    parser.add_argument("-c", "-n", "--count", "--number", dest="count", type=int, default=env["count"],
                        help="number of sequential tests to run (env: REQUESTS)")
    parser.add_argument("-t", "--threshold", dest="threshold_ms", type=float, default=env["threshold_ms"],
                        help="threshold for the 95th percentile in ms (env: THRESHOLD_MS)")
    parser.add_argument("-g", "--gate", action="store_true",
                        help="exit with code 1 if the 95th percentile is above the threshold")
    parser.add_argument("--gate-mode", choices=[m.value for m in GateMode], default=env["gate_mode"],
                        help="off, warn (print only) or enforce (same as --gate) (env: GATE_MODE)")
    parser.add_argument("-v", "--verbose", action="store_true", help="print the result of each request")
    parser.add_argument("-e", "--emulate-load", action="store_true",
                        help="send a burst of concurrent requests before sampling")
    parser.add_argument("-r", "--requests-count", type=int, default=env["requests_count"],
                        help="number of requests for load emulation (env: LOAD_REQUESTS)")
    parser.add_argument("--concurrency", type=int, default=env["concurrency"],
                        help="max in-flight requests during load emulation (env: CONCURRENCY)")
    parser.add_argument("--timeout", type=float, default=env["timeout"],
                        help="per-request timeout in seconds, none by default (env: TIMEOUT)")
    parser.add_argument("--json", dest="json_path", help="write a JSON report to this path")
    parser.add_argument("--plot", dest="plot_path", help="save a histogram + ECDF PNG to this path")
    return parser


def parse_settings(argv: Optional[List[str]] = None) -> Settings:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not args.url:
        parser.error("the following arguments are required: -u/--url (or set TARGET_URL)")

    try:
        return Settings(
            url=args.url,
            count=args.count,
            threshold_ms=args.threshold_ms,
            gate_mode=GateMode.ENFORCE if args.gate else args.gate_mode,
            verbose=args.verbose,
            emulate_load=args.emulate_load,
            requests_count=args.requests_count,
            concurrency=args.concurrency,
            timeout=args.timeout,
            json_path=args.json_path,
            plot_path=args.plot_path,
        )
    except ValidationError as e:
        parser.error(str(e))


def run(settings: Settings) -> int:
    if settings.emulate_load:
        print(f">> Emulating load on {settings.url} with {settings.requests_count} requests")
        result = run_load(
            settings.url,
            settings.requests_count,
            concurrency=settings.concurrency,
            timeout=settings.timeout,
        )
        print(f">> Load emulation done: {result.completed} completed, {result.failed} failed")

    for line in header_lines(settings.url, settings.count, settings.verbose):
        print(line)

    try:
        samples = sample_latency(
            settings.url,
            settings.count,
            verbose=settings.verbose,
            timeout=settings.timeout,
        )
        summary = summarize(latencies(samples))
    except TtfbGateError as e:
        print(f"❌ {e}", file=sys.stderr)
        print("💀 Aborting, no statistics were produced", file=sys.stderr)
        return EXIT_FATAL

    for line in summary_lines(settings.url, settings.count, summary):
        print(line)

    decision = GateEvaluator(settings.threshold_ms, settings.gate_mode).evaluate(summary.p95)
    for line in gate_lines(decision):
        print(line)

    if settings.json_path:
        out = write_json_report(settings.json_path, build_payload(settings.url, samples, summary, decision))
        print(f">> JSON report: {out}")
    if settings.plot_path:
        from .plot import save_plots

        out = save_plots(latencies(samples), summary, settings.plot_path)
        print(f">> Plot saved: {out}")

    return decision.exit_code


def main(argv: Optional[List[str]] = None) -> int:
    return run(parse_settings(argv))


if __name__ == "__main__":
    raise SystemExit(main())
