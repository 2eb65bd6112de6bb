import argparse, json, logging, os, sys
from .hops import parse_hops
from .query import resolve
from .render import render_annotated, render_report
from .ipinfo import IPInfoClient
from .jsonio import write_json, results_to_json
from .util import ensure_out, timestamp, write, read_lines
from .ui import prompt_token, run_interactive

log = logging.getLogger(__name__)


def resolve_token(flag_token: str | None) -> str:
    """-t flag, then IPINFO_TOKEN, then an interactive prompt."""
    if flag_token:
        return flag_token
    env = os.environ.get("IPINFO_TOKEN")
    if env:
        return env
    if not sys.stdin.isatty():
        raise SystemExit("No ipinfo.io token: pass -t TOKEN or set IPINFO_TOKEN.")
    return prompt_token()


def build_parser():
    ap = argparse.ArgumentParser(prog="trace-to-geo",
                                 description="Geolocate the IPs in a list or traceroute via ipinfo.io")
    ap.add_argument("-t", "--token", default=None, help="ipinfo.io API token (default: $IPINFO_TOKEN)")
    ap.add_argument("--file", default=None, help="Read input from this file instead of stdin")
    ap.add_argument("--mode", choices=["trace", "full", "json"], default="trace",
                    help="trace: annotated input; full: every field per hop; json: machine readable")
    ap.add_argument("--out", default=None, help="Optional path to save JSON")
    ap.add_argument("--save", action="store_true", help="Also write the rendered output under out/")
    ap.add_argument("--interactive", action="store_true", help="Menu-driven session")
    ap.add_argument("--no-batch", action="store_true", help="One request per IP instead of /batch")
    ap.add_argument("-v", "--verbose", action="count", default=0)
    return ap


def run(args) -> int:
    token = resolve_token(args.token)
    client = IPInfoClient(token)
    lookup = client.lookup_single if args.no_batch else client.lookup_batch

    if args.interactive:
        run_interactive(lookup)
        return 0

    lines = read_lines(args.file)
    if not lines:
        print("No input detected.", file=sys.stderr)
        return 1
    hops = parse_hops(lines)
    if not hops:
        print("No IP addresses found in input.", file=sys.stderr)
        return 1
    log.info("parsed %d hops from %d lines", len(hops), len(lines))

    geo = resolve(hops, lookup)
    doc = results_to_json(hops, geo)

    if args.mode == "json":
        text = json.dumps(doc, indent=2)
    elif args.mode == "full":
        text = "\n".join(render_report(hops, geo))
    else:
        text = "\n".join(render_annotated(lines, hops, geo))
    print(text)

    if args.save:
        ensure_out()
        path = f"out/trace_geo_{timestamp()}_{args.mode}.txt"
        write(path, text + "\n")
        print(f"Saved: {path}", file=sys.stderr)

    if args.out:
        write_json(args.out, doc)
        print(f"Saved: {args.out}", file=sys.stderr)
    return 0


def main(argv=None):
    args = build_parser().parse_args(argv)
    level = logging.WARNING - 10 * min(args.verbose, 2)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    try:
        sys.exit(run(args))
    except KeyboardInterrupt:
        print("Interrupted by user.", file=sys.stderr)
        sys.exit(130)


if __name__ == "__main__":
    main()
