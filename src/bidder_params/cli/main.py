from __future__ import annotations
import argparse, logging, sys
from bidder_params.cli.doctor import run_doctor
from bidder_params.settings import Settings


def build_parser() -> argparse.ArgumentParser:
    env = Settings.from_env()
    p = argparse.ArgumentParser(prog="bidder-params", description="Bidder param schema tooling")
    p.add_argument("-v", "--verbose", action="store_true")
    sub = p.add_subparsers(dest="cmd", required=True)

    d = sub.add_parser("doctor", help="Load every bidder param schema and report coverage against the partner registry")
    d.add_argument("--schema-dir", default=str(env.schema_dir))
    d.add_argument("--schema-ext", default=env.schema_ext)
    d.add_argument("--strict", action="store_true", default=env.strict, help="fail when a registered partner has no schema")
    d.add_argument("--report-out", default=None, help="also write the JSON report to this path")
    return p


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
    )
    if args.cmd == "doctor":
        return run_doctor(
            schema_dir=args.schema_dir,
            schema_ext=args.schema_ext,
            strict=args.strict,
            report_out=args.report_out,
        )
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
