"""Command-line entrypoint: evaluate one subject and print the verdict as JSON."""

from __future__ import annotations

import argparse
import json
import sys

from tririsk.config.settings import IpqsConfig, load_config
from tririsk.core.errors import ConfigError, ValidationError
from tririsk.core.logging import configure_logging
from tririsk.infra.cache import DictCache
from tririsk.orchestrator.evaluator import TriRiskEvaluator
from tririsk.providers.transport import HttpTransport


def run_once(
    *,
    email: str | None = None,
    ip_address: str | None = None,
    user_agent: str | None = None,
    phone_number: str | None = None,
    country: str | None = None,
    strictness: int | None = None,
    config: IpqsConfig | None = None,
    transport: HttpTransport | None = None,
) -> str:
    cfg = config or load_config()
    evaluator = TriRiskEvaluator.from_config(cfg, DictCache(), transport=transport)
    result = evaluator.evaluate(
        email=email,
        ip_address=ip_address,
        user_agent=user_agent,
        phone_number=phone_number,
        phone_country=country,
        ip_options={"strictness": strictness} if strictness is not None else None,
    )
    return json.dumps(result.to_dict(), ensure_ascii=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tririsk")
    parser.add_argument("--email", help="Email address to score.")
    parser.add_argument("--ip", dest="ip_address", help="IP address to score (needs --user-agent).")
    parser.add_argument("--user-agent", help="User agent sent with the IP lookup.")
    parser.add_argument("--phone", dest="phone_number", help="Phone number to score.")
    parser.add_argument("--country", help="2-letter country code for the phone lookup.")
    parser.add_argument("--strictness", type=int, choices=range(0, 4), help="IP lookup strictness (0-3).")
    parser.add_argument("--config", dest="config_path", help="Path to a yaml config file.")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        cfg = load_config(args.config_path)
    except ConfigError as exc:
        print(f"configuration error: {exc}", file=sys.stderr)
        return 1
    configure_logging(cfg.log_level)
    try:
        output = run_once(
            email=args.email,
            ip_address=args.ip_address,
            user_agent=args.user_agent,
            phone_number=args.phone_number,
            country=args.country,
            strictness=args.strictness,
            config=cfg,
        )
    except ValidationError as exc:
        print(f"invalid input: {exc}", file=sys.stderr)
        return 2
    print(output)
    return 0
