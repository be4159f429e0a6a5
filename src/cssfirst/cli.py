from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from .config import load_config
from .engine import RecommendationEngine
from .errors import CSSFirstError
from .feature_catalog import feature_dataframe

LOGGER = logging.getLogger(__name__)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cssfirst",
        description="Recommend modern CSS features for a UI task and look up browser support.",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug output to stderr.")
    parser.add_argument("--env-file", type=str, default=None, help="Optional .env file with CSSFIRST_* overrides.")
    parser.add_argument("--offline", action="store_true", help="Use the curated static documentation only.")
    sub = parser.add_subparsers(dest="command", required=True)

    suggest = sub.add_parser("suggest", help="Suggest CSS features for a task description.")
    suggest.add_argument("description", help="What the UI should do.")
    suggest.add_argument(
        "--approach",
        choices=["modern", "compatible", "progressive"],
        default="modern",
        help="Support tiers to allow.",
    )
    suggest.add_argument("--context", type=str, default=None, help="Free-form project context, e.g. 'react + tailwind'.")
    suggest.add_argument("--analysis", action="store_true", help="Include the intent analysis in the output.")
    suggest.add_argument("--keywords", action="store_true", help="Treat the description as legacy keyword rules.")

    support = sub.add_parser("support", help="Browser support for a CSS property.")
    support.add_argument("property")
    support.add_argument("--experimental", action="store_true", help="List experimental features too.")

    details = sub.add_parser("details", help="Syntax, values and examples for a CSS property.")
    details.add_argument("property")
    details.add_argument("--no-examples", action="store_true", help="Omit code examples.")

    confirm = sub.add_parser("confirm", help="Record a consent decision for a CSS property.")
    confirm.add_argument("property")
    confirm.add_argument("--decline", action="store_true", help="Decline and list alternatives.")
    confirm.add_argument("--fallback", action="store_true", help="Include fallback guidance.")

    sub.add_parser("features", help="Print the feature catalog as a table.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    config = load_config(args.env_file)
    if args.offline:
        config.docs.enabled = False

    if args.command == "features":
        print(feature_dataframe().to_string(index=False))
        return 0

    engine = RecommendationEngine(config, strategy="keywords" if getattr(args, "keywords", False) else "semantic")
    try:
        if args.command == "suggest":
            result = engine.suggest(
                args.description,
                approach=args.approach,
                project_context=args.context,
                include_analysis=args.analysis,
            )
        elif args.command == "support":
            result = engine.check_support(args.property, include_experimental=args.experimental)
        elif args.command == "details":
            result = engine.get_details(args.property, include_examples=not args.no_examples)
        else:
            result = engine.confirm_usage(args.property, consented=not args.decline, needs_fallback=args.fallback)
    except CSSFirstError as exc:
        LOGGER.error("%s", exc)
        print(json.dumps({"error": str(exc)}, indent=2))
        return 1

    print(result.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
