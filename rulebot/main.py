"""
Command-line entry point for RuleBot.

Usage:
  rulebot serve --port 5050
  rulebot ask "my wifi keeps dropping"
  rulebot ask "printer offline" --json
"""
import argparse
import json
import logging
import sys

from .classifier import RuleClassifier
from .settings import configure_logging, load_settings

logger = logging.getLogger(__name__)


def serve(args) -> int:
    import uvicorn
    from .api import create_app

    settings = load_settings(args.config)
    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = args.port
    configure_logging(settings.log_level)

    logger.info("RuleBot backend running on http://localhost:%d", settings.port)
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port,
                log_level=settings.log_level.lower())
    return 0


def ask(args) -> int:
    configure_logging("DEBUG" if args.verbose else "WARNING")
    if not args.message.strip():
        print("error: message is required", file=sys.stderr)
        return 2

    clf = RuleClassifier()
    if args.json:
        print(json.dumps(clf.reply(args.message), ensure_ascii=False, indent=2))
    else:
        print(clf.classify(args.message).render())
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="rulebot", description="Rule-based IT support bot")
    sub = parser.add_subparsers(dest="command", required=True)

    p_serve = sub.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", help="Bind address (overrides config)")
    p_serve.add_argument("--port", type=int, help="Listening port (overrides PORT / config)")
    p_serve.add_argument("--config", help="Path to YAML config (default: $RULEBOT_CONFIG)")
    p_serve.set_defaults(func=serve)

    p_ask = sub.add_parser("ask", help="Classify a single message")
    p_ask.add_argument("message", help="Support query text")
    p_ask.add_argument("--json", action="store_true", help="Print the structured JSON payload")
    p_ask.add_argument("--verbose", action="store_true", help="Log which rule matched")
    p_ask.set_defaults(func=ask)

    args = parser.parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
