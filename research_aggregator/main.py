import argparse
import json
import logging
import os
import sys
from dataclasses import replace

import structlog

from research_aggregator.config.settings import Settings
from research_aggregator.exceptions import ResearchSystemError
from research_aggregator.orchestrator import conduct_research


def _init_logging():
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(level=level, stream=sys.stderr)
    structlog.configure(
        processors=[structlog.processors.add_log_level, structlog.processors.TimeStamper(fmt="iso"), structlog.processors.JSONRenderer()],
        wrapper_class=structlog.make_filtering_bound_logger(getattr(logging, level, logging.INFO)),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def _parse_args(argv=None):
    p = argparse.ArgumentParser(prog="research-aggregator", description="Multi-source research aggregation")
    p.add_argument("--topic", required=True, help="Research topic (required)")
    p.add_argument("--context", default=None, help="Optional free-form requester context")
    p.add_argument("--platforms", default=None, help="Comma-separated platforms (default: all)")
    p.add_argument("--json", action="store_true", help="Print sources as JSON")
    return p.parse_args(argv)


def main(argv=None) -> int:
    _init_logging()
    log = structlog.get_logger()
    args = _parse_args(argv)

    topic = args.topic.strip()
    if not topic:
        log.error("empty_topic")
        return 2

    try:
        settings = Settings()
        if args.platforms:
            platforms = tuple(p.strip().lower() for p in args.platforms.split(",") if p.strip())
            settings = replace(settings, enabled_platforms=platforms)
        log.info("research_started", topic=topic, **settings.to_dict())
        sources = conduct_research(topic, args.context, settings=settings)
    except ResearchSystemError as e:
        log.error("research_failed", topic=topic, error=str(e))
        return 1

    if not sources:
        log.warning("no_sufficient_sources", topic=topic)
        return 3

    log.info("research_finished", topic=topic, sources=len(sources))
    if args.json:
        print(json.dumps([s.to_synthesis_dict() for s in sources], indent=2, ensure_ascii=False))
    else:
        for i, s in enumerate(sources, 1):
            print(f"{i:2d}. [{s.platform.value}] {s.title} ({s.final_score:.2f})")
            if s.url:
                print(f"    {s.url}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
