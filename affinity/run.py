"""
Command-line runner for the affinity engine.

Usage:
    python -m affinity.run --config configs/config.yaml --input pair.json
    python -m affinity.run --input team.json --batch --report report.csv

Single mode input:
    {"subject": {...}, "counterpart": {...},
     "context": "liderazgo", "closeness": "cercano", "messages": ["..."]}

Batch mode input:
    {"subject": {...}, "counterparts": [{"profile": {...}, "closeness": "far"}, ...],
     "context": "execution", "messages": ["..."]}

Profiles use the PersonProfile.to_dict() layout.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Dict, Any, Optional

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def setup_logging(log_level: str) -> None:
    """Configure logging level from config."""
    level = getattr(logging, str(log_level).upper(), logging.INFO)
    logging.getLogger().setLevel(level)


def _load_input(filepath: str) -> Dict[str, Any]:
    path = Path(filepath)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {filepath}")
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def run_single(
    payload: Dict[str, Any],
    config: Optional[Dict[str, Any]] = None,
    context: Optional[str] = None,
    closeness: Optional[str] = None
) -> Dict[str, Any]:
    """
    Score one pair from an input payload.

    Args:
        payload: Parsed single-mode input
        config: Loaded configuration
        context: Context override
        closeness: Closeness override

    Returns:
        The AffinityResult as a dictionary
    """
    from .inference import AffinityEngine
    from .schema import PersonProfile

    engine = AffinityEngine(config)
    subject = PersonProfile.from_dict(payload["subject"]) if payload.get("subject") else None
    counterpart = PersonProfile.from_dict(payload["counterpart"]) if payload.get("counterpart") else None

    result = engine.score(
        subject,
        counterpart,
        context or payload.get("context"),
        closeness or payload.get("closeness"),
        messages=payload.get("messages")
    )
    return result.to_dict()


def run_batch(
    payload: Dict[str, Any],
    config: Optional[Dict[str, Any]] = None,
    context: Optional[str] = None,
    report_path: Optional[str] = None
) -> Dict[str, Any]:
    """
    Score a subject against many counterparts and summarize.

    Args:
        payload: Parsed batch-mode input
        config: Loaded configuration
        context: Context override
        report_path: If provided, write the per-pair table as CSV

    Returns:
        Dictionary with the dashboard summary, per-context table and results
    """
    from .evaluation import results_to_frame, summarize_by_context, dashboard_summary
    from .inference import AffinityService
    from .schema import PersonProfile

    subject = PersonProfile.from_dict(payload["subject"])
    subject_id = subject.person_id or "subject"
    profiles = {subject_id: subject}
    counterparts = []
    for idx, entry in enumerate(payload.get("counterparts", [])):
        profile = PersonProfile.from_dict(entry.get("profile") or {})
        counterpart_id = profile.person_id or f"counterpart_{idx}"
        profiles[counterpart_id] = profile
        counterparts.append((counterpart_id, entry.get("closeness")))

    messages = payload.get("messages") or []
    service = AffinityService(
        profile_source=profiles.get,
        history_source=lambda _identity, limit: messages[:limit],
        config=config
    )
    results = service.recalculate(subject_id, counterparts, context or payload.get("context"))

    frame = results_to_frame(results)
    if report_path:
        frame.to_csv(report_path, index=False)
        logger.info(f"Saved affinity report to {report_path}")

    return {
        "summary": dashboard_summary(frame),
        "by_context": summarize_by_context(frame).to_dict(orient="records"),
        "results": [r.to_dict() for r in results],
    }


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Compute affinity scores between people"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to configuration YAML file"
    )
    parser.add_argument(
        "--input",
        type=str,
        required=True,
        help="Path to the JSON input payload"
    )
    parser.add_argument(
        "--context",
        type=str,
        default=None,
        help="Context override (e.g. leadership, liderazgo, relaciones)"
    )
    parser.add_argument(
        "--closeness",
        type=str,
        default=None,
        help="Closeness override for single mode (close, neutral, far, cercano, ...)"
    )
    parser.add_argument(
        "--batch",
        action="store_true",
        help="Score the subject against a list of counterparts"
    )
    parser.add_argument(
        "--report",
        type=str,
        default=None,
        help="Batch mode: write the per-pair table to this CSV path"
    )

    args = parser.parse_args()

    from .configs import load_config, validate_config

    try:
        config = {}
        if args.config:
            config = load_config(args.config)
            for issue in validate_config(config):
                logger.warning(f"Config issue: {issue}")
            setup_logging(config.get("global", {}).get("log_level", "INFO"))

        payload = _load_input(args.input)
        if args.batch:
            output = run_batch(payload, config, args.context, args.report)
        else:
            output = run_single(payload, config, args.context, args.closeness)
        print(json.dumps(output, indent=2, ensure_ascii=False))
        sys.exit(0)
    except (FileNotFoundError, ValueError, KeyError) as e:
        logger.error(f"Affinity run failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
