"""
Smoke test for the affinity engine on a synthetic team.

This script validates that:
1. Synthetic profiles load through the schema without errors
2. Every context produces bounded scores for every pair
3. Closeness never raises a score when moving from close to far
4. Missing assessment data yields an explicit not-available result
5. The batch report and dashboard summary build from the results

Usage:
    python scripts/smoke_test.py [--members 12] [--seed 7]
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import argparse
import logging
import numpy as np

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_team(n_members: int, seed: int):
    """Random but plausible profiles on the 65-135 assessment range."""
    from affinity.schema import (
        PersonProfile, CognitiveStyle, COMPETENCY_KEYS, OUTCOME_KEYS, TALENT_KEYS
    )

    rng = np.random.default_rng(seed)
    styles = list(CognitiveStyle)
    team = {}
    for i in range(n_members):
        talent_keys = rng.choice(TALENT_KEYS, size=6, replace=False)
        team[f"member_{i:02d}"] = PersonProfile(
            competencies={k: float(rng.integers(65, 136)) for k in COMPETENCY_KEYS},
            outcomes={k: float(rng.integers(65, 136)) for k in OUTCOME_KEYS},
            talents={str(k): float(rng.integers(65, 136)) for k in talent_keys},
            style=styles[i % len(styles)].value,
            name=f"Member {i}"
        )
    # One member with no assessment data at all
    team["member_new"] = PersonProfile(name="New Member")
    return team


def run_smoke_test(n_members: int = 12, seed: int = 7) -> int:
    """Run smoke tests over every context and closeness."""

    logger.info("=" * 60)
    logger.info("SMOKE TEST: Affinity Engine")
    logger.info("=" * 60)

    from affinity.configs import load_config, validate_config
    from affinity.evaluation import results_to_frame, dashboard_summary, compute_score_distribution
    from affinity.inference import AffinityService
    from affinity.schema import RelationalContext

    config_path = project_root / "configs" / "config.yaml"
    logger.info(f"Loading config from {config_path}")
    config = load_config(str(config_path))
    issues = validate_config(config)
    for issue in issues:
        logger.warning(f"  Config issue: {issue}")

    team = build_team(n_members, seed)
    service = AffinityService(profile_source=team.get, config=config)
    subject_id = "member_00"
    others = [m for m in team if m != subject_id]

    checks = {}

    # =========================================================================
    # TEST 1: Bounds across contexts
    # =========================================================================
    logger.info("\n" + "=" * 60)
    logger.info("TEST 1: Bounds across contexts")
    logger.info("=" * 60)

    all_results = []
    try:
        for context in RelationalContext:
            results = service.recalculate(subject_id, [(m, "close") for m in others], context.value)
            for r in results:
                if not r.available:
                    continue
                assert 0 <= r.composite <= 135, f"composite out of range: {r.composite}"
                assert 0 <= r.heat <= 100, f"heat out of range: {r.heat}"
            all_results.extend(results)
            logger.info(f"  {context.value}: {sum(r.available for r in results)}/{len(results)} available")
        checks["bounds"] = "PASSED"
    except Exception as e:
        logger.error(f"  Bounds TEST FAILED: {e}")
        checks["bounds"] = f"FAILED - {e}"

    # =========================================================================
    # TEST 2: Closeness ordering
    # =========================================================================
    logger.info("\n" + "=" * 60)
    logger.info("TEST 2: Closeness ordering")
    logger.info("=" * 60)

    try:
        violations = 0
        for counterpart_id in others[:-1]:
            for context in RelationalContext:
                scores = [
                    service.compute(subject_id, counterpart_id, context.value, closeness).composite
                    for closeness in ("close", "neutral", "far")
                ]
                if not scores[0] >= scores[1] >= scores[2]:
                    violations += 1
        logger.info(f"  Ordering violations: {violations}")
        checks["closeness"] = "PASSED" if violations == 0 else f"FAILED - {violations} violations"
    except Exception as e:
        logger.error(f"  Closeness TEST FAILED: {e}")
        checks["closeness"] = f"FAILED - {e}"

    # =========================================================================
    # TEST 3: Missing data
    # =========================================================================
    logger.info("\n" + "=" * 60)
    logger.info("TEST 3: Missing assessment data")
    logger.info("=" * 60)

    result = service.compute(subject_id, "member_new")
    logger.info(f"  member_new: available={result.available} reason={result.reason}")
    checks["missing_data"] = "PASSED" if not result.available and result.heat is None else "FAILED"

    # =========================================================================
    # Summary
    # =========================================================================
    logger.info("\n" + "=" * 60)
    logger.info("SMOKE TEST SUMMARY")
    logger.info("=" * 60)

    frame = results_to_frame(all_results)
    if not frame.empty:
        summary = dashboard_summary(frame)
        stats = compute_score_distribution(frame["composite"].to_numpy())
        logger.info(f"  Relationships: {summary['relationships']}  heat={summary['heat']}  band={summary['band']}")
        logger.info(f"  Composite: mean={stats.mean:.2f} std={stats.std:.2f} p10={stats.quantiles['p10']:.2f} p90={stats.quantiles['p90']:.2f}")
        logger.info(f"  Cached snapshots: {len(service.cache)}")

    all_passed = True
    for name, status in checks.items():
        logger.info(f"  {name}: {status}")
        if "FAILED" in status:
            all_passed = False

    if all_passed:
        logger.info("\n  ALL TESTS PASSED")
        return 0
    else:
        logger.error("\n  SOME TESTS FAILED")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Affinity engine smoke test")
    parser.add_argument("--members", type=int, default=12, help="Synthetic team size")
    parser.add_argument("--seed", type=int, default=7, help="Random seed")
    args = parser.parse_args()
    sys.exit(run_smoke_test(args.members, args.seed))
