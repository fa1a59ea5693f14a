# src/api/facade.py — v1
"""Public API facade: single entry point for community-guided solving.

Usage:
    from communitysat.api.facade import solve
    result = solve(formula)

Pipeline: literal graph -> community detection -> ranking -> assignment
-> validation -> gated repair -> optional exact-solver comparison.
"""

from __future__ import annotations

import logging
import time
import uuid

from pydantic import ValidationError

from communitysat.api.models import SolveOverrides, SolveResult
from communitysat.config.settings import ConfigurationError, Settings
from communitysat.core.models import Formula
from communitysat.graph.builder import build_literal_graph
from communitysat.graph.community_detector import detect_communities
from communitysat.graph.community_ranker import rank_communities
from communitysat.graph.modularity import modularity_report
from communitysat.logging.context import clear_context, set_solve_context, set_stage_context
from communitysat.solver.assignment import generate_assignment
from communitysat.solver.models import OracleVerdict
from communitysat.solver.oracle import BaseOracle, build_oracle
from communitysat.solver.repair import greedy_violation_repair, should_attempt_repair
from communitysat.solver.validator import evaluate_assignment

logger = logging.getLogger(__name__)


def solve(
    formula: Formula,
    settings: Settings | None = None,
    *,
    overrides: SolveOverrides | None = None,
    oracle: BaseOracle | None = None,
) -> SolveResult:
    """Run the community-guided heuristic on a formula.

    Args:
        formula: Validated formula.
        settings: Global settings. Loaded from .env if None.
        overrides: Per-solve overrides applied on top of ``settings``.
        oracle: Exact solver for ground truth. Defaults to the one
            selected by ``settings.oracle``.

    Returns:
        SolveResult with the assignment, community structure, validation
        detail and repair log.

    Raises:
        MalformedInputError: If the formula or an intermediate assignment
            cannot be resolved.
        ConfigurationError: If the overrides make the settings inconsistent.
    """
    settings = settings or Settings()
    settings = _apply_overrides(settings, overrides)

    solve_id = uuid.uuid4().hex
    set_solve_context(solve_id)
    start = time.perf_counter()

    logger.info(
        "Starting solve: %d variables, %d clauses (ratio %.2f)",
        formula.num_variables, formula.num_clauses, formula.ratio,
    )

    try:
        # --- Graph ---
        set_stage_context("graph")
        graph = build_literal_graph(formula)

        # --- Community detection ---
        set_stage_context("detection")
        detection = detect_communities(
            graph,
            max_iterations=settings.detection_max_iterations,
            epsilon=settings.detection_epsilon,
            seed=settings.random_seed,
            move_evaluation=settings.detection_move_evaluation,
            check_bounds=settings.check_modularity_bounds,
        )

        # --- Ranking ---
        set_stage_context("ranking")
        report = modularity_report(
            graph, detection.partition, check_bounds=settings.check_modularity_bounds,
        )
        ranked = rank_communities(graph, detection.partition, order=settings.community_order)

        # --- Assignment ---
        set_stage_context("assignment")
        outcome = generate_assignment(
            formula, graph, ranked,
            node_order=settings.node_order,
            seed=settings.random_seed,
        )

        # --- Validation ---
        set_stage_context("validation")
        initial_quality = evaluate_assignment(formula, outcome.assignment)
        assignment = outcome.assignment
        quality = initial_quality

        # --- Repair ---
        repair = None
        repair_attempted = False
        if settings.repair_enabled and should_attempt_repair(quality, settings.repair_threshold):
            set_stage_context("repair")
            repair_attempted = True
            repair = greedy_violation_repair(
                formula, assignment, max_flips=settings.repair_max_flips,
            )
            assignment = repair.assignment
            quality = evaluate_assignment(formula, assignment)

        # --- Ground truth ---
        oracle = oracle if oracle is not None else build_oracle(settings)
        ground_truth = None
        if oracle is not None:
            set_stage_context("oracle")
            ground_truth = _consult_oracle(oracle, formula)

        agrees = None
        if ground_truth is not None:
            agrees = ground_truth.satisfiable == quality.is_satisfied
            if not agrees:
                logger.info(
                    "Heuristic verdict differs from %s: heuristic=%s, exact=%s",
                    ground_truth.solver, quality.is_satisfied, ground_truth.satisfiable,
                )

        result = SolveResult(
            solve_id=solve_id,
            assignment=assignment,
            satisfiable=quality.is_satisfied,
            partition=dict(detection.partition.labels),
            communities=detection.partition.communities(),
            modularity=report.modularity,
            community_contributions=report.contributions,
            ranked_communities=ranked,
            detection_rounds=detection.rounds,
            converged=detection.converged,
            assignment_trace=outcome.trace,
            random_variables=outcome.random_variables,
            quality=quality,
            initial_quality=initial_quality,
            repair_attempted=repair_attempted,
            repair=repair,
            flip_count=repair.flip_count if repair is not None else 0,
            ground_truth=ground_truth,
            agrees_with_ground_truth=agrees,
            solve_time_s=time.perf_counter() - start,
        )

        logger.info(
            "Solve complete: satisfiable=%s, %d/%d clauses, %d communities, "
            "modularity=%.4f, flips=%d, %.3fs",
            result.satisfiable,
            quality.satisfied_clauses, quality.total_clauses,
            len(result.communities), result.modularity,
            result.flip_count, result.solve_time_s,
        )
        return result
    finally:
        clear_context()


def _apply_overrides(settings: Settings, overrides: SolveOverrides | None) -> Settings:
    """Apply per-solve config overrides if provided."""
    if overrides is None:
        return settings
    updates = overrides.model_dump(exclude_unset=True)
    if not updates:
        return settings
    current = settings.model_dump()
    current.update(updates)
    try:
        return Settings(_env_file=None, **current)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid solve overrides: {e}") from e


def _consult_oracle(oracle: BaseOracle, formula: Formula) -> OracleVerdict | None:
    """Ask the oracle for ground truth; a failing oracle yields none."""
    try:
        return oracle.solve(formula)
    except Exception as e:
        logger.warning("Oracle %s failed, no ground truth for this solve: %s", oracle.name, e)
        return None
