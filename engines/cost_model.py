"""
Service Delivery Cost Navigator — Cost Model Engine
Single entry point for every collaborator (forms, charts, exports, API):

    calculate(model, solution, values) -> result dict

Pipeline: validate → baseline → solution → 24-month projection →
break-even → sensitivity → summary/comparison. Pure: each call builds a
fresh result from its arguments and keeps nothing between calls.
"""
import logging
from engines.inputs import parse_inputs
from engines.baseline import calculate_baseline
from engines.solutions import calculate_solution
from engines.projection import project_months, scan_breakeven
from engines.breakeven import HORIZON_MONTHS
from engines.sensitivity import run_sensitivity
from engines.summary import summarize, build_comparison


def calculate(model, solution, values):
    op_model, strategy = parse_inputs(model, solution, values)
    baseline = calculate_baseline(op_model)
    sol = calculate_solution(op_model, strategy, baseline)
    data = project_months(baseline, sol)

    breakeven = sol['breakEvenMonths']
    if breakeven is not None and breakeven > HORIZON_MONTHS:
        logging.info(f"{solution}: break-even at month {breakeven}, beyond the {HORIZON_MONTHS}-month horizon")
    in_horizon = breakeven if breakeven is not None and breakeven <= HORIZON_MONTHS else None
    scanned = scan_breakeven(data)
    if scanned != in_horizon:
        logging.warning(f"{solution}: series crosses zero at month {scanned}, resolver says {in_horizon}")

    return {
        'model': model,
        'baseline': baseline,
        'solution': sol,
        'monthly': baseline['monthly'] - sol['monthly'],
        'breakeven': breakeven,
        'buildTime': sol['delay'],
        'data': data,
        'sensitivity': run_sensitivity(baseline, sol),
        'summary': summarize(op_model, baseline),
        'comparison': build_comparison(baseline, sol, data),
    }


def sensitivity_for(result):
    """Recompute the sensitivity bands from an existing result."""
    return run_sensitivity(result['baseline'], result['solution'])
