"""
Service Delivery Cost Navigator — Sensitivity Engine
Pessimistic / optimistic bands around the base monthly savings (±20%).
"""
from engines.breakeven import HORIZON_MONTHS, resolve_breakeven

VARIATION = 0.20


def horizon_total(monthly_savings, solution, months=HORIZON_MONTHS):
    """baseline×months − (solution×months + initial), written on the saving.

    For a platform the initial cost already includes the build period, so
    this reads the full horizon at the operating saving and can run above
    the projection's last point.
    """
    return monthly_savings * months - solution['initial']


def run_sensitivity(baseline, solution, months=HORIZON_MONTHS):
    base_monthly = baseline['monthly'] - solution['monthly']
    base_total = horizon_total(base_monthly, solution, months)
    initial = solution['initial']
    delay = solution.get('delay', 0)

    # Sign flips with negative savings so 'pessimistic' is always the worse outcome
    v = VARIATION if base_monthly >= 0 else -VARIATION

    def _case(monthly, total):
        return {'monthly': monthly, 'total': total,
                'breakeven': resolve_breakeven(monthly, initial, delay)}

    return {
        'base': _case(base_monthly, base_total),
        'pessimistic': _case(base_monthly * (1 - v), base_total * (1 - v)),
        'optimistic': _case(base_monthly * (1 + v), base_total * (1 + v)),
    }
