"""
Service Delivery Cost Navigator — Monthly Projection
Cumulative baseline vs solution cost over the planning horizon.

  baseline[m] = B * m
  m <= T      : solution[m] = initial + B * m              (build period, no benefit yet)
  m >  T      : solution[m] = initial + B * T + S * (m - T)

T is the solution's delay (platform build time, 0 for outsource/hybrid),
so non-platform solutions reduce to initial + S * m from month 1.
"""
from engines.breakeven import HORIZON_MONTHS


def project_months(baseline, solution, months=HORIZON_MONTHS):
    b = baseline['monthly']
    s = solution['monthly']
    initial = solution['initial']
    delay = solution.get('delay', 0)

    points = []
    prev_base = prev_sol = 0.0
    for m in range(1, months + 1):
        base_cum = b * m
        if m <= delay:
            sol_cum = initial + b * m
        else:
            sol_cum = initial + b * delay + s * (m - delay)
        points.append({
            'month': m,
            'baseline': base_cum,
            'solution': sol_cum,
            'savings': base_cum - sol_cum,
            'monthlySavings': (base_cum - prev_base) - (sol_cum - prev_sol),
        })
        prev_base, prev_sol = base_cum, sol_cum
    return points


def scan_breakeven(points):
    """First month whose cumulative savings are non-negative, else None."""
    for p in points:
        if p['savings'] >= 0:
            return p['month']
    return None
