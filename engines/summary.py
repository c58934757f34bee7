"""
Service Delivery Cost Navigator — Summary Metrics & Comparison Table
Headline figures for the results panel, derived from a finished calculation.
"""
import math
from engines.baseline import WORKING_HOURS

HOURS_PER_TICKET_ASSUMED = 4     # team model: capacity expressed as tickets
TICKET_MODEL_EFFICIENCY = 0.85   # ticket model has no efficiency input


def summarize(model, baseline):
    monthly = baseline['monthly']
    if model.kind == 'team':
        capacity = model.teamSize * WORKING_HOURS * model.serviceEfficiency / HOURS_PER_TICKET_ASSUMED
        cost_per_ticket = monthly / capacity if capacity > 0 else None
        efficiency = model.serviceEfficiency
        recommended = math.ceil(model.teamSize / model.serviceEfficiency) if model.serviceEfficiency > 0 else None
    else:
        cost_per_ticket = model.hoursPerTicket * model.peoplePerTicket * model.hourlyRate
        efficiency = TICKET_MODEL_EFFICIENCY
        recommended = math.ceil(model.monthlyTickets * model.hoursPerTicket / WORKING_HOURS)
    return {
        'monthlyCost': monthly,
        'annualCost': monthly * 12,
        'costPerTicket': cost_per_ticket,
        'efficiency': efficiency,
        'recommendedTeamSize': recommended,
    }


def _row(label, baseline_value, solution_value):
    diff = baseline_value - solution_value
    return {'label': label, 'baseline': baseline_value, 'solution': solution_value,
            'difference': abs(diff), 'direction': 'saved' if diff >= 0 else 'extra'}


def build_comparison(baseline, solution, data):
    """Baseline vs solution rows; the 2-year totals are the projection's last point.

    A platform's initial cost carries its build period (baseline cost paid
    while nothing is live yet), so those rows are labelled as such and the
    bare platform investment gets its own row.
    """
    last = data[-1]
    suffix = ' (incl. build period)' if solution.get('buildPeriodCost') else ''
    rows = [
        _row('Monthly Total', baseline['monthly'], solution['monthly']),
        _row('Initial Cost' + suffix, baseline['initial'], solution['initial']),
        _row('2-Year Total' + suffix, last['baseline'], last['solution']),
    ]
    if 'platformCost' in solution:
        rows.insert(1, _row('Platform Investment', 0, solution['platformCost']))
    return rows
