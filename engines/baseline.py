"""
Service Delivery Cost Navigator — Baseline Engine
Current-state monthly operating cost for the chosen operational model.
"""
from engines.errors import UnknownModelError

WORKING_HOURS = 160  # standard monthly working hours per FTE


def _team_baseline(m):
    base_monthly = m.teamSize * m.hourlyRate * WORKING_HOURS
    inefficiency = base_monthly * (1 - m.serviceEfficiency)
    overhead = base_monthly * m.operationalOverhead
    return {
        'initial': 0.0,
        'monthly': base_monthly * (1 + (1 - m.serviceEfficiency) + m.operationalOverhead),
        'breakdown': {'labor': base_monthly, 'inefficiency': inefficiency, 'overhead': overhead},
    }


def _ticket_baseline(m):
    monthly_hours = m.monthlyTickets * m.hoursPerTicket * m.peoplePerTicket
    monthly_total = monthly_hours * m.hourlyRate
    return {'initial': 0.0, 'monthly': monthly_total, 'breakdown': {'labor': monthly_total}}


BASELINES = {'team': _team_baseline, 'ticket': _ticket_baseline}


def calculate_baseline(model):
    fn = BASELINES.get(getattr(model, 'kind', None))
    if fn is None:
        raise UnknownModelError(getattr(model, 'kind', model))
    return fn(model)
