"""
Service Delivery Cost Navigator — Planning Engine
Works backwards from a goal instead of forwards from assumptions.

  plan_for_target   — derive platform assumptions that hit an ROI, team-reduction
                      or efficiency target, then run them through the cost model
  reverse_analysis  — how much can be spent for a desired saving, and what the
                      break-even looks like over 24/18/12-month timeframes
"""
import math
from engines.baseline import WORKING_HOURS
from engines.cost_model import calculate
from engines.errors import InvalidInputError

TARGET_TYPES = ('roi', 'team', 'efficiency')
DEFAULT_TIME_TO_BUILD = 3
MAINTENANCE_RATIO = 0.10     # monthly maintenance as a share of platform cost
DEFAULT_TEAM_REDUCTION = 0.30
DEFAULT_PROCESS_EFFICIENCY = 0.20

# (timeframe months, efficiency gain, team reduction, quality improvement)
BREAK_EVEN_SCENARIOS = [
    (24, 0.15, 0.10, 0.05),   # conservative
    (18, 0.25, 0.15, 0.10),   # moderate
    (12, 0.35, 0.20, 0.15),   # aggressive
]


def _number(field, raw):
    if raw is None or isinstance(raw, bool):
        raise InvalidInputError(field, f'must be a number, got {raw!r}')
    try:
        val = float(raw)
    except (TypeError, ValueError):
        raise InvalidInputError(field, f'must be a number, got {raw!r}')
    if not math.isfinite(val):
        raise InvalidInputError(field, 'must be finite')
    return val


def _check_target(target_type, target_value):
    if target_type not in TARGET_TYPES:
        raise InvalidInputError('targetType', f'must be one of {", ".join(TARGET_TYPES)}')
    if target_type == 'roi':
        if target_value <= -100:
            raise InvalidInputError('targetValue', 'ROI target must be greater than -100')
    elif not 0 <= target_value <= 100:
        raise InvalidInputError('targetValue', f'{target_type} target must be between 0 and 100')


def plan_for_target(model, base_values, target_type, target_value, timeframe):
    """
    target_value is a percentage: ROI % over `timeframe` months for 'roi',
    team reduction % for 'team', process efficiency gain % for 'efficiency'.
    """
    if not isinstance(base_values, dict):
        raise InvalidInputError('values', 'must be an object')
    target_value = _number('targetValue', target_value)
    timeframe = _number('timeframe', timeframe)
    _check_target(target_type, target_value)
    if timeframe <= 0:
        raise InvalidInputError('timeframe', 'must be greater than 0')

    # Baseline first, with the platform defaults standing in for the unknowns
    probe = calculate(model, 'platform', {**base_values, 'platformCost': 0, 'platformMaintenance': 0,
                                          'teamReduction': 0, 'processEfficiency': 0})
    monthly_base = probe['baseline']['monthly']
    annual_base = monthly_base * 12
    target = target_value / 100

    team_reduction = DEFAULT_TEAM_REDUCTION
    process_efficiency = DEFAULT_PROCESS_EFFICIENCY
    if target_type == 'roi':
        required_savings = monthly_base * target * (timeframe / 12)
        platform_cost = required_savings / (1 + target)
    elif target_type == 'team':
        team_reduction = target
        platform_cost = annual_base * target * 1.5
    else:
        process_efficiency = target
        platform_cost = annual_base * target * 2

    assumptions = {
        'platformCost': platform_cost,
        'platformMaintenance': platform_cost * MAINTENANCE_RATIO,
        'timeToBuild': DEFAULT_TIME_TO_BUILD,
        'teamReduction': team_reduction,
        'processEfficiency': process_efficiency,
    }
    result = calculate(model, 'platform', {**base_values, **assumptions})
    savings = result['monthly']
    return {
        **assumptions,
        'baselineCost': monthly_base,
        'annualBaseline': annual_base,
        'monthlyBaseCost': monthly_base,
        'monthlyOperatingCostReduction': savings,
        # first month whose own cost is below baseline, i.e. right after the build
        'crossoverPoint': DEFAULT_TIME_TO_BUILD + 1 if savings > 0 else None,
        'breakEvenPoint': result['breakeven'],
        'isViable': result['solution']['isViable'],
        'targetType': target_type,
        'targetValue': target_value,
        'timeframe': timeframe,
    }


def _team_metrics(team_metrics):
    """(monthly labour cost, manual work %) from a teamMetrics object."""
    if not isinstance(team_metrics, dict):
        raise InvalidInputError('teamMetrics', 'must be an object with teamSize and hourlyRate')
    for key in ('teamSize', 'hourlyRate'):
        if key not in team_metrics:
            raise InvalidInputError('teamMetrics', f'{key} is required')
    size = _number('teamMetrics', team_metrics['teamSize'])
    rate = _number('teamMetrics', team_metrics['hourlyRate'])
    if size <= 0 or rate <= 0:
        raise InvalidInputError('teamMetrics', 'teamSize and hourlyRate must be greater than 0')
    manual = _number('teamMetrics', team_metrics.get('manualWorkPercentage', 100))
    return size * rate * WORKING_HOURS, manual


def reverse_analysis(target_roi_period, desired_savings, max_budget=None, team_metrics=None):
    target_roi_period = _number('targetROIPeriod', target_roi_period)
    desired_savings = _number('desiredSavings', desired_savings)
    if max_budget is not None:
        max_budget = _number('maxBudget', max_budget)
        if max_budget < 0:
            raise InvalidInputError('maxBudget', 'must be >= 0')

    if team_metrics:
        monthly_labor, manual = _team_metrics(team_metrics)
        max_cost = min(monthly_labor * 12 * 0.5, desired_savings * target_roi_period * 1.5)
        efficiency_gains = min(desired_savings / monthly_labor * 100, manual)
    else:
        max_cost = max_budget or 0
        efficiency_gains = 0

    scenarios = [{
        'timeframe': months,
        'requiredSavings': max_cost / months,
        'assumptions': {'efficiencyGain': eff, 'teamReduction': red, 'qualityImprovement': q},
    } for months, eff, red, q in BREAK_EVEN_SCENARIOS]
    return {
        'maxAllowableCost': max_cost,
        'requiredEfficiencyGains': efficiency_gains,
        'breakEvenScenarios': scenarios,
    }
