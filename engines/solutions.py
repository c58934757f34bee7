"""
Service Delivery Cost Navigator — Solution Engine
Monthly and one-time cost of each alternative delivery strategy:

  platform  — automation investment; team shrinks and work gets faster after a build period
  outsource — work moves to a vendor, adjusted for management overhead, quality and knowledge loss
  hybrid    — workload split between platform, vendor and the unchanged internal team

Every calculator returns a cost snapshot (initial / monthly / breakdown)
extended with monthlySavings, breakEvenMonths, isViable and delay.
Breakdown entries sum to the monthly total.
"""
import math
from engines.breakeven import resolve_breakeven, is_viable
from engines.errors import InvalidAllocationError, UnknownSolutionError


def quality_factor(quality_impact):
    # Positive impact is an improvement and lowers cost; negative is degradation and raises it.
    if quality_impact >= 0:
        return 1 - quality_impact
    return 1 + abs(quality_impact)


def knowledge_factor(knowledge_loss, transition_time):
    # Knowledge-loss cost grows logarithmically with transition length.
    return 1 + knowledge_loss * math.log10(transition_time + 1)


def _vendor_cost(baseline_monthly, hourly_rate, s):
    """Vendor monthly cost for a baseline slice, with its factor breakdown."""
    baseline_hours = baseline_monthly / hourly_rate
    vendor = baseline_hours * s.vendorRate
    of = 1 + s.managementOverhead
    qf = quality_factor(s.qualityImpact)
    kf = knowledge_factor(s.knowledgeLoss, s.transitionTime)
    parts = {
        'vendor': vendor,
        'overhead': vendor * (of - 1),
        'quality': vendor * of * (qf - 1),
        'knowledge': vendor * of * qf * (kf - 1),
    }
    return vendor * of * qf * kf, parts


def platform_solution(model, s, baseline):
    b = baseline['monthly']
    team_reduction_factor = 1 - s.teamReduction
    efficiency_factor = 1 - s.processEfficiency
    labor = b * team_reduction_factor * efficiency_factor
    monthly = labor + s.platformMaintenance
    savings = b - monthly
    build_period_cost = b * s.timeToBuild
    total_investment = s.platformCost + build_period_cost
    be = resolve_breakeven(savings, total_investment, s.timeToBuild)
    return {
        'type': 'platform',
        'initial': total_investment,
        'monthly': monthly,
        'monthlySavings': savings,
        'breakEvenMonths': be,
        'isViable': is_viable(be),
        'delay': s.timeToBuild,
        'timeToBuild': s.timeToBuild,
        'buildPeriodCost': build_period_cost,
        'platformCost': s.platformCost,
        'totalInvestment': total_investment,
        'breakdown': {'labor': labor, 'platform': s.platformMaintenance},
    }


def outsource_solution(model, s, baseline):
    b = baseline['monthly']
    monthly, parts = _vendor_cost(b, model.hourlyRate, s)
    savings = b - monthly
    be = resolve_breakeven(savings, s.transitionCost)
    return {
        'type': 'outsource',
        'initial': s.transitionCost,
        'monthly': monthly,
        'monthlySavings': savings,
        'breakEvenMonths': be,
        'isViable': is_viable(be),
        'delay': 0,
        'breakdown': parts,
    }


def hybrid_solution(model, s, baseline):
    if s.platformPortion + s.vendorPortion > 100:
        raise InvalidAllocationError(s.platformPortion, s.vendorPortion)
    b = baseline['monthly']
    pp = s.platformPortion / 100
    vp = s.vendorPortion / 100

    # Platform slice: same factors as a full platform, maintenance added flat, no build delay
    platform_labor = b * pp * (1 - s.teamReduction) * (1 - s.processEfficiency)
    platform_monthly = platform_labor + s.platformMaintenance

    # Vendor slice: hour basis is the vendor share of the baseline
    vendor_monthly, _ = _vendor_cost(b * vp, model.hourlyRate, s)

    internal_pct = 1 - pp - vp
    internal_monthly = b * internal_pct

    monthly = platform_monthly + vendor_monthly + internal_monthly
    savings = b - monthly
    initial = s.platformCost + s.transitionCost * vp
    be = resolve_breakeven(savings, initial)
    return {
        'type': 'hybrid',
        'initial': initial,
        'monthly': monthly,
        'monthlySavings': savings,
        'breakEvenMonths': be,
        'isViable': is_viable(be),
        'delay': 0,
        'portions': {'platform': s.platformPortion, 'vendor': s.vendorPortion,
                     'internal': round(internal_pct * 100, 6)},
        'breakdown': {
            'platformLabor': platform_labor,
            'platform': s.platformMaintenance,
            'vendor': vendor_monthly,
            'internal': internal_monthly,
        },
    }


SOLUTIONS = {'platform': platform_solution, 'outsource': outsource_solution, 'hybrid': hybrid_solution}


def calculate_solution(model, strategy, baseline):
    fn = SOLUTIONS.get(getattr(strategy, 'kind', None))
    if fn is None:
        raise UnknownSolutionError(getattr(strategy, 'kind', strategy))
    return fn(model, strategy, baseline)
