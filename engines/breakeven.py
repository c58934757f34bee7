"""
Service Delivery Cost Navigator — Break-even Resolver
One rule for every break-even figure the engines report:

    breakeven = delay + ceil(upfront / monthly_savings)      (savings > 0)
    breakeven = None                                         (savings <= 0)

`delay` is the build period before operational savings start and
`upfront` is everything that has to be recovered (investment plus any
cost carried during the delay). The projection in projection.py is laid
out so that its first non-negative cumulative-savings month equals this
value whenever it falls inside the horizon.
"""
import math

HORIZON_MONTHS = 24


def resolve_breakeven(monthly_savings, upfront, delay=0):
    if monthly_savings is None or monthly_savings <= 0:
        return None
    return max(1, int(delay) + math.ceil(upfront / monthly_savings))


def is_viable(breakeven, horizon=HORIZON_MONTHS):
    return breakeven is not None and breakeven <= horizon
