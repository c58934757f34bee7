"""
Service Delivery Cost Navigator — Input Catalogue, Assumptions & Validation
Field definitions and defaults for every model/solution form, an
assumptions workbook loader (data/config/assumptions.xlsx), and the
parser that turns a flat value bag into typed model/strategy variants.

Factor fields (efficiency, overhead, reduction, quality, knowledge loss)
are fractions: 0.30 means 30%. Hybrid portions are percentages (0-100).
"""
import os, math, logging
from dataclasses import dataclass
import openpyxl

from engines.errors import InvalidInputError, UnknownModelError, UnknownSolutionError

DATA_DIR = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'data')

MODELS = ('team', 'ticket')
SOLUTIONS = ('platform', 'outsource', 'hybrid')

# ── Field catalogue ──
# lo/hi are hard validation bounds (None = unbounded); default seeds the forms.
BASE_FIELDS = {
    'team': [
        {'name':'teamSize','label':'Team Size (FTEs)','lo':0,'hi':None,'step':1,'default':5},
        {'name':'hourlyRate','label':'Hourly Rate ($)','lo':0,'hi':None,'step':1,'default':75,'positive':True},
        {'name':'serviceEfficiency','label':'Service Efficiency','lo':0,'hi':1,'step':0.01,'default':0.6},
        {'name':'operationalOverhead','label':'Operational Overhead','lo':0,'hi':1,'step':0.01,'default':0.2},
    ],
    'ticket': [
        {'name':'monthlyTickets','label':'Monthly Tickets','lo':0,'hi':None,'step':1,'default':50},
        {'name':'hoursPerTicket','label':'Hours per Ticket','lo':0,'hi':None,'step':0.1,'default':4},
        {'name':'peoplePerTicket','label':'People per Ticket','lo':0,'hi':None,'step':1,'default':2},
        {'name':'hourlyRate','label':'Hourly Rate ($)','lo':0,'hi':None,'step':1,'default':75,'positive':True},
    ],
}

SOLUTION_FIELDS = {
    'platform': [
        {'name':'platformCost','label':'Platform Investment ($)','lo':0,'hi':None,'step':1000,'default':100000},
        {'name':'platformMaintenance','label':'Monthly Maintenance ($)','lo':0,'hi':None,'step':100,'default':5000},
        {'name':'timeToBuild','label':'Time to Build (months)','lo':0,'hi':None,'step':1,'default':3,'integer':True},
        {'name':'teamReduction','label':'Team Reduction Factor','lo':0,'hi':1,'step':0.01,'default':0.3},
        {'name':'processEfficiency','label':'Process Efficiency Gain','lo':0,'hi':1,'step':0.01,'default':0.2},
    ],
    'outsource': [
        {'name':'vendorRate','label':'Vendor Hourly Rate ($)','lo':0,'hi':None,'step':1,'default':50},
        {'name':'managementOverhead','label':'Management Overhead','lo':0,'hi':1,'step':0.01,'default':0.15},
        {'name':'qualityImpact','label':'Quality Impact Factor','lo':-0.5,'hi':0.5,'step':0.01,'default':-0.15},
        {'name':'knowledgeLoss','label':'Knowledge Loss Factor','lo':0,'hi':1,'step':0.01,'default':0.2},
        {'name':'transitionTime','label':'Transition Time (months)','lo':0,'hi':None,'step':1,'default':3},
        {'name':'transitionCost','label':'Transition Cost ($)','lo':0,'hi':None,'step':1000,'default':50000},
    ],
    'hybrid': [
        {'name':'platformPortion','label':'Platform Portion (%)','lo':0,'hi':100,'step':5,'default':50},
        {'name':'vendorPortion','label':'Vendor Portion (%)','lo':0,'hi':100,'step':5,'default':50},
        {'name':'platformCost','label':'Platform Investment ($)','lo':0,'hi':None,'step':1000,'default':60000},
        {'name':'platformMaintenance','label':'Monthly Maintenance ($)','lo':0,'hi':None,'step':100,'default':3000},
        {'name':'processEfficiency','label':'Process Efficiency Gain','lo':0,'hi':1,'step':0.01,'default':0.15},
        {'name':'teamReduction','label':'Team Reduction Factor','lo':0,'hi':1,'step':0.01,'default':0.0},
        {'name':'vendorRate','label':'Vendor Hourly Rate ($)','lo':0,'hi':None,'step':1,'default':55},
        {'name':'managementOverhead','label':'Management Overhead','lo':0,'hi':1,'step':0.01,'default':0.1},
        {'name':'qualityImpact','label':'Quality Impact Factor','lo':-0.5,'hi':0.5,'step':0.01,'default':-0.1},
        {'name':'knowledgeLoss','label':'Knowledge Loss Factor','lo':0,'hi':1,'step':0.01,'default':0.2},
        {'name':'transitionTime','label':'Transition Time (months)','lo':0,'hi':None,'step':1,'default':3},
        {'name':'transitionCost','label':'Transition Cost ($)','lo':0,'hi':None,'step':1000,'default':0},
    ],
}

# Fields a caller may omit; the catalogue default is used instead.
OPTIONAL_FIELDS = {
    'platform': {'timeToBuild'},
    'outsource': set(),
    'hybrid': {'teamReduction', 'transitionCost'},
}


# ── Typed variants ──

@dataclass(frozen=True)
class TeamModel:
    teamSize: float
    hourlyRate: float
    serviceEfficiency: float
    operationalOverhead: float
    kind = 'team'


@dataclass(frozen=True)
class TicketModel:
    monthlyTickets: float
    hoursPerTicket: float
    peoplePerTicket: float
    hourlyRate: float
    kind = 'ticket'


@dataclass(frozen=True)
class PlatformStrategy:
    platformCost: float
    platformMaintenance: float
    timeToBuild: int
    teamReduction: float
    processEfficiency: float
    kind = 'platform'


@dataclass(frozen=True)
class OutsourceStrategy:
    vendorRate: float
    managementOverhead: float
    qualityImpact: float
    knowledgeLoss: float
    transitionTime: float
    transitionCost: float
    kind = 'outsource'


@dataclass(frozen=True)
class HybridStrategy:
    platformPortion: float
    vendorPortion: float
    platformCost: float
    platformMaintenance: float
    processEfficiency: float
    teamReduction: float
    vendorRate: float
    managementOverhead: float
    qualityImpact: float
    knowledgeLoss: float
    transitionTime: float
    transitionCost: float
    kind = 'hybrid'


MODEL_TYPES = {'team': TeamModel, 'ticket': TicketModel}
STRATEGY_TYPES = {'platform': PlatformStrategy, 'outsource': OutsourceStrategy, 'hybrid': HybridStrategy}


def check_tags(model, solution):
    if model not in MODELS:
        raise UnknownModelError(model)
    if solution not in SOLUTIONS:
        raise UnknownSolutionError(solution)


def field_catalogue(model, solution):
    """Form definition for one model/solution pair (base fields first)."""
    check_tags(model, solution)
    base_names = {f['name'] for f in BASE_FIELDS[model]}
    fields = [dict(f) for f in BASE_FIELDS[model]]
    fields += [dict(f) for f in SOLUTION_FIELDS[solution] if f['name'] not in base_names]
    return fields


def default_values(model, solution):
    return {f['name']: f['default'] for f in field_catalogue(model, solution)}


def _coerce(spec, raw):
    name = spec['name']
    if raw is None:
        raise InvalidInputError(name, 'is required')
    if isinstance(raw, bool):
        raise InvalidInputError(name, 'must be a number')
    try:
        val = float(raw)
    except (TypeError, ValueError):
        raise InvalidInputError(name, f'must be a number, got {raw!r}')
    if not math.isfinite(val):
        raise InvalidInputError(name, 'must be finite')
    lo, hi = spec['lo'], spec['hi']
    if spec.get('positive') and val <= 0:
        raise InvalidInputError(name, 'must be greater than 0')
    if lo is not None and val < lo:
        raise InvalidInputError(name, f'must be >= {lo:g}')
    if hi is not None and val > hi:
        raise InvalidInputError(name, f'must be <= {hi:g}')
    if spec.get('integer'):
        if not val.is_integer():
            raise InvalidInputError(name, 'must be a whole number of months')
        return int(val)
    return val


def parse_inputs(model, solution, values):
    """
    Validate a flat value bag and build (OperationalModel, SolutionStrategy).

    Raises UnknownModelError / UnknownSolutionError for bad tags and
    InvalidInputError for missing, non-numeric, non-finite or out-of-range
    values. Extra keys are ignored. The portion-sum invariant of hybrid is
    checked by the solution calculator, not here.
    """
    check_tags(model, solution)
    values = values or {}
    optional = OPTIONAL_FIELDS[solution]

    def _take(specs, skip_optional):
        out = {}
        for spec in specs:
            raw = values.get(spec['name'])
            if raw is None and skip_optional and spec['name'] in optional:
                raw = spec['default']
            out[spec['name']] = _coerce(spec, raw)
        return out

    base = _take(BASE_FIELDS[model], False)
    sol = _take(SOLUTION_FIELDS[solution], True)
    return MODEL_TYPES[model](**base), STRATEGY_TYPES[solution](**sol)


# ── Assumptions workbook ──

ASSUMPTION_LABELS = {
    f['label']: f['name']
    for group in (BASE_FIELDS, SOLUTION_FIELDS)
    for fields in group.values()
    for f in fields
}


def read_xlsx_sheet(filepath, sheet_name=None):
    wb = openpyxl.load_workbook(filepath, read_only=True, data_only=True)
    ws = wb[sheet_name] if sheet_name else wb.active
    rows = list(ws.iter_rows(values_only=True))
    wb.close()
    if len(rows) < 2:
        return []
    headers = [str(h).strip() if h else f'col_{i}' for i, h in enumerate(rows[0])]
    return [dict(zip(headers, row)) for row in rows[1:]]


def load_assumptions(model, solution, path=None):
    """Defaults for model/solution overlaid with a Parameter | Value sheet.

    Rows may name a field by its form label ('Hourly Rate ($)') or its
    field name ('hourlyRate'). Rows for fields outside this model/solution
    are ignored; unknown labels and non-numeric values are logged and skipped.
    """
    values = default_values(model, solution)
    path = path or os.path.join(DATA_DIR, 'config', 'assumptions.xlsx')
    if not os.path.exists(path):
        return values
    applied = 0
    for row in read_xlsx_sheet(path):
        key = str(row.get('Parameter') or '').strip()
        val = row.get('Value')
        if not key or val is None:
            continue
        name = ASSUMPTION_LABELS.get(key, key)
        if name not in ASSUMPTION_LABELS.values():
            logging.warning(f"load_assumptions: unknown parameter '{key}' — skipped")
            continue
        if name not in values:
            continue
        try:
            values[name] = float(val)
        except (TypeError, ValueError):
            logging.warning(f"load_assumptions: non-numeric value for '{key}': {val!r} — skipped")
            continue
        applied += 1
    logging.info(f"Loaded {applied} assumption overrides from {path}")
    return values
