import logging

import pytest

import engines.cost_model as cost_model
from engines.cost_model import calculate
from engines.errors import (CostModelError, InvalidAllocationError, InvalidInputError,
                            UnknownModelError, UnknownSolutionError)


def test_team_platform_result(team_platform):
    result = calculate('team', 'platform', team_platform)
    assert result['model'] == 'team'
    assert result['solution']['type'] == 'platform'
    assert result['baseline']['monthly'] == pytest.approx(96000)
    assert result['monthly'] == pytest.approx(37240)
    assert result['breakeven'] == 14
    assert result['buildTime'] == 3


def test_monthly_is_baseline_minus_solution(ticket_outsource):
    result = calculate('ticket', 'outsource', ticket_outsource)
    assert result['monthly'] == result['baseline']['monthly'] - result['solution']['monthly']
    assert result['breakeven'] is None


@pytest.mark.parametrize('solution,values', [
    ('platform', {'teamReduction': 0, 'processEfficiency': 0}),
    ('outsource', {'vendorRate': 200}),
])
def test_breakeven_null_whenever_savings_not_positive(team_platform, ticket_outsource, solution, values):
    base = team_platform if solution == 'platform' else ticket_outsource
    model = 'team' if solution == 'platform' else 'ticket'
    result = calculate(model, solution, {**base, **values})
    assert result['monthly'] <= 0
    assert result['breakeven'] is None


def test_hybrid_over_allocation_aborts(team_hybrid):
    team_hybrid.update(platformPortion=40, vendorPortion=70)
    with pytest.raises(InvalidAllocationError):
        calculate('team', 'hybrid', team_hybrid)


def test_unknown_tags(team_platform):
    with pytest.raises(UnknownModelError):
        calculate('squad', 'platform', team_platform)
    with pytest.raises(UnknownSolutionError):
        calculate('team', 'offshore', team_platform)


def test_invalid_values_raise_before_calculation(team_platform):
    team_platform['hourlyRate'] = 0
    with pytest.raises(InvalidInputError) as exc:
        calculate('team', 'platform', team_platform)
    assert exc.value.field == 'hourlyRate'
    assert isinstance(exc.value, CostModelError)


def test_calls_are_independent(team_platform, ticket_outsource):
    first = calculate('team', 'platform', team_platform)
    calculate('ticket', 'outsource', ticket_outsource)
    again = calculate('team', 'platform', team_platform)
    assert again == first
    assert again is not first


def test_summary_and_comparison(team_platform):
    result = calculate('team', 'platform', team_platform)
    summary = result['summary']
    assert summary['annualCost'] == pytest.approx(96000 * 12)
    # capacity: 5 people x 160h x 0.6 / 4h per ticket = 120 tickets
    assert summary['costPerTicket'] == pytest.approx(96000 / 120)
    assert summary['recommendedTeamSize'] == 9
    rows = {r['label']: r for r in result['comparison']}
    assert rows['Monthly Total']['difference'] == pytest.approx(37240)
    assert rows['Monthly Total']['direction'] == 'saved'
    assert rows['Platform Investment']['solution'] == 100000
    assert rows['Initial Cost (incl. build period)']['solution'] == pytest.approx(388000)
    assert rows['Initial Cost (incl. build period)']['direction'] == 'extra'
    total = rows['2-Year Total (incl. build period)']
    assert total['solution'] == pytest.approx(result['data'][-1]['solution'])
    assert total['difference'] == pytest.approx(abs(result['data'][-1]['savings']))


def test_comparison_without_build_period(team_hybrid):
    result = calculate('team', 'hybrid', team_hybrid)
    labels = [r['label'] for r in result['comparison']]
    assert labels == ['Monthly Total', 'Initial Cost', '2-Year Total']


def test_ticket_summary(ticket_outsource):
    summary = calculate('ticket', 'outsource', ticket_outsource)['summary']
    assert summary['costPerTicket'] == pytest.approx(2 * 1 * 50)
    assert summary['recommendedTeamSize'] == 2      # ceil(100 * 2 / 160)
    assert summary['efficiency'] == 0.85


def test_series_and_resolver_agree_silently(caplog, team_platform, ticket_outsource, team_hybrid):
    with caplog.at_level(logging.WARNING):
        calculate('team', 'platform', team_platform)
        calculate('ticket', 'outsource', ticket_outsource)
        calculate('team', 'hybrid', team_hybrid)
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]


def test_series_disagreement_is_logged(caplog, monkeypatch, team_platform):
    monkeypatch.setattr(cost_model, 'scan_breakeven', lambda points: 1)
    with caplog.at_level(logging.WARNING):
        result = calculate('team', 'platform', team_platform)
    assert result['breakeven'] == 14
    assert 'resolver says 14' in caplog.text
