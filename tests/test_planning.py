import pytest

from engines.errors import InvalidInputError
from engines.planning import plan_for_target, reverse_analysis


def test_roi_target_derives_viable_platform(team_values):
    plan = plan_for_target('team', team_values, 'roi', 50, 12)
    assert plan['baselineCost'] == pytest.approx(96000)
    assert plan['annualBaseline'] == pytest.approx(96000 * 12)
    assert plan['platformCost'] == pytest.approx(48000 / 1.5)
    assert plan['platformMaintenance'] == pytest.approx(3200)
    assert plan['timeToBuild'] == 3
    assert plan['monthlyOperatingCostReduction'] == pytest.approx(96000 - (96000 * 0.7 * 0.8 + 3200))
    # 3 build months + ceil((32000 + 3 * 96000) / 39040)
    assert plan['breakEvenPoint'] == 12
    assert plan['crossoverPoint'] == 4
    assert plan['isViable'] is True


def test_team_target_sets_reduction(team_values):
    plan = plan_for_target('team', team_values, 'team', 40, 12)
    assert plan['teamReduction'] == pytest.approx(0.4)
    assert plan['platformCost'] == pytest.approx(96000 * 12 * 0.4 * 1.5)
    # maintenance outweighs the labour saved: never pays back
    assert plan['monthlyOperatingCostReduction'] < 0
    assert plan['breakEvenPoint'] is None
    assert plan['crossoverPoint'] is None
    assert plan['isViable'] is False


def test_efficiency_target(ticket_values):
    plan = plan_for_target('ticket', ticket_values, 'efficiency', 25, 12)
    assert plan['processEfficiency'] == pytest.approx(0.25)
    assert plan['platformCost'] == pytest.approx(10000 * 12 * 0.25 * 2)


def test_unknown_target_type(team_values):
    with pytest.raises(InvalidInputError):
        plan_for_target('team', team_values, 'happiness', 10, 12)


def test_reverse_analysis_with_team_metrics():
    out = reverse_analysis(12, 10000, team_metrics={'teamSize': 5, 'hourlyRate': 75, 'manualWorkPercentage': 40})
    assert out['maxAllowableCost'] == pytest.approx(180000)
    assert out['requiredEfficiencyGains'] == pytest.approx(10000 / 60000 * 100)
    assert [s['timeframe'] for s in out['breakEvenScenarios']] == [24, 18, 12]
    assert out['breakEvenScenarios'][0]['requiredSavings'] == pytest.approx(7500)


def test_reverse_analysis_caps_efficiency_at_manual_work():
    out = reverse_analysis(12, 50000, team_metrics={'teamSize': 5, 'hourlyRate': 75, 'manualWorkPercentage': 40})
    assert out['requiredEfficiencyGains'] == 40


def test_reverse_analysis_budget_only():
    out = reverse_analysis(12, 10000, max_budget=50000)
    assert out['maxAllowableCost'] == 50000
    assert out['requiredEfficiencyGains'] == 0
    assert out['breakEvenScenarios'][2]['requiredSavings'] == pytest.approx(50000 / 12)


@pytest.mark.parametrize('target_type, target_value', [
    ('roi', -100), ('roi', -250), ('team', -5), ('team', 120), ('efficiency', 101),
])
def test_target_value_out_of_range(team_values, target_type, target_value):
    with pytest.raises(InvalidInputError) as exc:
        plan_for_target('team', team_values, target_type, target_value, 12)
    assert exc.value.field == 'targetValue'


def test_target_value_must_be_numeric(team_values):
    with pytest.raises(InvalidInputError) as exc:
        plan_for_target('team', team_values, 'roi', 'lots', 12)
    assert exc.value.field == 'targetValue'


def test_timeframe_must_be_positive(team_values):
    with pytest.raises(InvalidInputError) as exc:
        plan_for_target('team', team_values, 'roi', 50, 0)
    assert exc.value.field == 'timeframe'


@pytest.mark.parametrize('team_metrics', [
    {'teamSize': 5},
    {'hourlyRate': 75},
    {'teamSize': 'five', 'hourlyRate': 75},
    {'teamSize': 0, 'hourlyRate': 75},
    'five people',
])
def test_reverse_analysis_rejects_bad_team_metrics(team_metrics):
    with pytest.raises(InvalidInputError) as exc:
        reverse_analysis(12, 10000, team_metrics=team_metrics)
    assert exc.value.field == 'teamMetrics'


@pytest.mark.parametrize('budget', ['abc', -1, float('nan')])
def test_reverse_analysis_rejects_bad_budget(budget):
    with pytest.raises(InvalidInputError) as exc:
        reverse_analysis(12, 10000, max_budget=budget)
    assert exc.value.field == 'maxBudget'
