import pytest

TEAM = {'teamSize': 5, 'hourlyRate': 75, 'serviceEfficiency': 0.6, 'operationalOverhead': 0.2}

# 100 tickets x 2h x 1 person x $50 = $10,000 / month
TICKET = {'monthlyTickets': 100, 'hoursPerTicket': 2, 'peoplePerTicket': 1, 'hourlyRate': 50}

PLATFORM = {'platformCost': 100000, 'platformMaintenance': 5000, 'timeToBuild': 3,
            'teamReduction': 0.3, 'processEfficiency': 0.2}

OUTSOURCE = {'vendorRate': 40, 'managementOverhead': 0.15, 'qualityImpact': -0.15,
             'knowledgeLoss': 0.2, 'transitionTime': 3, 'transitionCost': 50000}

HYBRID = {'platformPortion': 40, 'vendorPortion': 30, 'platformCost': 60000,
          'platformMaintenance': 3000, 'processEfficiency': 0.15, 'teamReduction': 0.1,
          'vendorRate': 55, 'managementOverhead': 0.1, 'qualityImpact': 0.05,
          'knowledgeLoss': 0.2, 'transitionTime': 3, 'transitionCost': 20000}


@pytest.fixture
def team_values():
    return dict(TEAM)


@pytest.fixture
def ticket_values():
    return dict(TICKET)


@pytest.fixture
def team_platform(team_values):
    return {**team_values, **PLATFORM}


@pytest.fixture
def ticket_outsource(ticket_values):
    return {**ticket_values, **OUTSOURCE}


@pytest.fixture
def team_hybrid(team_values):
    return {**team_values, **HYBRID}
