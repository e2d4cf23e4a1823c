"""Dashboard Service - fixed platform statistics for the admin dashboard.

Invariants:
    - Returns the same payload on every call; not wired to real aggregation
"""

_MOCK_STATS = {
    "totalUsers": 1284,
    "totalServiceHubs": 46,
    "totalInsuranceCompanies": 12,
    "totalVehicles": 3310,
    "activeListings": 418,
    "monthlyRevenue": 1_875_000,
}


def get_dashboard_stats() -> dict:
    return dict(_MOCK_STATS)
