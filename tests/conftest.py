"""
Shared test fixtures and sample data for csv-normalize tests.

Sample rows are defined here as module-level constants for easy
discovery. Column order everywhere is:

    timestamp, address, zip, full name, foo, bar, total, notes
"""

import pytest

# ---------------------------------------------------------------------------
# Sample CSV records -- edit here if the column layout changes
# ---------------------------------------------------------------------------
HEADER = "Timestamp,Address,ZIP,FullName,FooDuration,BarDuration,TotalDuration,Notes"

VALID_ROW = (
    '3/14/23 2:05:09 PM,"123 Main St, Apt 4",94121,jane q public,'
    '1:02:03.500,0:00:10.750,zzz,"said ""hi"""'
)
VALID_ROW_OUTPUT = (
    '2023-03-14T17:05:09-04:00,"123 Main St, Apt 4",94121,Jane Q Public,'
    '3723.5,10.75,3734.25,"said ""hi"""'
)

SECOND_ROW = "12/31/22 11:00:00 PM,1 Elm St,501,ada lovelace,0:01:00.000,0:00:00.001,,ok"
SECOND_ROW_OUTPUT = (
    "2023-01-01T02:00:00-05:00,1 Elm St,00501,Ada Lovelace,60,0.001,60.001,ok"
)

BAD_ZIP_ROW = "3/14/23 2:05:09 PM,9 Oak Ave,123456,bob,0:00:01.000,0:00:02.000,,bad zip"


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def valid_fields() -> list[str]:
    """Tokenized form of VALID_ROW."""
    return [
        "3/14/23 2:05:09 PM",
        "123 Main St, Apt 4",
        "94121",
        "jane q public",
        "1:02:03.500",
        "0:00:10.750",
        "zzz",
        'said "hi"',
    ]


# ---------------------------------------------------------------------------
# Pytest markers
# ---------------------------------------------------------------------------
def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (runs the full stream or the CLI)",
    )
