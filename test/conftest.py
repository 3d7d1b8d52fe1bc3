import pytest


@pytest.fixture
def make_payload():
    def _make(**fields):
        payload = {
            "id": "abc123",
            "extractedOn": "2024-01-15T12:00:00Z",
            "lastUpdated": "2024-02-03T08:30:00Z",
        }
        payload.update(fields)
        return payload

    return _make
