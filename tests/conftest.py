import json
from unittest.mock import MagicMock

import pytest

from ai_client import LegalAIClient
from app import create_app

SAMPLE_DOCUMENT = """RESIDENTIAL LEASE AGREEMENT

1. Term. This lease begins on 1 March 2024 and renews automatically for successive twelve month terms.
2. Rent. Tenant shall pay $1,200 per month. A late fee of $75 applies after the 5th day of the month.
3. Termination. Tenant must give 90 days written notice to terminate.
"""


@pytest.fixture()
def document_text() -> str:
    return SAMPLE_DOCUMENT


@pytest.fixture()
def ai_client() -> MagicMock:
    """AI client stub; no network calls."""
    return MagicMock(spec=LegalAIClient)


@pytest.fixture()
def risk_json():
    def _build(score=10, rating="Low Risk", justification=None):
        return json.dumps({
            "score": score,
            "rating": rating,
            "justification": justification if justification is not None else ["a", "b"],
        })
    return _build


@pytest.fixture()
def flask_client(ai_client):
    app = create_app(ai_client=ai_client)
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client
