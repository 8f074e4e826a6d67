"""
Pytest configuration for Career Compass backend tests.

Sets up the test environment and shared fixtures. Gemini is never called:
tests patch get_gemini_client with a MagicMock whose async
generate_content is controlled per test.
"""
import json
import os
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

# Disable config validation during tests
os.environ["VALIDATE_CONFIG"] = "false"

# Set test environment variables
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GOOGLE_API_KEY", "test-google-api-key")

from career_compass.schemas.profile import Profile  # noqa: E402


@pytest.fixture
def pcb_profile() -> Profile:
    """Science-PCB student, 78%, interested in medicine."""
    return Profile.model_validate({
        "academics": {
            "stream": "Science-PCB",
            "marks": 78,
            "subjects": ["Physics", "Chemistry", "Biology", "English"]
        },
        "skills": {"empathy": True, "coding": False, "communication": True},
        "interests": {"primary": "Medicine"},
        "location": {"state": "Kerala"}
    })


@pytest.fixture
def low_marks_arts_profile() -> Profile:
    """Arts student with 20% marks and nothing else filled in."""
    return Profile.model_validate({"academics": {"stream": "Arts", "marks": 20}})


@pytest.fixture
def medicine_recommendations() -> list:
    """Four conforming recommendation items, as Gemini would return them."""
    return [
        {
            "careerName": "MBBS Doctor",
            "matchPercentage": 92,
            "eligibilityStatus": "Eligible",
            "riskLevel": "High",
            "shortDescription": "Diagnose and treat patients.",
            "whyItMatches": "Biology background and strong empathy.",
            "parentalAdvice": "NEET preparation takes one to two years of focused study."
        },
        {
            "careerName": "BDS Dentist",
            "matchPercentage": 85,
            "eligibilityStatus": "Eligible",
            "riskLevel": "Medium",
            "shortDescription": "Oral health specialist.",
            "whyItMatches": "Clinical interest with lower competition than MBBS.",
            "parentalAdvice": "Private college fees vary widely; compare early."
        },
        {
            "careerName": "B.Sc Nursing",
            "matchPercentage": 80,
            "eligibilityStatus": "Eligible",
            "riskLevel": "Low",
            "shortDescription": "Patient care in hospitals and clinics.",
            "whyItMatches": "Empathy and communication skills.",
            "parentalAdvice": "Strong demand in India and abroad."
        },
        {
            "careerName": "Physiotherapist",
            "matchPercentage": 74,
            "eligibilityStatus": "Eligible",
            "riskLevel": "Low",
            "shortDescription": "Rehabilitation through physical therapy.",
            "whyItMatches": "Healthcare interest without NEET dependence.",
            "parentalAdvice": "Four and a half year BPT programme including internship."
        }
    ]


@pytest.fixture
def not_eligible_recommendations() -> list:
    """Items all marked Not Eligible."""
    return [
        {
            "careerName": "Civil Services (IAS)",
            "matchPercentage": 40,
            "eligibilityStatus": "Not Eligible",
            "riskLevel": "High",
            "shortDescription": "Administrative service.",
            "whyItMatches": "Interest in public affairs.",
            "parentalAdvice": "Requires graduation first."
        },
        {
            "careerName": "National Law University LLB",
            "matchPercentage": 35,
            "eligibilityStatus": "Not Eligible",
            "riskLevel": "High",
            "shortDescription": "Five year integrated law degree.",
            "whyItMatches": "Interest in writing and argument.",
            "parentalAdvice": "Most NLUs require 45% in class 12."
        }
    ]


@pytest.fixture
def mbbs_details() -> dict:
    """A conforming CareerDetail document."""
    return {
        "whyThisCareerSuitsYou": "Your biology marks and empathy fit clinical work.",
        "careerRoadmap": [
            "Prepare for NEET-UG",
            "Complete MBBS (5.5 years)",
            "Finish the compulsory internship",
            "Clear NEET-PG",
            "Specialise through MD/MS"
        ],
        "scopeAndGrowth": "Steady demand across public and private healthcare.",
        "suggestedColleges": [
            {
                "name": "Government Medical College, Thiruvananthapuram",
                "location": "Thiruvananthapuram, Kerala",
                "type": "Public",
                "reasoning": "Popularly recommended state college with strong clinical exposure."
            }
        ],
        "suggestedScholarships": [
            {
                "name": "Post Matric Scholarship",
                "provider": "Central Government",
                "typicalEligibility": "Family income limits and category criteria."
            }
        ]
    }


def make_gemini_response(payload) -> MagicMock:
    """Mock generate_content result whose .text is the JSON of payload."""
    response = MagicMock()
    response.text = payload if isinstance(payload, str) or payload is None else json.dumps(payload)
    return response


@pytest.fixture
def mock_gemini():
    """
    Patch the shared Gemini client.

    Yields the AsyncMock standing in for client.aio.models.generate_content.
    Set .return_value (via make_gemini_response) or .side_effect per test.
    """
    with patch("career_compass.services.gemini_client.get_gemini_client") as mock_get_client:
        client = MagicMock()
        client.aio.models.generate_content = AsyncMock()
        mock_get_client.return_value = client
        yield client.aio.models.generate_content


@pytest.fixture
def gemini_response():
    """Factory fixture for make_gemini_response."""
    return make_gemini_response


@pytest.fixture
def missing_api_key(monkeypatch):
    """Remove every accepted Gemini credential from the environment."""
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.delenv("API_KEY", raising=False)
