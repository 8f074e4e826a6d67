"""
Tests for the profile and guidance request/response schemas.
"""

import pytest
from pydantic import ValidationError

from career_compass.schemas.careers import (
    CareerDetail,
    GuidanceRequest,
    RecommendationItem,
)
from career_compass.schemas.profile import Profile


def _user_data(**academics):
    return {
        "academics": {"stream": "Science-PCM", "marks": 88, **academics},
        "skills": {"analytical": True, "drawing": False},
        "interests": {"primary": "Engineering"},
        "location": {"state": "Karnataka"},
    }


class TestProfile:

    def test_valid_profile(self):
        profile = Profile.model_validate(_user_data(subjects=["Physics", "Maths"]))

        assert profile.academics.stream == "Science-PCM"
        assert profile.academics.marks == 88
        assert profile.selected_skills() == ["analytical"]

    @pytest.mark.parametrize("marks", [-1, 100.5, 250])
    def test_marks_outside_percentage_range_rejected(self, marks):
        with pytest.raises(ValidationError):
            Profile.model_validate(_user_data(marks=marks))

    @pytest.mark.parametrize("marks", [0, 100, 33.3])
    def test_marks_boundaries_accepted(self, marks):
        assert Profile.model_validate(_user_data(marks=marks)).academics.marks == marks

    def test_unknown_stream_rejected(self):
        with pytest.raises(ValidationError):
            Profile.model_validate(_user_data(stream="Vocational"))

    def test_academics_alone_is_a_complete_profile(self):
        profile = Profile.model_validate({"academics": {"stream": "Arts", "marks": 20}})

        assert profile.skills == {}
        assert profile.interests.primary == ""
        assert profile.location.state == ""

    def test_missing_academics_rejected(self):
        with pytest.raises(ValidationError):
            Profile.model_validate({"interests": {"primary": "Design"}})

    def test_location_defaults_to_empty_state(self):
        data = _user_data()
        del data["location"]

        assert Profile.model_validate(data).location.state == ""

    def test_profile_is_immutable(self):
        profile = Profile.model_validate(_user_data())

        with pytest.raises(ValidationError):
            profile.academics.marks = 10


class TestGuidanceRequest:

    def test_recommendations_envelope_from_wire(self):
        envelope = GuidanceRequest.model_validate({
            "action": "recommendations",
            "userData": _user_data(),
        })

        assert envelope.action == "recommendations"
        assert envelope.career_name is None

    def test_details_requires_career_name(self):
        with pytest.raises(ValidationError):
            GuidanceRequest.model_validate({"action": "details", "userData": _user_data()})

    def test_details_rejects_blank_career_name(self):
        with pytest.raises(ValidationError):
            GuidanceRequest.model_validate({
                "action": "details",
                "userData": _user_data(),
                "careerName": "   ",
            })

    def test_serialises_with_wire_names(self):
        envelope = GuidanceRequest(
            action="details",
            user_data=Profile.model_validate(_user_data()),
            career_name="Data Scientist",
        )

        wire = envelope.model_dump(mode="json", by_alias=True)

        assert set(wire) == {"action", "userData", "careerName"}
        assert wire["userData"]["academics"]["stream"] == "Science-PCM"


class TestRecommendationItem:

    def _item(self, **overrides):
        item = {
            "careerName": "Software Engineer",
            "matchPercentage": 90,
            "eligibilityStatus": "Eligible",
            "riskLevel": "Low",
            "shortDescription": "Builds software.",
            "whyItMatches": "Strong maths.",
            "parentalAdvice": "Good placement record at most colleges.",
        }
        item.update(overrides)
        return item

    def test_round_trips_wire_names(self):
        item = RecommendationItem.model_validate(self._item())

        assert item.model_dump(by_alias=True) == self._item()

    @pytest.mark.parametrize("status", ["eligible", "Maybe", ""])
    def test_eligibility_status_is_closed(self, status):
        with pytest.raises(ValidationError):
            RecommendationItem.model_validate(self._item(eligibilityStatus=status))

    @pytest.mark.parametrize("risk", ["low", "Extreme"])
    def test_risk_level_is_closed(self, risk):
        with pytest.raises(ValidationError):
            RecommendationItem.model_validate(self._item(riskLevel=risk))


class TestCareerDetail:

    def test_colleges_and_scholarships_default_to_empty(self):
        details = CareerDetail.model_validate({
            "whyThisCareerSuitsYou": "Fits your interest.",
            "careerRoadmap": ["Step one"],
            "scopeAndGrowth": "Growing.",
        })

        assert details.suggested_colleges == []
        assert details.suggested_scholarships == []

    def test_model_supplied_disclaimer_is_kept(self):
        details = CareerDetail.model_validate({
            "whyThisCareerSuitsYou": "Fits your interest.",
            "careerRoadmap": ["Step one"],
            "scopeAndGrowth": "Growing.",
            "disclaimer": "Check official sites.",
        })

        assert details.disclaimer == "Check official sites."
