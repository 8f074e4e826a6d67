"""
Pydantic schema for the student profile.

The profile is assembled step by step by the guidance form (academics,
skills, interests, location) and sent as `userData` with every request.
The gateway never modifies it.
"""

from typing import Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field

Stream = Literal["Science-PCM", "Science-PCB", "Science-PCMB", "Commerce", "Arts"]


class Academics(BaseModel):
    """Class 12 academic record."""

    model_config = ConfigDict(frozen=True)

    stream: Stream = Field(
        ...,
        description="Higher secondary stream",
        examples=["Science-PCB", "Commerce"]
    )
    marks: float = Field(
        ...,
        description="Aggregate marks percentage",
        ge=0,
        le=100,
        examples=[78, 91.4]
    )
    subjects: List[str] = Field(
        default_factory=list,
        description="Subjects taken in class 12",
        examples=[["Physics", "Chemistry", "Biology", "English"]]
    )


class Interests(BaseModel):
    model_config = ConfigDict(frozen=True)

    primary: str = Field(
        "",
        description="Primary field of interest",
        max_length=200,
        examples=["Medicine", "Design"]
    )


class Location(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: str = Field(
        "",
        description="Preferred state for higher studies",
        max_length=100,
        examples=["Maharashtra", "Kerala"]
    )


class Profile(BaseModel):
    """
    Student profile sent as `userData`.

    Example:
        {
            "academics": {"stream": "Science-PCB", "marks": 78, "subjects": []},
            "skills": {"empathy": true, "coding": false},
            "interests": {"primary": "Medicine"},
            "location": {"state": "Kerala"}
        }
    """

    model_config = ConfigDict(frozen=True)

    academics: Academics
    skills: Dict[str, bool] = Field(
        default_factory=dict,
        description="Self-reported skill flags",
        examples=[{"empathy": True, "analytical": True, "coding": False}]
    )
    interests: Interests = Field(default_factory=Interests)
    location: Location = Field(default_factory=Location)

    def selected_skills(self) -> List[str]:
        """Names of the skills the student ticked, in form order."""
        return [name for name, selected in self.skills.items() if selected]
