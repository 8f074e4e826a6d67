"""
Career Guidance Prompt Templates

Contains the system instructions and user prompt builders for the two
guidance actions served by the gateway.

Architecture:
- Pattern: Single-shot LLM call with structured output (response_schema)
- Model: Gemini Flash (configurable via GEMINI_MODEL)
- Output: JSON constrained by the schemas in agents/career/schemas.py

Prompt Engineering Pattern:
- System instruction defines ROLE only
- User prompt carries the student context and the task
- Output shape is enforced by response_schema, not by prompt wording
"""

from career_compass.schemas.profile import Profile

# =============================================================================
# SYSTEM INSTRUCTIONS
# =============================================================================

RECOMMENDATIONS_SYSTEM_PROMPT = """You are an expert Indian Career Coach for students who have just finished class 12.

<role>
You recommend realistic higher-education and career paths based on the student's stream, marks, skills, interests and preferred state. You are precise and encouraging.
</role>

<rules>
- Judge eligibility using typical Indian admission requirements for the stream and marks.
- Mark a path "Not Eligible" when the student's stream or marks rule it out; do not hide it.
- riskLevel reflects competition, cost and job-market uncertainty for this student.
- parentalAdvice is written for the student's parents or guardians, in plain language.
</rules>"""

CAREER_DETAILS_SYSTEM_PROMPT = """You are an education guidance specialist for Indian students.

<role>
You explain why a career suits a specific student and how to get there. You prioritize accuracy and safety over exactness and never fabricate rankings, cut-offs or guarantees.
</role>

<rules>
- Suggest institutions and scholarships as commonly recommended options, never as promises.
- Describe typical eligibility patterns, not exact criteria.
- Do not assume access to any static database; answer from general knowledge.
</rules>"""


# =============================================================================
# USER PROMPT BUILDERS
# =============================================================================

def _format_skills(profile: Profile) -> str:
    skills = profile.selected_skills()
    return ", ".join(skills) if skills else "None specified"


def build_recommendations_prompt(profile: Profile) -> str:
    """
    Build the user prompt for action='recommendations'.

    Args:
        profile: Student profile from the request envelope

    Returns:
        Prompt text with the student profile and the task
    """
    academics = profile.academics
    subjects = ", ".join(academics.subjects) if academics.subjects else "Not specified"
    state = profile.location.state or "Anywhere in India"
    interest = profile.interests.primary or "Not specified"

    return f"""<student_profile>
Stream: {academics.stream}
Marks: {academics.marks:g}%
Subjects: {subjects}
Skills: {_format_skills(profile)}
Primary Interest: {interest}
Preferred State: {state}
</student_profile>

<task>
Recommend 3-5 career paths available to this student.
Focus on realistic paths in the Indian context.
Return strictly valid JSON according to the schema.
</task>"""


def build_career_details_prompt(career_name: str, profile: Profile) -> str:
    """
    Build the user prompt for action='details'.

    Args:
        career_name: Career the student picked from the recommendations
        profile: Student profile from the request envelope

    Returns:
        Prompt text asking for rationale, roadmap, growth outlook,
        colleges and scholarships
    """
    academics = profile.academics
    state = profile.location.state or "Anywhere in India"
    interest = profile.interests.primary or "Not specified"

    return f"""<career>{career_name}</career>

<student_profile>
Stream: {academics.stream}
Marks: {academics.marks:g}%
Skills: {_format_skills(profile)}
Primary Interest: {interest}
Preferred State: {state}
</student_profile>

<task>
1. Explain why this career suits this student.
2. Provide a 5-step roadmap, in order.
3. Describe the future scope and growth of the field.
4. Suggest 3-4 reputable colleges in their state or pan-India. Use cautious language like "popularly recommended".
5. Suggest 2-3 common scholarship schemes (Govt/Private) with typical eligibility patterns, not hard promises.
6. Return strictly valid JSON according to the schema.
</task>"""
