"""
Career Guidance Response Schemas

OpenAPI-style schemas passed to Gemini as `response_schema`. They constrain
what the model generates; the pydantic models in
career_compass/schemas/careers.py validate what it actually returned.
Keep the two in sync.
"""

RECOMMENDATION_ITEM_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "careerName": {"type": "STRING"},
        "matchPercentage": {
            "type": "NUMBER",
            "description": "How well the career fits the student, 0-100"
        },
        "eligibilityStatus": {
            "type": "STRING",
            "enum": ["Eligible", "Not Eligible"]
        },
        "riskLevel": {
            "type": "STRING",
            "enum": ["Low", "Medium", "High"]
        },
        "shortDescription": {"type": "STRING"},
        "whyItMatches": {"type": "STRING"},
        "parentalAdvice": {"type": "STRING"}
    },
    "required": [
        "careerName", "matchPercentage", "eligibilityStatus", "riskLevel",
        "shortDescription", "whyItMatches", "parentalAdvice"
    ]
}

RECOMMENDATIONS_RESPONSE_SCHEMA = {
    "type": "ARRAY",
    "items": RECOMMENDATION_ITEM_SCHEMA
}

CAREER_DETAILS_RESPONSE_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "whyThisCareerSuitsYou": {"type": "STRING"},
        "careerRoadmap": {
            "type": "ARRAY",
            "items": {"type": "STRING"}
        },
        "scopeAndGrowth": {"type": "STRING"},
        "suggestedColleges": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "name": {
                        "type": "STRING",
                        "description": "Name of a reputable institution for this course."
                    },
                    "location": {"type": "STRING", "description": "City or Region."},
                    "type": {"type": "STRING", "description": "e.g., Public, Private, or Deemed."},
                    "reasoning": {
                        "type": "STRING",
                        "description": "Why this is a popular choice for this course."
                    }
                },
                "required": ["name", "location", "type", "reasoning"]
            }
        },
        "suggestedScholarships": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "name": {"type": "STRING", "description": "Name of the scholarship scheme."},
                    "provider": {
                        "type": "STRING",
                        "description": "e.g., Central Government, State Govt, or Private Trust."
                    },
                    "typicalEligibility": {
                        "type": "STRING",
                        "description": "Brief overview of common criteria like income or marks."
                    }
                },
                "required": ["name", "provider", "typicalEligibility"]
            }
        }
    },
    "required": [
        "whyThisCareerSuitsYou", "careerRoadmap", "scopeAndGrowth",
        "suggestedColleges", "suggestedScholarships"
    ]
}
