#!/usr/bin/env python3
"""
Career Guidance Try-Out Script

Sends a sample student profile through CareerGuidanceClient to a running
gateway (see serve.py) and prints the recommendations, then the details for
the first (or --career) recommendation.

Usage:
    python scripts/try_guidance.py
    python scripts/try_guidance.py --stream Science-PCB --marks 78 --interest Medicine --skill empathy
    python scripts/try_guidance.py --url http://localhost:8000 --career "Chartered Accountant" --stream Commerce
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import List, Optional

# Add the project root to the path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from career_compass.client import CareerGuidanceClient, GuidanceClientError
from career_compass.schemas.profile import Academics, Interests, Location, Profile

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def build_profile(
    stream: str,
    marks: float,
    interest: str,
    state: str,
    skills: List[str],
) -> Profile:
    return Profile(
        academics=Academics(stream=stream, marks=marks),
        skills={skill: True for skill in skills},
        interests=Interests(primary=interest),
        location=Location(state=state),
    )


async def run(url: str, profile: Profile, career: Optional[str], timeout: Optional[float]) -> int:
    print("\n" + "=" * 60)
    print("CAREER GUIDANCE TRY-OUT")
    print("=" * 60)
    print(f"\nGateway:  {url}")
    print(f"Stream:   {profile.academics.stream}")
    print(f"Marks:    {profile.academics.marks:g}%")
    print(f"Interest: {profile.interests.primary}")
    print(f"Skills:   {', '.join(profile.selected_skills()) or '-'}")

    async with CareerGuidanceClient(url, timeout=timeout) as client:
        try:
            items = await client.get_career_recommendations(profile)
        except GuidanceClientError as e:
            print(f"\n❌ Recommendations failed ({type(e).__name__}): {e.message}")
            return 1

        print(f"\n✅ {len(items)} recommendation(s):\n")
        for i, item in enumerate(items, 1):
            print(f"--- #{i} {item.career_name} ---")
            print(f"  Match:       {item.match_percentage:g}%")
            print(f"  Eligibility: {item.eligibility_status}")
            print(f"  Risk:        {item.risk_level}")
            print(f"  Summary:     {item.short_description}")
            print()

        career_name = career or items[0].career_name
        print(f"Fetching details for: {career_name}")
        try:
            details = await client.get_career_details(career_name, profile)
        except GuidanceClientError as e:
            print(f"\n❌ Details failed ({type(e).__name__}): {e.message}")
            return 1

        print(json.dumps(details.model_dump(by_alias=True), indent=2, ensure_ascii=False))
    return 0


def main():
    parser = argparse.ArgumentParser(
        description="Try the career guidance gateway with a sample profile",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--url", default="http://localhost:8000", help="Gateway base URL")
    parser.add_argument(
        "--stream",
        default="Science-PCB",
        choices=["Science-PCM", "Science-PCB", "Science-PCMB", "Commerce", "Arts"],
        help="Class 12 stream (default: Science-PCB)"
    )
    parser.add_argument("--marks", type=float, default=78, help="Marks percentage (default: 78)")
    parser.add_argument("--interest", default="Medicine", help="Primary interest")
    parser.add_argument("--state", default="Kerala", help="Preferred state")
    parser.add_argument(
        "--skill",
        action="append",
        default=[],
        help="Skill flag set to true (repeatable)"
    )
    parser.add_argument("--career", help="Career to expand (default: first recommendation)")
    parser.add_argument("--timeout", type=float, help="Client deadline in seconds")
    args = parser.parse_args()

    profile = build_profile(
        stream=args.stream,
        marks=args.marks,
        interest=args.interest,
        state=args.state,
        skills=args.skill or ["empathy"],
    )
    sys.exit(asyncio.run(run(args.url, profile, args.career, args.timeout)))


if __name__ == "__main__":
    main()
