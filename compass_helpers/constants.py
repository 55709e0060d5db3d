"""Static option lists for the analysis form."""

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass(frozen=True)
class LocationGroup:
    label: str
    options: List[str] = field(default_factory=list)


DEFAULT_LOCATION = "Any / Undecided"

LOCATIONS: List[Union[str, LocationGroup]] = [
    DEFAULT_LOCATION,
    LocationGroup("United States", [
        "Anywhere in USA",
        "New York, USA",
        "Boston, USA",
        "San Francisco, USA",
        "Los Angeles, USA",
        "Chicago, USA",
    ]),
    LocationGroup("United Kingdom", [
        "Anywhere in UK",
        "London, UK",
        "Edinburgh, UK",
        "Manchester, UK",
    ]),
    LocationGroup("Canada", [
        "Anywhere in Canada",
        "Toronto, Canada",
        "Vancouver, Canada",
        "Montreal, Canada",
    ]),
    LocationGroup("Australia & New Zealand", [
        "Anywhere in Australia",
        "Sydney, Australia",
        "Melbourne, Australia",
        "Brisbane, Australia",
        "Auckland, New Zealand",
    ]),
    LocationGroup("Europe", [
        "Anywhere in Germany",
        "Paris, France",
        "Berlin, Germany",
        "Munich, Germany",
        "Amsterdam, Netherlands",
        "Dublin, Ireland",
        "Zurich, Switzerland",
        "Stockholm, Sweden",
    ]),
    LocationGroup("Asia", [
        "Singapore",
        "Tokyo, Japan",
        "Seoul, South Korea",
        "Hong Kong",
    ]),
]

DEGREE_PROGRAMS = [
    "Any / Undecided",
    "Computer Science",
    "Engineering",
    "Business Administration",
    "Medicine & Health Sciences",
    "Fine Arts",
    "Humanities & Social Sciences",
    "Law",
    "Architecture",
    "Data Science & Analytics",
    "Environmental Science",
    "Economics",
]

GRADES = [
    "12th Grade / A-Level",
    "11th Grade / AS-Level",
    "10th Grade / IGCSE / O-Level",
    "9th Grade",
    "8th Grade",
    "IB Diploma Year 2",
    "IB Diploma Year 1",
]

SCHOLARSHIP_TYPES = [
    "Merit-Based",
    "Need-Based",
    "Athletic",
    "Artistic/Talent-Based",
    "Community Service",
    "Minority/Diversity",
]

ALL_SCHOLARSHIPS_KEY = "All"

GRANT_AMOUNTS = [
    "Any",
    "$1,000+",
    "$5,000+",
    "$10,000+",
    "Half Tuition+",
    "Full Ride",
]

UNIVERSITY_SIZES = [
    "Any",
    "Small (< 5,000 students)",
    "Medium (5,000 - 15,000 students)",
    "Large (> 15,000 students)",
]

CAMPUS_SETTINGS = [
    "Any",
    "Urban",
    "Suburban",
    "Rural",
]

SCORE_FILE_TYPES = ["image/png", "image/jpeg", "application/pdf"]
PICTURE_FILE_TYPES = ["image/png", "image/jpeg"]


def flatten_locations() -> List[str]:
    """Every selectable location, in display order."""
    flat = []
    for entry in LOCATIONS:
        if isinstance(entry, LocationGroup):
            flat.extend(entry.options)
        else:
            flat.append(entry)
    return flat


def location_group_of(option: str) -> Optional[str]:
    for entry in LOCATIONS:
        if isinstance(entry, LocationGroup) and option in entry.options:
            return entry.label
    return None
