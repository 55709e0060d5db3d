from compass_helpers.constants import (
    CAMPUS_SETTINGS,
    DEFAULT_LOCATION,
    DEGREE_PROGRAMS,
    GRANT_AMOUNTS,
    LOCATIONS,
    LocationGroup,
    UNIVERSITY_SIZES,
    flatten_locations,
    location_group_of,
)


def test_any_options_come_first():
    assert LOCATIONS[0] == DEFAULT_LOCATION == "Any / Undecided"
    assert DEGREE_PROGRAMS[0] == "Any / Undecided"
    assert UNIVERSITY_SIZES[0] == "Any"
    assert CAMPUS_SETTINGS[0] == "Any"
    assert GRANT_AMOUNTS[0] == "Any"


def test_flatten_locations_keeps_display_order():
    flat = flatten_locations()
    assert flat[0] == DEFAULT_LOCATION
    assert flat[1] == "Anywhere in USA"
    assert flat[-1] == "Hong Kong"
    groups = [entry for entry in LOCATIONS if isinstance(entry, LocationGroup)]
    assert len(flat) == 1 + sum(len(g.options) for g in groups)


def test_location_group_of():
    assert location_group_of("London, UK") == "United Kingdom"
    assert location_group_of("Auckland, New Zealand") == "Australia & New Zealand"
    assert location_group_of(DEFAULT_LOCATION) is None
    assert location_group_of("Atlantis") is None
