"""Unit tests for address summarization.

Pure function tests - no mocks needed.
"""

from workout_finder.core.location import extract_city_and_state


class TestExtractCityAndState:
    """Tests for extract_city_and_state()."""

    def test_us_address_with_country(self):
        """Street, city, state, zip, country."""
        location = "26721 Hawks Prairie Blvd, Katy, TX, 77494, United States"
        assert extract_city_and_state(location) == "Katy, TX"

    def test_state_with_zip(self):
        """State and zip in one part."""
        location = "29995 Evans Rd, Menifee, CA 92586"
        assert extract_city_and_state(location) == "Menifee, CA"

    def test_lowercase_state_upcased(self):
        """State codes are upper-cased."""
        assert extract_city_and_state("Austin, tx") == "Austin, TX"

    def test_international_with_postal_code(self):
        """City, postal code, country code."""
        location = "Manston Park, Leeds, LS15 8BS, GB"
        assert extract_city_and_state(location) == "Leeds, GB"

    def test_us_suffix_ignored(self):
        """Trailing US is not treated as part of the city."""
        location = "100 Main St, Springfield, IL, US"
        assert extract_city_and_state(location) == "Springfield, IL"

    def test_falls_back_to_last_two_parts(self):
        """Without a state or country code, last two parts are used."""
        location = "1 Rue de Rivoli, Paris, France"
        assert extract_city_and_state(location) == "Paris, France"

    def test_no_commas_unchanged(self):
        """A single-part location is returned as-is."""
        assert extract_city_and_state("Central Park") == "Central Park"

    def test_empty(self):
        """Empty location gives an empty summary."""
        assert extract_city_and_state("") == ""
