"""Tests for prefix, suffix and month vocabularies."""

from verparse.versions.markers import MONTHS, VersionPrefix, VersionSuffix, parse_month


class TestVersionPrefix:
    """Test prefix lookup and rendering."""

    def test_parse_case_insensitive(self):
        assert VersionPrefix.parse("V") is VersionPrefix.V
        assert VersionPrefix.parse("v") is VersionPrefix.V

    def test_parse_unknown(self):
        assert VersionPrefix.parse("RC") is None
        assert VersionPrefix.parse("release") is None

    def test_str_is_lowercase(self):
        assert str(VersionPrefix.V) == "v"


class TestVersionSuffix:
    """Test suffix lookup and canonical casing."""

    def test_parse_case_insensitive(self):
        assert VersionSuffix.parse("BETA") is VersionSuffix.BETA
        assert VersionSuffix.parse("b") is VersionSuffix.B
        assert VersionSuffix.parse("RC") is VersionSuffix.RC
        assert VersionSuffix.parse("rc") is VersionSuffix.RC
        assert VersionSuffix.parse("Dev") is VersionSuffix.DEV

    def test_parse_unknown(self):
        assert VersionSuffix.parse("foobar") is None
        assert VersionSuffix.parse("v") is None
        assert VersionSuffix.parse("d") is None

    def test_canonical_casing(self):
        """Test only RC renders uppercase."""
        assert str(VersionSuffix.B) == "b"
        assert str(VersionSuffix.PATCH) == "patch"
        assert str(VersionSuffix.RC) == "RC"

    def test_default_is_p(self):
        assert VersionSuffix.default() is VersionSuffix.P


class TestParseMonth:
    """Test month name lookup."""

    def test_abbreviations(self):
        assert parse_month("Feb") == 2
        assert parse_month("Nov") == 11
        assert parse_month("nov") == 11

    def test_full_names(self):
        assert parse_month("January") == 1
        assert parse_month("DECEMBER") == 12

    def test_not_a_month(self):
        assert parse_month("11") is None
        assert parse_month("novem") is None
        assert parse_month("") is None

    def test_table_covers_all_months(self):
        assert sorted(set(MONTHS.values())) == list(range(1, 13))
