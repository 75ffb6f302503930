"""Tests for header-driven column lookup."""

from signup_dashboard.aggregation.header import HeaderIndex, normalize_header


class TestNormalizeHeader:
    """Test header normalization."""

    def test_trims_and_lowercases(self):
        assert normalize_header("  Email ") == "email"

    def test_none_is_empty(self):
        assert normalize_header(None) == ""

    def test_non_string_cells(self):
        assert normalize_header(42) == "42"


class TestColumnIndex:
    """Test column position lookup."""

    def test_finds_columns_by_normalized_name(self):
        header = HeaderIndex([" EMAIL", "Timestamp ", "ip_country"])
        assert header.column_index("email") == 0
        assert header.column_index("timestamp") == 1
        assert header.column_index("IP_Country") == 2

    def test_absent_column_returns_none(self):
        header = HeaderIndex(["email"])
        assert header.column_index("ip_country") is None

    def test_first_duplicate_wins(self):
        header = HeaderIndex(["email", "Email"])
        assert header.column_index("email") == 0

    def test_blank_header_cells_are_not_columns(self):
        header = HeaderIndex(["", "email", "   "])
        assert header.columns == ["email"]

    def test_contains(self):
        header = HeaderIndex(["Email"])
        assert "email" in header
        assert "timestamp" not in header


class TestValue:
    """Test field extraction from a row."""

    def test_reads_cell_by_name(self):
        header = HeaderIndex(["timestamp", "email"])
        assert header.value(["t1", "a@x.com"], "email") == "a@x.com"

    def test_absent_column_reads_empty(self):
        header = HeaderIndex(["email"])
        assert header.value(["a@x.com"], "ip_country") == ""

    def test_short_row_reads_empty(self):
        """Sheets omits trailing empty cells, so rows can be shorter than the header."""
        header = HeaderIndex(["email", "timestamp", "ip_country"])
        assert header.value(["a@x.com"], "ip_country") == ""

    def test_none_cell_reads_empty(self):
        header = HeaderIndex(["email"])
        assert header.value([None], "email") == ""

    def test_reordered_columns(self):
        header = HeaderIndex(["ip_country", "notes", "email"])
        assert header.value(["MX", "vip", "a@x.com"], "email") == "a@x.com"
        assert header.value(["MX", "vip", "a@x.com"], "ip_country") == "MX"
