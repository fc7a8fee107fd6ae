"""
Unit tests for PostgreSQL dialect statement rendering.
"""

import pytest

from hotel_desk.infrastructure.sql.dialects import PostgreSQLDialect


@pytest.fixture
def dialect():
    return PostgreSQLDialect()


@pytest.mark.unit
class TestBuildInsert:
    """Tests for build_insert."""

    def test_basic_insert(self, dialect):
        sql = dialect.build_insert("Room", ["hotelID", "roomNo"], ["?", "?"])
        assert sql == "INSERT INTO Room (hotelID, roomNo) VALUES (?, ?)"

    def test_insert_quotes_unusual_columns(self, dialect):
        sql = dialect.build_insert("Room", ["room type"], ["?"])
        assert sql == 'INSERT INTO Room ("room type") VALUES (?)'


@pytest.mark.unit
class TestBuildSelect:
    """Tests for build_select."""

    def test_no_predicates_omits_where(self, dialect):
        assert dialect.build_select("Room", ["*"]) == "SELECT * FROM Room"

    def test_full_select(self, dialect):
        sql = dialect.build_select(
            "MaintenanceCompany",
            ["m.name", "COUNT(*) AS repair_count"],
            ["m.cmpID = ?"],
            alias="m",
            joins=["JOIN Repair r ON r.mCompany = m.cmpID"],
            group_by=["m.cmpID", "m.name"],
            order_by="COUNT(*) DESC",
            limit_placeholder="?",
        )
        assert sql == (
            "SELECT m.name, COUNT(*) AS repair_count FROM MaintenanceCompany m "
            "JOIN Repair r ON r.mCompany = m.cmpID WHERE m.cmpID = ? "
            "GROUP BY m.cmpID, m.name ORDER BY COUNT(*) DESC LIMIT ?"
        )

    def test_predicates_joined_with_and(self, dialect):
        sql = dialect.build_select("Customer", ["*"], ["fName = ?", "lName = ?"])
        assert sql == "SELECT * FROM Customer WHERE fName = ? AND lName = ?"
