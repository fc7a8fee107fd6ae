"""
Tests for StatementExecutor against an in-memory SQLite database.
"""

from datetime import date
from decimal import Decimal

import pytest
import sqlalchemy as sa

from hotel_desk.infrastructure.schema.definitions import BOOKING, ROOM
from hotel_desk.infrastructure.sql import BuiltStatement, ExtraClauses, StatementMode, build
from hotel_desk.infrastructure.validation import validate_record
from hotel_desk.io.connectors import DatabaseExecutionFailed
from hotel_desk.io.repositories import ExecutionResult, StatementExecutor, to_sqlalchemy


@pytest.mark.unit
class TestToSqlalchemy:
    """Conversion of built statements to typed text clauses."""

    def test_markers_become_named_binds(self):
        clause = to_sqlalchemy(
            BuiltStatement("SELECT * FROM Room WHERE hotelID = ? AND roomNo = ?", (1, 2))
        )
        assert str(clause) == "SELECT * FROM Room WHERE hotelID = :p_0 AND roomNo = :p_1"
        assert clause.compile().params == {"p_0": 1, "p_1": 2}

    def test_bind_types_follow_values(self):
        clause = to_sqlalchemy(
            BuiltStatement(
                "SELECT ?, ?, ?, ?, ?",
                (True, 3, Decimal("1.50"), date(2024, 1, 1), "x"),
            )
        )
        types = {name: type(bind.type) for name, bind in clause._bindparams.items()}
        assert types == {
            "p_0": sa.Boolean,
            "p_1": sa.Integer,
            "p_2": sa.Numeric,
            "p_3": sa.Date,
            "p_4": sa.String,
        }

    def test_mismatched_statement_rejected(self):
        with pytest.raises(ValueError):
            to_sqlalchemy(BuiltStatement("SELECT ?", ()))


@pytest.mark.unit
def test_execution_result_scalar():
    assert ExecutionResult(("n",), [(4,)], 1).scalar() == 4
    assert ExecutionResult().scalar() is None
    assert ExecutionResult().returns_rows is False


@pytest.mark.integration
class TestExecute:
    """Executing statements on SQLite."""

    def test_insert_then_select(self, executor: StatementExecutor):
        values = validate_record(ROOM, ["3", "301", "Suite"])
        inserted = executor.execute(build("Room", ROOM, values, StatementMode.INSERT))
        assert inserted.rowcount == 1
        assert inserted.returns_rows is False

        lookup = validate_record(ROOM.subset("Key", "hotelID", "roomNo"), ["3", "301"])
        result = executor.execute(
            build(
                "Room",
                ROOM.subset("Key", "hotelID", "roomNo"),
                lookup,
                StatementMode.SELECT,
                ExtraClauses(projection=("roomType",)),
            )
        )
        assert result.columns == ("roomType",)
        assert result.rows == [("Suite",)]
        assert result.rowcount == 1

    def test_dates_and_decimals_round_trip(self, executor: StatementExecutor):
        values = validate_record(
            BOOKING, ["10", "2", "2", "201", "07/07/2024", "", "99.95"]
        )
        executor.execute(build("Booking", BOOKING, values, StatementMode.INSERT))

        result = executor.execute(
            BuiltStatement(
                "SELECT bID, noOfPeople FROM Booking WHERE bookingDate = ?",
                (date(2024, 7, 7),),
            )
        )
        assert result.rows == [(10, None)]

    def test_join_marker_with_filter(self, executor: StatementExecutor):
        record = ROOM.subset("RoomHotel", "hotelID")
        statement = build(
            "Room",
            record,
            validate_record(record, ["1"]),
            StatementMode.SELECT,
            ExtraClauses(
                projection=("DISTINCT r.roomNo",),
                alias="r",
                joins=("JOIN Booking b ON b.roomNo = r.roomNo AND b.price > ?",),
                where_parameters=(100,),
                order_by="r.roomNo",
            ),
        )

        result = executor.execute(statement)

        assert result.rows == [(101,)]

    def test_limit_is_bound(self, executor: StatementExecutor):
        result = executor.execute(
            BuiltStatement("SELECT roomNo FROM Room ORDER BY roomNo LIMIT ?", (2,))
        )
        assert [row[0] for row in result.rows] == [101, 102]

    def test_hostile_text_is_stored_verbatim(self, executor: StatementExecutor):
        hostile = "x'); DROP TABLE Room; --"
        executor.execute(
            BuiltStatement("INSERT INTO Room (hotelID, roomNo, roomType) VALUES (?, ?, ?)", (9, 1, hostile))
        )
        result = executor.execute(
            BuiltStatement("SELECT roomType FROM Room WHERE hotelID = ?", (9,))
        )
        assert result.scalar() == hostile
        assert executor.execute(BuiltStatement("SELECT COUNT(*) FROM Room")).scalar() == 5

    def test_driver_error_wrapped(self, executor: StatementExecutor, hotel_db):
        statement = BuiltStatement(
            "INSERT INTO Room (hotelID, roomNo, roomType) VALUES (?, ?, ?)", (1, 101, "Dup")
        )
        with pytest.raises(DatabaseExecutionFailed) as exc_info:
            executor.execute(statement)

        error = exc_info.value
        assert "UNIQUE" in str(error)
        assert error.statement == statement.text
        details = error.to_dict()
        assert details["original_error_type"] == "IntegrityError"
        assert "Dup" not in str(details)

        hotel_db.rollback()
        assert executor.execute(BuiltStatement("SELECT COUNT(*) FROM Room")).scalar() == 4

    def test_unknown_table(self, executor: StatementExecutor):
        with pytest.raises(DatabaseExecutionFailed, match="no such table"):
            executor.execute(BuiltStatement("SELECT * FROM Hotel"))
