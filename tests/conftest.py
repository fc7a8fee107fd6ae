"""Pytest configuration and shared database fixtures.

Statements are executed against an in-memory SQLite database carrying the
hotel schema. SQLite accepts the standard SQL the builder emits, so every
action except the per-year repair report can be exercised end to end.
"""

from __future__ import annotations

import os
from typing import Generator, List

import pytest
from sqlalchemy import create_engine
from sqlalchemy.engine import Connection, Engine

# Keep developer .env files and shell variables out of the test run.
os.environ.setdefault("ENVIRONMENT", "dev")
os.environ.setdefault("HOTEL_ENV_FILE", ".env.test-missing")

from hotel_desk.config import get_settings  # noqa: E402
from hotel_desk.io.repositories import StatementExecutor  # noqa: E402

HOTEL_SCHEMA: List[str] = [
    """
    CREATE TABLE Customer (
        customerID INTEGER PRIMARY KEY,
        fName VARCHAR(30) NOT NULL,
        lName VARCHAR(30) NOT NULL,
        Address TEXT,
        phNo VARCHAR(20),
        DOB DATE,
        gender VARCHAR(10)
    )
    """,
    """
    CREATE TABLE Room (
        hotelID INTEGER NOT NULL,
        roomNo INTEGER NOT NULL,
        roomType VARCHAR(10) NOT NULL,
        PRIMARY KEY (hotelID, roomNo)
    )
    """,
    """
    CREATE TABLE MaintenanceCompany (
        cmpID INTEGER PRIMARY KEY,
        name VARCHAR(30) NOT NULL,
        address TEXT,
        isCertified BOOLEAN NOT NULL
    )
    """,
    """
    CREATE TABLE Repair (
        rID INTEGER PRIMARY KEY,
        hotelID INTEGER NOT NULL,
        roomNo INTEGER NOT NULL,
        mCompany INTEGER NOT NULL REFERENCES MaintenanceCompany (cmpID),
        repairDate DATE NOT NULL,
        description TEXT,
        repairType VARCHAR(10)
    )
    """,
    """
    CREATE TABLE Booking (
        bID INTEGER PRIMARY KEY,
        customer INTEGER NOT NULL REFERENCES Customer (customerID),
        hotelID INTEGER NOT NULL,
        roomNo INTEGER NOT NULL,
        bookingDate DATE NOT NULL,
        noOfPeople INTEGER,
        price NUMERIC NOT NULL
    )
    """,
    """
    CREATE TABLE Assigned (
        asgID INTEGER PRIMARY KEY,
        staffID INTEGER NOT NULL,
        hotelID INTEGER NOT NULL,
        roomNo INTEGER NOT NULL
    )
    """,
    """
    CREATE TABLE Request (
        reqID INTEGER PRIMARY KEY,
        managerID INTEGER NOT NULL,
        repairID INTEGER NOT NULL,
        requestDate DATE NOT NULL,
        description TEXT
    )
    """,
]

SAMPLE_ROWS: List[str] = [
    "INSERT INTO Customer (customerID, fName, lName) VALUES (1, 'Alice', 'Smith')",
    "INSERT INTO Customer (customerID, fName, lName) VALUES (2, 'Bob', 'Jones')",
    "INSERT INTO Customer (customerID, fName, lName) VALUES (3, 'Bob', 'Jones')",
    "INSERT INTO Room (hotelID, roomNo, roomType) VALUES (1, 101, 'Single')",
    "INSERT INTO Room (hotelID, roomNo, roomType) VALUES (1, 102, 'Double')",
    "INSERT INTO Room (hotelID, roomNo, roomType) VALUES (1, 103, 'Suite')",
    "INSERT INTO Room (hotelID, roomNo, roomType) VALUES (2, 201, 'Single')",
    "INSERT INTO MaintenanceCompany (cmpID, name, isCertified) VALUES (1, 'FixIt', 1)",
    "INSERT INTO MaintenanceCompany (cmpID, name, isCertified) VALUES (2, 'Handy', 0)",
    "INSERT INTO Repair (rID, hotelID, roomNo, mCompany, repairDate, repairType) "
    "VALUES (1, 1, 101, 1, '2024-01-10', 'plumbing')",
    "INSERT INTO Repair (rID, hotelID, roomNo, mCompany, repairDate, repairType) "
    "VALUES (2, 1, 102, 1, '2024-03-05', 'painting')",
    "INSERT INTO Repair (rID, hotelID, roomNo, mCompany, repairDate, repairType) "
    "VALUES (3, 2, 201, 2, '2023-11-20', 'electric')",
    "INSERT INTO Booking (bID, customer, hotelID, roomNo, bookingDate, noOfPeople, price) "
    "VALUES (1, 1, 1, 101, '2024-05-01', 2, 120)",
    "INSERT INTO Booking (bID, customer, hotelID, roomNo, bookingDate, noOfPeople, price) "
    "VALUES (2, 1, 1, 102, '2024-05-03', 1, 80)",
    "INSERT INTO Booking (bID, customer, hotelID, roomNo, bookingDate, noOfPeople, price) "
    "VALUES (3, 1, 1, 101, '2024-06-15', 2, 150)",
]


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings around each test so env changes take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sqlite_engine() -> Generator[Engine, None, None]:
    engine = create_engine("sqlite://")
    yield engine
    engine.dispose()


@pytest.fixture
def hotel_db(sqlite_engine: Engine) -> Generator[Connection, None, None]:
    """Connection to an in-memory database with the hotel schema and sample rows."""
    with sqlite_engine.connect() as connection:
        for ddl in HOTEL_SCHEMA:
            connection.exec_driver_sql(ddl)
        for row in SAMPLE_ROWS:
            connection.exec_driver_sql(row)
        connection.commit()
        yield connection


@pytest.fixture
def executor(hotel_db: Connection) -> StatementExecutor:
    return StatementExecutor(hotel_db)
