"""Repositories executing statements against the hotel database."""

from .statement_executor import ExecutionResult, StatementExecutor, to_sqlalchemy

__all__ = ["ExecutionResult", "StatementExecutor", "to_sqlalchemy"]
