from .schema import DatabaseRecord, TestResult

__all__ = ["DatabaseRecord", "TestResult"]
