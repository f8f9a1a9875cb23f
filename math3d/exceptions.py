"""Custom exception types to more accurately represent difficulties"""

__all__ = ["InvalidInputError", "Math3dException"]


class Math3dException(Exception):
    "General base for exceptional situations related to the specifics of this project"
    pass


class InvalidInputError(Math3dException, ValueError):
    """Error subtype for when data from which to build a value is missing or malformed"""
