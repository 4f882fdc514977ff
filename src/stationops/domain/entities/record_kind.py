"""Kinds of records that carry a human-readable ID."""

from enum import Enum


class RecordKind(str, Enum):
    """Record kinds labelled by the sequential ID generator."""

    CLIENT = "client"
    EMPLOYEE = "employee"
