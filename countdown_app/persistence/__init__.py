"""
Persistence module.

Stores the selected countdown target so that a restart resumes the countdown.
"""
from .date_store import DateStore, MemoryDateStore, SqliteDateStore, create_date_store

__all__ = ["DateStore", "MemoryDateStore", "SqliteDateStore", "create_date_store"]
