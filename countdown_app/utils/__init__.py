"""
Utility functions module.

Time conversion helpers shared by the states and the date entry surface.

Time Semantics:
- Target dates are carried as datetimes or millisecond epoch timestamps
- The persisted date is always an integer millisecond timestamp
- Anything that cannot be turned into a timestamp becomes NaN
"""
