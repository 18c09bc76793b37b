"""
Data entry module.

Parses user supplied dates and feeds them to the state machine as inputs.
"""
