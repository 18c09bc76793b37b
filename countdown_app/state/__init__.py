"""
State machine module.

Implements the input contract, the State base class with static handler
tables, the dispatch engine (Machine) and the countdown states:
Pending → SelectDate → Countdown → Arrived.
"""
