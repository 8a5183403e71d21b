"""
Core layer: time sources, deadline arithmetic and static analysis tables.

Nothing here imports the MCP SDK.
"""

from .clock import Clock, CounterIdGenerator, FixedClock, IdGenerator, isoformat_millis
from .deadlines import classify_urgency, days_until, parse_deadline
from .findings import generate_findings, generate_next_steps, generate_recommendations

__all__ = [
    'Clock',
    'FixedClock',
    'IdGenerator',
    'CounterIdGenerator',
    'isoformat_millis',
    'parse_deadline',
    'days_until',
    'classify_urgency',
    'generate_findings',
    'generate_recommendations',
    'generate_next_steps',
]
