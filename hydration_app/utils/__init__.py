"""
Utility functions module.

Time Semantics:
- All day boundaries use the local calendar date
- Dates are exchanged as zero-padded YYYY-MM-DD keys
- No timezone conversion is performed
"""
