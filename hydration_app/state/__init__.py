"""
Hydration state machine and runtime module.

Pure transitions (initialize, rollover, intake, progress) plus the runtime
container that loads, applies and persists the active state.
"""
