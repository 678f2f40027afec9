"""
Configuration module.

Frozen defaults, YAML file overrides and validation for storage and logging.
"""
