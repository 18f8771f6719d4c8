"""
Configuration module.

Default analysis parameters, per-symbol YAML overrides and validation.
"""
