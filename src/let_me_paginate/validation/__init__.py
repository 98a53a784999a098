"""
Validation Package - Pagination Config Validation.

    - ConfigValidator: Validate pagination configs before processing

Design Principles:
    - Fail fast on invalid input
    - Clear, actionable error messages
"""

from let_me_paginate.validation.config_validator import ConfigValidator

__all__ = ["ConfigValidator"]
