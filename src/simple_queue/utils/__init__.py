"""
Module: utils
Description: Package initialization for utility functions.

Current utilities:
- logger: get_logger() and opt-in configure_logging()
- text: camel-case splitting for attribute names
- time_format: duration and timestamp rendering
"""

__all__ = []
