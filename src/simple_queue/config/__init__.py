"""
Package: config
Description: Settings loaded from SIMPLE_QUEUE_* environment variables.
"""
