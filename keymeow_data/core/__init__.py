"""
Store configuration and the process-wide store accessor.
"""
