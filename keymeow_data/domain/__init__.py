"""
Typed resources and error types shared by the data, storage and services layers.
"""
