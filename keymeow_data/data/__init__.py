"""
Filesystem side of the resource store.

This package is responsible for:
* Determining the per-user data directory and creating its category folders.
* Scanning a category folder into an in-memory name -> path catalog.
"""
