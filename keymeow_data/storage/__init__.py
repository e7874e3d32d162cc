"""
The resource store and the file formats it reads.
"""
