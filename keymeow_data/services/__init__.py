"""
Optional network services (first-run bootstrap).
"""
