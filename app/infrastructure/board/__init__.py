"""
Board bounded context — infrastructure adapters.
"""
