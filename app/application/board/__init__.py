"""
Board bounded context — application layer.

One use case per module: account sign-up/login/logout, token verification,
and the five post operations.
"""
