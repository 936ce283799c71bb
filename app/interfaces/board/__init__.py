"""
Board bounded context — interface layer (routers, schemas, dependencies).
"""
