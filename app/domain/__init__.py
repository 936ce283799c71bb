"""
Domain layer package.

Entities, port interfaces and the classified error taxonomy.
No framework imports, no IO.
"""
