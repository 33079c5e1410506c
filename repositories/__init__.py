"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific domain entity.
Repositories are handed a ``db.connection.Database`` (or an open ``Transaction``)
and return domain model objects.
"""
