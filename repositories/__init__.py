"""
repositories/ - Data Access Layer
==================================
Each repository encapsulates all SQL queries for a specific aggregate.
Repositories receive raw rows from the database and return domain model objects.
"""
