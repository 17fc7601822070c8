"""
models/ - Domain Models
=======================
Plain dataclasses for the project aggregate. No database code lives here.
"""
