"""
services/ - Business Logic Layer
================================
Sits between the console input layer and the repositories.
"""
