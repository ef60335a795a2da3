"""Core package of the resume builder application.

Holds configuration, logging setup, bearer-token handling and the exception
types shared by the persistence and routing layers.

Notes:
    1. This file performs no operations and is used solely for package initialization.

"""
