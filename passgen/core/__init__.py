"""
Passgen Core
=============

Data models, exceptions, and the engine facade.
"""
