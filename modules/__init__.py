"""
Modules Package - Bot Feature Modules
=====================================

Every folder with a ``module.py`` descriptor is loaded at startup:
- utility: latency check and echo commands
- management: role management commands and join roles
"""
