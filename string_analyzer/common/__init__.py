"""
Shared runtime helpers for settings and logging.
They are used by both HTTP services and by the deployment CLI.
"""
