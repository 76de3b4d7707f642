"""Users module - dealer staff accounts.

Users are provisioned from the command line; sign-in lives in
``core.auth.routes``. The module exposes no router of its own.
"""
