"""Integrations with third-party libraries.

Import the submodules directly; each one pulls in its library on import.
"""
