"""
Package: handlers
Description: Host-facing event handlers.
"""
