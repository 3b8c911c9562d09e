"""Command line interface for Quill Cloud.

Updates: v0.1.0 - 2026-10-16 - Package scaffold for parser, runtime, and command handlers.
"""
