# moe_common/__init__.py
"""
Shared configuration, error and logging plumbing.
"""
