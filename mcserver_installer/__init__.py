"""Minecraft server installer (interactive, re-runnable).

Core design goals:
- Idempotent steps, re-derived by probing the live system
- No state file; re-running is the recovery path
- Every external command logged and bounded by a timeout
- Centralized logging
"""

__all__ = []
