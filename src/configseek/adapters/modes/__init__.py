"""Execution mode adapters (blocking and asyncio)."""

from configseek.adapters.modes.modes import BlockingMode, CooperativeMode, mode_for


__all__ = ["BlockingMode", "CooperativeMode", "mode_for"]
