"""Adapters for configseek (cache, execution modes, loaders)."""
