"""Adapters binding the engine to markdown-it-py and PyYAML."""
