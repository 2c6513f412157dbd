"""Core dispatch logic: validation, command table, nvim runner."""
