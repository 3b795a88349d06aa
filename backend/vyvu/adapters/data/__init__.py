"""Bundled deck and sentence data files."""
