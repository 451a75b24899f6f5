"""Bundled sample repositories (JSON package data)."""
