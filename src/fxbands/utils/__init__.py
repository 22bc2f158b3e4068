"""Shared utilities: errors, logging, decorators and path helpers."""
