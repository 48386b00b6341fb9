"""Adapters package exposing entry points."""

__all__: list[str] = []
