"""Application layer: ports and use cases."""

__all__: list[str] = []
