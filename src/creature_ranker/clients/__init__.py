from .creatures import CreatureApiClient, CreatureSource

__all__ = ["CreatureApiClient", "CreatureSource"]
