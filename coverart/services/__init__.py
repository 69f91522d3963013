from coverart.services.provider_registry import ProviderRegistry

__all__ = ["ProviderRegistry"]
