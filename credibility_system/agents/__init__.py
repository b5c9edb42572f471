"""Signal extractors and external analyzer adapters."""
