"""Adapters – httpx-backed clients for the identity provider and Key Vault."""
