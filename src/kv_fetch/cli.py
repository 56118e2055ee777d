"""Command-line entrypoint: fetch the configured secrets and print them."""

from __future__ import annotations

import argparse
import asyncio
import dataclasses
import os
import sys
from typing import Mapping, Sequence, TextIO

from kv_fetch.adapters.keyvault import KeyVaultSecretStore
from kv_fetch.adapters.oauth import ClientCredentialsTokenProvider
from kv_fetch.config import ConfigError, KeyVaultSettings, SecretStore, load_settings
from kv_fetch.kernel.errors import AuthError, FetchError
from kv_fetch.kernel.time import Clock, SystemClock
from kv_fetch.observability.logging import JsonLoggerFactory, get_logger, level_from_name
from kv_fetch.security.tokens import (
    ClientCredentials,
    CredentialCache,
    FileTokenCacheStore,
    TokenCacheStore,
    TokenProvider,
)

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kv-fetch",
        description="Fetch Key Vault secrets using a cached service-principal token.",
    )
    parser.add_argument("--env-file", default=".env", help="dotenv file merged under the environment (default: .env)")
    parser.add_argument("--cache-dir", help="token cache directory (overrides TOKEN_CACHE_DIR)")
    parser.add_argument("--log-level", help="DEBUG, INFO or WARN; anything else logs errors only (overrides LOG_LEVEL)")
    return parser


async def run(
    settings: KeyVaultSettings,
    *,
    out: TextIO | None = None,
    clock: Clock | None = None,
    token_store: TokenCacheStore | None = None,
    token_provider: TokenProvider | None = None,
    secret_store: SecretStore | None = None,
) -> int:
    """Acquire a credential, then fetch and print every configured secret.

    A failed fetch is logged and skipped; only an :class:`AuthError` makes
    the run fail.
    """
    out = out or sys.stdout
    clock = clock or SystemClock()
    cache = CredentialCache(
        token_store or FileTokenCacheStore(settings.token_cache_dir),
        token_provider or ClientCredentialsTokenProvider(settings.token_endpoint, clock),
        clock,
    )

    try:
        credential = await cache.acquire(
            ClientCredentials(settings.client_id, settings.client_secret),
            settings.vault_resource,
        )
    except AuthError as exc:
        logger.error("token.acquire_failed", error=exc.message, detail=exc.detail)
        print(f"authentication failed: {exc.message}", file=sys.stderr)
        return EXIT_FAILURE

    store = secret_store or KeyVaultSecretStore(settings.vault_base_url, credential, settings.vault_api_version)
    for ref in settings.secret_refs:
        try:
            value = await store.get(ref)
        except FetchError as exc:
            logger.warning(
                "secret.fetch_failed",
                secret_name=ref.name,
                version=ref.version or "current",
                status_code=exc.status_code,
                error=exc.message,
            )
            continue
        print(f"{ref.name} ({ref.version or 'current'}) Value= {value}", file=out)

    return EXIT_OK


def main(argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    environ = os.environ if environ is None else environ
    JsonLoggerFactory.configure(level_from_name(args.log_level or environ.get("LOG_LEVEL")))

    try:
        settings = load_settings(args.env_file, environ)
    except ConfigError as exc:
        logger.error("settings.invalid", violations=[str(v) for v in exc.violations] or [exc.message])
        print(exc.render(), file=sys.stderr)
        return EXIT_FAILURE

    # LOG_LEVEL may only have been set by the env file
    if not args.log_level and settings.log_level and settings.log_level != environ.get("LOG_LEVEL"):
        JsonLoggerFactory.configure(level_from_name(settings.log_level))
    if args.cache_dir:
        settings = dataclasses.replace(settings, token_cache_dir=args.cache_dir)

    return asyncio.run(run(settings))


if __name__ == "__main__":
    raise SystemExit(main())
