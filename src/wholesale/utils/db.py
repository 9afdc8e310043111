"""Schema management for the SQL providers (sqlite, postgresql).

The memory provider needs no schema, so both helpers are no-ops under the
default configuration.
"""

from protean.domain import Domain
from sqlalchemy import create_engine

SQL_PROVIDERS = ("sqlite", "postgresql")


def _sql_providers(domain: Domain):
    for provider in domain.providers.values():
        if provider.conn_info["provider"] in SQL_PROVIDERS:
            yield provider


def _register_models(domain: Domain, provider) -> None:
    """Touch each repository DAO so its table lands in the provider metadata."""
    records = list(domain.registry.aggregates.values()) + list(domain.registry.entities.values())
    for record in records:
        if record.cls.meta_.provider == provider.name:
            domain.repository_for(record.cls)._dao  # noqa: B018


def setup_db(domain: Domain):
    """Create every table for the brand, product and cart models."""
    with domain.domain_context():
        for provider in _sql_providers(domain):
            _register_models(domain, provider)
            provider._metadata.create_all(create_engine(provider.conn_info["database_uri"]))


def drop_db(domain: Domain):
    with domain.domain_context():
        for provider in _sql_providers(domain):
            provider._metadata.drop_all(create_engine(provider.conn_info["database_uri"]))
