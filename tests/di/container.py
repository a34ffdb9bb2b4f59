"""Test container with per-component mocking."""

from typing import get_args

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from hdnotes.util.di import PROVIDERS, Component, get_provider


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every component is mocked unless unmocked.

    ``build_test_container(unmock={"persistence"})`` talks to the
    PostgreSQL at DATABASE__URL and keeps mock email and Google clients.

    Raises:
        ValueError: If ``unmock`` names an unknown component
    """
    unmock = unmock or set()
    unknown = unmock - set(get_args(Component))
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    providers = [
        get_provider(base, use_mock=base.__mock_component__ not in unmock)()
        for base in PROVIDERS
    ]
    # FastapiProvider lets the same container back a TestClient app
    return make_async_container(*providers, FastapiProvider())
