"""Pytest configuration and shared fixtures for klaw-collections tests."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import msgspec
import pytest
import structlog
from klaw_collections import _config
from klaw_collections._logging import clear_log_hooks


@dataclass
class Person:
    """Plain dataclass element for sort_by_field tests."""

    name: str
    age: int
    height: float = 0.0
    active: bool = False


class Point(msgspec.Struct, frozen=True):
    """msgspec element for sort_by_field tests."""

    x: int
    y: int
    tags: list[str] = []


@pytest.fixture
def people() -> list[Person]:
    """A small unsorted list of people."""
    return [
        Person('carol', 35, 1.62, True),
        Person('alice', 30, 1.70, False),
        Person('bob', 25, 1.80, True),
    ]


@pytest.fixture
def points() -> list[Point]:
    """Points with distinct x values and a duplicate y."""
    return [Point(3, 1), Point(1, 2), Point(2, 1)]


@pytest.fixture
def clean_runtime():
    """Reset configuration, hooks and logging around a test."""
    _config.reset()
    clear_log_hooks()
    yield
    _config.reset()
    clear_log_hooks()
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()
