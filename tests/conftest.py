"""Shared pytest fixtures and Hypothesis configuration.

This module provides pytest fixtures and configures Hypothesis profiles
for the test suite.
"""

from __future__ import annotations

import pytest
from hypothesis import Verbosity, settings

from patchform import FormAdapterFactory
from tests.forms import NameForm, dict_name_pipeline, keep_only_pipeline, name_pipeline

# Configure Hypothesis settings for the test suite
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, deadline=None, verbosity=Verbosity.verbose)


@pytest.fixture
def pipeline():
    """The two-field name pipeline over NameForm."""
    return name_pipeline()


@pytest.fixture
def keep_pipeline():
    return keep_only_pipeline()


@pytest.fixture
def dict_pipeline():
    return dict_name_pipeline()


@pytest.fixture
def empty_form() -> NameForm:
    return NameForm(first_name="", last_name="")


@pytest.fixture(autouse=True)
def _reset_adapter_registry():
    """Keep adapter registrations made by one test out of the others."""
    yield
    FormAdapterFactory.clear_registry()
