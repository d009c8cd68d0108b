"""Pytest configuration and shared fixtures."""
import pytest

from toolbox import Box, ToolFactory


@pytest.fixture
def factory():
    """Provide a tool factory, closed after the test."""
    factory = ToolFactory()
    yield factory
    factory.close()


@pytest.fixture
def toolbox(factory):
    """Provide box B1 holding one unique tool and two shared wrenches."""
    box = Box("B1")
    box.add_product(factory.create_tool("Pliers", "Plier-type")) \
       .add_product(factory.create_tool("10", "Wrench")) \
       .add_product(factory.create_tool("12", "Wrench"))
    return box
