"""Shared fixtures for the calendar tests."""

import pytest

from cal import Locale


@pytest.fixture
def english():
    """English names with Monday as the default row start."""
    return Locale.english()


@pytest.fixture
def cells():
    """Flatten a month block into its cells, row by row in column order."""

    def flatten(block):
        return [row[column] for row in block.rows for column in block.columns if column in row]

    return flatten
