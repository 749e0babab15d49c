"""Pytest configuration and fixtures for JSX parser tests."""

import pytest

from jsx_parser import JsxParser


@pytest.fixture
def parser():
    """Basic parser fixture."""
    return JsxParser()


@pytest.fixture
def shallow_parser():
    """Parser with a small nesting limit."""
    return JsxParser({'max_depth': 3})


@pytest.fixture
def dialog_jsx():
    """Sample component markup for testing."""
    return """
// Confirmation dialog
<AlertDialog open={isOpen} {...rest}>
  <AlertDialog.Trigger asChild>
    <Button variant="outline">Delete &amp; close</Button>
  </AlertDialog.Trigger>
  {/* body */}
  <AlertDialog.Content xlink:href='#x'>
    {items.map((item) => <Row key={item.id} label={`#${item.id}`} />)}
    <Footer />
  </AlertDialog.Content>
</AlertDialog>;
"""


def pytest_configure(config):
    """Configure pytest with custom settings."""
    config.addinivalue_line("markers", "parser: JSX parser tests")


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers."""
    for item in items:
        if "jsx_parser" in item.nodeid:
            item.add_marker(pytest.mark.parser)
