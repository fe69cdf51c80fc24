"""Pytest configuration and shared fixtures for the md2fxml test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import logging
import os
from typing import Generator

import pytest
from hypothesis import Phase, Verbosity, settings

from md2fxml.logging_utils import PACKAGE_LOGGER
from md2fxml.options import FxmlRendererOptions
from md2fxml.renderers.fxml import FxmlRenderer

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")


@pytest.fixture(autouse=True)
def reset_package_logger() -> Generator[None, None, None]:
    """Undo handler setup done by CLI tests so caplog keeps seeing records."""
    yield
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)


@pytest.fixture
def renderer() -> FxmlRenderer:
    """Renderer without the XML prologue, so output starts at the root box."""
    return FxmlRenderer(FxmlRendererOptions(include_header=False))


@pytest.fixture
def sample_markdown() -> str:
    """Provide a markdown document touching every supported construct.

    Returns
    -------
    str
        Standard sample markdown used across multiple tests.

    """
    return """# Sample Document

This is a **sample document** with *italic text*, ~~old~~ and some `inline code`.
See [the docs](https://example.com/docs) for more.

> A quoted line

- Item 1
- Item 2

3. Third
4. Fourth

```python
def hello_world():
    print("Hello, <World>!")
```

| Name | Description |
|:-----|------------:|
| a    | short       |
| b    | a much longer description |

---

![logo](images/logo.png)
"""
