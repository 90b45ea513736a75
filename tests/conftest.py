"""Pytest configuration and shared fixtures for the md2doc test suite.

This module provides shared fixtures, test configuration, and Hypothesis
profiles used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=200, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=50)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "fuzzing: Property-based tests over generated inputs")
    config.addinivalue_line("markers", "slow: Slow tests that may take several seconds")


@pytest.fixture
def sample_markdown() -> str:
    """Provide sample Markdown covering every supported block.

    Returns
    -------
    str
        Standard sample document used across integration tests.

    """
    return """# Sample Document

This is a **sample document** with _italic text_ and some `inline code`.

## Lists

- Item 1
- Item 2
- Item 3

3. Third
4. Fourth

- [ ] open task
- [x] finished task

> Quoted text

```python
def hello_world():
    print("Hello, World!")
```

---

| Header 1 | Header 2 |
|----------|----------|
| Cell 1   | Cell 2   |
"""
