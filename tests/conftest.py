"""
Test fixtures for the principle catalog.

SAMPLE_TEXT is a two-entry catalog small enough to edit inline when a test
needs a broken variant; the bundled corpus is used for the full-size checks.
"""
import pytest

from principia.loader import default_catalog
from principia.text.parser import parse_catalog

SAMPLE_TEXT = """\
# Sample Principles

What design principles are.

## Why Do We Need Them?

Because code changes.

### 1. Single Responsibility Principle (SRP)

One reason to change.

**Bad Example:** God class

```python
class Report:
    # formats and saves
    def save(self): ...
```

**Issues:**

1. Two reasons to change.
2. Hard to test.

**Good Example:** Split classes

```python
class Formatter: ...
class Writer: ...
```

**Benefits:**

1. One reason each.

### 2. Hollywood Principle

Don't call us, we'll call you.

**Bad Example:** Plugin drives the app

```python
plugin.run(app)
```

**Issues:**

1. Plugin controls the flow.

**Good Example:** App calls the hook

```python
app.register(plugin)
```

**Benefits:**

1. Framework owns the flow.
"""


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def sample_catalog():
    return parse_catalog(SAMPLE_TEXT)


@pytest.fixture
def catalog():
    """The bundled corpus wrapped in a PrincipleCatalog."""
    return default_catalog()


@pytest.fixture
def clean_env(monkeypatch):
    """Remove PRINCIPIA_* variables so tests see the defaults."""
    for name in (
        "PRINCIPIA_CATALOG_PATH",
        "PRINCIPIA_VERBOSE",
        "PRINCIPIA_LOG_FILE",
        "PRINCIPIA_AUDIT_ENABLED",
        "PRINCIPIA_AUDIT_PATH",
    ):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
