"""
Shared pytest fixtures for Pattern Library tests

Provides a mock logger, a tool context and a small on-disk patterns tree.
"""

import sys
from pathlib import Path
import pytest
from unittest.mock import Mock

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


AZURE_PATTERN = """\
# Azure AD Authentication with MSAL (React + TypeScript)

> Proven pattern for Azure AD sign-in with MSAL in a React SPA.

## Setup

```ts
const msalInstance = new PublicClientApplication(msalConfig);
```
"""

ROUTER_PATTERN = """\
# React Router Navigation Pattern

> Nested routes with a shared layout and protected pages.

```tsx
<Route path="/" element={<Layout />} />
```
"""


def write_pattern(root: Path, category: str, name: str, content: str) -> Path:
    """Write <root>/<category>/<name>.md and return its path."""
    path = root / category / f"{name}.md"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def patterns_dir(tmp_path):
    """Patterns tree with one auth and one routing pattern."""
    root = tmp_path / "patterns"
    root.mkdir()
    write_pattern(root, "auth", "azure-ad-msal", AZURE_PATTERN)
    write_pattern(root, "routing", "react-router-navigation", ROUTER_PATTERN)
    return root


@pytest.fixture
def config(patterns_dir):
    """Config pointing at the sample patterns tree."""
    from pattern_library.config import Config
    return Config(environment="test", log_level="DEBUG", patterns_dir=patterns_dir)


@pytest.fixture
def logger():
    """
    Standard mock logger for all tests.
    """
    from pattern_library.utils.logger import Logger
    return Mock(spec=Logger)


@pytest.fixture
def catalog(config, logger):
    from pattern_library.catalog import PatternCatalog
    return PatternCatalog(config, logger)


@pytest.fixture
def mock_context():
    """
    Standard ToolContext for all tests.
    """
    from pattern_library.mcp_types.tools import ToolContext
    
    return ToolContext(
        userId='test_user',
        requestId='test_req_123',
        timestamp=1234567890.0,
        toolName=None
    )


@pytest.fixture
def make_pattern(patterns_dir):
    """Add a pattern file to the sample tree: make_pattern(category, name, content)."""
    def _make(category: str, name: str, content: str) -> Path:
        return write_pattern(patterns_dir, category, name, content)
    return _make
