"""Shared fixtures: sample markdown sources written to a temporary directory."""

import pytest

BASIC_MD = """---
title: Test Presentation
author: Test Author
---
# Test Presentation
## A subtitle

---

# Introduction

---

## Agenda

- First point
- Second point
"""

CODE_ONLY_MD = """```javascript
const x = 1;
```
---
```python
def hello():
    return "world"
```
"""

DIAGRAM_MD = """## Architecture

```mermaid
graph TD
  A --> B
```
"""

NO_FRONTMATTER_MD = """# Plain document

Some text without any frontmatter.
"""


@pytest.fixture
def sample_dir(tmp_path):
    """Directory with a mix of markdown and non-markdown entries."""
    content_dir = tmp_path / "sample-content"
    content_dir.mkdir()
    (content_dir / "basic.md").write_text(BASIC_MD, encoding="utf-8")
    (content_dir / "code-only.md").write_text(CODE_ONLY_MD, encoding="utf-8")
    (content_dir / "diagram.md").write_text(DIAGRAM_MD, encoding="utf-8")
    (content_dir / "no-frontmatter.md").write_text(NO_FRONTMATTER_MD, encoding="utf-8")
    (content_dir / "empty.md").write_text("", encoding="utf-8")
    (content_dir / "notes.txt").write_text("# Not markdown", encoding="utf-8")
    nested = content_dir / "nested"
    nested.mkdir()
    (nested / "ignored.md").write_text("# Nested\n---\n# Ignored", encoding="utf-8")
    return content_dir
