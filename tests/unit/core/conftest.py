"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_MD = """\
# Heading 1

A paragraph with **bold** text and a [[Linked Note|link]].

## Heading 2

- item one
- item *two*

1. first
2. second

> quoted line one
> quoted `line` two

```python
print("hello")
```

---

Footer paragraph.
"""

SAMPLE_FM_MD = """\
---
title: Test Doc
slug: test-doc
published: true
tags: [a, "b"]
---

# Title

Body content with #inline-tag and [[Other Page]].
"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="sample_fm_md")
def sample_fm_md_fixture():
    return SAMPLE_FM_MD
