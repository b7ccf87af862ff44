"""Shared fixtures for core unit tests"""

import pytest

from mdimport.config import Settings
from mdimport.core.parse import make_parser


SAMPLE_MD = """\
---
title: Hello World
snippet: A short intro
tags: [a, b, c]
image:
  src: /covers/hero.png
---

# Heading

Intro with ![inline](/img/one.png) image.

* item one
* item two

```mermaid
graph TD; A-->B
```

```python
print("hello")
```
"""


@pytest.fixture(name="settings")
def settings_fixture():
    return Settings()


@pytest.fixture(name="mdit")
def mdit_fixture(settings):
    return make_parser(settings)


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD
