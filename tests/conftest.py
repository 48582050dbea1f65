"""Test setup for vuedoc2md."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


README_TEXT = """# vuedoc2md

Generate documentation for Vue components.

## Install

```sh
npm install vuedoc2md
# not a heading
```

## API

Old API documentation.

- item one
- item two

## License

MIT
"""

CHECKBOX_SOURCE = """<template>
  <label class="checkbox">
    <input type="checkbox" :checked="checked" @change="$emit('input', $event.target.checked)"/>
    <!-- Use this slot to set the checkbox label -->
    <slot name="label">Label</slot>
    <slot></slot>
  </label>
</template>

<script>
  /**
   * A simple checkbox component
   */
  export default {
    name: 'checkbox',
    props: {
      /**
       * The checkbox model
       */
      checked: {
        type: Boolean,
        default: false
      },
      // Initial checkbox value
      value: [String, Number],
      /**
       * Whether the checkbox is disabled
       */
      disabled: { type: Boolean, required: true }
    },
    methods: {
      /**
       * Check the checkbox
       */
      check () {
        /**
         * Emitted when the checkbox state changes
         */
        this.$emit('change', true)
      },
      uncheck: function (silent, reason = 'user') {
        this.$emit('change', false)
      },
      /**
       * @private
       */
      sync () {},
      _internal () {}
    }
  }
</script>
"""

BROKEN_SOURCE = """
  <template>
    <input @click="input"/>
  </template>
  <script>var skrgj=!</script>
"""


@pytest.fixture
def readme_text() -> str:
    """Existing README with an API section."""
    return README_TEXT


@pytest.fixture
def checkbox_source() -> str:
    """A documented checkbox component."""
    return CHECKBOX_SOURCE


@pytest.fixture
def broken_source() -> str:
    """Component whose script has no component definition."""
    return BROKEN_SOURCE


@pytest.fixture
def readme_file(tmp_path: Path) -> Path:
    """README written to a temporary directory."""
    path = tmp_path / "README.md"
    path.write_text(README_TEXT, encoding="utf-8")
    return path


@pytest.fixture
def checkbox_file(tmp_path: Path) -> Path:
    """Checkbox component written to a temporary directory."""
    path = tmp_path / "checkbox.vue"
    path.write_text(CHECKBOX_SOURCE, encoding="utf-8")
    return path
