# tests/conftest.py
"""
Shared pytest fixtures for codegate tests.

Provides:
- A fresh CodeValidator
- An async HTTP client bound to the FastAPI app
- Generated-code snippets modelled on real LLM output
"""
import pytest
from httpx import ASGITransport, AsyncClient

from codegate.validation import CodeValidator


# ═══════════════════════════════════════════════════════
# FIXTURES - Validator / Client
# ═══════════════════════════════════════════════════════

@pytest.fixture
def validator():
    """Validator with the built-in syntax checker."""
    return CodeValidator()


@pytest.fixture
async def async_client():
    """Async HTTP client for testing."""
    from codegate.main import app

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ═══════════════════════════════════════════════════════
# FIXTURES - Snippets
# ═══════════════════════════════════════════════════════

@pytest.fixture
def react_counter():
    """Well-formed React component."""
    return """
import React, { useState } from 'react';

function Counter() {
  const [count, setCount] = useState(0);
  return (
    <div>
      <p>Count: {count}</p>
      <button onClick={() => setCount(count + 1)}>Increment</button>
    </div>
  );
}

export default Counter;
"""


@pytest.fixture
def vue_composition():
    """Well-formed Vue composition API script."""
    return """
import { ref, computed } from 'vue';

const count = ref(0);
const doubled = computed(() => count.value * 2);

function increment() {
  count.value++;
}
"""


@pytest.fixture
def svelte_script():
    """Svelte component script with no module imports."""
    return """
let count = 0;

function handleClick() {
  count += 1;
}
"""


@pytest.fixture
def react_missing_hooks():
    """Uses hooks with only the default React import."""
    return """
import React from 'react';

function Component() {
  const [value, setValue] = useState(0);
  useEffect(() => {
    console.log(value);
  }, [value]);
  return <div>{value}</div>;
}
"""
