# codegate/validation/imports.py
"""
Import heuristics - advisory warnings for framework APIs used without import.

Prone to false positives by nature, so findings are warnings, never errors.
"""
import re
from typing import Dict, List, Optional, Tuple

from .models import Framework, ImportPattern

_IMPORT_LINE = re.compile(r"^import\s", re.MULTILINE)
_WHITESPACE = re.compile(r"\s+")


def _hook(name: str) -> ImportPattern:
    return ImportPattern(re.compile(rf"\b{name}\b"), name)


def _call(name: str) -> ImportPattern:
    return ImportPattern(re.compile(rf"\b{name}\s*\("), name)


IMPORT_PATTERNS: Dict[Framework, Tuple[ImportPattern, ...]] = {
    Framework.REACT: (
        _hook("useState"),
        _hook("useEffect"),
        _hook("useRef"),
        _hook("useMemo"),
        _hook("useCallback"),
        _hook("useContext"),
        _hook("useReducer"),
    ),
    Framework.VUE: (
        _call("ref"),
        _call("reactive"),
        _call("computed"),
        _call("watch"),
        _call("onMounted"),
    ),
    Framework.SOLID: (
        _hook("createSignal"),
        _hook("createEffect"),
        _hook("createStore"),
    ),
    Framework.SVELTE: (),
    Framework.VANILLA: (),
}

# Globals that may be destructured instead of imported: const { ref } = Vue
FRAMEWORK_GLOBALS: Dict[Framework, Optional[str]] = {
    Framework.REACT: "React",
    Framework.VUE: "Vue",
}


def has_import_statements(code: str) -> bool:
    return bool(_IMPORT_LINE.search(code))


def has_import(code: str, import_name: str, framework: Optional[Framework] = None) -> bool:
    """
    True if import_name is brought in by a named import or by destructuring
    a require() call / framework global.
    """
    normalized = _WHITESPACE.sub(" ", code)
    name = re.escape(import_name)

    named_import = re.compile(
        r"import\s+[^;]*\{[^}]*\b" + name + r"\b[^}]*\}\s*from",
        re.IGNORECASE,
    )
    if named_import.search(normalized):
        return True

    sources = ["require"]
    framework_global = FRAMEWORK_GLOBALS.get(framework) if framework else None
    if framework_global:
        sources.append(framework_global)
    destructured = re.compile(
        r"const\s*\{[^}]*\b" + name + r"\b[^}]*\}\s*=\s*(" + "|".join(sources) + ")",
        re.IGNORECASE,
    )
    return bool(destructured.search(normalized))


def detect_missing_imports(code: str, framework: Framework) -> List[str]:
    """
    Warn for every table entry whose usage appears without a matching import.

    Skipped entirely for snippets with no import statements at all.
    """
    if not has_import_statements(code):
        return []

    warnings: List[str] = []
    for entry in IMPORT_PATTERNS.get(framework, ()):
        if not entry.usage_pattern.search(code):
            continue
        if not has_import(code, entry.expected_import_name, framework):
            warnings.append(f"Possibly missing import: {entry.expected_import_name}")

    return warnings
