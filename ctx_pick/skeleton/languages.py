"""Language registry: file extensions and names mapped to tree-sitter grammars.

Each entry also carries the definition query used by tag-based extraction.
Queries capture a definition node as ``@definition.<kind>`` and its name as
``@name``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from functools import lru_cache

import tree_sitter_javascript
import tree_sitter_python
import tree_sitter_rust
import tree_sitter_typescript
from tree_sitter import Language
from tree_sitter import Parser

from ..errors import UnsupportedLanguageError

logger = logging.getLogger(__name__)

PYTHON_TAGS = """
(class_definition name: (identifier) @name) @definition.class
(function_definition name: (identifier) @name) @definition.function
"""

RUST_TAGS = """
(struct_item name: (type_identifier) @name) @definition.class
(enum_item name: (type_identifier) @name) @definition.class
(union_item name: (type_identifier) @name) @definition.class
(type_item name: (type_identifier) @name) @definition.class
(trait_item name: (type_identifier) @name) @definition.interface
(impl_item type: (_) @name) @definition.implementation
(function_item name: (identifier) @name) @definition.function
(function_signature_item name: (identifier) @name) @definition.function
(mod_item name: (identifier) @name) @definition.module
(macro_definition name: (identifier) @name) @definition.macro
"""

JAVASCRIPT_TAGS = """
(class_declaration name: (identifier) @name) @definition.class
(function_declaration name: (identifier) @name) @definition.function
(generator_function_declaration name: (identifier) @name) @definition.function
(method_definition name: (property_identifier) @name) @definition.method
(lexical_declaration
  (variable_declarator name: (identifier) @name value: [(arrow_function) (function_expression)])) @definition.function
"""

TYPESCRIPT_TAGS = """
(class_declaration name: (type_identifier) @name) @definition.class
(abstract_class_declaration name: (type_identifier) @name) @definition.class
(interface_declaration name: (type_identifier) @name) @definition.interface
(type_alias_declaration name: (type_identifier) @name) @definition.type
(enum_declaration name: (identifier) @name) @definition.type
(function_declaration name: (identifier) @name) @definition.function
(function_signature name: (identifier) @name) @definition.function
(method_definition name: (property_identifier) @name) @definition.method
(method_signature name: (property_identifier) @name) @definition.method
(abstract_method_signature name: (property_identifier) @name) @definition.method
(module name: (_) @name) @definition.module
(lexical_declaration
  (variable_declarator name: (identifier) @name value: [(arrow_function) (function_expression)])) @definition.function
"""


@dataclass(frozen=True)
class LanguageSpec:
    """A registered grammar.

    Attributes:
        name: Canonical language name
        extensions: File extensions (without dot) that select this grammar
        load: Returns the tree-sitter language capsule
        tags_query: Definition query for tag-based extraction
    """

    name: str
    extensions: tuple[str, ...]
    load: Callable[[], object]
    tags_query: str | None = None


LANGUAGES: tuple[LanguageSpec, ...] = (
    LanguageSpec("python", ("py", "pyi"), tree_sitter_python.language, PYTHON_TAGS),
    LanguageSpec("rust", ("rs",), tree_sitter_rust.language, RUST_TAGS),
    LanguageSpec("typescript", ("ts", "mts", "cts"), tree_sitter_typescript.language_typescript, TYPESCRIPT_TAGS),
    LanguageSpec("tsx", ("tsx",), tree_sitter_typescript.language_tsx, TYPESCRIPT_TAGS),
    LanguageSpec("javascript", ("js", "mjs", "cjs", "jsx"), tree_sitter_javascript.language, JAVASCRIPT_TAGS),
)

_BY_KEY: dict[str, LanguageSpec] = {}
for _spec in LANGUAGES:
    _BY_KEY[_spec.name] = _spec
    for _ext in _spec.extensions:
        _BY_KEY[_ext] = _spec


def get_language_spec(language: str) -> LanguageSpec:
    """Look up a grammar by language name or file extension.

    Args:
        language: ``"python"``, ``"py"``, ``".py"`` and so on (case-insensitive)

    Raises:
        UnsupportedLanguageError: Nothing is registered under that key
    """
    key = language.lower().lstrip(".")
    spec = _BY_KEY.get(key)
    if spec is None:
        raise UnsupportedLanguageError(language, "Language support not configured for file extension")
    return spec


def supported_extensions() -> list[str]:
    """All registered extensions, sorted."""
    return sorted(ext for spec in LANGUAGES for ext in spec.extensions)


@lru_cache(maxsize=None)
def get_language(name: str) -> Language:
    """Build (once) the tree-sitter Language for a registered name."""
    spec = get_language_spec(name)
    logger.debug(f"Loading tree-sitter grammar: {spec.name}")
    return Language(spec.load())


def get_parser(language: str) -> Parser:
    """A fresh parser for ``language``; parsers are cheap, grammars are cached."""
    spec = get_language_spec(language)
    return Parser(get_language(spec.name))
