"""Java code-model extraction using tree-sitter queries."""

import logging
from pathlib import Path
from typing import Iterator

from tree_sitter import Node, Query, QueryCursor
from tree_sitter_language_pack import get_language, get_parser

from guarding.config import IdentifySettings, get_settings
from guarding.models import CodeClass, CodeFile, CodeFunction, CodeVariable

from .base import LanguageIdent, node_location, node_text

logger = logging.getLogger(__name__)

IMPORT_QUERY = """
(import_declaration
    [(scoped_identifier) (identifier)] @import-name)
"""

PACKAGE_QUERY = """
(package_declaration
    [(scoped_identifier) (identifier)] @package-name)
"""

CLASS_QUERY = "(program (class_declaration) @class)"
INTERFACE_QUERY = "(program (interface_declaration) @class)"

FUNCTION_NODE_TYPES = ("method_declaration", "constructor_declaration")
VARIABLE_NODE_TYPES = ("field_declaration", "constant_declaration")
# Anonymous and local classes and lambdas own their locals
NESTED_SCOPE_NODE_TYPES = ("class_body", "lambda_expression")


def _walk(node: Node) -> Iterator[Node]:
    """Yield descendants of a node in document order, without entering nested scopes."""
    for child in node.children:
        yield child
        if child.type not in NESTED_SCOPE_NODE_TYPES:
            yield from _walk(child)


def _captured_nodes(query: Query, root: Node, capture_name: str) -> list[Node]:
    """Run a query and return the nodes bound to one capture, in document order."""
    cursor = QueryCursor(query)
    nodes: list[Node] = []
    for _pattern_index, captures_dict in cursor.matches(root):
        nodes.extend(captures_dict.get(capture_name, []))
    nodes.sort(key=lambda n: (n.start_byte, n.end_byte))
    return nodes


class JavaIdent(LanguageIdent):
    """Builds the code model of a Java compilation unit."""

    def __init__(self, settings: IdentifySettings | None = None):
        self.settings = settings

    def get_language_name(self) -> str:
        return "java"

    def _settings(self) -> IdentifySettings:
        return self.settings if self.settings is not None else get_settings().identify

    def identify(self, source: bytes, path: Path | None = None) -> CodeFile:
        language = get_language("java")
        tree = get_parser("java").parse(source)
        root = tree.root_node

        if root.has_error:
            logger.warning(f"Parse tree contains errors for {path or '<source>'}")

        imports = [
            self._import_name(node, source)
            for node in _captured_nodes(Query(language, IMPORT_QUERY), root, "import-name")
        ]

        packages = _captured_nodes(Query(language, PACKAGE_QUERY), root, "package-name")
        package = node_text(packages[0], source) if packages else None

        class_query = CLASS_QUERY
        if self._settings().include_interfaces:
            class_query = f"{CLASS_QUERY}\n{INTERFACE_QUERY}"
        classes = [
            self._build_class(node, source)
            for node in _captured_nodes(Query(language, class_query), root, "class")
        ]

        logger.debug(f"Identified {len(imports)} import(s) and {len(classes)} class(es) in {path or '<source>'}")
        return CodeFile(path=path, language="java", package=package, imports=imports, classes=classes)

    @staticmethod
    def _import_name(node: Node, source: bytes) -> str:
        """Imported name, keeping the ``.*`` of on-demand imports."""
        name = node_text(node, source)
        parent = node.parent
        if parent is not None and any(child.type == "asterisk" for child in parent.children):
            return f"{name}.*"
        return name

    def _build_class(self, node: Node, source: bytes) -> CodeClass:
        name_node = node.child_by_field_name("name")
        code_class = CodeClass(
            name=node_text(name_node, source) if name_node else "anonymous",
            location=node_location(node),
        )

        body = node.child_by_field_name("body")
        if body is None:
            return code_class

        for member in body.children:
            if member.type in FUNCTION_NODE_TYPES:
                code_class.functions.append(self._build_function(member, source))
            elif member.type in VARIABLE_NODE_TYPES:
                code_class.vars.extend(self._declared_variables(member, source))
        return code_class

    def _build_function(self, node: Node, source: bytes) -> CodeFunction:
        name_node = node.child_by_field_name("name")
        function = CodeFunction(
            name=node_text(name_node, source) if name_node else "anonymous",
            location=node_location(node),
        )

        parameters = node.child_by_field_name("parameters")
        if parameters is not None:
            for param in parameters.children:
                if param.type == "formal_parameter":
                    function.vars.append(self._build_variable(param, param, source))

        body = node.child_by_field_name("body")
        if body is not None:
            for child in _walk(body):
                if child.type == "local_variable_declaration":
                    function.vars.extend(self._declared_variables(child, source))
        return function

    def _declared_variables(self, node: Node, source: bytes) -> list[CodeVariable]:
        """Variables of a field or local declaration (``int a, b;`` yields two)."""
        return [
            self._build_variable(declarator, node, source)
            for declarator in node.children_by_field_name("declarator")
        ]

    @staticmethod
    def _build_variable(declarator: Node, declaration: Node, source: bytes) -> CodeVariable:
        name_node = declarator.child_by_field_name("name")
        type_node = declaration.child_by_field_name("type")
        return CodeVariable(
            name=node_text(name_node, source) if name_node else node_text(declarator, source),
            type_name=node_text(type_node, source) if type_node else None,
            location=node_location(declarator),
        )
