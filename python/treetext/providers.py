"""Display labels for parse tree nodes."""

from __future__ import annotations

import logging
from typing import Callable, Protocol, Sequence

from antlr4.tree.Tree import ErrorNode, Tree
from antlr4.tree.Trees import Trees

logger = logging.getLogger(__name__)

Resolver = Callable[[Tree, Sequence[str]], str]


class TreeTextProvider(Protocol):
    """Anything that can label a node for a tree viewer or a console dump."""

    def label_for(self, node: Tree | None) -> str: ...


class InterpreterTreeTextProvider:
    """Label nodes by rule name, marking error nodes.

    The rule-name table is captured once and never changes, so one instance
    can be shared between threads.
    """

    def __init__(self, rule_names: Sequence[str], resolver: Resolver = Trees.getNodeText):
        """Construct a provider.

        :param rule_names: Rule names indexed by rule id. Not validated.
        :param resolver: Renders one node given the rule-name table.
        """

        self.rule_names: tuple[str, ...] = tuple(rule_names)
        self.resolver = resolver
        logger.debug("tree text provider created with %d rule names", len(self.rule_names))

    def label_for(self, node: Tree | None) -> str:
        """Return the display label of a node.

        :param node: The node, or ``None``.
        :returns: ``"null"`` for ``None``; the resolved text wrapped as
            ``<error ...>`` for error nodes; the resolved text otherwise.
        """

        if node is None:
            return "null"
        node_text = self.resolver(node, self.rule_names)
        if isinstance(node, ErrorNode):
            return "<error " + node_text + ">"
        return node_text

    def __repr__(self) -> str:
        return "InterpreterTreeTextProvider(%r)" % (list(self.rule_names),)
