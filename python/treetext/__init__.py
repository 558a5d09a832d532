"""Public API for the ``treetext`` package.

Display labels for ANTLR parse tree nodes, for tree viewers and console dumps.

"""

from treetext.providers import InterpreterTreeTextProvider, Resolver, TreeTextProvider

__all__ = [
    "InterpreterTreeTextProvider",
    "Resolver",
    "TreeTextProvider",
]
