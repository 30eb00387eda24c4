"""viper-scaffold — VIPER module generator for iOS projects.

Renders the Contract, View, Interactor, Presenter and Router sources of a
module from in-process templates and writes them into a fresh directory
tree.
"""

from viper_scaffold.version import __version__

__all__: list[str] = ["__version__"]
