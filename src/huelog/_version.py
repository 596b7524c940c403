"""
Package version for huelog.

``pyproject.toml`` takes the version from git tags through hatch-vcs, with
``0.0.0`` as the fallback for untagged checkouts. This module keeps
``huelog.__version__`` importable from a plain source tree.
"""

__version__ = "0.0.0+local"
