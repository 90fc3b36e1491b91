"""Loan Approval - application approval pipeline package.

This package runs submitted loan applications through a fixed sequence of
validation stages and persists the applications that pass every stage.

Key Components:
    - domain: Loan application model, stage outcomes and collaborator ports
    - application: The approval pipeline and its default stage services
    - infrastructure: Repositories, credit bureau client, logging, errors
    - config: Configuration schema and loading
    - api: HTTP interface
    - cli: Command-line interface

Architecture:
    Domain logic has no dependency on infrastructure. Collaborators are
    injected into the pipeline through single-method ports.
"""

from ._version import __version__

PACKAGE_NAME = "loan-approval"

__package_name__ = PACKAGE_NAME
__all__ = ["__version__", "PACKAGE_NAME"]
