"""Command-line interface modules for the pairing package.

This package contains the execution logic, making scripts/ optional and deletable.
"""

from pairing.cli.run_pairing import main, run_pairing, setup_logging

__all__ = ['main', 'run_pairing', 'setup_logging']
