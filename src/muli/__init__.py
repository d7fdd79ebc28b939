"""`MULI` - computer vision library: contract checks and error reporting.

Subpackages:
- contracts: Failure types, check primitives, image contracts
- schemas: Build configuration
"""

__version__ = "0.1.0"
