"""Creational Patterns - Root Package.

A teaching collection of the classic creational design patterns:

    - Abstract Factory: families of related products created through one
      factory interface.
    - Factory Method: a creator whose business logic relies on a product
      returned by an overridable factory method.
    - Prototype: objects produced by copying a template, including the
      redirection of a back-reference held by a nested component.

Key Components:
    - domain: The pattern participants themselves
    - application: Services running each pattern's client code
    - infrastructure: Logging and the variant registries
    - config: Default configuration, env expansion and schemas
    - cli: The ``creational-patterns`` command

Usage:
    >>> creational-patterns prototype --primitive 245
    >>> creational-patterns abstract-factory --variant 1 --format json
"""

from ._version import __version__

__package_name__ = "creational-patterns"
