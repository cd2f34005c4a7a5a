"""solidkit - Root Package.

This package demonstrates object-oriented design principles around a single
recurring pattern: a capability abstraction, a small set of interchangeable
variants, and consumers that depend only on the abstraction.

Key Components:
    - domain: Capability contracts and domain variants (payments, discounts)
    - application: Consumers bound to a single capability variant
    - infrastructure: Logger adapters, registries and the DI container
    - config: Typed configuration loading
    - cli: Command line demonstrations

Architecture:
    Variants are selected at assembly time, either directly or through a
    name-keyed registry, and injected into consumers through their constructor.
"""

from ._package import __version__

__all__ = ["__version__"]
