"""FHEVM example toolkit: category scaffolding, single-project generation,
and documentation generated from contract annotations."""

__version__ = "0.1.0"
