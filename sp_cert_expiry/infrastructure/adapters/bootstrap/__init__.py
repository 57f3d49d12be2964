"""Dependency bootstrap adapter."""

from .pip_installer import PipDependencyBootstrapper

__all__ = ["PipDependencyBootstrapper"]
