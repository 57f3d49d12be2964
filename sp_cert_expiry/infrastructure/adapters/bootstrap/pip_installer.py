"""Dependency bootstrap using pip in the running interpreter."""

from __future__ import annotations

import importlib
import logging
import subprocess
import sys
from collections.abc import Callable
from importlib import metadata

from ....application.ports import BootstrapResult
from ....domain.value_objects import DependencyStatus

logger = logging.getLogger(__name__)

Runner = Callable[..., subprocess.CompletedProcess[str]]


class PipDependencyBootstrapper:
    """
    Make sure a distribution is installed, installing it with pip if needed.

    Implements the DependencyBootstrapper port.
    """

    def __init__(
        self,
        *,
        auto_install: bool = True,
        runner: Runner = subprocess.run,
        timeout: float = 300.0,
    ) -> None:
        """
        Initialize the bootstrapper.

        Args:
            auto_install: Run pip for missing packages. When False a missing
                package is reported as failed.
            runner: Callable with the ``subprocess.run`` signature.
            timeout: Seconds to wait for pip.
        """
        self._auto_install = auto_install
        self._runner = runner
        self._timeout = timeout

    def ensure_available(self, package: str) -> BootstrapResult:
        """Check for ``package`` and install it when missing."""
        if self._is_installed(package):
            return BootstrapResult(package=package, status=DependencyStatus.ALREADY_PRESENT)

        if not self._auto_install:
            logger.warning("Package %s is not installed and auto-install is disabled", package)
            return BootstrapResult(
                package=package,
                status=DependencyStatus.FAILED,
                reason="auto-install disabled",
            )

        logger.info("Package %s is not installed, installing...", package)
        command = [sys.executable, "-m", "pip", "install", package]

        try:
            completed = self._runner(
                command,
                capture_output=True,
                text=True,
                check=False,
                timeout=self._timeout,
            )
        except (OSError, subprocess.SubprocessError) as e:
            logger.warning("Could not run pip for %s: %s", package, e)
            return BootstrapResult(package=package, status=DependencyStatus.FAILED, reason=str(e))

        if completed.returncode != 0:
            reason = (completed.stderr or "").strip().splitlines()
            message = reason[-1] if reason else f"pip exited with {completed.returncode}"
            logger.warning("pip install %s failed: %s", package, message)
            return BootstrapResult(package=package, status=DependencyStatus.FAILED, reason=message)

        importlib.invalidate_caches()
        logger.info("Installed %s", package)
        return BootstrapResult(package=package, status=DependencyStatus.INSTALLED)

    @staticmethod
    def _is_installed(package: str) -> bool:
        """Check if a distribution with this name is installed."""
        try:
            metadata.version(package)
        except metadata.PackageNotFoundError:
            return False
        return True
