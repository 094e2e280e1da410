"""Dependency installation for the generated project.

The install step is one blocking child process: ``<pm> install`` run through
the platform shell (``/bin/sh`` on POSIX, ``cmd.exe`` on Windows) with the
project directory as its working directory and the terminal's streams
inherited.  There is no timeout, no retry and no rollback.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Awaitable, Callable

from create_errika.errors import InstallError
from create_errika.models import PackageManager

InstallRunner = Callable[[PackageManager, Path], Awaitable[int]]


def install_command(package_manager: PackageManager) -> str:
    return f"{package_manager.value} install"


async def run_install(package_manager: PackageManager, working_directory: Path) -> int:
    """Run ``<pm> install`` in *working_directory* and return its exit status.

    stdin/stdout/stderr are not piped, so the package manager's own progress
    output goes straight to the user's terminal.
    """
    process = await asyncio.create_subprocess_shell(
        install_command(package_manager),
        stdin=None,
        stdout=None,
        stderr=None,
        cwd=str(working_directory),
    )
    return await process.wait()


class Installer:
    """Runs the install capability and turns a failure into ``InstallError``.

    *runner* defaults to :func:`run_install`; tests pass a fake that returns
    canned exit statuses.
    """

    def __init__(self, runner: InstallRunner | None = None) -> None:
        self.runner = runner or run_install

    async def install(self, package_manager: PackageManager, working_directory: Path) -> None:
        status = await self.runner(package_manager, Path(working_directory))
        if status != 0:
            raise InstallError(install_command(package_manager), status)
