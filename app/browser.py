"""
Opens the documentation page in the host's default browser.
Best effort: failures are logged and never raised.
"""

import asyncio
import logging
import sys

logger = logging.getLogger(__name__)


def browser_command(url: str, platform: str = sys.platform) -> str:
    """Shell command that opens url with the platform's default browser."""
    if platform == "darwin":
        return f"open {url}"
    elif platform == "win32":
        return f"start {url}"
    return f"xdg-open {url}"


class BrowserLauncher:
    """Runs the platform open command in a subprocess shell."""

    def __init__(self, platform: str = sys.platform):
        self.platform = platform

    async def open(self, url: str) -> bool:
        """Open url. Returns False if the command could not be run or failed."""
        command = browser_command(url, self.platform)

        try:
            process = await asyncio.create_subprocess_shell(
                command,
                stdout=asyncio.subprocess.DEVNULL,
                stderr=asyncio.subprocess.PIPE,
            )
            _, stderr = await process.communicate()
        except OSError as e:
            self._warn(url, str(e))
            return False

        if process.returncode != 0:
            reason = stderr.decode(errors="replace").strip() or f"exit status {process.returncode}"
            self._warn(url, f"Command failed: {command}: {reason}")
            return False

        return True

    async def open_later(self, url: str, delay: float) -> bool:
        """Wait delay seconds, then open url."""
        await asyncio.sleep(delay)
        return await self.open(url)

    def _warn(self, url: str, reason: str) -> None:
        logger.warning(f"Could not open browser automatically: {reason}")
        logger.warning(f"Please open {url} manually in your browser")


# Global launcher instance
browser_launcher = BrowserLauncher()
