"""Check generated calls for JavaScript syntax errors in a real browser."""

import logging
from dataclasses import dataclass
from typing import Any

from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Page, async_playwright

logger = logging.getLogger(__name__)

# Compiles the script without running it; returns the SyntaxError message or null
COMPILE_SCRIPT_JS = """
(source) => {
  try {
    new Function(source);
    return null;
  } catch (e) {
    return e.name + ': ' + e.message;
  }
}
"""


class ScriptCheckError(Exception):
    """The browser could not check a script."""


@dataclass
class SyntaxCheckResult:
    """Outcome of compiling a script in the browser."""

    script: str
    valid: bool
    error: str | None = None

    def to_dict(self) -> dict:
        return {"script": self.script, "valid": self.valid, "error": self.error}


class ScriptChecker:
    """Compile scripts in headless Chromium.

    Usage:
        async with ScriptChecker() as checker:
            result = await checker.check(request.get_script())

    A page from an existing browser can be passed in instead, in which case
    the checker neither launches nor closes a browser.
    """

    def __init__(self, page: Page | None = None):
        self._page = page
        self._owns_browser = page is None
        self._playwright = None
        self._browser = None

    async def __aenter__(self) -> "ScriptChecker":
        if self._owns_browser:
            try:
                self._playwright = await async_playwright().start()
                self._browser = await self._playwright.chromium.launch()
                self._page = await self._browser.new_page()
            except PlaywrightError as e:
                logger.error(f"Failed to launch browser: {e}")
                await self.close()
                raise ScriptCheckError(f"Failed to launch browser: {e}") from e
            logger.info("Browser launched")
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.close()

    async def close(self):
        """Close the browser if this checker launched it."""
        if not self._owns_browser:
            return
        if self._browser:
            await self._browser.close()
            self._browser = None
        if self._playwright:
            await self._playwright.stop()
            self._playwright = None
        logger.info("Browser closed")

    async def check(self, script: str) -> SyntaxCheckResult:
        """Compile a script and report whether it is valid JavaScript.

        Raises:
            ScriptCheckError: If no page is available or the browser fails
        """
        if self._page is None:
            raise ScriptCheckError("No page available outside of checker context")

        try:
            error = await self._page.evaluate(COMPILE_SCRIPT_JS, script)
        except PlaywrightError as e:
            logger.error(f"Failed to evaluate script: {e}")
            raise ScriptCheckError(str(e)) from e

        if error:
            logger.warning(f"Invalid script {script!r}: {error}")
            return SyntaxCheckResult(script=script, valid=False, error=error)

        logger.info(f"Script is valid: {script}")
        return SyntaxCheckResult(script=script, valid=True)
