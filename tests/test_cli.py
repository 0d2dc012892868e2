"""Tests for CLI interface."""

import json
from unittest.mock import AsyncMock, patch

import pytest

from js_call_builder.cli import run_cli
from js_call_builder.syntax_checker import SyntaxCheckResult


class TestRenderCommand:
    def given_args(self, *args):
        self.args = ["render", *args]

    async def when_cli_is_run_capturing_output(self, capsys):
        self.exit_code = await run_cli(self.args)
        self.captured = capsys.readouterr()

    def then_exit_code_is_zero(self):
        assert self.exit_code == 0

    def then_exit_code_is_nonzero(self):
        assert self.exit_code != 0

    def then_stdout_is(self, expected):
        assert self.captured.out == expected + "\n"

    @pytest.mark.asyncio
    async def test_renders_function_call(self, capsys):
        """render prints the call to stdout."""
        self.given_args("foo", "-p", "quoted=x", "-p", "bool=1")
        await self.when_cli_is_run_capturing_output(capsys)
        self.then_exit_code_is_zero()
        self.then_stdout_is('jaxon_foo("x", true)')

    @pytest.mark.asyncio
    async def test_renders_class_call_with_single_quotes(self, capsys):
        """--kind and --single-quote are applied."""
        self.given_args(
            "User.save", "--kind", "class", "--single-quote", "-p", "form=userForm"
        )
        await self.when_cli_is_run_capturing_output(capsys)
        self.then_exit_code_is_zero()
        self.then_stdout_is("Jaxon.User.save(jaxon.getFormValues('userForm'))")

    @pytest.mark.asyncio
    async def test_sets_page_number(self, capsys):
        """--page replaces the page-number parameter."""
        self.given_args("list", "-p", "page=1", "-p", "num=20", "--page", "4")
        await self.when_cli_is_run_capturing_output(capsys)
        self.then_stdout_is("jaxon_list(4, 20)")

    @pytest.mark.asyncio
    async def test_uses_options_file(self, tmp_path, capsys):
        """Prefixes are read from the options file."""
        options_file = tmp_path / "options.json"
        options_file.write_text(json.dumps({"prefix": {"function": "app_"}}))
        self.given_args("foo", "--options", str(options_file))
        await self.when_cli_is_run_capturing_output(capsys)
        self.then_stdout_is("app_foo()")

    @pytest.mark.asyncio
    async def test_bad_options_file_fails(self, tmp_path, capsys):
        """An unreadable options file is reported on stderr."""
        self.given_args("foo", "--options", str(tmp_path / "missing.json"))
        await self.when_cli_is_run_capturing_output(capsys)
        self.then_exit_code_is_nonzero()
        assert "Error:" in self.captured.err
        assert self.captured.out == ""

    @pytest.mark.asyncio
    async def test_malformed_parameter_fails(self, capsys):
        """Parameters without KIND=VALUE are rejected."""
        self.given_args("foo", "-p", "oops")
        await self.when_cli_is_run_capturing_output(capsys)
        self.then_exit_code_is_nonzero()
        assert "KIND=VALUE" in self.captured.err

    @pytest.mark.asyncio
    async def test_boolean_words_render_as_booleans(self, capsys):
        """bool=false and bool=True render as false and true."""
        self.given_args("foo", "-p", "bool=false", "-p", "bool=True")
        await self.when_cli_is_run_capturing_output(capsys)
        self.then_exit_code_is_zero()
        self.then_stdout_is("jaxon_foo(false, true)")

    @pytest.mark.asyncio
    async def test_unknown_value_kind_is_ignored(self, capsys):
        """Parameters of unknown kind are left out."""
        self.given_args("foo", "-p", "bogus=v")
        await self.when_cli_is_run_capturing_output(capsys)
        self.then_exit_code_is_zero()
        self.then_stdout_is("jaxon_foo()")


class TestPaginateCommand:
    @pytest.mark.asyncio
    async def test_prints_links(self, capsys):
        """paginate prints HTML links."""
        exit_code = await run_cli(
            ["paginate", "show", "-p", "page=1", "--total", "30", "--current", "2"]
        )
        captured = capsys.readouterr()
        assert exit_code == 0
        assert '<ul class="pagination">' in captured.out
        assert "jaxon_show(3);return false;" in captured.out

    @pytest.mark.asyncio
    async def test_fails_without_page_parameter(self, capsys):
        """paginate needs a page-number parameter."""
        exit_code = await run_cli(["paginate", "show", "--total", "30"])
        captured = capsys.readouterr()
        assert exit_code == 1
        assert "page-number" in captured.err

    @pytest.mark.asyncio
    async def test_single_page_prints_nothing(self, capsys):
        """Nothing is printed when all items fit on one page."""
        exit_code = await run_cli(["paginate", "show", "-p", "page=1", "--total", "5"])
        captured = capsys.readouterr()
        assert exit_code == 0
        assert captured.out == ""


class TestCheckCommand:
    def given_checker_returning(self, result):
        self.checker = AsyncMock()
        self.checker.__aenter__.return_value = self.checker
        self.checker.check.return_value = result

    async def when_check_is_run(self, capsys, *args):
        with patch(
            "js_call_builder.syntax_checker.ScriptChecker", return_value=self.checker
        ):
            self.exit_code = await run_cli(["check", *args])
        self.captured = capsys.readouterr()

    @pytest.mark.asyncio
    async def test_valid_call(self, capsys):
        """A valid call exits 0 and prints the result as JSON."""
        self.given_checker_returning(
            SyntaxCheckResult(script="jaxon_foo(1)", valid=True)
        )
        await self.when_check_is_run(capsys, "foo", "-p", "num=1")
        assert self.exit_code == 0
        assert json.loads(self.captured.out)["valid"] is True
        self.checker.check.assert_awaited_once_with("jaxon_foo(1)")

    @pytest.mark.asyncio
    async def test_invalid_call(self, capsys):
        """An invalid call exits 1."""
        self.given_checker_returning(
            SyntaxCheckResult(script="jaxon_foo(1 +)", valid=False, error="SyntaxError")
        )
        await self.when_check_is_run(capsys, "foo", "-p", "js=1 +")
        assert self.exit_code == 1
        assert json.loads(self.captured.out)["error"] == "SyntaxError"


class TestCLIUsage:
    @pytest.mark.asyncio
    async def test_no_command_shows_help(self, capsys):
        """Without a command, help goes to stderr."""
        exit_code = await run_cli([])
        captured = capsys.readouterr()
        assert exit_code == 1
        assert "render" in captured.err
        assert "paginate" in captured.err

    @pytest.mark.asyncio
    async def test_missing_name_fails(self, capsys):
        """render without a name is a usage error."""
        exit_code = await run_cli(["render"])
        captured = capsys.readouterr()
        assert exit_code != 0
        assert "usage" in captured.err.lower()

    @pytest.mark.asyncio
    async def test_help_lists_subcommands(self, capsys):
        """--help lists the subcommands."""
        await run_cli(["--help"])
        captured = capsys.readouterr()
        assert "check" in captured.out
