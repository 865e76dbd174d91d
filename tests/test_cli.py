"""Tests for the nbsandbox CLI."""

import io
from pathlib import Path

import pytest
import yaml

from nbsandbox import __version__
from nbsandbox.cli import create_parser, main
from nbsandbox.config import get_settings
from nbsandbox.profile import DEFAULT_SANDBOX_PROFILE, minify_profile


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Run each test in an empty directory with default settings."""
    for name in (
        "NBSANDBOX_PERMISSIONS_PATH",
        "NBSANDBOX_TEMPLATE_PATH",
        "NBSANDBOX_MINIFY",
        "NBSANDBOX_RESOLVE_PATHS",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def dirs(tmp_path: Path) -> dict[str, str]:
    """Create existing directories for permissions."""
    paths = {}
    for name in ("allowed", "denied"):
        path = tmp_path / name
        path.mkdir()
        paths[name] = str(path)
    return paths


@pytest.fixture
def template(tmp_path: Path) -> str:
    """Write a small template file."""
    path = tmp_path / "base.sb"
    path.write_text("(version 1)\n(deny default)\n")
    return str(path)


class TestParser:
    """Tests for argument parsing."""

    def test_repeatable_options(self):
        """Test path options can be repeated."""
        args = create_parser().parse_args(["generate", "--allow-read", "/a", "--allow-read", "/b"])
        assert args.allow_read == ["/a", "/b"]
        assert args.deny_read is None
        assert args.minify is None

    def test_version(self, capsys):
        """Test --version prints the version."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_no_command(self, capsys):
        """Test running without a command prints help."""
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out.lower()


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_generate_from_options(self, capsys, dirs, template):
        """Test generating a profile from command-line options."""
        exit_code = main(
            [
                "generate",
                "--template",
                template,
                "--allow-read",
                dirs["allowed"],
                "--deny-write",
                dirs["denied"],
                "--allow-net",
                "--allow-run",
                "python",
            ]
        )
        assert exit_code == 0

        out = capsys.readouterr().out
        assert out.startswith("(version 1)\n(deny default)\n")
        assert "(allow file-read*)" in out
        assert f'(deny file-write* (subpath "{dirs["denied"]}"))' in out
        assert "(allow network*)" in out
        assert '(literal "python")' in out

    def test_generate_default_template(self, capsys):
        """Test the embedded template is used by default."""
        assert main(["generate"]) == 0
        assert capsys.readouterr().out == DEFAULT_SANDBOX_PROFILE

    def test_generate_minified(self, capsys, dirs, template):
        """Test --minify prints one line."""
        assert main(["generate", "-t", template, "--allow-write", dirs["allowed"], "--minify"]) == 0
        out = capsys.readouterr().out
        assert out == f'(version 1) (deny default) (allow file-write*) (subpath "{dirs["allowed"]}") )\n'

    def test_generate_from_permissions_file(self, capsys, tmp_path, dirs, template):
        """Test options replace categories of the permissions file."""
        perms = tmp_path / "perms.yaml"
        with open(perms, "w") as f:
            yaml.dump({"allow_read": [dirs["allowed"]], "allow_run": ["python"]}, f)

        assert main(["generate", "-p", str(perms), "-t", template, "--allow-run", "jupyter"]) == 0
        out = capsys.readouterr().out
        assert f'(subpath "{dirs["allowed"]}")' in out
        assert '(literal "jupyter")' in out
        assert '(literal "python")' not in out

    def test_generate_from_settings(self, capsys, tmp_path, dirs, template, monkeypatch):
        """Test permissions, template and minify come from settings."""
        perms = tmp_path / "perms.yaml"
        with open(perms, "w") as f:
            yaml.dump({"deny_read": [dirs["denied"]]}, f)
        monkeypatch.setenv("NBSANDBOX_PERMISSIONS_PATH", str(perms))
        monkeypatch.setenv("NBSANDBOX_TEMPLATE_PATH", template)
        monkeypatch.setenv("NBSANDBOX_MINIFY", "true")
        get_settings.cache_clear()

        assert main(["generate"]) == 0
        out = capsys.readouterr().out
        assert out == f'(version 1) (deny default) (deny file-read* (subpath "{dirs["denied"]}"))\n'

    def test_generate_to_file(self, tmp_path, dirs, template):
        """Test --output writes the profile to a file."""
        output = tmp_path / "out" / "kernel.sb"
        assert main(["generate", "-t", template, "--allow-net", "-o", str(output)]) == 0
        assert output.read_text() == "(version 1)\n(deny default)\n(allow network*)\n"

    def test_missing_path(self, capsys, tmp_path):
        """Test a missing path is reported as an error."""
        missing = str(tmp_path / "missing")
        assert main(["generate", "--allow-read", missing]) == 1
        err = capsys.readouterr().err
        assert err.startswith("Error:")
        assert missing in err

    def test_unsafe_program(self, capsys):
        """Test an unsafe program is reported as an error."""
        assert main(["generate", "--deny-run", 'bash")']) == 1
        assert "Unsafe character" in capsys.readouterr().err

    def test_missing_template(self, capsys, tmp_path):
        """Test a missing template is reported as an error."""
        assert main(["generate", "-t", str(tmp_path / "nope.sb")]) == 1
        assert "Template file not found" in capsys.readouterr().err


class TestMinifyCommand:
    """Tests for the minify command."""

    def test_minify_file(self, capsys, tmp_path):
        """Test minifying a profile file."""
        path = tmp_path / "profile.sb"
        path.write_text("; c\n(version 1)\n\n(deny default)\n; c2\n(allow file-read*)\n")
        assert main(["minify", str(path)]) == 0
        assert capsys.readouterr().out == "(version 1) (deny default) (allow file-read*)\n"

    def test_minify_stdin(self, capsys, monkeypatch):
        """Test minifying from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("(version 1)\n; note\n(deny default)\n"))
        assert main(["minify"]) == 0
        assert capsys.readouterr().out == "(version 1) (deny default)\n"


class TestTemplateCommand:
    """Tests for the template command."""

    def test_print_template(self, capsys):
        """Test the default template is printed."""
        assert main(["template"]) == 0
        assert capsys.readouterr().out == DEFAULT_SANDBOX_PROFILE

    def test_write_template(self, tmp_path):
        """Test the default template can be written to a file."""
        output = tmp_path / "default.sb"
        assert main(["template", "-o", str(output)]) == 0
        assert minify_profile(output.read_text()) == minify_profile(DEFAULT_SANDBOX_PROFILE)
