import pytest
from click.testing import CliRunner

from gorgon.cli import cli, describe_failure
from gorgon.errors import PathNotFound
from gorgon.outcome import Failure


def test_build_success(project):
    runner = CliRunner()
    result = runner.invoke(cli, ["build", str(project)], catch_exceptions=False)
    assert result.exit_code == 0
    lines = result.output.strip().splitlines()
    assert lines[-1] == "Successfully built site!"
    assert (project / "build" / "index.html").exists()


def test_build_defaults_to_current_directory(project, monkeypatch):
    monkeypatch.chdir(project)
    result = CliRunner().invoke(cli, ["build", "--no-color"], catch_exceptions=False)
    assert result.exit_code == 0
    assert (project / "build" / "index.html").exists()


def test_build_project_option(project):
    result = CliRunner().invoke(cli, ["build", "-p", str(project)], catch_exceptions=False)
    assert result.exit_code == 0
    assert (project / "build" / "rss.xml").exists()


def test_positional_path_wins_over_project_option(project, tmp_path):
    result = CliRunner().invoke(
        cli, ["build", str(project), "--project", str(tmp_path / "nope")]
    )
    assert result.exit_code == 0
    assert "Successfully built site!" in result.output


def test_build_missing_directory(tmp_path):
    result = CliRunner().invoke(cli, ["build", str(tmp_path / "nope")])
    assert result.exit_code == 1
    assert result.output.strip() == (
        "Encountered issues building site, Directory does not exist"
    )


def test_build_failure_shows_message(tmp_path, project_factory):
    project = project_factory(tmp_path / "site", page_layout="missing")
    result = CliRunner().invoke(cli, ["build", str(project)])
    assert result.exit_code == 1
    assert result.output.strip().splitlines()[-1] == (
        "Encountered issues building site, Layout missing does not exist"
    )


@pytest.mark.parametrize("value", ["-1", "[2]"])
def test_build_invalid_workers_config(tmp_path, project_factory, value):
    project = project_factory(tmp_path / "site")
    with open(project / "gorgon.yaml", "a", encoding="utf-8") as f:
        f.write(f"workers: {value}\n")
    result = CliRunner().invoke(cli, ["build", str(project)])
    assert result.exit_code == 1
    assert not isinstance(result.exception, (TypeError, ValueError))
    assert result.output.strip().splitlines()[-1] == (
        "Encountered issues building site, "
        "Invalid gorgon.yaml: workers must be a positive integer"
    )
    assert not (project / "build").exists()


def test_build_quoted_generate_rss_fails(tmp_path, project_factory):
    project = project_factory(tmp_path / "site")
    config = project / "gorgon.yaml"
    config.write_text(
        config.read_text(encoding="utf-8").replace(
            "generate_rss: true", 'generate_rss: "false"'
        ),
        encoding="utf-8",
    )
    result = CliRunner().invoke(cli, ["build", str(project)])
    assert result.exit_code == 1
    assert result.output.strip().splitlines()[-1] == (
        "Encountered issues building site, "
        "Invalid gorgon.yaml: generate_rss must be true or false"
    )
    assert not (project / "build" / "rss.xml").exists()


def test_build_help_does_not_build(monkeypatch):
    def explode(*args, **kwargs):
        raise AssertionError("build should not run")

    monkeypatch.setattr("gorgon.build.build_site", explode)
    runner = CliRunner()
    for args in (["build", "help"], ["build", "-h"], ["build", "--help"]):
        result = runner.invoke(cli, args, catch_exceptions=False)
        assert result.exit_code == 0
        assert "Usage:" in result.output
        assert "gorgon build <project>" in result.output


def test_build_rejects_unknown_options(monkeypatch):
    monkeypatch.setattr("gorgon.build.build_site", lambda *a, **k: None)
    result = CliRunner().invoke(cli, ["build", "--bogus"])
    assert result.exit_code == 2
    assert "Usage:" in result.output

    result = CliRunner().invoke(cli, ["build", "--workers", "0"])
    assert result.exit_code == 2


def test_build_passes_workers(monkeypatch, tmp_path):
    seen = {}

    def fake_build_site(path, formatter=None, max_workers=None):
        seen["path"] = path
        seen["workers"] = max_workers
        return Failure("nope")

    monkeypatch.setattr("gorgon.build.build_site", fake_build_site)
    result = CliRunner().invoke(cli, ["build", str(tmp_path), "--workers", "4"])
    assert result.exit_code == 1
    assert seen == {"path": tmp_path, "workers": 4}
    assert "Encountered issues building site, nope" in result.output


def test_describe_failure():
    assert describe_failure(Failure("x", PathNotFound("p"))) == "Directory does not exist"
    assert describe_failure(Failure("A, B")) == "A, B"


def test_new_scaffolds_buildable_project(tmp_path):
    runner = CliRunner()
    target = tmp_path / "mysite"
    result = runner.invoke(cli, ["new", str(target)])
    assert result.exit_code == 0
    assert (target / "gorgon.yaml").exists()
    assert (target / "theme" / "layouts" / "page.html").exists()
    assert (target / "posts" / "2024-01-15-hello-world.md").exists()

    result = runner.invoke(cli, ["build", str(target)], catch_exceptions=False)
    assert result.exit_code == 0
    out = target / "build"
    assert "Hello World" in (out / "index.html").read_text(encoding="utf-8")
    assert (out / "2024-01-15-hello-world.html").exists()
    assert (out / "assets" / "style.css").exists()
    assert (out / "rss.xml").exists()

    # refuses a non-empty directory
    result = runner.invoke(cli, ["new", str(target)])
    assert result.exit_code != 0
    assert "non-empty" in result.output


def test_module_main_entrypoint():
    from gorgon.__main__ import main

    assert callable(main)


def test_version():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "gorgon" in result.output
