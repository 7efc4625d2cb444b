"""Tests for the command-line interface."""

import io
import json
import logging
import zipfile
from pathlib import Path

import pytest

from portfolioai import cli
from portfolioai.cli_config import Command
from portfolioai.cli_execute import get_status_icon
from portfolioai.cli_gather import gather_user_requirements
from portfolioai.pipeline import assemble_profile
from conftest import SAMPLE_RESUME_LINES, make_docx_bytes, make_pdf_bytes

JANE_LINES = [
    "Jane Q. Doe",
    "Backend Engineer",
    "jane.doe@example.com",
    "SUMMARY",
    "Backend engineer with six years of experience designing payment APIs.",
]


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the logging setup done by main()."""
    handlers = list(logging.root.handlers)
    level = logging.root.level
    yield
    for handler in logging.root.handlers:
        if handler not in handlers:
            handler.close()
    logging.root.handlers[:] = handlers
    logging.root.setLevel(level)


@pytest.fixture
def alex_docx(tmp_path: Path) -> Path:
    path = tmp_path / "alex.docx"
    path.write_bytes(make_docx_bytes(SAMPLE_RESUME_LINES))
    return path


@pytest.fixture
def jane_pdf(tmp_path: Path) -> Path:
    path = tmp_path / "jane.pdf"
    path.write_bytes(make_pdf_bytes([JANE_LINES]))
    return path


@pytest.fixture
def profile_json(tmp_path: Path, sample_resume_text) -> Path:
    path = tmp_path / "profile.json"
    path.write_text(json.dumps(assemble_profile(sample_resume_text).as_dict()), encoding="utf-8")
    return path


class TestGatherUserRequirements:
    """Tests for argument parsing (phase 1)."""

    def test_extract_defaults(self):
        """extract collects sources and default settings."""
        config = gather_user_requirements(["extract", "a.pdf", "b.docx"], environ={})
        assert config.command is Command.EXTRACT
        assert config.extract.sources == [Path("a.pdf"), Path("b.docx")]
        assert config.extract.output is None
        assert config.extract.settings.max_pages == 15
        assert not config.strict

    def test_settings_from_env_and_flags(self):
        """Flags override environment values, which override defaults."""
        config = gather_user_requirements(
            ["extract", "a.pdf", "--min-text-length", "20"],
            environ={"PORTFOLIOAI_MAX_PAGES": "3", "PORTFOLIOAI_MIN_TEXT_LENGTH": "50"},
        )
        assert config.extract.settings.max_pages == 3
        assert config.extract.settings.min_text_length == 20

    def test_global_flags(self):
        """--debug, -vv and --log-file are read before the command."""
        config = gather_user_requirements(["--debug", "-vv", "--log-file", "run.log", "templates"])
        assert config.command is Command.TEMPLATES
        assert config.debug
        assert config.verbosity == 2
        assert config.log_file == "run.log"

    def test_render_options(self):
        """render collects the template, role and outputs."""
        config = gather_user_requirements([
            "render", "p.json", "--template", "creative", "--target-role", "Backend Engineer",
            "--output", "site", "--zip", "site.zip",
        ])
        stage = config.render
        assert stage.profile == Path("p.json")
        assert stage.template == "creative"
        assert stage.target_role == "Backend Engineer"
        assert stage.output_dir == Path("site")
        assert stage.archive == Path("site.zip")
        assert stage.preview is None

    def test_output_with_several_sources(self):
        """--output only accepts one input."""
        with pytest.raises(ValueError, match="single input"):
            gather_user_requirements(["extract", "a.pdf", "b.pdf", "--output", "x.json"])

    def test_output_and_target(self):
        """--output and --target are mutually exclusive."""
        with pytest.raises(ValueError, match="either"):
            gather_user_requirements(["extract", "a.pdf", "--output", "x.json", "--target", "out"])

    def test_missing_command_exits(self):
        """A command is required."""
        with pytest.raises(SystemExit):
            gather_user_requirements([])


class TestExtractCommand:
    """Tests for `portfolioai extract`."""

    def test_extract_to_stdout(self, alex_docx, capsys):
        """Without an output the profile JSON goes to stdout."""
        assert cli.main(["extract", str(alex_docx)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["personalInfo"]["name"] == "Alex Johnson"
        assert data["education"][0]["gpa"] == "3.8"

    def test_extract_to_file(self, alex_docx, tmp_path):
        """--output writes the JSON file, creating its folder."""
        out = tmp_path / "profiles" / "alex.json"
        assert cli.main(["extract", str(alex_docx), "--output", str(out)]) == 0
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data["personalInfo"]["email"] == "alex.johnson@email.com"

    def test_extract_to_target_dir(self, alex_docx, jane_pdf, tmp_path, caplog):
        """--target writes one file per input and logs a summary."""
        target = tmp_path / "out"
        assert cli.main(["-v", "extract", str(alex_docx), str(jane_pdf), "--target", str(target)]) == 0
        assert sorted(p.name for p in target.iterdir()) == ["alex.json", "jane.json"]
        assert "1 fully successful, 1 partially successful, 0 failed (total 2)" in caplog.text

    def test_strict_mode_with_placeholders(self, jane_pdf, tmp_path):
        """--strict turns fields that were not found into exit code 2."""
        out = tmp_path / "jane.json"
        assert cli.main(["extract", str(jane_pdf), "--output", str(out), "--strict"]) == 2
        assert out.exists()

    def test_strict_mode_all_found(self, alex_docx, tmp_path):
        """--strict passes when every field was found."""
        out = tmp_path / "alex.json"
        assert cli.main(["extract", str(alex_docx), "--output", str(out), "--strict"]) == 0

    def test_unsupported_file_fails(self, tmp_path, caplog):
        """Unsupported inputs fail with the upload advice."""
        notes = tmp_path / "notes.txt"
        notes.write_text("hello", encoding="utf-8")
        assert cli.main(["extract", str(notes)]) == 1
        assert "Please upload a PDF or DOCX file." in caplog.text

    def test_missing_file_fails(self, tmp_path):
        """A missing input file fails the run."""
        assert cli.main(["extract", str(tmp_path / "missing.pdf")]) == 1

    def test_one_failure_fails_the_run(self, alex_docx, tmp_path):
        """Any failed input makes the exit code 1."""
        broken = tmp_path / "broken.pdf"
        broken.write_bytes(b"not a pdf")
        assert cli.main(["extract", str(alex_docx), str(broken), "--target", str(tmp_path / "out")]) == 1
        assert (tmp_path / "out" / "alex.json").exists()

    def test_invalid_arguments_exit_1(self, tmp_path):
        """Inconsistent arguments are reported, not raised."""
        assert cli.main(["extract", "a.pdf", "b.pdf", "--output", str(tmp_path / "x.json")]) == 1


class TestRenderCommand:
    """Tests for `portfolioai render`."""

    def test_render_all_outputs(self, profile_json, tmp_path):
        """Directory, archive and preview are written on request."""
        site_dir = tmp_path / "site"
        archive = tmp_path / "dist" / "site.zip"
        preview = tmp_path / "preview.html"
        assert cli.main([
            "render", str(profile_json), "--template", "executive",
            "--target-role", "Backend Engineer",
            "--output", str(site_dir), "--zip", str(archive), "--preview", str(preview),
        ]) == 0

        html = (site_dir / "index.html").read_text(encoding="utf-8")
        assert "Currently seeking opportunities as a Backend Engineer" in html
        assert "#2c3e50" in (site_dir / "styles.css").read_text(encoding="utf-8")
        with zipfile.ZipFile(io.BytesIO(archive.read_bytes())) as zf:
            assert sorted(zf.namelist()) == ["index.html", "styles.css"]
        assert "<style>" in preview.read_text(encoding="utf-8")

    def test_render_to_stdout(self, profile_json, capsys):
        """Without outputs the preview document is printed."""
        assert cli.main(["render", str(profile_json)]) == 0
        out = capsys.readouterr().out
        assert out.startswith("<!DOCTYPE html>")
        assert "--primary-color: #667eea;" in out

    def test_render_invalid_profile(self, tmp_path, caplog):
        """A profile missing required fields fails with exit code 1."""
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps({"personalInfo": {"name": "X"}}), encoding="utf-8")
        assert cli.main(["render", str(bad)]) == 1
        assert "missing required field" in caplog.text


class TestTemplatesCommand:
    """Tests for `portfolioai templates`."""

    def test_lists_templates(self, capsys):
        """Every template id is printed with its name."""
        assert cli.main(["templates"]) == 0
        out = capsys.readouterr().out
        for template_id in ("modern", "creative", "executive", "startup"):
            assert template_id in out
        assert "Modern Developer" in out


class TestStatusIcon:
    """Tests for get_status_icon."""

    def test_icons(self):
        """Failure, warnings and success each have an icon."""
        assert get_status_icon(False, False) == "❌"
        assert get_status_icon(True, True) == "⚠️ "
        assert get_status_icon(True, False) == "🟢"


class TestLogFile:
    """Tests for --log-file."""

    def test_log_file_created(self, alex_docx, tmp_path, capsys):
        """The log file and its folder are created."""
        log_file = tmp_path / "logs" / "run.log"
        assert cli.main(["--log-file", str(log_file), "extract", str(alex_docx)]) == 0
        for handler in logging.root.handlers:
            handler.flush()
        assert "Extract summary" in log_file.read_text(encoding="utf-8")


class TestLicenseHeader:
    """Tests for the CLI module header."""

    def test_apache_header_names_project(self):
        """The license header credits the project authors."""
        header = Path(cli.__file__).read_text(encoding="utf-8").splitlines()[:3]
        assert header[1] == "# Copyright 2025 The portfolioai Authors"
        assert "Apache License, Version 2.0" in header[2]
