"""Tests for model_compiler.orchestrator."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from model_compiler.errors import GenerationError, LintError, ManifestError, Stage, VersionReadError
from model_compiler.orchestrator import ModelCompiler
from model_compiler.postproc.header import GENERATED_HEADER
from tests._fixtures.model_builder import RecordingToolRunner

_ARTIFACTS = ("plugin/main.go", "plugin/paths.go", "go.mod", "Makefile", "Dockerfile")


@pytest.fixture
def compile_logger() -> logging.Logger:
    logger = logging.getLogger("tests.model_compiler")
    logger.setLevel(logging.DEBUG)
    return logger


def test_compile_produces_bindings_tree_and_artifacts(model_builder, tool_runner, compile_logger) -> None:
    model_builder.write_metadata(name="testdevice", modules=[("foo", "2020-01-01")], lint=False)
    root = model_builder.path().resolve()

    result = ModelCompiler(runner=tool_runner, logger=compile_logger).compile(root)

    generated = (root / "api" / "generated.go").read_text(encoding="utf-8")
    assert generated.startswith(GENERATED_HEADER)
    assert (root / "testdevice.tree").is_file()
    for relative in _ARTIFACTS:
        assert (root / relative).is_file(), relative
    assert result.artifacts == [root / relative for relative in _ARTIFACTS]
    assert result.dictionary.name == "testdevice"
    assert result.dictionary.plugin_version == "1.0.0"
    assert result.bindings_file == root / "api" / "generated.go"
    assert result.tree_file == root / "testdevice.tree"
    assert [type(w) for w in result.warnings] == [VersionReadError]
    assert tool_runner.calls_for("pyang")[0][:2] == ["-f", "tree"]


def test_compile_skips_lint_when_disabled(model_builder, tool_runner, compile_logger) -> None:
    model_builder.write_metadata(lint=False)

    ModelCompiler(runner=tool_runner, logger=compile_logger).compile(model_builder.path())

    assert [name for name, _ in tool_runner.calls] == ["generator", "pyang"]


def test_compile_runs_stages_in_order_when_linting(model_builder, tool_runner, compile_logger) -> None:
    model_builder.write_metadata(modules=[("foo", "2020-01-01"), ("bar", "2021-01-01")], lint=True)
    root = model_builder.path().resolve()

    ModelCompiler(runner=tool_runner, logger=compile_logger).compile(root)

    assert [name for name, _ in tool_runner.calls] == ["pyang", "generator", "pyang"]
    lint_args = tool_runner.calls[0][1]
    assert lint_args[4:] == [
        str(root / "yang" / "foo@2020-01-01.yang"),
        str(root / "yang" / "bar@2021-01-01.yang"),
    ]
    tree_args = tool_runner.calls[2][1]
    assert tree_args[6:] == lint_args[4:]


def test_lint_failure_leaves_no_later_artifacts(model_builder, compile_logger) -> None:
    model_builder.write_metadata(lint=True)
    root = model_builder.path().resolve()
    runner = RecordingToolRunner({"pyang": 1})

    with pytest.raises(LintError) as excinfo:
        ModelCompiler(runner=runner, logger=compile_logger).compile(root)

    assert excinfo.value.stage is Stage.LINT
    assert len(runner.calls) == 1
    assert not (root / "api" / "generated.go").exists()
    assert not (root / "testdevice.tree").exists()
    for relative in _ARTIFACTS:
        assert not (root / relative).exists(), relative


def test_generation_failure_stops_before_tree(model_builder, compile_logger) -> None:
    model_builder.write_metadata()
    root = model_builder.path().resolve()
    runner = RecordingToolRunner({"generator": 1})

    with pytest.raises(GenerationError) as excinfo:
        ModelCompiler(runner=runner, logger=compile_logger).compile(root)

    assert excinfo.value.stage is Stage.GENERATE_BINDINGS
    assert runner.calls_for("pyang") == []
    assert not (root / "Makefile").exists()


def test_version_file_sets_plugin_version(model_builder, tool_runner, compile_logger) -> None:
    model_builder.write_metadata()
    model_builder.write({"VERSION": "2.3.1\n"})

    result = ModelCompiler(runner=tool_runner, logger=compile_logger).compile(model_builder.path())

    assert result.dictionary.plugin_version == "2.3.1"
    assert result.warnings == []
    assert 'PLUGIN_VERSION ?= 2.3.1' in (model_builder.path() / "Makefile").read_text(encoding="utf-8")


def test_missing_manifest_aborts_before_tools(model_builder, tool_runner, compile_logger, caplog) -> None:
    caplog.set_level(logging.INFO, logger=compile_logger.name)

    with pytest.raises(ManifestError):
        ModelCompiler(runner=tool_runner, logger=compile_logger).compile(model_builder.path())

    assert tool_runner.calls == []
    assert any(
        record.levelno == logging.ERROR and "Unable to read model meta-data" in record.getMessage()
        for record in caplog.records
    )


def test_stage_progress_is_logged(model_builder, tool_runner, compile_logger, caplog) -> None:
    caplog.set_level(logging.INFO, logger=compile_logger.name)
    model_builder.write_metadata(lint=True)

    ModelCompiler(runner=tool_runner, logger=compile_logger).compile(model_builder.path())

    messages = [record.getMessage() for record in caplog.records]
    assert any(message.startswith("Compiling config model at") for message in messages)
    assert "Linting YANG files" in messages
    assert any(message.startswith("Generating YANG bindings") for message in messages)
    assert any(message.startswith("Generating YANG tree") for message in messages)
    assert any(message.startswith("Generating plugin Dockerfile") for message in messages)
    warnings = [record for record in caplog.records if record.levelno == logging.WARNING]
    assert warnings and "defaulting to 1.0.0" in warnings[0].getMessage()


def test_repeated_compiles_share_no_state(tmp_path: Path, compile_logger) -> None:
    from tests._fixtures.model_builder import ModelBuilder

    first = ModelBuilder(tmp_path / "a")
    second = ModelBuilder(tmp_path / "b")
    first.write_metadata(name="alpha")
    second.write_metadata(name="beta")
    second.write({"VERSION": "3.0.0\n"})
    compiler = ModelCompiler(runner=RecordingToolRunner(), logger=compile_logger)

    result_a = compiler.compile(first.path())
    result_b = compiler.compile(second.path())

    assert (result_a.dictionary.name, result_a.dictionary.plugin_version) == ("alpha", "1.0.0")
    assert (result_b.dictionary.name, result_b.dictionary.plugin_version) == ("beta", "3.0.0")


def test_empty_version_file_is_defaulted_once(model_builder, tool_runner, compile_logger) -> None:
    model_builder.write_metadata()
    (model_builder.path() / "VERSION").write_text("", encoding="utf-8")

    result = ModelCompiler(runner=tool_runner, logger=compile_logger).compile(model_builder.path())

    assert result.plugin_version.value == "1.0.0"
    assert result.dictionary.plugin_version == "1.0.0"
    assert [type(w) for w in result.warnings] == [VersionReadError]


def test_failure_is_logged_against_failing_stage(model_builder, compile_logger, caplog) -> None:
    caplog.set_level(logging.INFO, logger=compile_logger.name)
    model_builder.write_metadata(lint=True)

    with pytest.raises(LintError):
        ModelCompiler(runner=RecordingToolRunner({"pyang": 1}), logger=compile_logger).compile(
            model_builder.path()
        )

    errors = [record for record in caplog.records if record.levelno == logging.ERROR]
    assert len(errors) == 1
    assert errors[0].stage == "lint"
    assert errors[0].getMessage().startswith("YANG files contain issues")
