"""Tests for the dictionary and model projections."""

from __future__ import annotations

from model_compiler.models import (
    Dictionary,
    GetStateMode,
    MetaData,
    ModelInfo,
    ModuleDescriptor,
    ReadWritePath,
)


def _metadata() -> MetaData:
    return MetaData(
        name="testdevice",
        version="1.0.x",
        go_package="example.com/testdevice",
        get_state_mode=GetStateMode.OP_STATE,
        module="foo",
        modules=(
            ModuleDescriptor(
                name="foo",
                revision="2020-01-01",
                organization="ONF",
                yang_file="foo@2020-01-01.yang",
            ),
        ),
    )


def test_dictionary_is_pure_function_of_inputs() -> None:
    metadata = _metadata()

    first = Dictionary.build(metadata, ModelInfo.from_metadata(metadata), "2.0.0")
    second = Dictionary.build(metadata, ModelInfo.from_metadata(metadata), "2.0.0")

    assert first == second
    assert first.as_context() == second.as_context()


def test_dictionary_fields_come_from_upstream_records() -> None:
    metadata = _metadata()
    model_info = ModelInfo.from_metadata(metadata)
    model_info.read_write_paths = (ReadWritePath(path="/cont1a/leaf1a", value_type="STRING"),)

    dictionary = Dictionary.build(metadata, model_info, "2.0.0")

    assert dictionary.name == "testdevice"
    assert dictionary.version == "1.0.x"
    assert dictionary.plugin_version == "2.0.0"
    assert dictionary.go_package == "example.com/testdevice"
    assert dictionary.module == "foo"
    assert dictionary.get_state_mode == 1
    assert [md.name for md in dictionary.model_data] == ["foo"]
    assert dictionary.read_only_paths == ()
    assert dictionary.read_write_paths[0].path == "/cont1a/leaf1a"


def test_dictionary_defaults_plugin_version() -> None:
    metadata = _metadata()
    dictionary = Dictionary.build(metadata, ModelInfo.from_metadata(metadata), "")
    assert dictionary.plugin_version == "1.0.0"


def test_as_context_exposes_template_variables() -> None:
    metadata = _metadata()
    context = Dictionary.build(metadata, ModelInfo.from_metadata(metadata)).as_context()

    assert set(context) == {
        "name",
        "version",
        "plugin_version",
        "go_package",
        "model_data",
        "module",
        "get_state_mode",
        "read_only_paths",
        "read_write_paths",
    }
    assert context["model_data"][0]["version"] == "2020-01-01"
