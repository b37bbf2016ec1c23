import pytest

from inclusivity.config import ConfigError, ScanConfig, find_config, load_config, parse_config


def test_defaults_without_file(tmp_path):
    config = load_config(start=tmp_path)
    assert config == ScanConfig()
    assert config.scan_names and config.scan_docs
    assert config.extensions == (".py",)


def test_discovers_config_in_parent(tmp_path):
    (tmp_path / ".inclusivity.yaml").write_text(
        "allow_names:\n  - MasterNode\nscan_docs: false\nextensions: [py, pyi]\n",
        encoding="utf-8",
    )
    nested = tmp_path / "src" / "pkg"
    nested.mkdir(parents=True)

    assert find_config(nested) == (tmp_path / ".inclusivity.yaml").resolve()
    config = load_config(start=nested)
    assert config.allow_names == ["MasterNode"]
    assert config.scan_docs is False
    assert config.extensions == (".py", ".pyi")


def test_exclude_accepts_single_string():
    config = parse_config({"exclude": "generated/*"})
    assert config.exclude == ["generated/*"]


def test_non_mapping_is_rejected(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("- just\n- a list\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_invalid_yaml_is_rejected(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("allow_names: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        load_config(path)


def test_missing_explicit_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "absent.yaml")


def test_bad_list_value():
    with pytest.raises(ConfigError):
        parse_config({"allow_names": {"MasterNode": True}})
