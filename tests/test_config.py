import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from docseal.shared import load_config


def test_defaults_without_config_file(tmp_path):
    config = load_config(tmp_path / "missing.toml")

    assert config.keys.bits == 2048
    assert config.encryption.policy == "selective"
    assert config.encryption.fields_to_encrypt == []
    assert config.network.max_body_size == 4096
    assert config.logging.level == logging.INFO


def test_repository_config_loads():
    config = load_config(Path(__file__).parents[1] / "config.toml")
    assert config.network.port == 8080
    assert config.keys.public_path == "pub_key"


def test_specific_config_overrides_sections(tmp_path):
    shared = tmp_path / "config.toml"
    shared.write_text(
        '[logging]\nlevel = "warning"\n'
        '[encryption]\npolicy = "depth_1"\n'
        '[network]\nport = 9000\n'
    )
    specific = tmp_path / "dev.toml"
    specific.write_text('[encryption]\nfields_to_encrypt = ["secret"]\n')

    config = load_config(shared, specific)

    assert config.logging.level == logging.WARNING
    assert config.network.port == 9000
    # Whole sections are replaced, not merged key by key
    assert config.encryption.policy == "selective"
    assert config.encryption.fields_to_encrypt == ["secret"]


def test_unknown_log_level_falls_back_to_info(tmp_path):
    shared = tmp_path / "config.toml"
    shared.write_text('[logging]\nlevel = "chatty"\n')
    assert load_config(shared).logging.level == logging.INFO


def test_invalid_policy_is_rejected(tmp_path):
    shared = tmp_path / "config.toml"
    shared.write_text('[encryption]\npolicy = "everything"\n')
    with pytest.raises(ValidationError):
        load_config(shared)
