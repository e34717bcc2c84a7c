from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from bootstrap_module.config import (
    DEFAULT_COPYRIGHT_HOLDER,
    ModuleConfig,
    ModuleType,
    ProjectLayout,
)


def test_from_module_name_generates_expected_defaults():
    config = ModuleConfig.from_module_name("acme-billing")
    assert config.module_type is ModuleType.WORDPRESS
    assert config.config_base_key == "acme_billing"
    assert config.namespace == "AcmeBilling"
    assert config.repo_url == "https://github.com/kaisekidev/kaiseki-wp-acme-billing"
    assert config.copyright_holder == DEFAULT_COPYRIGHT_HOLDER
    assert config.package_name_dash == "wp-acme-billing"


def test_core_modules_have_no_prefix():
    config = ModuleConfig.from_module_name("logger", ModuleType.CORE)
    assert config.package_name_dash == "logger"
    assert config.repo_url == "https://github.com/kaisekidev/kaiseki-logger"
    assert ModuleType.CORE.namespace_prefix == ""
    assert ModuleType.WORDPRESS.namespace_prefix == "WordPress\\"


def test_overrides_take_precedence():
    config = ModuleConfig.from_module_name(
        "billing",
        config_base_key="invoices",
        namespace="Invoices",
        repo_url="https://example.com/billing",
        copyright_holder="ACME",
    )
    assert config.config_base_key == "invoices"
    assert config.namespace == "Invoices"
    assert config.repo_url == "https://example.com/billing"
    assert config.copyright_holder == "ACME"


@pytest.mark.parametrize(
    "field, value",
    [
        ("module_name", "Billing"),
        ("namespace", "billing"),
        ("repo_url", "nope"),
    ],
)
def test_invalid_answers_are_rejected(field, value):
    answers = {
        "module_name": "billing",
        "config_base_key": "billing",
        "namespace": "Billing",
        "repo_url": "https://example.com",
    }
    answers[field] = value
    with pytest.raises(ValidationError):
        ModuleConfig(**answers)


def test_repo_url_is_stored_verbatim():
    config = ModuleConfig.from_module_name("billing", repo_url="https://example.com")
    assert config.repo_url == "https://example.com"


def test_config_is_frozen():
    config = ModuleConfig.from_module_name("billing")
    with pytest.raises(ValidationError):
        config.namespace = "Other"


def test_rejects_unknown_fields():
    with pytest.raises(ValidationError):
        ModuleConfig.model_validate(
            {
                "module_name": "billing",
                "config_base_key": "billing",
                "namespace": "Billing",
                "repo_url": "https://example.com",
                "unknown": "field",
            }
        )


def test_placeholders_follow_fixed_order():
    config = ModuleConfig.from_module_name("billing", ModuleType.CORE, copyright_holder="ACME")
    assert config.placeholders() == [
        ("%package_name_dash%", "billing"),
        ("%config_base_key%", "billing"),
        ("%namespace%", "Billing"),
        ("%namespace_escaped%", "Billing"),
        ("%repo_url%", "https://github.com/kaisekidev/kaiseki-billing"),
        ("%copyright_holder%", "ACME"),
    ]


def test_layout_from_root(tmp_path: Path):
    layout = ProjectLayout.from_root(tmp_path)
    assert layout.root == tmp_path.resolve()
    assert layout.templates_dir == tmp_path.resolve() / "templates"
    assert layout.output_dir == tmp_path.resolve() / "output"
    assert layout.template_root("core") == layout.templates_dir / "core"
    assert set(layout.selectors()) == {"shared", "core", "wordpress"}
