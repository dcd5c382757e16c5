import pytest

from omod_init.models import FilePatternGroup
from omod_init.settings import InitializerSettings


def test_defaults_match_module_conventions() -> None:
    settings = InitializerSettings()

    assert settings.config_source == "src/main/resources"
    assert settings.webapp_source == "src/main/webapp"
    assert settings.webapp_target == "web/module"
    assert settings.config_file_path == "config.xml"
    assert settings.descriptor_directory == "src/main/resources"
    assert settings.descriptor_groups is None
    assert settings.descriptor_property == "hbmConfig"
    assert settings.descriptor_format == '<mapping resource="{0}" />'
    assert settings.omod_descriptor_property == "omodHbmConfig"
    assert settings.omod_descriptor_format == "{0}"


def test_from_dict_reads_groups_and_scalars() -> None:
    settings = InitializerSettings.from_dict(
        {
            "webapp_target": "web/custom",
            "descriptor_groups": [
                {"directory": "mappings", "includes": ["*.hbm.xml"]},
                {
                    "directory": "legacy",
                    "includes": ["**/*.xml"],
                    "excludes": ["old/**"],
                    "use_default_excludes": False,
                },
            ],
        }
    )

    assert settings.webapp_target == "web/custom"
    assert settings.descriptor_groups == (
        FilePatternGroup(directory="mappings", includes=("*.hbm.xml",)),
        FilePatternGroup(
            directory="legacy",
            includes=("**/*.xml",),
            excludes=("old/**",),
            use_default_excludes=False,
        ),
    )


def test_from_dict_ignores_null_values() -> None:
    settings = InitializerSettings.from_dict({"config_source": None, "descriptor_groups": None})

    assert settings == InitializerSettings()


def test_with_overrides_replaces_scalars() -> None:
    settings = InitializerSettings().with_overrides({"descriptor_property": "mappings"})

    assert settings.descriptor_property == "mappings"
    assert settings.omod_descriptor_property == "omodHbmConfig"


def test_with_overrides_rejects_unknown_keys() -> None:
    with pytest.raises(ValueError, match="Unknown setting: bogus"):
        InitializerSettings().with_overrides({"bogus": "1"})


def test_with_overrides_rejects_group_override() -> None:
    with pytest.raises(ValueError, match="descriptor_groups"):
        InitializerSettings().with_overrides({"descriptor_groups": "x"})

