import pytest


def test_string_values(helper_config, monkeypatch):
    monkeypatch.setenv("ARCHIVE_SUPABASE_BASE_URL", "  https://db.example  ")
    assert helper_config.get_string_val("archive_supabase_base_url") == "https://db.example"

    monkeypatch.setenv("EMPTY_SETTING", "")
    assert helper_config.get_string_val("EMPTY_SETTING", default="fallback") == "fallback"
    with pytest.raises(ValueError):
        helper_config.get_string_val("EMPTY_SETTING")


def test_number_values(helper_config, monkeypatch):
    monkeypatch.setenv("ARCHIVE_TIMEOUT", "12")
    assert helper_config.get_number_val("ARCHIVE_TIMEOUT") == 12
    monkeypatch.setenv("ARCHIVE_TIMEOUT", "2.5")
    assert helper_config.get_number_val("ARCHIVE_TIMEOUT") == 2.5
    monkeypatch.setenv("ARCHIVE_TIMEOUT", "soon")
    with pytest.raises(ValueError, match="not a valid number"):
        helper_config.get_number_val("ARCHIVE_TIMEOUT")
    monkeypatch.delenv("ARCHIVE_TIMEOUT")
    assert helper_config.get_number_val("ARCHIVE_TIMEOUT", default=30.0) == 30.0


def test_bool_values(helper_config, monkeypatch):
    monkeypatch.setenv("FEATURE_FLAG", "Yes")
    assert helper_config.get_bool_val("FEATURE_FLAG") is True
    monkeypatch.setenv("FEATURE_FLAG", "off")
    assert helper_config.get_bool_val("FEATURE_FLAG") is False


def test_list_values(helper_config, monkeypatch):
    monkeypatch.setenv("ARCHIVE_ENGINES", "[supabase, ,other]")
    assert helper_config.get_list_val("ARCHIVE_ENGINES") == ["supabase", "other"]

    monkeypatch.setenv("ARCHIVE_ENGINES", "supabase")
    with pytest.raises(ValueError, match="format"):
        helper_config.get_list_val("ARCHIVE_ENGINES")

    monkeypatch.setenv("PAGE_SIZES", "[1,x]")
    with pytest.raises(ValueError, match="invalid elements"):
        helper_config.get_list_val("PAGE_SIZES", element_type=int)
