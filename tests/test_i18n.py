"""Tests for translation lookup."""

import pytest

from holical.i18n import Translator


def test_month_names(translator):
    assert translator.month_name(7) == "Agosto"
    translator.change_language("en")
    assert translator.month_name(7) == "August"


def test_month_name_out_of_range(translator):
    assert translator.month_name(12) == "month"


def test_lookup_nested_keys(translator):
    assert translator.t("translation.days.monday") == "Lun"
    assert translator.t("translation.articles.battle_boyaca.title") == "Batalla de Boyacá"


def test_fallback_language(translator):
    """Keys missing in Spanish are read from English."""
    assert translator.t("translation.days.tuesday") == "Tue"
    assert translator.t("translation.articles.usa_independence.title") == "Independence Day"


def test_missing_key_uses_default_then_key(translator):
    assert translator.t("translation.days.friday", default="Fri") == "Fri"
    assert translator.t("translation.days.friday") == "translation.days.friday"


def test_objects_need_return_objects(translator):
    """Objects are only returned when asked for."""
    assert translator.t("translation.articles.battle_boyaca") == "translation.articles.battle_boyaca"
    article = translator.t("translation.articles.battle_boyaca", return_objects=True)
    assert article["title"] == "Batalla de Boyacá"
    assert article["image"] == "boyaca.jpg"


def test_missing_object_is_none(translator):
    assert translator.t("translation.articles.unknown", return_objects=True) is None


def test_change_language(translator):
    assert translator.languages == ["es", "en"]
    translator.change_language("en")
    assert translator.language == "en"
    assert translator.t("translation.days.monday") == "Mon"


def test_change_to_unknown_language(translator):
    with pytest.raises(ValueError):
        translator.change_language("fr")
    assert translator.language == "es"


def test_unknown_initial_language():
    with pytest.raises(ValueError):
        Translator({"en": {}}, "es", "en")
