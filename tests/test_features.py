from __future__ import annotations

import pytest
from pydantic import ValidationError

from flutter_scaffold.features import DEFAULT_LAYERS, Feature, Layer, expand_feature_entry


def test_feature_of_has_the_four_layers():
    feature = Feature.of("home")
    assert feature.name == "home"
    assert feature.layers == (Layer.DATA, Layer.PRESENTATION, Layer.DOMAIN, Layer.LOGIC)
    assert {layer.value for layer in feature.layers} == {"data", "presentation", "domain", "logic"}


def test_feature_rejects_other_layers():
    with pytest.raises(ValidationError):
        Feature(name="home", layers=(Layer.DATA,))


def test_feature_is_immutable():
    feature = Feature.of("home")
    with pytest.raises(ValidationError):
        feature.name = "other"


def test_directories_include_widgets():
    assert Feature.of("home").directories() == [
        "data",
        "presentation",
        "domain",
        "logic",
        "presentation/widgets",
    ]


def test_default_layers_order():
    assert [layer.value for layer in DEFAULT_LAYERS] == ["data", "presentation", "domain", "logic"]


@pytest.mark.parametrize("entry", ["auth", "AUTH", "Auth"])
def test_auth_expands_to_three_features(entry):
    names = [feature.name for feature in expand_feature_entry(entry)]
    assert names == ["login", "register", "forgot_password"]
    assert "auth" not in names


@pytest.mark.parametrize("entry", ["", "   ", "\t"])
def test_blank_entry_yields_nothing(entry):
    assert expand_feature_entry(entry) == []


def test_other_entries_are_kept_verbatim():
    assert expand_feature_entry("user_profile") == [Feature.of("user_profile")]
    assert expand_feature_entry("Profile") == [Feature.of("Profile")]


def test_feature_of_does_not_expand_auth():
    assert Feature.of("auth").name == "auth"
