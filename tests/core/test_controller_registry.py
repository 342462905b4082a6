import pytest

from gpiosim.core.registry import (
    ControllerRegistry,
    create_controller,
    get_controller,
    list_available_controllers,
    register_controller,
)


class DummyController:
    def __init__(self, **kwargs):
        self.kwargs = kwargs


def test_controller_registry_basic_operations():
    registry = ControllerRegistry()
    registry.register("dummy", DummyController)
    assert registry.get("dummy") is DummyController
    assert registry.list_controllers() == ["dummy"]

    instance = registry.create("dummy", foo=1)
    assert isinstance(instance, DummyController)
    assert instance.kwargs == {"foo": 1}

    with pytest.raises(ValueError):
        registry.register("dummy", DummyController)

    with pytest.raises(ValueError):
        registry.get("missing")


def test_global_registry_functions(monkeypatch):
    registry = ControllerRegistry()
    monkeypatch.setattr("gpiosim.core.registry._REGISTRY", registry)

    register_controller("dummy", DummyController)
    assert get_controller("dummy") is DummyController
    assert list_available_controllers() == ["dummy"]
    instance = create_controller("dummy", bar=2)
    assert isinstance(instance, DummyController)
    assert instance.kwargs == {"bar": 2}


def test_aspeed_revisions_are_registered():
    import gpiosim.aspeed  # noqa: F401

    names = list_available_controllers()
    for revision in ("ast2400", "ast2500", "ast2600"):
        assert f"aspeed.gpio-{revision}" in names


def test_create_aspeed_controller_by_name():
    gpio = create_controller("aspeed.gpio-ast2400")
    assert gpio.variant.name == "ast2400"
    assert gpio.name == "aspeed.gpio-ast2400"
