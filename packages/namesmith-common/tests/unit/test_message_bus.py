import json
from pathlib import Path

import pytest

import namesmith.common
from namesmith.common import MessageBus
from namesmith.needle import L, Needle
from namesmith.test_utils import SpyBus, MockNeedle


class MockRenderer:
    def __init__(self):
        self.messages = []

    def render(self, message: str, level: str) -> None:
        self.messages.append({"level": level, "message": message})


@pytest.fixture
def assets_root(tmp_path: Path) -> Path:
    assets = tmp_path / "needle" / "en"
    assets.mkdir(parents=True)
    (assets / "msgs.json").write_text(
        json.dumps({"greeting": "Hello {name}", "broken": "Hello {missing}"})
    )
    return tmp_path


@pytest.fixture
def test_bus(assets_root: Path) -> MessageBus:
    return MessageBus(needle_instance=Needle(roots=[assets_root]))


def test_bus_does_not_fail_without_renderer(test_bus: MessageBus):
    try:
        test_bus.info("some.id")
    except Exception as e:
        pytest.fail(f"MessageBus raised an exception without a renderer: {e}")


def test_bus_forwards_to_renderer(test_bus: MessageBus):
    renderer = MockRenderer()
    test_bus.set_renderer(renderer)

    test_bus.info(L.greeting, name="World")
    test_bus.warning(L.greeting, name="namesmith")
    test_bus.debug(L.greeting, name="debug")

    assert renderer.messages == [
        {"level": "info", "message": "Hello World"},
        {"level": "warning", "message": "Hello namesmith"},
        {"level": "debug", "message": "Hello debug"},
    ]


def test_bus_identity_fallback(test_bus: MessageBus):
    renderer = MockRenderer()
    test_bus.set_renderer(renderer)

    test_bus.info(L.nonexistent.key)

    assert renderer.messages == [{"level": "info", "message": "nonexistent.key"}]


def test_bus_reports_formatting_errors(test_bus: MessageBus):
    assert test_bus.render_to_string(L.broken) == "<formatting_error for 'broken'>"


def test_spy_bus_captures_ids_and_params(monkeypatch):
    spy_bus = SpyBus()

    with spy_bus.patch(monkeypatch):
        namesmith.common.bus.info(L.greeting, name="World")
        namesmith.common.bus.success(L.apply.run.summary, applied=1)

    assert spy_bus.get_messages() == [
        {"level": "info", "id": "greeting", "params": {"name": "World"}},
        {"level": "success", "id": "apply.run.summary", "params": {"applied": 1}},
    ]
    spy_bus.assert_id_called(L.apply.run.summary, level="success")
    with pytest.raises(AssertionError):
        spy_bus.assert_id_called(L.apply.run.summary, level="error")


def test_global_bus_resolves_packaged_templates(monkeypatch):
    renderer = MockRenderer()
    monkeypatch.setattr(namesmith.common.bus, "_renderer", renderer)

    namesmith.common.bus.warning(
        L.apply.rename.rejected, old_name="a", new_name="b", reason="duplicate"
    )

    assert renderer.messages == [
        {
            "level": "warning",
            "message": "Could not apply suggestion: a -> b (duplicate)",
        }
    ]


def test_mock_needle_overrides_templates(monkeypatch):
    renderer = MockRenderer()
    monkeypatch.setattr(namesmith.common.bus, "_renderer", renderer)

    with MockNeedle({"greeting": "Hi {name}"}).patch(monkeypatch):
        namesmith.common.bus.info(L.greeting, name="there")

    assert renderer.messages == [{"level": "info", "message": "Hi there"}]
