import pytest

import namesmith.common
from namesmith.test_utils import ProjectFactory


@pytest.fixture
def project_factory(tmp_path, monkeypatch):
    # A clean project directory as cwd for each test
    factory = ProjectFactory(tmp_path).with_project_name("sample")
    monkeypatch.chdir(tmp_path)
    return factory


@pytest.fixture(autouse=True)
def detached_bus(monkeypatch):
    # Renderers installed by one CLI invocation must not leak into the next test.
    monkeypatch.setattr(namesmith.common.bus, "_renderer", None)


@pytest.fixture(autouse=True)
def isolated_needle(monkeypatch):
    # The CLI points the shared needle at each test project; restore it afterwards.
    needle = namesmith.common.needle
    monkeypatch.setattr(needle, "roots", list(needle.roots))
    yield
    needle.reset()
