from pathlib import Path

import pytest

tomllib = pytest.importorskip("tomllib")

pytestmark = pytest.mark.unit

PYPROJECT = Path(__file__).resolve().parents[2] / "pyproject.toml"


def name_of(requirement: str) -> str:
    return requirement.split(";")[0].split("[")[0].strip().lower()


def test_runner_deps_only_in_test_extra():
    project = tomllib.loads(PYPROJECT.read_text(encoding="utf-8"))["project"]
    runtime = {name_of(r) for r in project["dependencies"]}
    test_extra = {name_of(r) for r in project["optional-dependencies"]["test"]}
    assert not runtime & test_extra, f"重复声明的依赖：{runtime & test_extra}"
    assert {"pytest", "pytest-rerunfailures"} <= test_extra
    assert {"playwright", "allure-pytest"} <= runtime
