from importlib.metadata import distribution, entry_points


def test_console_script_runs_app() -> None:
    (script,) = entry_points(group="console_scripts", name="lightbnb")
    assert script.value == "lightbnb.app:run"

    from lightbnb.app import run

    assert script.load() is run


def test_dev_extra_has_no_hook_runner() -> None:
    requirements = distribution("lightbnb").requires or []
    assert any(requirement.startswith("pip-tools") for requirement in requirements)
    assert not any(requirement.startswith("pre-commit") for requirement in requirements)
