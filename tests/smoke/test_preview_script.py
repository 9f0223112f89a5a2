from __future__ import annotations

import json

import pytest

import preview_ramp


@pytest.fixture()
def no_config(monkeypatch: pytest.MonkeyPatch, clean_env) -> None:
    from common import settings

    monkeypatch.setenv("RAMP_CONFIG_DISABLED", "1")
    settings.reload_from_env()


@pytest.mark.smoke
@pytest.mark.usefixtures("no_config")
def test_table_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert preview_ramp.main(["--seed", "18a0fb", "--stops", "100,500,900"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 3
    assert lines[1].split()[0] == "500"
    assert "*" in lines[1]


@pytest.mark.smoke
@pytest.mark.usefixtures("no_config")
def test_json_payload_oklch(capsys: pytest.CaptureFixture[str]) -> None:
    code = preview_ramp.main(["--mode", "oklch", "--hue", "210", "--json"])
    assert code == 0
    data = json.loads(capsys.readouterr().out)
    assert data["name"] == "Blue"
    assert [s["stop"] for s in data["swatches"]] == [100, 200, 300, 400, 500, 600, 700, 800, 900]


@pytest.mark.smoke
@pytest.mark.usefixtures("no_config")
def test_show_original_row(capsys: pytest.CaptureFixture[str]) -> None:
    assert preview_ramp.main(["--seed", "#9600ff", "--show-original", "--theme", "dark"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == 10
    assert sum("#9600ff" in line for line in lines) >= 1


@pytest.mark.smoke
@pytest.mark.usefixtures("no_config")
def test_invalid_seed_exits_with_2() -> None:
    assert preview_ramp.main(["--seed", "not-a-color"]) == 2


@pytest.mark.smoke
@pytest.mark.usefixtures("clean_env")
def test_uses_repository_config(capsys: pytest.CaptureFixture[str]) -> None:
    # configs/default.yaml selects oklch mode
    assert preview_ramp.main(["--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["name"] == "Indigo"
