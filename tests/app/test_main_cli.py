from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from placekeeper.ui import cli as cli_module

if TYPE_CHECKING:
    from pathlib import Path

    from placekeeper.domain.resources import ResourceReconciler
    from tests.helpers.platform import FakePlatformClient


@pytest.fixture
def patched_reconciler(
    monkeypatch: pytest.MonkeyPatch, reconciler: ResourceReconciler
) -> dict[str, object]:
    captured: dict[str, object] = {}

    def fake_build(**kwargs: object) -> ResourceReconciler:
        captured.update(kwargs)
        return reconciler

    monkeypatch.setattr(cli_module, "build_resource_reconciler", fake_build)
    return captured


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_main_cli_create_prints_outputs(
    patched_reconciler: dict[str, object],
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    inputs = _write(tmp_path / "inputs.json", "{}")

    cli_module.main(
        ["--project", str(tmp_path), "create", "--type", "experience", "--inputs", str(inputs)]
    )

    assert patched_reconciler["project_dir"] == str(tmp_path)
    assert json.loads(capsys.readouterr().out) == {"assetId": 1000, "startPlaceId": 2000}


def test_main_cli_reads_yaml_documents(
    patched_reconciler: dict[str, object],
    fake_platform: FakePlatformClient,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    del patched_reconciler
    inputs = _write(
        tmp_path / "inputs.yml",
        "experienceId: 4\nname: Gems\nprice: 5\ndescription: Shiny\n",
    )
    outputs = _write(tmp_path / "outputs.yml", "assetId: 6\nproductId: 7\nshopId: 8\n")

    cli_module.main(
        [
            "update",
            "--type",
            "experienceDeveloperProduct",
            "--inputs",
            str(inputs),
            "--outputs",
            str(outputs),
        ]
    )

    assert fake_platform.call_names() == ["update_developer_product"]
    assert json.loads(capsys.readouterr().out) == {"assetId": 6, "productId": 7, "shopId": 8}


def test_main_cli_delete_prints_nothing(
    patched_reconciler: dict[str, object],
    fake_platform: FakePlatformClient,
    tmp_path: Path,
    capsys: pytest.CaptureFixture[str],
) -> None:
    del patched_reconciler
    inputs = _write(tmp_path / "inputs.json", '{"experienceId": 1, "isActive": true}')
    outputs = _write(tmp_path / "outputs.json", "null")

    cli_module.main(
        [
            "delete",
            "--type",
            "experienceActivation",
            "--inputs",
            str(inputs),
            "--outputs",
            str(outputs),
        ]
    )

    assert fake_platform.calls == []
    assert capsys.readouterr().out == ""


def test_main_cli_resource_error_exits_with_usage_code(
    patched_reconciler: dict[str, object], tmp_path: Path
) -> None:
    del patched_reconciler
    inputs = _write(
        tmp_path / "inputs.json", '{"experienceId": 1, "startPlaceId": 2, "isStart": true}'
    )
    outputs = _write(tmp_path / "outputs.json", '{"assetId": 2}')

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(
            ["delete", "--type", "place", "--inputs", str(inputs), "--outputs", str(outputs)]
        )

    assert excinfo.value.code == 2


def test_main_cli_missing_document_exits_with_usage_code(
    patched_reconciler: dict[str, object], tmp_path: Path
) -> None:
    del patched_reconciler

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(
            ["create", "--type", "experience", "--inputs", str(tmp_path / "missing.json")]
        )

    assert excinfo.value.code == 2


def test_main_cli_rejects_unknown_resource_type(tmp_path: Path) -> None:
    inputs = _write(tmp_path / "inputs.json", "{}")

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["create", "--type", "gamePass", "--inputs", str(inputs)])

    assert excinfo.value.code == 2


def test_main_cli_requires_session_cookie(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.delenv("ROBLOSECURITY", raising=False)
    inputs = _write(tmp_path / "inputs.json", "{}")

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["create", "--type", "experience", "--inputs", str(inputs)])

    assert excinfo.value.code == 2


def test_main_cli_unexpected_failure_exits_with_error_code(
    monkeypatch: pytest.MonkeyPatch,
    patched_reconciler: dict[str, object],
    fake_platform: FakePlatformClient,
    tmp_path: Path,
) -> None:
    del patched_reconciler

    def explode(*_: object, **__: object) -> None:
        raise RuntimeError("platform unavailable")

    monkeypatch.setattr(fake_platform, "set_experience_active", explode)
    inputs = _write(tmp_path / "inputs.json", '{"experienceId": 1, "isActive": false}')

    with pytest.raises(SystemExit) as excinfo:
        cli_module.main(["create", "--type", "experienceActivation", "--inputs", str(inputs)])

    assert excinfo.value.code == 1
