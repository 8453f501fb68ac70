import json
import logging
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from docvalidator.config.settings import Settings
from docvalidator.main import EXIT_ERROR, EXIT_INVALID, EXIT_VALID, build_registry, main
from docvalidator.sensors.static_adapter import static_suite
from docvalidator.validation.validator import build_validator


@pytest.fixture(autouse=True)
def _static_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("SENSOR_ENGINE", "static")
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    monkeypatch.delenv("CUSTOM_CATEGORIES_PATH", raising=False)
    monkeypatch.delenv("CONFIDENCE_THRESHOLD", raising=False)
    monkeypatch.delenv("OCR_LEVEL", raising=False)
    yield
    logger = logging.getLogger("docvalidator")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


@pytest.fixture()
def image_path(tmp_path: Path, blank_png_bytes: bytes) -> Path:
    path = tmp_path / "upload.png"
    path.write_bytes(blank_png_bytes)
    return path


def _license_validator(settings: Settings):
    return build_validator(
        settings,
        sensors=static_suite(
            lines=[("DRIVER LICENSE", 0.9), ("DOB 01/02/1990", 0.9), ("DL A1234567", 0.9)],
            edge_score=0.85,
            face_detected=True,
        ),
    )


class TestValidateCommand:
    def test_invalid_document_exits_one(
        self, image_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = main([str(image_path), "--category", "drivers_license"])
        output = json.loads(capsys.readouterr().out)
        assert code == EXIT_INVALID
        assert output["is_valid"] is False
        assert output["expected_category"]["id"] == "drivers_license"

    def test_valid_document_exits_zero(
        self, image_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with patch("docvalidator.main.build_validator", side_effect=_license_validator):
            code = main([str(image_path), "--category", "drivers_license"])
        output = json.loads(capsys.readouterr().out)
        assert code == EXIT_VALID
        assert output["is_valid"] is True
        assert output["signals"]["keyword_match"] is True

    def test_threshold_flag_overrides_settings(
        self, image_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = main([str(image_path), "--category", "passport", "--threshold", "0"])
        output = json.loads(capsys.readouterr().out)
        assert code == EXIT_VALID
        assert output["confidence"] == 0.0

    def test_unknown_category_exits_two(
        self, image_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert main([str(image_path), "--category", "boarding_pass"]) == EXIT_ERROR
        assert capsys.readouterr().out == ""

    def test_missing_image_exits_two(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "nope.png"), "--category", "passport"]) == EXIT_ERROR

    def test_undecodable_image_exits_two(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.png"
        path.write_bytes(b"not really a png")
        assert main([str(path), "--category", "passport"]) == EXIT_ERROR

    def test_invalid_configuration_exits_two(
        self, image_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("OCR_LEVEL", "blurry")
        assert main([str(image_path), "--category", "passport"]) == EXIT_ERROR
        assert capsys.readouterr().out == ""

    def test_category_or_classify_is_required(self, image_path: Path) -> None:
        with pytest.raises(SystemExit):
            main([str(image_path)])


class TestClassifyCommand:
    def test_ranks_every_preset(
        self, image_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = main([str(image_path), "--classify"])
        output = json.loads(capsys.readouterr().out)
        assert code == EXIT_VALID
        assert len(output) == 11
        confidences = [entry["confidence"] for entry in output]
        assert confidences == sorted(confidences, reverse=True)

    def test_best_match_first(self, image_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("docvalidator.main.build_validator", side_effect=_license_validator):
            main([str(image_path), "--classify", "--ocr-level", "fast"])
        output = json.loads(capsys.readouterr().out)
        assert output[0]["expected_category"]["id"] == "drivers_license"


class TestCustomCatalog:
    @pytest.fixture()
    def catalog(self, tmp_path: Path) -> Path:
        path = tmp_path / "categories.json"
        path.write_text(
            json.dumps(
                {
                    "categories": [
                        {
                            "name": "Gym Card",
                            "id": "gym_card",
                            "expects_document_edges": False,
                            "keyword_groups": [["gym", "member"]],
                        }
                    ]
                }
            ),
            encoding="utf-8",
        )
        return path

    def test_build_registry_adds_catalog(self, catalog: Path) -> None:
        registry = build_registry(Settings(custom_categories_path=catalog))
        assert len(registry) == 12
        assert registry.get("gym_card").keyword_groups == (("gym", "member"),)

    def test_validates_against_custom_category(
        self,
        catalog: Path,
        image_path: Path,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        monkeypatch.setenv("CUSTOM_CATEGORIES_PATH", str(catalog))
        code = main([str(image_path), "--category", "gym_card"])
        output = json.loads(capsys.readouterr().out)
        assert code == EXIT_INVALID
        assert output["expected_category"]["name"] == "Gym Card"
        assert output["confidence"] == pytest.approx(0.1)

    def test_broken_catalog_exits_two(
        self, tmp_path: Path, image_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        broken = tmp_path / "broken.json"
        broken.write_text("{not json", encoding="utf-8")
        monkeypatch.setenv("CUSTOM_CATEGORIES_PATH", str(broken))
        assert main([str(image_path), "--category", "passport"]) == EXIT_ERROR
