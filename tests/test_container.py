"""Tests for container wiring."""

from pathlib import Path

import pytest

from dog_impact.config import Settings
from dog_impact.containers import build_container
from tests.conftest import StaticReferenceLoader

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


def test_build_container_uses_loader(settings, reference_data) -> None:
    loader = StaticReferenceLoader(reference_data)

    container = build_container(settings, loader=loader)

    assert loader.calls == 1
    assert container.reference_data is reference_data
    assert container.impact_service.reference_data is reference_data


def test_build_container_applies_settings(reference_data) -> None:
    settings = Settings(human_daily_kcal=2000, max_references=1)

    container = build_container(settings, loader=StaticReferenceLoader(reference_data))
    report = container.impact_service.estimate("pizza", "slice", "Beagle")

    assert report.impact.human_equivalent_kcal == pytest.approx(270)
    assert len(report.references) == 1


def test_default_csv_paths_point_at_bundled_data() -> None:
    settings = Settings()

    assert settings.foods_csv_path == DATA_DIR / "calories.csv"
    assert settings.breeds_csv_path == DATA_DIR / "breeds.csv"
    assert settings.foods_csv_path.is_file()
    assert settings.breeds_csv_path.is_file()


def test_csv_paths_can_be_overridden_from_env(tmp_path, monkeypatch) -> None:
    monkeypatch.setenv("DOG_IMPACT_FOODS_CSV_PATH", str(tmp_path / "foods.csv"))

    assert Settings().foods_csv_path == tmp_path / "foods.csv"


def test_build_container_reads_bundled_csv(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    container = build_container(Settings())

    assert container.reference_data.foods
    assert container.reference_data.breeds
    report = container.impact_service.estimate("pizza", "slice", "Beagle")
    assert report.food.name == "Pizza"
