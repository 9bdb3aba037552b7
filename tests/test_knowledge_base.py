from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from baseline_checker.issue import ApiStatus
from baseline_checker.knowledge_base import (
    MANUAL_APIS,
    CompatibilityKnowledgeBase,
    is_problematic_feature,
)


def test_manual_apis_are_always_present(knowledge_base) -> None:
    for api in MANUAL_APIS:
        descriptor = knowledge_base.lookup(api)
        assert descriptor is not None
        assert descriptor.status == ApiStatus.DEPRECATED
        assert descriptor.suggestion


def test_bundled_dataset_registers_non_baseline_features(knowledge_base) -> None:
    usb = knowledge_base.lookup("api.USB.requestDevice")
    assert usb is not None
    assert usb.status == ApiStatus.NON_BASELINE
    assert usb.feature_id == "webusb"


def test_bundled_dataset_skips_features_with_baseline_low_date(knowledge_base) -> None:
    assert "api.Clipboard.writeText" not in knowledge_base
    assert "api.Window.requestAnimationFrame" not in knowledge_base


def test_missing_low_date_is_treated_as_non_baseline(knowledge_base) -> None:
    # "low" without a baseline_low_date still counts as never reaching Baseline.
    assert "api.Document.startViewTransition" in knowledge_base


def test_discouraged_feature_is_deprecated(knowledge_base) -> None:
    descriptor = knowledge_base.lookup("api.Document.execCommand")
    assert descriptor is not None
    assert descriptor.status == ApiStatus.DEPRECATED


def test_overrides_replace_dataset_entries() -> None:
    features = {
        "clipboard-legacy": {
            "description": "bulk description",
            "status": {"baseline": False},
            "compat_features": ["document.execCommand", "legacyThing"],
        }
    }
    kb = CompatibilityKnowledgeBase(features=features)
    descriptor = kb.lookup("document.execCommand")
    assert descriptor.status == ApiStatus.DEPRECATED
    assert descriptor.description == MANUAL_APIS["document.execCommand"]["description"]
    assert kb.lookup("legacyThing").description == "bulk description"


def test_missing_dataset_falls_back_to_overrides(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        kb = CompatibilityKnowledgeBase(dataset_path=tmp_path / "nope.json")
    assert len(kb) == len(MANUAL_APIS)
    assert "Could not load web-features data" in caplog.text


def test_corrupt_dataset_falls_back_to_overrides(tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_text("{not json", encoding="utf-8")
    kb = CompatibilityKnowledgeBase(dataset_path=path)
    assert len(kb) == len(MANUAL_APIS)


def test_bare_feature_mapping_is_accepted(tmp_path: Path) -> None:
    path = tmp_path / "features.json"
    path.write_text(
        json.dumps({"webnfc": {"status": {"baseline": False}, "compat_features": ["NDEFReader"]}}),
        encoding="utf-8",
    )
    kb = CompatibilityKnowledgeBase(dataset_path=path)
    assert "NDEFReader" in kb


def test_is_problematic_feature() -> None:
    assert is_problematic_feature({"status": {"baseline": False}})
    assert is_problematic_feature({})
    assert not is_problematic_feature({"status": {"baseline": "high", "baseline_low_date": "2020-01-01"}})


def test_api_info(knowledge_base) -> None:
    info = knowledge_base.api_info("webkitURL")
    assert info.is_baseline is False
    assert info.status == "deprecated"
    assert info.suggestion == "Use URL"

    info = knowledge_base.api_info("fetch")
    assert info.is_baseline is True
    assert info.status == "stable"


def test_knowledge_base_is_read_only(knowledge_base) -> None:
    with pytest.raises(TypeError):
        knowledge_base._entries["x"] = None
