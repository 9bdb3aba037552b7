"""
Knowledge base of web-platform APIs that are deprecated or not yet Baseline.

Entries come from a bulk dataset in the ``web-features`` JSON format plus a
hand-curated override table. Overrides always win because the bulk data often
lacks deprecation detail for vendor-prefixed and legacy APIs.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from .issue import ApiStatus

logger = logging.getLogger(__name__)

DEFAULT_DATASET_PATH = Path(__file__).parent / "data" / "web-features.json"

# Hand-curated entries applied after the bulk dataset.
MANUAL_APIS: Dict[str, Dict[str, str]] = {
    "document.execCommand": {
        "suggestion": "Use the Clipboard API (navigator.clipboard)",
        "status": "deprecated",
        "browser_support": "Use navigator.clipboard instead",
        "description": "Deprecated and unreliable API",
    },
    "webkitRequestAnimationFrame": {
        "suggestion": "Use requestAnimationFrame",
        "status": "deprecated",
        "browser_support": "Use standard requestAnimationFrame",
        "description": "Vendor-prefixed API no longer needed",
    },
    "mozRequestAnimationFrame": {
        "suggestion": "Use requestAnimationFrame",
        "status": "deprecated",
        "browser_support": "Use standard requestAnimationFrame",
        "description": "Vendor-prefixed API no longer needed",
    },
    "webkitGetUserMedia": {
        "suggestion": "Use navigator.mediaDevices.getUserMedia",
        "status": "deprecated",
        "browser_support": "Use modern promise-based getUserMedia",
        "description": "Legacy getUserMedia API",
    },
    "webkitURL": {
        "suggestion": "Use URL",
        "status": "deprecated",
        "browser_support": "Use standard URL constructor",
        "description": "Vendor-prefixed URL constructor",
    },
    "webkitAudioContext": {
        "suggestion": "Use AudioContext",
        "status": "deprecated",
        "browser_support": "Use standard AudioContext",
        "description": "Vendor-prefixed AudioContext",
    },
}


@dataclass(frozen=True)
class CompatibilityDescriptor:
    """Compatibility metadata for one API identifier."""
    api_name: str
    status: ApiStatus
    description: str
    suggestion: str = ""
    browser_support: str = ""
    feature_id: str = ""


@dataclass(frozen=True)
class APIInfo:
    """Hover-style summary of a single identifier."""
    is_baseline: bool
    browser_support: str
    status: str
    suggestion: Optional[str] = None


def is_problematic_feature(feature: Mapping[str, Any]) -> bool:
    """True if a feature never reached Baseline (or is explicitly not Baseline)."""
    status = feature.get("status") or {}
    return status.get("baseline") is False or status.get("baseline_low_date") is None


def load_dataset(path: Path) -> Dict[str, Any]:
    """Read a web-features dataset and return its feature records.

    Accepts either a ``data.json`` file (features under a ``features`` key) or a
    bare mapping of feature id to feature record.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    features = data.get("features")
    if isinstance(features, dict):
        return features
    return data


def descriptors_from_features(features: Mapping[str, Any]) -> Dict[str, CompatibilityDescriptor]:
    """Build descriptors for every compat feature of every problematic feature."""
    result: Dict[str, CompatibilityDescriptor] = {}
    for feature_id, feature in features.items():
        if not isinstance(feature, dict) or not is_problematic_feature(feature):
            continue
        compat_features = feature.get("compat_features") or []
        status = ApiStatus.DEPRECATED if feature.get("discouraged") else ApiStatus.NON_BASELINE
        description = feature.get("description") or feature.get("name") or ""
        for api_name in compat_features:
            result[api_name] = CompatibilityDescriptor(
                api_name=api_name,
                status=status,
                description=description,
                feature_id=feature_id,
            )
    return result


def manual_descriptors() -> Dict[str, CompatibilityDescriptor]:
    """Descriptors for the curated override table."""
    return {
        api: CompatibilityDescriptor(
            api_name=api,
            status=ApiStatus(info["status"]),
            description=info["description"],
            suggestion=info["suggestion"],
            browser_support=info["browser_support"],
        )
        for api, info in MANUAL_APIS.items()
    }


class CompatibilityKnowledgeBase:
    """Read-only map from API identifier to its compatibility descriptor."""

    def __init__(
        self,
        dataset_path: Optional[Path] = None,
        features: Optional[Mapping[str, Any]] = None,
    ):
        """Build from explicit ``features`` records, or by loading ``dataset_path``
        (the bundled dataset when neither is given)."""
        entries: Dict[str, CompatibilityDescriptor] = {}
        if features is None:
            path = dataset_path or DEFAULT_DATASET_PATH
            try:
                features = load_dataset(path)
            except (OSError, ValueError) as e:
                logger.warning("Could not load web-features data from %s: %s", path, e)
                features = {}
        entries.update(descriptors_from_features(features))
        entries.update(manual_descriptors())
        self._entries: Mapping[str, CompatibilityDescriptor] = MappingProxyType(entries)
        logger.debug("Knowledge base ready with %d API entries", len(entries))

    def lookup(self, api_name: str) -> Optional[CompatibilityDescriptor]:
        """Return the descriptor for ``api_name`` or None if it is not tracked."""
        return self._entries.get(api_name)

    def api_info(self, word: str) -> APIInfo:
        """Summarize an identifier for hover popups."""
        descriptor = self.lookup(word)
        if descriptor is None:
            return APIInfo(is_baseline=True, browser_support="Baseline supported", status="stable")
        return APIInfo(
            is_baseline=False,
            browser_support=descriptor.browser_support or "Limited support",
            status=descriptor.status.value,
            suggestion=descriptor.suggestion or None,
        )

    def __contains__(self, api_name: object) -> bool:
        return api_name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Tuple[str, CompatibilityDescriptor]]:
        return iter(self._entries.items())
