"""Shared fixtures for brand detection tests."""

import os
import sys
from pathlib import Path

import pytest


def ensure_src_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.append(str(src_path))


ensure_src_on_path()

os.environ.setdefault("ENABLE_MODEL_DISCOVERY", "false")
os.environ.setdefault("ENABLE_HEURISTIC_DISCOVERY_FALLBACK", "true")
os.environ.setdefault("ENABLE_TEXT_PREPROCESSING", "true")
os.environ.setdefault("ENABLE_MENTION_SENTIMENT", "true")

from services.brand_detection.models import BrandCatalogEntry, OrgBrandProfile, OrgOverlay


@pytest.fixture
def hubspot_profile() -> OrgBrandProfile:
    return OrgBrandProfile.from_catalog(
        "HubSpot",
        [BrandCatalogEntry(name="HubSpot", is_org_brand=True, variants=["HubSpot Marketing Hub"])],
    )


@pytest.fixture
def taskly_profile() -> OrgBrandProfile:
    return OrgBrandProfile.from_catalog(
        "Taskly",
        [
            BrandCatalogEntry(name="Taskly", is_org_brand=True),
            BrandCatalogEntry(name="Plannery", variants=["Plannery App"]),
        ],
        domain="taskly.io",
    )


@pytest.fixture
def make_profile():
    def _make(org_name="Acme", brands=(), competitors=(), overlay=None, domain=None):
        catalog = [BrandCatalogEntry(name=b, is_org_brand=True) for b in brands]
        catalog += [BrandCatalogEntry(name=c) for c in competitors]
        return OrgBrandProfile.from_catalog(org_name, catalog, domain=domain, overlay=overlay or OrgOverlay())
    return _make
