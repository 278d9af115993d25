"""
Fixed targets, expectations and thresholds for the smoke runs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from urllib.parse import urlparse, urlunparse

TARGET_URL = "https://varunbagi.github.io/spring-associate-images/"

RESULTS_DIR = "test-results"
WEBSITE_REPORT_NAME = "website-test-report.json"
LIGHTHOUSE_REPORT_NAME = "lighthouse-report.json"
LIGHTHOUSE_SUMMARY_NAME = "lighthouse-summary.json"

NAVIGATION_TIMEOUT_MS = 10000
MENU_SETTLE_MS = 500
BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]

REQUIRED_SECTIONS = ("hero", "tea-types", "signature-blends", "services", "contact")

# Lighthouse category ids keyed by ThresholdPolicy field.
AUDIT_CATEGORIES = {
    "performance": "performance",
    "accessibility": "accessibility",
    "best_practices": "best-practices",
    "seo": "seo",
}
CATEGORY_LABELS = {
    "performance": "Performance",
    "accessibility": "Accessibility",
    "best_practices": "Best Practices",
    "seo": "SEO",
}
CATEGORY_ICONS = {
    "performance": "📊",
    "accessibility": "♿",
    "best_practices": "✨",
    "seo": "🔍",
}


@dataclass(frozen=True)
class SiteExpectations:
    url: str = TARGET_URL
    sections: tuple[str, ...] = REQUIRED_SECTIONS
    menu_trigger: str = ".hamburger"
    menu_id: str = "navMenu"
    menu_active_class: str = "active"
    tea_card_selector: str = ".tea-card"
    tea_card_count: int = 2
    service_card_selector: str = ".service-card"
    service_card_count: int = 3
    service_card_distinct: int = 3
    image_selector: str = "img"
    nav_link_selector: str = ".nav-menu a"
    nav_link_count: int = 5
    navigation_timeout_ms: int = NAVIGATION_TIMEOUT_MS
    menu_settle_ms: int = MENU_SETTLE_MS
    browser_args: tuple[str, ...] = field(default_factory=lambda: tuple(BROWSER_ARGS))


@dataclass(frozen=True)
class ThresholdPolicy:
    performance: int = 70
    accessibility: int = 90
    best_practices: int = 80
    seo: int = 80

    def items(self) -> list[tuple[str, int]]:
        return [(name, getattr(self, name)) for name in AUDIT_CATEGORIES]


def normalize_url(raw: str) -> str:
    value = raw.strip()
    parsed = urlparse(value)
    if not parsed.scheme:
        value = f"https://{value}"
        parsed = urlparse(value)
    if parsed.scheme not in ("http", "https"):
        raise ValueError(f"Unsupported URL scheme: {parsed.scheme}")
    if not parsed.netloc:
        raise ValueError(f"Missing host in URL: {raw}")
    path = parsed.path or "/"
    return urlunparse((parsed.scheme, parsed.netloc, path, "", parsed.query, ""))
