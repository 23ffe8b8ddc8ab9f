import logging
from dataclasses import dataclass
from typing import Dict, List, Set

from models.domain import DetectionStrategy
from services.brand_detection import (
    BrandCatalogEntry,
    OrgBrandProfile,
    analyze_response,
)

logging.basicConfig(level=logging.WARNING)
logger = logging.getLogger(__name__)

TEST_CASES = [
    {
        "name": "CRM comparison with org product line",
        "org": "HubSpot",
        "catalog": [{"name": "HubSpot", "is_org_brand": True, "variants": ["HubSpot Marketing Hub"]}],
        "text": "While Salesforce CRM is popular, our HubSpot Marketing Hub offers better value.",
        "expected_brands": {"HubSpot Marketing Hub"},
        "expected_competitors": {"Salesforce CRM"},
    },
    {
        "name": "Listed alternatives",
        "org": "Pipedrive",
        "catalog": [{"name": "Pipedrive", "is_org_brand": True, "variants": []}],
        "text": (
            "Popular alternatives to Pipedrive include Zoho CRM, Freshworks and HubSpot. "
            "Zoho CRM offers a free tier, while HubSpot provides strong marketing tools."
        ),
        "expected_brands": {"Pipedrive"},
        "expected_competitors": {"Zoho CRM", "Freshworks", "HubSpot"},
    },
    {
        "name": "Feature description without brands",
        "org": "Acme Analytics",
        "catalog": [{"name": "Acme Analytics", "is_org_brand": True, "variants": ["Acme"]}],
        "text": "Using an all-in-one customer platform improves experience and reduces churn.",
        "expected_brands": set(),
        "expected_competitors": set(),
    },
    {
        "name": "Private catalog competitor",
        "org": "Taskly",
        "catalog": [
            {"name": "Taskly", "is_org_brand": True, "variants": []},
            {"name": "Plannery", "is_org_brand": False, "variants": ["Plannery App"]},
        ],
        "text": "For small teams, Plannery is a lightweight option. Taskly offers deeper reporting.",
        "expected_brands": {"Taskly"},
        "expected_competitors": {"Plannery"},
    },
    {
        "name": "Markdown with citations",
        "org": "Notion",
        "catalog": [{"name": "Notion", "is_org_brand": True, "variants": []}],
        "text": (
            "## Best tools\n\n1. **Asana** is a leading project platform [1]\n"
            "2. [Trello](https://www.trello.com/pricing) offers simple boards [2]\n"
            "3. Notion is flexible for docs."
        ),
        "expected_brands": {"Notion"},
        "expected_competitors": {"Asana", "Trello"},
    },
]


@dataclass
class CaseScore:
    name: str
    strategy: str
    precision: float
    recall: float
    false_positives: List[str]
    missed: List[str]
    brands_correct: bool


def build_profile(case: Dict) -> OrgBrandProfile:
    catalog = [BrandCatalogEntry(**entry) for entry in case["catalog"]]
    return OrgBrandProfile.from_catalog(case["org"], catalog)


def score_case(case: Dict, strategy: DetectionStrategy) -> CaseScore:
    result = analyze_response(case["text"], build_profile(case), strategy=strategy)
    found: Set[str] = set(result.competitors)
    expected: Set[str] = case["expected_competitors"]
    hits = found & expected

    precision = len(hits) / len(found) if found else (1.0 if not expected else 0.0)
    recall = len(hits) / len(expected) if expected else 1.0
    return CaseScore(
        name=case["name"],
        strategy=result.metadata.get("strategy_used") or strategy.value,
        precision=round(precision, 2),
        recall=round(recall, 2),
        false_positives=sorted(found - expected),
        missed=sorted(expected - found),
        brands_correct=set(result.brands) == case["expected_brands"],
    )


def run_evaluation() -> Dict[str, List[CaseScore]]:
    print("=" * 80)
    print("BRAND/COMPETITOR DETECTION EVALUATION")
    print("=" * 80)

    all_scores: Dict[str, List[CaseScore]] = {s.value: [] for s in DetectionStrategy}
    for case in TEST_CASES:
        print(f"\nTEST: {case['name']}")
        for strategy in DetectionStrategy:
            score = score_case(case, strategy)
            all_scores[strategy.value].append(score)
            print(
                f"  {strategy.value:<12} used={score.strategy:<12} "
                f"P={score.precision:.2f} R={score.recall:.2f} brands_ok={score.brands_correct}"
            )
            if score.false_positives:
                print(f"    false positives: {score.false_positives}")
            if score.missed:
                print(f"    missed: {score.missed}")

    print(f"\n{'=' * 80}")
    print("SUMMARY")
    print(f"{'=' * 80}")
    for strategy, scores in all_scores.items():
        precision = sum(s.precision for s in scores) / len(scores)
        recall = sum(s.recall for s in scores) / len(scores)
        brands_ok = sum(1 for s in scores if s.brands_correct)
        print(f"{strategy}: precision {precision:.2f}, recall {recall:.2f}, brands {brands_ok}/{len(scores)}")
    return all_scores


if __name__ == "__main__":
    run_evaluation()
