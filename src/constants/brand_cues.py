BRAND_CUES = [
    "offers", "provides", "specializes", "focuses on", "develops", "platform", "software", "tool", "service",
    "solution", "company", "marketplace", "app", "website", "vendor", "provider", "brand", "product",
    "alternative", "alternatives", "competitor", "competitors", "versus", "vs", "compared to", "instead of",
    "rather than", "better than", "such as", "including", "popular", "leading", "recommend", "known for",
    "pricing", "plan", "integrates", "features",
]

NEGATIVE_CONTEXT_VERBS = ["allows", "lets", "can", "should", "enables", "helps"]

GENERIC_QUOTE_PHRASES = [
    "click here", "learn more", "sign up", "get started", "read more", "find out", "discover", "explore",
    "try now", "download", "install",
]

COMPANY_SUFFIXES = [
    "inc", "inc.", "corp", "corp.", "corporation", "llc", "ltd", "ltd.", "gmbh", "ag", "sa", "plc",
    "technologies", "technology", "labs", "software", "systems", "solutions", "group", "holdings", "hq",
]

COMPANY_DOMAIN_SUFFIXES = (".com", ".io", ".ai", ".co", ".app", ".net", ".org")

SENTIMENT_POSITIVE_WORDS = [
    "recommend", "excellent", "best", "great", "outstanding", "superior", "top", "leading", "preferred",
    "ideal", "perfect", "amazing", "love", "fantastic", "impressive", "innovative", "should use",
    "highly rated", "popular choice", "go-to solution",
]

SENTIMENT_NEGATIVE_WORDS = [
    "avoid", "terrible", "bad", "poor", "worst", "disappointing", "problematic", "issues", "concerns",
    "limitations", "drawbacks", "outdated", "deprecated", "discontinued", "not recommend", "stay away",
]

RECOMMENDATION_MARKERS = [
    "recommend", "suggest", "should use", "try", "choose", "go with", "opt for", "pick", "best option",
    "top choice", "ideal solution",
]

COMPARISON_MARKERS = [
    "vs", "versus", "compared to", "compare", "against", "better than", "worse than", "similar to",
    "alternative to", "instead of", "rather than",
]

EXAMPLE_MARKERS = [
    "for example", "such as", "e.g.", "i.e.", "including", "examples include", "among others",
    "to name a few",
]
