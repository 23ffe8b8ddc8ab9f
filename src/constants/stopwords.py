ENGLISH_STOPWORDS = {
    # articles, prepositions, pronouns
    "a", "an", "the", "and", "or", "but", "in", "on", "at", "to", "for", "of", "with", "by", "from", "about",
    "into", "through", "over", "under", "above", "below", "up", "down", "out", "off", "away", "back", "here", "there",
    "i", "me", "my", "we", "us", "our", "you", "your", "he", "him", "his", "she", "her", "they", "them", "their",
    "it", "its", "this", "that", "these", "those", "what", "which", "who", "whom", "whose",
    # verbs
    "is", "am", "are", "was", "were", "be", "been", "being", "have", "has", "had", "do", "does", "did", "will", "would",
    "could", "should", "may", "might", "can", "must", "shall", "go", "get", "make", "take", "come", "see", "know",
    "use", "uses", "used", "using", "work", "works", "help", "helps", "create", "build", "find", "think", "look",
    "try", "need", "want", "start", "show", "run", "provide", "provides", "include", "includes", "including",
    "offer", "offers", "consider", "considering", "choose", "choosing", "compare", "allow", "allows", "let", "lets",
    "enable", "enables", "focus", "track", "manage", "automate", "integrate", "improve", "explore", "discover",
    # nouns that LLM answers capitalize at sentence start
    "time", "year", "way", "day", "thing", "world", "life", "part", "place", "case", "point", "company", "number",
    "group", "problem", "fact", "business", "service", "market", "name", "idea", "information", "level", "result",
    "change", "reason", "research", "experience", "system", "program", "process", "plan", "course", "example",
    "option", "options", "choice", "feature", "features", "price", "pricing", "cost", "support", "summary",
    "conclusion", "overview", "note", "notes", "tip", "tips", "step", "steps", "pros", "cons", "benefits",
    "key", "best", "top", "free", "paid", "basic", "standard", "premium", "enterprise", "starter", "professional",
    # adjectives and adverbs
    "new", "old", "good", "bad", "small", "large", "big", "long", "short", "high", "low", "right", "left", "next",
    "last", "first", "second", "third", "early", "late", "important", "great", "real", "different", "same", "own",
    "current", "available", "total", "general", "recent", "easy", "hard", "simple", "complex", "fast", "strong",
    "popular", "powerful", "robust", "reliable", "affordable", "flexible", "scalable", "comprehensive", "advanced",
    "several", "many", "few", "much", "more", "most", "less", "all", "some", "any", "no", "not", "every", "each",
    "other", "another", "both", "either", "neither", "such", "very", "too", "quite", "really", "also", "just",
    "only", "even", "still", "yet", "already", "often", "always", "never", "sometimes", "usually", "typically",
    "finally", "additionally", "however", "overall", "ultimately", "alternatively", "similarly", "meanwhile",
    # conjunctions and subordinators
    "while", "when", "where", "how", "why", "because", "so", "therefore", "thus", "though", "although", "unless",
    "if", "whether", "than", "as", "like", "unlike", "besides", "except", "without", "within", "between", "among",
    "against", "during", "before", "after", "since", "until", "then", "once", "instead", "rather", "versus", "vs",
    "yes", "ok", "okay", "please", "thanks", "hello", "hi",
    # calendar words; singular weekdays stay out because "monday" is a brand alias
    "mondays", "tuesdays", "wednesdays", "thursdays", "fridays", "saturdays", "sundays",
    "january", "february", "march", "april", "june", "july", "august", "september", "october",
    "november", "december", "weekend", "weekends",
}

BUSINESS_GENERIC_TERMS = {
    # technology
    "solution", "solutions", "platform", "platforms", "software", "application", "applications", "system", "systems",
    "tool", "tools", "service", "services", "product", "products", "technology", "technologies", "digital", "online",
    "cloud", "web", "mobile", "app", "apps", "website", "websites", "internet", "network", "data", "database",
    "server", "client", "clients", "user", "users", "customer", "customers", "api", "apis", "interface",
    "framework", "library", "integration", "integrations", "automation", "workflow", "workflows", "dashboard",
    # business
    "business", "businesses", "company", "companies", "organization", "organizations", "enterprise", "enterprises",
    "management", "marketing", "sales", "development", "design", "analytics", "analysis", "report", "reports",
    "performance", "optimization", "security", "privacy", "compliance", "collaboration", "communication",
    "productivity", "efficiency", "scalability", "reliability", "innovation", "insights", "engagement",
    "conversion", "roi", "kpi", "metrics", "tracking", "monitoring", "reporting", "personalization",
    # marketing and sales
    "campaign", "campaigns", "audience", "content", "email", "emails", "newsletter", "blog", "social", "media",
    "video", "brand", "brands", "branding", "seo", "sem", "ppc", "traffic", "lead", "leads", "prospect", "pipeline",
    "revenue", "vendor", "vendors", "partner", "partners", "channel", "channels", "ecommerce", "crm", "erp", "cms",
    # support and accounts
    "ticket", "tickets", "chat", "feedback", "review", "reviews", "rating", "ratings", "documentation", "guide",
    "tutorial", "training", "onboarding", "setup", "account", "accounts", "team", "teams", "admin",
}

GENERIC_CATEGORY_PHRASES = {
    "marketing automation", "email automation", "marketing platform", "email platform", "automation platform",
    "marketing software", "email software", "marketing solution", "marketing tools", "email service",
    "customer relationship management", "crm platform", "crm software", "crm solution", "crm system", "crm tools",
    "sales platform", "sales software", "sales automation", "lead generation", "lead management",
    "contact management", "pipeline management",
    "analytics platform", "analytics software", "analytics tools", "data analytics", "web analytics",
    "marketing analytics", "business analytics", "business intelligence", "reporting tools",
    "customer data", "customer experience", "customer journey", "customer engagement", "customer support",
    "content marketing", "content management", "content strategy", "content calendar",
    "social media", "social media management", "social listening", "social media marketing",
    "search engine optimization", "seo tools", "digital marketing", "online marketing", "inbound marketing",
    "email marketing", "affiliate marketing", "influencer marketing", "conversion optimization",
    "project management", "task management", "workflow management", "collaboration tools", "team collaboration",
    "productivity tools", "time tracking", "resource management",
    "communication platform", "messaging platform", "video conferencing", "team communication",
    "integration platform", "workflow automation", "business automation", "process automation",
    "enterprise software", "cloud platform", "cloud software", "saas platform", "saas software",
}

CONNECTIVE_WORDS = {"the", "and", "or", "but", "for", "with", "by", "from", "to", "in", "on", "at"}

STRICT_STOPWORDS = {
    # tech giants mentioned as infrastructure, not as competitors
    "google", "microsoft", "apple", "amazon", "meta", "facebook", "ibm", "oracle",
    # descriptors LLMs attach to product names
    "pro", "plus", "premium", "enterprise", "basic", "standard", "free", "lite", "suite", "cloud", "online",
    "ai", "api", "app", "saas", "b2b", "b2c", "smb", "usa", "us", "uk", "eu",
}
