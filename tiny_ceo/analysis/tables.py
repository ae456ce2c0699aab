"""Keyword tables used by the classifiers and the maturity assessor.

Table order matters: for first-match classifiers it is the priority
ranking, and for count-based classifiers it breaks ties. Bump
KEYWORD_TABLES_VERSION whenever a table changes, since any edit can change
classification results for existing conversations.
"""

import re
from typing import Dict, List, Tuple

KEYWORD_TABLES_VERSION = "1.0.0"

# Industry: scored by keyword count, see classifiers.detect_industry
DEFAULT_INDUSTRY = "saas"
INDUSTRY_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "saas": ("saas", "software", "platform", "cloud", "subscription"),
    "fintech": ("finance", "financial", "payment", "banking", "investment", "money"),
    "healthcare": ("health", "medical", "patient", "doctor", "hospital", "wellness"),
    "ecommerce": ("ecommerce", "e-commerce", "marketplace", "retail", "shop", "store"),
    "ai": ("ai", "artificial intelligence", "machine learning", "ml", "neural"),
    "edtech": ("education", "learning", "student", "teacher", "course", "training"),
    "martech": ("marketing", "advertising", "campaign", "analytics", "seo"),
}

# Target audience: first match wins
DEFAULT_TARGET_AUDIENCE = "Small to medium-sized businesses"
TARGET_AUDIENCE_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "Small businesses": ("small business", "smb", "small company"),
    "Enterprise companies": ("enterprise", "large company", "corporation"),
    "Individual consumers": ("consumer", "individual", "personal use"),
    "Developers": ("developer", "engineer", "programmer", "coder"),
    "Startups": ("startup", "early-stage", "founder"),
    "Students": ("student", "university", "college", "education"),
    "Professionals": ("professional", "working", "employee"),
}

# Business model: first rule whose every keyword group has a hit wins
DEFAULT_BUSINESS_MODEL = "Subscription-based"
BUSINESS_MODEL_RULES: List[Tuple[str, Tuple[Tuple[str, ...], ...]]] = [
    ("Subscription-based (SaaS)", (("subscription", "saas", "monthly"),)),
    ("Marketplace (Commission-based)", (("marketplace", "commission"),)),
    ("Freemium", (("free",), ("premium",))),
    ("Transaction fees", (("transaction", "fee"),)),
]

# Unique value: keyed by a single trigger keyword, first match wins
DEFAULT_UNIQUE_VALUE = "Innovative solution designed for efficiency"
UNIQUE_VALUE_KEYWORDS: Dict[str, Tuple[str, ...]] = {
    "AI-powered automation and intelligence": ("ai",),
    "ML-driven insights and predictions": ("machine learning",),
    "Automated workflow and efficiency": ("automation",),
    "User-friendly and intuitive design": ("simple",),
    "Easy to use and implement": ("easy",),
    "Speed and performance": ("fast",),
    "Real-time processing and updates": ("real-time",),
    "Data-driven insights and analytics": ("analytics",),
    "Seamless integrations with existing tools": ("integration",),
    "Mobile-first experience": ("mobile",),
    "Team collaboration features": ("collaborative",),
    "Enterprise-grade security": ("secure",),
}

# Field extractors
DEFAULT_PROBLEM = "Solving a key market challenge"
PROBLEM_KEYWORDS = ("problem", "issue", "challenge", "pain", "difficult", "struggle")

DEFAULT_SOLUTION = "An innovative solution"
SOLUTION_KEYWORDS = ("solution", "platform", "product", "service", "app", "tool")

PAIN_POINT_KEYWORDS = (
    "difficult", "hard", "problem", "issue", "challenge",
    "frustrating", "time-consuming", "expensive", "complex",
)

# Maturity topic detectors, applied to lower-cased user text
TOPIC_PATTERNS: Dict[str, "re.Pattern[str]"] = {
    "mentions_problem": re.compile(
        r"problem|issue|challenge|pain|difficult|struggle|solve|help", re.IGNORECASE
    ),
    "mentions_customers": re.compile(
        r"customer|user|client|audience|target|people|artisan|seller|buyer", re.IGNORECASE
    ),
    "mentions_solution": re.compile(
        r"solution|product|platform|service|app|marketplace|tool|system", re.IGNORECASE
    ),
    "mentions_monetization": re.compile(
        r"price|pricing|revenue|money|pay|subscription|sell|buy|cost", re.IGNORECASE
    ),
}
