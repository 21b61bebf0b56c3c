"""
Static guardrail tables: allowed topics, off-topic vocabulary and the regex
lists used by the safety checks and the intent classifier.

Everything here is built once at import time and exposed as tuples/frozensets.
"""

import re

from wealthchat.model_interface.types import TopicDefinition

_I = re.IGNORECASE


def _topic(name, keywords, patterns, priority):
    return TopicDefinition(
        name=name,
        keywords=frozenset(keywords),
        patterns=tuple(re.compile(p, _I) for p in patterns),
        priority=priority,
    )


ALLOWED_TOPICS = (
    _topic(
        "savings",
        ["save", "saving", "savings", "emergency fund", "rainy day", "put away", "set aside"],
        [r"how\s+(?:much|can|do|should)\s+(?:i|we)\s+save", r"saving\s+(?:money|rate|goal)"],
        1,
    ),
    _topic(
        "investing",
        ["invest", "investment", "portfolio", "stocks", "bonds", "etf", "401k", "ira", "roth",
         "index fund", "mutual fund", "compound interest", "returns", "market"],
        [r"(?:how|where|should)\s+(?:i|we)\s+invest", r"investment\s+(?:strategy|advice|tip)"],
        1,
    ),
    _topic(
        "retirement",
        ["retire", "retirement", "pension", "social security", "nest egg", "golden years"],
        [r"(?:when|how)\s+(?:can|will|should)\s+(?:i|we)\s+retire", r"retirement\s+(?:age|plan|goal|savings)"],
        1,
    ),
    _topic(
        "wealth",
        ["wealth", "rich", "wealthy", "net worth", "millionaire", "financial freedom", "fire",
         "financial independence"],
        [r"how\s+(?:rich|wealthy)\s+(?:can|will)\s+(?:i|we)", r"(?:build|grow|accumulate)\s+wealth"],
        1,
    ),
    _topic(
        "budgeting",
        ["budget", "budgeting", "spending", "expenses", "cost", "money management", "track",
         "spending habits"],
        [r"(?:create|make|help\s+with)\s+(?:a\s+)?budget", r"(?:reduce|cut|lower)\s+(?:spending|expenses)"],
        1,
    ),
    _topic(
        "spending_control",
        ["swipeswipe", "swipe swipe", "impulse", "control spending", "overspending",
         "online shopping", "extension"],
        [r"(?:how|what)\s+(?:does|is)\s+swipeswipe", r"swipeswipe\s+(?:help|save|work)"],
        1,
    ),
    _topic(
        "projection",
        ["projection", "forecast", "predict", "calculate", "estimate", "future", "growth", "years"],
        [r"(?:how|what)\s+(?:much|will)\s+(?:i|my\s+money)\s+(?:have|grow|be)",
         r"(?:5|10|15|20|25|30|35)\s+years"],
        1,
    ),
    _topic(
        "debt",
        ["debt", "loan", "mortgage", "credit card", "interest rate", "pay off", "owe"],
        [r"pay\s+off\s+(?:debt|loan|credit)", r"(?:reduce|eliminate)\s+debt"],
        2,
    ),
    _topic(
        "income",
        ["income", "salary", "wage", "paycheck", "raise", "bonus", "side hustle", "passive income"],
        [r"(?:increase|grow|boost)\s+income",
         r"(?:how|where)\s+(?:to|can)\s+(?:make|earn)\s+(?:more\s+)?money"],
        2,
    ),
    _topic(
        "financial_education",
        ["learn", "understand", "explain", "what is", "how does", "financial literacy", "money basics"],
        [r"(?:what|how)\s+(?:is|does|are)\s+(?:compound\s+interest|investing|stocks|bonds|diversification)"],
        2,
    ),
    _topic(
        "recalculate",
        ["start over", "new projection", "recalculate", "redo", "again", "change", "update"],
        [r"(?:start|do)\s+(?:over|again)", r"(?:new|different)\s+(?:projection|calculation)"],
        1,
    ),
)

FINANCIAL_INDICATORS = (
    "money", "dollar", "save", "invest", "rich", "wealth", "retire", "income", "budget",
    "percent", "growth", "return", "interest", "compound", "year",
)

OFF_TOPIC_KEYWORDS = (
    # programming
    "python", "javascript", "java", "coding", "programming", "code", "developer", "software",
    "react", "angular", "vue", "node", "database", "api", "github", "algorithm",
    # weather
    "weather", "temperature", "rain", "sunny", "cloudy", "forecast", "climate",
    # sports
    "football", "basketball", "soccer", "baseball", "hockey", "tennis", "golf",
    "game", "score", "team", "player", "championship", "league", "nfl", "nba", "mlb",
    # entertainment
    "movie", "film", "show", "series", "actor", "actress", "celebrity", "music", "song",
    "concert", "album", "artist", "netflix", "streaming", "tv",
    # politics
    "president", "election", "vote", "democrat", "republican", "congress", "senate",
    "politics", "political", "government", "law", "legislation", "policy",
    # food
    "recipe", "cook", "bake", "ingredient", "restaurant", "food", "meal", "dinner",
    # travel
    "vacation", "trip", "travel", "flight", "hotel", "destination", "tourist",
    # non-financial health
    "doctor", "medical", "symptom", "disease", "treatment", "medicine", "hospital",
    "diagnosis", "prescription",
    # relationships
    "dating", "relationship", "marriage", "divorce", "boyfriend", "girlfriend",
    # general knowledge / homework
    "history", "geography", "science", "biology", "chemistry", "physics", "math",
    "homework", "essay", "school", "university", "exam",
)

# Redirect flavour for off-topic messages, checked in order.
OFF_TOPIC_CATEGORIES = (
    ("programming", ("python", "javascript", "code", "programming", "java", "react")),
    ("weather", ("weather", "rain", "sunny", "temperature")),
    ("sports", ("game", "score", "team", "player", "sports", "football")),
    ("politics", ("president", "election", "government", "politics", "democrat", "republican")),
)

JAILBREAK_PATTERNS = tuple(re.compile(p, _I) for p in (
    r"ignore\s+(?:all\s+)?(?:previous|prior|above)\s+(?:instructions|prompts)",
    r"you\s+are\s+now\s+(?:an?\s+)?(?:dan|dango|evil|unrestricted)",
    r"pretend\s+you\s+(?:are|have)\s+no\s+(?:restrictions|limits|rules)",
    r"act\s+as\s+(?:if|though)\s+you\s+(?:have|were)\s+no\s+(?:guidelines|ethics)",
    r"disregard\s+(?:your|all)\s+(?:programming|training|rules)",
    r"override\s+(?:your|all)\s+(?:safety|ethical)\s+(?:protocols|guidelines)",
    r"(?:roleplay|pretend)\s+(?:as|you're)\s+(?:a\s+)?(?:different|other|new)\s+(?:ai|bot|assistant)",
    r"what\s+would\s+(?:dan|unrestricted\s+ai)\s+say",
    r"(?:bypass|circumvent|disable)\s+(?:your|all)\s+(?:filters|restrictions|safety)",
    r"you\s+(?:must|have\s+to|should)\s+(?:answer|respond\s+to)\s+(?:everything|anything)",
))

PII_PATTERNS = tuple(re.compile(p, _I) for p in (
    r"(?:what\s+is|give\s+me|share|tell\s+me)\s+(?:your|my)\s+(?:ssn|social\s+security)",
    r"(?:bank|credit\s+card)\s+(?:number|account|details)",
    r"\b(?:passwords?|pin|security\s+(?:code|questions?))\b",
    r"(?:mother'?s?\s+maiden|birthplace|first\s+pet)",
))

INAPPROPRIATE_PATTERNS = tuple(re.compile(p, _I) for p in (
    r"\b(?:fuck|shit|ass|damn|bitch|bastard)\b",
    r"\b(?:kill|murder|suicide|harm)\b",
    r"\b(?:illegal|drugs|weapons?)\b",
))

FINANCIAL_ADVICE_PATTERNS = tuple(re.compile(p, _I) for p in (
    r"should\s+i\s+(?:buy|sell|invest|put)",
    r"(?:what|which)\s+stocks?\s+(?:should|to)\s+(?:buy|invest)",
    r"(?:recommend|suggest)\s+(?:a|any)\s+(?:stock|investment|fund)",
    r"is\s+(?:this|it)\s+a\s+good\s+(?:time|idea)\s+to\s+(?:buy|sell|invest)",
))

# Order matters: the first matching label wins.
INTENT_PATTERNS = tuple((label, re.compile(p, _I)) for label, p in (
    ("restart", r"(?:start\s+over|new\s+projection|recalculate)"),
    ("product_info", r"(?:how|what)\s+(?:does|is)\s+(?:swipeswipe|this)"),
    ("education", r"(?:what|how)\s+(?:is|does)\s+(?:compound|interest)"),
    ("retirement", r"(?:retire|retirement)"),
    ("savings_tips", r"(?:save|saving|budget)"),
    ("investment", r"(?:invest|stock|market|portfolio)"),
    ("closing", r"(?:thank|thanks|bye|goodbye)"),
    ("help", r"(?:help|assist|support)"),
))
