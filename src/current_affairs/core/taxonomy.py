"""Fixed keyword and lookup tables used by the scoring and analysis stages.

Each subject "strategy" is a plain data table. Stages receive these tables
through their constructors, so alternative taxonomies can be swapped in
without subclassing.
"""

from current_affairs.core.entities import MainsPaper, SubjectArea

# Keyword dictionary per syllabus domain. Insertion order matters: it breaks
# ties when picking the primary subject and orders secondary subjects.
SYLLABUS_KEYWORDS: dict[SubjectArea, list[str]] = {
    SubjectArea.POLITY: [
        "constitution", "parliament", "judiciary", "supreme court", "high court",
        "president", "prime minister", "governor", "election", "democracy",
        "fundamental rights", "directive principles", "amendment", "article",
        "bill", "act", "legislation", "federalism", "panchayat", "municipality",
    ],
    SubjectArea.ECONOMY: [
        "gdp", "inflation", "budget", "fiscal", "monetary", "rbi", "repo rate",
        "economy", "trade", "export", "import", "manufacturing", "agriculture",
        "industry", "service sector", "employment", "poverty", "development",
        "finance", "banking", "insurance", "stock market", "investment",
    ],
    SubjectArea.GEOGRAPHY: [
        "climate", "monsoon", "river", "mountain", "plateau", "coastal",
        "natural resources", "minerals", "forest", "wildlife", "biodiversity",
        "disaster", "earthquake", "cyclone", "flood", "drought", "urbanization",
    ],
    SubjectArea.HISTORY: [
        "ancient", "medieval", "modern", "independence", "freedom struggle",
        "colonial", "british", "mughal", "maurya", "gupta", "architecture",
        "culture", "heritage", "monument", "archaeological",
    ],
    SubjectArea.ENVIRONMENT: [
        "climate change", "global warming", "pollution", "conservation",
        "sustainable", "renewable energy", "solar", "wind", "biodiversity",
        "forest", "wildlife", "ecosystem", "carbon", "emissions", "green",
    ],
    SubjectArea.SCIENCE_TECH: [
        "technology", "space", "isro", "satellite", "nuclear", "biotechnology",
        "artificial intelligence", "digital", "cyber", "innovation", "research",
        "scientific", "discovery", "health", "medicine", "vaccine",
    ],
    SubjectArea.INTERNATIONAL_RELATIONS: [
        "foreign policy", "diplomacy", "bilateral", "multilateral", "united nations",
        "g20", "brics", "saarc", "asean", "trade agreement", "treaty",
        "international relations", "global", "summit", "cooperation",
    ],
    SubjectArea.SOCIAL_ISSUES: [
        "education", "health", "poverty", "inequality", "gender", "women",
        "child", "tribal", "minority", "caste", "reservation", "welfare",
        "scheme", "social justice", "empowerment", "development",
    ],
}

DEFAULT_SUBJECT = SubjectArea.POLITY

OFFICIAL_BULLETIN_SOURCES = frozenset({"PIB"})

POLICY_KEYWORDS = [
    "cabinet", "ministry", "government", "policy", "scheme", "programme",
    "initiative", "mission", "yojana", "bill", "act", "ordinance",
    "budget", "announcement", "launched", "approved",
]

CONSTITUTIONAL_KEYWORDS = [
    "constitution", "fundamental", "article", "amendment", "supreme court",
    "high court", "judiciary", "parliament", "legislative", "executive",
    "federal", "rights", "duties", "directive principles", "judgment",
]

HIGH_VALUE_CONSTITUTIONAL_PHRASES = [
    "constitutional amendment", "supreme court judgment", "fundamental rights",
    "article 370", "basic structure", "judicial review",
]

INTERNATIONAL_KEYWORDS = [
    "g20", "g7", "brics", "saarc", "asean", "united nations", "un",
    "bilateral", "multilateral", "summit", "treaty", "agreement",
    "foreign", "diplomacy", "ambassador", "visa", "trade", "fta",
]

REGIONAL_KEYWORDS = [
    "china", "pakistan", "bangladesh", "sri lanka", "nepal", "bhutan",
    "myanmar", "usa", "russia", "japan", "australia", "uk", "eu",
]

ECONOMIC_INDICATORS = [
    "gdp", "inflation", "unemployment", "fiscal deficit", "current account",
    "exports", "imports", "fdi", "investment", "growth rate",
]

ECONOMIC_POLICIES = [
    "monetary policy", "fiscal policy", "budget", "taxation", "gst",
    "reform", "liberalization", "privatization", "disinvestment",
]

ENVIRONMENT_KEYWORDS = [
    "climate change", "global warming", "carbon", "emissions", "renewable",
    "sustainable", "conservation", "biodiversity", "pollution", "green",
]

CRITICAL_CLIMATE_TOPICS = [
    "cop", "paris agreement", "net zero", "carbon neutral", "climate summit",
    "ipcc", "unfccc", "green hydrogen", "electric vehicle",
]

MILESTONE_KEYWORDS = [
    "first", "landmark", "historic", "unprecedented", "milestone",
    "anniversary", "commemoration", "legacy", "heritage",
]

# keyword -> syllabus topic, per primary subject
SYLLABUS_TOPIC_MAP: dict[SubjectArea, dict[str, str]] = {
    SubjectArea.POLITY: {
        "parliament": "Parliamentary System",
        "judiciary": "Judicial System",
        "fundamental rights": "Fundamental Rights",
        "election": "Electoral System",
        "federalism": "Centre-State Relations",
        "local government": "Local Governance",
    },
    SubjectArea.ECONOMY: {
        "budget": "Public Finance",
        "monetary policy": "Money and Banking",
        "agriculture": "Agricultural Economy",
        "industry": "Industrial Policy",
        "trade": "International Trade",
        "employment": "Employment and Skill Development",
    },
    SubjectArea.ENVIRONMENT: {
        "climate change": "Climate Change",
        "biodiversity": "Biodiversity Conservation",
        "pollution": "Environmental Pollution",
        "renewable energy": "Renewable Energy",
        "conservation": "Environmental Conservation",
    },
}

GENERIC_TOPIC = "Current Developments"

HIGH_PROBABILITY_TAGS = ["budget", "constitutional amendment", "supreme court", "election", "scheme"]

SOURCE_QUESTION_BONUS = {"PIB": 10, "TheHindu": 5}

FACTUAL_KEYWORDS = ["launched", "approved", "announced", "first", "largest", "highest"]

ANALYTICAL_KEYWORDS = ["impact", "significance", "challenges", "implications", "analysis"]

MAINS_PAPER_MAP: dict[SubjectArea, list[MainsPaper]] = {
    SubjectArea.HISTORY: [MainsPaper.GS1],
    SubjectArea.GEOGRAPHY: [MainsPaper.GS1, MainsPaper.GS3],
    SubjectArea.SOCIAL_ISSUES: [MainsPaper.GS1, MainsPaper.GS2],
    SubjectArea.POLITY: [MainsPaper.GS2],
    SubjectArea.INTERNATIONAL_RELATIONS: [MainsPaper.GS2],
    SubjectArea.ECONOMY: [MainsPaper.GS3],
    SubjectArea.ENVIRONMENT: [MainsPaper.GS3],
    SubjectArea.SCIENCE_TECH: [MainsPaper.GS3],
    SubjectArea.ETHICS: [MainsPaper.GS4],
}

# Quick categorisation used by ContentAnalyzer.categorize_news
QUICK_PRIMARY_RULES: list[tuple[SubjectArea, list[str]]] = [
    (SubjectArea.POLITY, ["parliament", "constitution", "judiciary"]),
    (SubjectArea.ECONOMY, ["economy", "gdp", "inflation"]),
    (SubjectArea.ENVIRONMENT, ["climate", "environment", "pollution"]),
    (SubjectArea.INTERNATIONAL_RELATIONS, ["foreign", "bilateral", "summit"]),
]

QUICK_SECONDARY_KEYWORDS: dict[SubjectArea, list[str]] = {
    SubjectArea.ECONOMY: ["economic", "financial", "trade", "market"],
    SubjectArea.ENVIRONMENT: ["environmental", "climate", "sustainable"],
    SubjectArea.SCIENCE_TECH: ["technology", "digital", "innovation"],
    SubjectArea.SOCIAL_ISSUES: ["social", "welfare", "education", "health"],
}

QUICK_TOPIC_MAP: dict[str, list[str]] = {
    "constitutional": ["Constitutional Framework", "Fundamental Rights"],
    "parliament": ["Parliamentary System", "Legislative Process"],
    "judiciary": ["Judicial System", "Supreme Court"],
    "economy": ["Economic Development", "Public Finance"],
    "climate": ["Climate Change", "Environmental Conservation"],
}

# (trigger keywords, topic, subject, connection)
STATIC_CONNECTION_RULES: list[tuple[list[str], str, SubjectArea, str]] = [
    (["article", "amendment"], "Constitutional Framework", SubjectArea.POLITY,
     "Links to constitutional provisions and amendments"),
    (["independence", "colonial", "historical"], "Modern Indian History", SubjectArea.HISTORY,
     "Historical evolution and precedents"),
    (["gdp", "inflation", "fiscal"], "Economic Concepts", SubjectArea.ECONOMY,
     "Basic economic principles and theories"),
    (["climate", "sustainable", "conservation"], "Environmental Geography", SubjectArea.GEOGRAPHY,
     "Environmental concepts and climate systems"),
]

SUBJECT_DEFAULT_CONNECTIONS: dict[SubjectArea, tuple[str, str]] = {
    SubjectArea.POLITY: ("Indian Constitution", "Fundamental principles and institutional framework"),
    SubjectArea.ECONOMY: ("Economic Survey", "Annual economic trends and policy recommendations"),
    SubjectArea.ENVIRONMENT: ("Environmental Governance", "Environmental laws, institutions and international commitments"),
    SubjectArea.INTERNATIONAL_RELATIONS: ("India's Foreign Policy", "Principles and evolution of India's external engagement"),
}

GENERAL_DEFAULT_CONNECTION = ("Governance and Policy", "Broader themes of governance, policy-making and public administration")

PYQ_BY_SUBJECT: dict[SubjectArea, list[str]] = {
    SubjectArea.POLITY: [
        "2023 Prelims - Q on Constitutional amendments and federal structure",
        "2022 Mains GS2 - Role of judiciary in governance",
        "2021 Prelims - Fundamental rights and reasonable restrictions",
    ],
    SubjectArea.ECONOMY: [
        "2023 Prelims - Questions on monetary policy and inflation",
        "2022 Mains GS3 - Economic recovery post-pandemic",
        "2021 Prelims - Government schemes and fiscal policy",
    ],
    SubjectArea.ENVIRONMENT: [
        "2023 Prelims - Climate change commitments and COP",
        "2022 Mains GS3 - Sustainable development and conservation",
        "2021 Prelims - Environmental laws and biodiversity",
    ],
}

GENERIC_PYQ = "Previous year questions on current developments"

PYQ_BY_KEYWORD: dict[str, str] = {
    "supreme court": "2022 Prelims - Supreme Court judgments on fundamental rights",
    "economy": "2023 Mains GS3 - Economic reforms and growth",
}

# (regex, theme name) applied to titles and key points
THEME_PATTERNS: list[tuple[str, str]] = [
    (r"climate\s+change", "Climate Change"),
    (r"economic\s+growth", "Economic Growth"),
    (r"judicial\s+review", "Judicial Review"),
    (r"foreign\s+policy", "Foreign Policy"),
    (r"digital\s+india", "Digital India"),
    (r"sustainable\s+development", "Sustainable Development"),
    (r"constitutional\s+amendment", "Constitutional Amendment"),
    (r"social\s+justice", "Social Justice"),
    (r"federalism", "Federalism"),
    (r"governance", "Governance"),
]

FACTUAL_THEME_KEYWORDS = [
    "scheme", "mission", "project", "agreement", "summit",
    "launched", "approved", "statistics", "ranking",
]

ANALYTICAL_THEME_KEYWORDS = [
    "governance", "development", "challenge", "impact",
    "policy", "reform", "justice", "relations",
]

THEME_KEY_POINTS: dict[str, list[str]] = {
    "Climate Change": [
        "India's climate commitments and net-zero targets",
        "International climate negotiations and COP outcomes",
        "Renewable energy transition and green initiatives",
    ],
    "Economic Growth": [
        "GDP growth projections and economic indicators",
        "Fiscal and monetary policy measures",
        "Sectoral performance and challenges",
    ],
    "Judicial Review": [
        "Recent Supreme Court judgments on constitutional matters",
        "Balance between judicial activism and restraint",
        "Impact on governance and policy implementation",
    ],
}

SUBJECT_EMOJI: dict[SubjectArea, str] = {
    SubjectArea.POLITY: "⚖️",
    SubjectArea.ECONOMY: "💹",
    SubjectArea.ENVIRONMENT: "🌿",
    SubjectArea.SCIENCE_TECH: "🔬",
    SubjectArea.INTERNATIONAL_RELATIONS: "🌐",
    SubjectArea.GEOGRAPHY: "🗺️",
    SubjectArea.HISTORY: "📜",
    SubjectArea.SOCIAL_ISSUES: "👥",
    SubjectArea.ART_CULTURE: "🎭",
    SubjectArea.ETHICS: "🤝",
}

# Daily update buckets keyed by primary subject; other subjects fall back to content keywords
UPDATE_BUCKETS: dict[SubjectArea, str] = {
    SubjectArea.POLITY: "government",
    SubjectArea.SOCIAL_ISSUES: "government",
    SubjectArea.ECONOMY: "economy",
    SubjectArea.INTERNATIONAL_RELATIONS: "international",
    SubjectArea.ENVIRONMENT: "environment",
    SubjectArea.GEOGRAPHY: "environment",
}

UPDATE_FALLBACK_KEYWORDS: list[tuple[str, str]] = [
    ("government", "government"),
    ("economy", "economy"),
]
