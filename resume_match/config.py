"""
Configuration for the keyword-based resume matching system.
Adjust category weights and keyword lists here.
"""

# Similarity above this value counts as a fuzzy match (strictly greater)
FUZZY_THRESHOLD = 0.85

# Final score bounds. Partial matches never score below the floor.
SCORE_FLOOR = 40
SCORE_CEILING = 100

# Tokens shorter than this are discarded as noise
MIN_TOKEN_LENGTH = 3

# Catch-all category for unclassified tokens (never scored)
OTHER_CATEGORY = "other"

# Category weights, in declaration order. Order decides classification
# tie-breaks and the order of match details.
CATEGORY_WEIGHTS = {
    "technical": 2.0,
    "soft": 1.5,
    "industry": 1.0,
    OTHER_CATEGORY: 0.0,
}

# Canonical keywords per category. Each keyword must be a single lowercase
# alphanumeric token that tokenization can produce, and may appear in only
# one category.
CATEGORY_KEYWORDS = {
    "technical": [
        "python",
        "java",
        "javascript",
        "typescript",
        "react",
        "angular",
        "vue",
        "nodejs",
        "django",
        "fastapi",
        "api",
        "sql",
        "mysql",
        "postgresql",
        "mongodb",
        "redis",
        "docker",
        "kubernetes",
        "aws",
        "azure",
        "gcp",
        "linux",
        "github",
        "html",
        "css",
        "graphql",
        "pandas",
        "pyspark",
        "numpy",
        "tensorflow",
        "pytorch",
        "hadoop",
        "kafka",
        "terraform",
        "jenkins",
        "golang",
        "kotlin",
        "tableau",
        "jira",
        "agile",
        "scrum",
    ],
    "soft": [
        "leadership",
        "teamwork",
        "collaboration",
        "creativity",
        "adaptability",
        "mentoring",
        "negotiation",
        "presentation",
        "management",
        "organization",
        "accountability",
    ],
    "industry": [
        "finance",
        "fintech",
        "healthcare",
        "insurance",
        "ecommerce",
        "logistics",
        "manufacturing",
        "telecom",
        "saas",
        "blockchain",
        "cybersecurity",
        "marketing",
        "pharmaceutical",
        "gdpr",
        "hipaa",
    ],
    OTHER_CATEGORY: [],
}

# LLM configuration for the alternate scoring strategy
LLM_CONFIG = {
    "model": "gpt-4",
    "temperature": 0.7,
    "max_tokens": 1000,
    "max_retries": 3,
}

# Score reported when the LLM response contains no percentage
LLM_DEFAULT_SCORE = 50

# Document types the text extractor understands
PDF_MIME_TYPE = "application/pdf"
DOCX_MIME_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"
TEXT_MIME_TYPE = "text/plain"

SUPPORTED_MIME_TYPES = {
    ".pdf": PDF_MIME_TYPE,
    ".docx": DOCX_MIME_TYPE,
    ".txt": TEXT_MIME_TYPE,
}

# Upload size cap for the HTTP API
MAX_UPLOAD_BYTES = 10 * 1024 * 1024
