"""Prompt templates and candidate labels for content assessment.

Zero-shot classification appends a short hypothesis cue to the text and
scores it against a candidate label set. Two label sets are used per
submission: content type and factuality.

The generative assessor receives a system instruction and the raw text as
the user turn, and must answer with a JSON object.
"""

NEWS_ARTICLE_LABEL = "news article"

CONTENT_TYPE_LABELS = [
    NEWS_ARTICLE_LABEL,
    "opinion piece",
    "social media post",
    "advertisement",
    "blog post",
]

FACTUALITY_LABELS = [
    "factual",
    "misleading",
    "false",
    "opinion",
    "unverified",
]

# Labels the score math cannot do without
REQUIRED_FACTUALITY_LABELS = ["factual", "misleading", "false", "opinion"]

CONTENT_TYPE_SUFFIX = "\nThis text is:"
FACTUALITY_SUFFIX = "\nThis content is:"

ASSESSOR_SYSTEM_PROMPT = '''You are a fact-checking assistant. Analyze the following content and provide a detailed assessment of its credibility, factuality, and potential biases.

Return the result as a single JSON object with these fields:
{
    "credibilityScore": 0-100,
    "truthScore": 0-100,
    "confidence": 0-100,
    "analysis": "short explanation of the assessment",
    "biases": ["detected bias", ...]
}

credibilityScore measures overall trustworthiness, truthScore measures how
likely the factual claims are true, and confidence is your certainty in the
assessment. All three must be numbers.'''
