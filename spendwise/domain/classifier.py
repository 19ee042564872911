"""Rule-based expense priority classification.

This module contains the functional core for classification:
- No I/O operations
- No side effects
- Deterministic: identical inputs always give the identical label

Classification runs in two stages. Feature extraction evaluates a fixed panel
of keyword patterns against the lower-cased description (plus exact category
checks) and buckets the amount. Scoring then sums a fixed set of weighted
rules and maps the score onto one of four priority tiers.

The weights and thresholds are fixed constants. Previously classified data
depends on them, so they must not be tuned.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Any

from spendwise.domain.models import Priority

logger = logging.getLogger(__name__)

URGENT_PATTERN = re.compile(r"urgent|emergency|critical|immediate|asap")
MEDICAL_PATTERN = re.compile(r"medical|doctor|hospital|medicine|health|prescription")
UTILITY_PATTERN = re.compile(r"rent|electricity|water|gas|internet|phone")
FOOD_PATTERN = re.compile(r"food|grocery|groceries|meal|breakfast|lunch|dinner")
TRANSPORT_PATTERN = re.compile(r"transport|fuel|petrol|diesel|bus|train|taxi|uber")
EDUCATION_PATTERN = re.compile(r"education|school|college|course|books|tuition")
LUXURY_PATTERN = re.compile(r"luxury|premium|brand|designer|expensive")
ENTERTAINMENT_PATTERN = re.compile(r"entertainment|movie|game|party|club|bar|concert")
SHOPPING_PATTERN = re.compile(r"shopping|clothes|fashion|accessories")
DINING_PATTERN = re.compile(r"restaurant|cafe|coffee|dine|dining")
SUBSCRIPTION_PATTERN = re.compile(r"subscription|netflix|spotify|prime|membership")

# Narrower than URGENT_PATTERN; only used by the high-value food rule
FOOD_EMERGENCY_PATTERN = re.compile(r"emergency|urgent")

HIGH_AMOUNT_THRESHOLD = 5000
MEDIUM_AMOUNT_THRESHOLD = 1000

MOST_IMPORTANT_SCORE = 9
IMPORTANT_SCORE = 5
LESS_IMPORTANT_SCORE = 2

_LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_DECIMAL_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}


@dataclass(frozen=True)
class ExpenseFeatures:
    """Immutable feature vector derived from one expense candidate."""

    amount: float
    category: str
    description: str

    is_urgent: bool
    is_medical: bool
    is_utility: bool
    is_food: bool
    is_transport: bool
    is_education: bool

    is_luxury: bool
    is_entertainment: bool
    is_shopping: bool
    is_dining: bool
    is_subscription: bool

    is_high_amount: bool
    is_medium_amount: bool
    is_low_amount: bool


@dataclass(frozen=True)
class Classification:
    """Immutable classification result with the evidence behind it."""

    features: ExpenseFeatures
    score: int
    priority: Priority


def parse_amount(value: Any) -> float:
    """Coerce an amount to a float, leniently.

    Numbers pass through. Strings are read from their leading numeric prefix,
    so "12.50 INR" becomes 12.5. Anything else becomes NaN.

    Args:
        value: Raw amount as entered.

    Returns:
        Parsed amount, or NaN if no number can be read.
    """
    if isinstance(value, bool) or value is None:
        return math.nan

    if isinstance(value, (int, float)):
        return float(value)

    match = _LEADING_NUMBER.match(str(value).strip())
    if not match:
        return math.nan
    return float(match.group(0))


def coerce_number(value: Any) -> float:
    """Coerce a value to a float as a whole-string numeric cast would.

    Stricter than parse_amount about trailing text ("12.5kg" is NaN) but
    also reads "Infinity" and 0x/0o/0b integer literals. Amount buckets
    are decided on this value.

    Args:
        value: Raw amount as entered.

    Returns:
        Coerced number, or NaN if the whole value is not numeric.
    """
    if isinstance(value, bool) or value is None:
        return math.nan

    if isinstance(value, (int, float)):
        return float(value)

    text = str(value).strip()
    if _DECIMAL_NUMBER.fullmatch(text):
        return float(text)
    if text in ("Infinity", "+Infinity"):
        return math.inf
    if text == "-Infinity":
        return -math.inf

    base = _RADIX_PREFIXES.get(text[:2].lower())
    digits = text[2:]
    if base and digits.isalnum():
        try:
            return float(int(digits, base))
        except ValueError:
            return math.nan
    return math.nan


def extract_features(amount: Any, category: str | None, description: str | None) -> ExpenseFeatures:
    """Compute the feature vector for an expense candidate.

    Args:
        amount: Expense amount (coerced with coerce_number).
        category: Category label; None is treated as empty.
        description: Free-text description; None is treated as empty.

    Returns:
        ExpenseFeatures with every keyword and amount flag evaluated.
    """
    value = coerce_number(amount)
    desc = (description or "").lower()
    cat = (category or "").lower()

    # NaN fails every comparison, so an unreadable amount sets no bucket
    return ExpenseFeatures(
        amount=value,
        category=cat,
        description=desc,
        is_urgent=bool(URGENT_PATTERN.search(desc)),
        is_medical=bool(MEDICAL_PATTERN.search(desc)) or cat == "medical",
        is_utility=bool(UTILITY_PATTERN.search(desc)) or cat in ("utilities", "rent"),
        is_food=bool(FOOD_PATTERN.search(desc)) or cat == "food",
        is_transport=bool(TRANSPORT_PATTERN.search(desc)) or cat == "transport",
        is_education=bool(EDUCATION_PATTERN.search(desc)) or cat == "education",
        is_luxury=bool(LUXURY_PATTERN.search(desc)),
        is_entertainment=bool(ENTERTAINMENT_PATTERN.search(desc)) or cat == "entertainment",
        is_shopping=bool(SHOPPING_PATTERN.search(desc)) or cat == "shopping",
        is_dining=bool(DINING_PATTERN.search(desc)),
        is_subscription=bool(SUBSCRIPTION_PATTERN.search(desc)),
        is_high_amount=value > HIGH_AMOUNT_THRESHOLD,
        is_medium_amount=MEDIUM_AMOUNT_THRESHOLD <= value <= HIGH_AMOUNT_THRESHOLD,
        is_low_amount=0 < value < MEDIUM_AMOUNT_THRESHOLD,
    )


def score_features(features: ExpenseFeatures) -> int:
    """Sum the weighted classification rules.

    Every rule is evaluated; the score may be negative.

    Args:
        features: Feature vector from extract_features.

    Returns:
        Integer importance score.
    """
    f = features
    score = 0

    if f.is_urgent:
        score += 5
    if f.is_medical and f.is_high_amount:
        score += 5
    if f.is_utility and f.is_high_amount:
        score += 4
    if f.is_food and f.is_high_amount and FOOD_EMERGENCY_PATTERN.search(f.description):
        score += 4

    if f.is_medical:
        score += 3

    # Essentials
    if f.is_utility:
        score += 3
    if f.is_transport and f.is_medium_amount:
        score += 2
    if f.is_education:
        score += 3
    if f.is_food:
        score += 2

    if f.is_high_amount and (f.is_utility or f.is_medical or f.is_education):
        score += 2

    # Non-essentials
    if f.is_luxury:
        score -= 3
    if f.is_entertainment:
        score -= 2
    if f.is_shopping and not f.is_urgent:
        score -= 2
    if f.is_dining:
        score -= 1
    if f.is_subscription and f.is_low_amount:
        score -= 1

    return score


def priority_for_score(score: int) -> Priority:
    """Map an importance score onto a priority tier.

    Args:
        score: Score from score_features.

    Returns:
        Priority label.
    """
    if score >= MOST_IMPORTANT_SCORE:
        return "most_important"
    elif score >= IMPORTANT_SCORE:
        return "important"
    elif score >= LESS_IMPORTANT_SCORE:
        return "less_important"
    else:
        return "least_important"


def explain_classification(amount: Any, category: str | None, description: str | None) -> Classification:
    """Classify an expense and keep the features and score used."""
    features = extract_features(amount, category, description)
    score = score_features(features)
    priority = priority_for_score(score)

    logger.debug(
        "Expense classified",
        extra={"category": features.category, "score": score, "priority": priority},
    )

    return Classification(features=features, score=score, priority=priority)


def classify_expense(amount: Any, category: str | None, description: str | None) -> Priority:
    """Classify an expense into one of the four priority tiers.

    Never raises: malformed amounts are treated as indeterminate and empty
    text simply matches no keywords.

    Args:
        amount: Expense amount.
        category: Category label.
        description: Free-text description.

    Returns:
        Priority label.
    """
    return explain_classification(amount, category, description).priority
