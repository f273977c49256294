"""
RuleBot IT Support Classifier

A rule-based support bot that maps a free-text query to a canned
troubleshooting checklist:
- Normalization of the raw message
- Ordered keyword rules, first match wins
- A fallback response asking for more detail
- A small HTTP layer exposing the classifier
"""
from .classifier import RuleClassifier, classify
from .types import CategoryRule, ResponseTemplate

__all__ = ["RuleClassifier", "classify", "CategoryRule", "ResponseTemplate"]
